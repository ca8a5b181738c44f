import pytest

from starkcore.errors import (
    ChallengePhaseError,
    InvalidOpeningArgumentError,
    InvalidProofShapeError,
    OodEvaluationMismatchError,
    VerificationError,
)


@pytest.mark.parametrize(
    "error, text",
    [
        (InvalidProofShapeError(), "invalid proof shape"),
        (OodEvaluationMismatchError(), "out-of-domain evaluation mismatch"),
        (ChallengePhaseError(), "challenge phase error"),
    ],
)
def test_messages(error, text):
    assert str(error) == text


def test_opening_argument_message_includes_detail():
    err = InvalidOpeningArgumentError("bad merkle path")
    assert str(err) == "invalid opening argument: bad merkle path"
    assert err.detail == "bad merkle path"


@pytest.mark.parametrize(
    "cls",
    [
        InvalidProofShapeError,
        OodEvaluationMismatchError,
        ChallengePhaseError,
    ],
)
def test_caught_as_verification_error(cls):
    with pytest.raises(VerificationError) as info:
        raise cls()
    assert type(info.value) is cls


def test_equality_by_kind_and_detail():
    assert OodEvaluationMismatchError() == OodEvaluationMismatchError()
    assert ChallengePhaseError() != OodEvaluationMismatchError()
    assert InvalidOpeningArgumentError("a") == InvalidOpeningArgumentError("a")
    assert InvalidOpeningArgumentError("a") != InvalidOpeningArgumentError("b")


def test_hash_consistent_with_equality():
    errors = {ChallengePhaseError(), ChallengePhaseError(), InvalidProofShapeError()}
    assert len(errors) == 2