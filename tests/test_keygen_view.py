from types import SimpleNamespace

import pytest

from starkcore.keygen_types import (
    StarkVerifyingKey,
    StarkVerifyingParams,
    TraceWidth,
    VerifierSinglePreprocessedData,
)
from starkcore.keygen_view import MultiStarkVerifyingKeyView


def _vk(challenges, commit=None, exposed=None, after=None):
    n = len(challenges)
    return StarkVerifyingKey(
        preprocessed_data=None if commit is None else VerifierSinglePreprocessedData(commit),
        params=StarkVerifyingParams(
            width=TraceWidth(
                preprocessed=None,
                cached_mains=[],
                common_main=2,
                after_challenge=[1] * n if after is None else after,
            ),
            num_public_values=0,
            num_exposed_values_after_challenge=[1] * n if exposed is None else exposed,
            num_challenges_to_sample=list(challenges),
        ),
        symbolic_constraints=SimpleNamespace(interactions=[]),
        quotient_degree=1,
        rap_phase_seq_kind=None,
    )


def test_preprocessed_commits():
    view = MultiStarkVerifyingKeyView([_vk([], commit="a"), _vk([]), _vk([], commit="b")])
    assert view.preprocessed_commits() == ["a", None, "b"]
    assert view.flattened_preprocessed_commits() == ["a", "b"]


def test_num_phases_is_max():
    view = MultiStarkVerifyingKeyView([_vk([2]), _vk([3, 1]), _vk([])])
    assert view.num_phases() == 2


def test_num_challenges_per_phase():
    view = MultiStarkVerifyingKeyView([_vk([2]), _vk([3, 1]), _vk([])])
    assert view.num_challenges_per_phase() == [3, 1]
    assert view.num_challenges_in_phase(1) == 1


def test_empty_view():
    view = MultiStarkVerifyingKeyView([])
    assert view.num_phases() == 0
    assert view.num_challenges_per_phase() == []


def test_unused_phase_raises():
    view = MultiStarkVerifyingKeyView([_vk([2])])
    with pytest.raises(ValueError):
        view.num_challenges_in_phase(1)


def test_inconsistent_params_raise():
    view = MultiStarkVerifyingKeyView([_vk([2, 2], after=[1])])
    with pytest.raises(ValueError):
        view.num_phases()
    view = MultiStarkVerifyingKeyView([_vk([2], exposed=[])])
    with pytest.raises(ValueError):
        view.num_phases()