"""Errors raised when a proof fails verification."""

from __future__ import annotations


class VerificationError(Exception):
    """Base class for proof verification failures."""

    message = "verification failed"

    def __init__(self, *args: object) -> None:
        super().__init__(*args)

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VerificationError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidProofShapeError(VerificationError):
    message = "invalid proof shape"


class InvalidOpeningArgumentError(VerificationError):
    """An error occurred while verifying the claimed openings."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"invalid opening argument: {self.detail}"


class OodEvaluationMismatchError(VerificationError):
    """``constraints(zeta)`` did not match ``quotient(zeta) * Z_H(zeta)``."""

    message = "out-of-domain evaluation mismatch"


class ChallengePhaseError(VerificationError):
    message = "challenge phase error"