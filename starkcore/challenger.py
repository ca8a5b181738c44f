"""Fiat-Shamir challenger built on a SHA-512 duplex construction."""

from __future__ import annotations

import hashlib
from typing import Iterable, Union

from .field import BabyBear

Observable = Union[BabyBear, int, bytes, bytearray]

_DOMAIN_SEPARATOR = b"starkcore-challenger-v1"
_FIELD_TAG = b"\x00"
_BYTES_TAG = b"\x01"
_WORD_SIZE = 8


def _encode(value: Observable) -> bytes:
    if isinstance(value, BabyBear):
        return _FIELD_TAG + value.value.to_bytes(4, "little")
    if isinstance(value, int):
        return _FIELD_TAG + BabyBear(value).value.to_bytes(4, "little")
    if isinstance(value, (bytes, bytearray)):
        data = bytes(value)
        return _BYTES_TAG + len(data).to_bytes(8, "little") + data
    raise TypeError(f"cannot observe a value of type {type(value).__name__}")


class HashChallenger:
    """Absorbs field elements and byte strings, and squeezes field elements.

    Two challengers that observe the same values in the same order sample
    the same challenges.
    """

    def __init__(self, seed: bytes = b"") -> None:
        self._state = hashlib.sha512(_DOMAIN_SEPARATOR + bytes(seed)).digest()
        self._input = bytearray()
        self._output: list[BabyBear] = []

    def observe(self, value: Observable) -> None:
        """Absorbs one value; any buffered samples are discarded."""
        self._input += _encode(value)
        self._output.clear()

    def observe_slice(self, values: Iterable[Observable]) -> None:
        """Absorbs every value in order."""
        for value in values:
            self.observe(value)

    def _duplex(self) -> None:
        self._state = hashlib.sha512(self._state + bytes(self._input)).digest()
        self._input.clear()
        self._output = [
            BabyBear(int.from_bytes(self._state[i : i + _WORD_SIZE], "little"))
            for i in range(0, len(self._state), _WORD_SIZE)
        ]

    def sample(self) -> BabyBear:
        """Squeezes one base field element."""
        if self._input or not self._output:
            self._duplex()
        return self._output.pop()

    def sample_ext_element(self) -> BabyBear:
        """Squeezes one challenge element; the challenge field is the base field here."""
        return self.sample()