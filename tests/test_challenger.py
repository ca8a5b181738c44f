import pytest

from starkcore.challenger import HashChallenger
from starkcore.field import BabyBear, MODULUS


def test_same_observations_give_same_samples():
    a = HashChallenger()
    b = HashChallenger()
    for ch in (a, b):
        ch.observe_slice([BabyBear(1), BabyBear(2), BabyBear(3)])
    assert [a.sample() for _ in range(20)] == [b.sample() for _ in range(20)]


def test_different_observations_give_different_samples():
    a = HashChallenger()
    b = HashChallenger()
    a.observe(BabyBear(1))
    b.observe(BabyBear(2))
    assert [a.sample() for _ in range(4)] != [b.sample() for _ in range(4)]


def test_observe_slice_matches_individual_observes():
    a = HashChallenger()
    b = HashChallenger()
    values = [BabyBear(7), BabyBear(11), BabyBear(13)]
    a.observe_slice(values)
    for v in values:
        b.observe(v)
    assert a.sample_ext_element() == b.sample_ext_element()


def test_int_and_field_element_observe_identically():
    a = HashChallenger()
    b = HashChallenger()
    a.observe(5)
    b.observe(BabyBear(5))
    assert a.sample() == b.sample()


def test_samples_are_field_elements_in_range():
    ch = HashChallenger()
    samples = [ch.sample() for _ in range(50)]
    assert all(isinstance(s, BabyBear) and 0 <= s.value < MODULUS for s in samples)
    assert len(set(s.value for s in samples)) > 40


def test_observe_after_sample_changes_next_sample():
    a = HashChallenger()
    b = HashChallenger()
    a.sample()
    b.sample()
    a.observe(BabyBear(9))
    assert a.sample() != b.sample()


def test_seed_separates_challengers():
    assert HashChallenger(b"one").sample() != HashChallenger(b"two").sample()


def test_bytes_are_observable_and_distinct_from_fields():
    a = HashChallenger()
    b = HashChallenger()
    a.observe(b"\x05\x00\x00\x00")
    b.observe(BabyBear(5))
    assert a.sample() != b.sample()


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        HashChallenger().observe(1.5)