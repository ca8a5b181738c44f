from types import SimpleNamespace

import pytest

from starkcore.challenger import HashChallenger
from starkcore.coordinator import Coordinator
from starkcore.field import BabyBear
from starkcore.hal import ProverBackend, ProverDevice
from starkcore.keygen_types import StarkVerifyingKey, StarkVerifyingParams, TraceWidth
from starkcore.prover_types import (
    AirProvingContext,
    DeviceMultiStarkProvingKey,
    DeviceStarkProvingKey,
    ProverDataAfterRapPhases,
    ProvingContext,
    RapSinglePhaseView,
    RowMajorMatrix,
    SingleCommitPreimage,
)


class FakeBackend(ProverBackend):
    @property
    def challenge_ext_degree(self):
        return 4


class RecordingDevice(ProverDevice):
    def __init__(self, after=None):
        self.after = after if after is not None else ProverDataAfterRapPhases()
        self.calls = {}
        self.alpha = None

    def commit(self, traces):
        traces = list(traces)
        self.calls["commit"] = traces
        return b"common", ("common-data", len(traces))

    def partially_prove(self, challenger, pk_views, trace_views):
        self.calls["partially_prove"] = trace_views
        return "rap-proof", self.after

    def eval_and_commit_quotient(self, challenger, pk_views, public_values,
                                 cached_views_per_air, common_main_pcs_data, prover_data_after):
        self.calls["quotient"] = (list(public_values), common_main_pcs_data)
        self.alpha = challenger.sample_ext_element()
        return b"quotient", "quotient-data"

    def open(self, challenger, preprocessed, main, after_phase, quotient_data, quotient_degrees):
        self.calls["open"] = (preprocessed, main, after_phase, quotient_data, list(quotient_degrees))
        return "opening"


def _vk(common_main=2, cached=(), quotient_degree=1):
    width = TraceWidth(preprocessed=None, cached_mains=list(cached), common_main=common_main)
    return StarkVerifyingKey(
        preprocessed_data=None,
        params=StarkVerifyingParams(width=width, num_public_values=0),
        symbolic_constraints=SimpleNamespace(interactions=[]),
        quotient_degree=quotient_degree,
        rap_phase_seq_kind=None,
    )


def _matrix(height, width=2):
    return RowMajorMatrix([BabyBear(i) for i in range(height * width)], width)


def _two_air_setup(pvs0=(1, 2)):
    mpk = DeviceMultiStarkProvingKey(
        air_ids=[0, 3],
        per_air=[
            DeviceStarkProvingKey("AirA", _vk(quotient_degree=2)),
            DeviceStarkProvingKey("AirB", _vk(quotient_degree=1)),
        ],
    )
    ctx = ProvingContext([
        (0, AirProvingContext(common_main=_matrix(4), public_values=[BabyBear(v) for v in pvs0])),
        (3, AirProvingContext(common_main=_matrix(8))),
    ])
    return mpk, ctx


def _prove(device, mpk, ctx):
    return Coordinator(FakeBackend(), device, HashChallenger()).prove(mpk, ctx)


def test_prove_builds_proof():
    device = RecordingDevice()
    mpk, ctx = _two_air_setup()
    proof = _prove(device, mpk, ctx)
    assert [p.air_id for p in proof.per_air] == [0, 3]
    assert [p.degree for p in proof.per_air] == [4, 8]
    assert proof.per_air[0].public_values == [BabyBear(1), BabyBear(2)]
    assert proof.commitments.main_trace == [b"common"]
    assert proof.commitments.quotient == b"quotient"
    assert proof.commitments.after_challenge == []
    assert proof.opening == "opening"
    assert proof.rap_partial_proof == "rap-proof"


def test_open_receives_main_data_and_quotient_degrees():
    device = RecordingDevice()
    mpk, ctx = _two_air_setup()
    _prove(device, mpk, ctx)
    preprocessed, main, after_phase, quotient_data, degrees = device.calls["open"]
    assert preprocessed == []
    assert main == [("common-data", 2)]
    assert after_phase == []
    assert quotient_data == "quotient-data"
    assert degrees == [2, 1]


def test_pair_views_have_log_heights():
    device = RecordingDevice()
    mpk, ctx = _two_air_setup()
    _prove(device, mpk, ctx)
    views = device.calls["partially_prove"]
    assert [v.log_trace_height for v in views] == [2, 3]
    assert [len(v.partitioned_main) for v in views] == [1, 1]


def test_cached_mains_come_before_common_commit():
    cached = _matrix(4, 1)
    mpk = DeviceMultiStarkProvingKey([0], [DeviceStarkProvingKey("AirC", _vk(cached=[1]))])
    ctx = ProvingContext([
        (0, AirProvingContext(
            cached_mains=[(b"cached", SingleCommitPreimage(cached, "cached-data", 0))],
            common_main=_matrix(4),
        )),
    ])
    device = RecordingDevice()
    proof = _prove(device, mpk, ctx)
    assert proof.commitments.main_trace == [b"cached", b"common"]
    assert device.calls["open"][1] == ["cached-data", ("common-data", 1)]


def test_exposed_values_are_pruned_per_air():
    after = ProverDataAfterRapPhases(
        committed_pcs_data_per_phase=[(b"perm", "perm-data")],
        rap_views_per_phase=[[
            RapSinglePhaseView(inner=0, exposed_values=[BabyBear(7)]),
            RapSinglePhaseView(inner=None),
        ]],
    )
    device = RecordingDevice(after)
    mpk, ctx = _two_air_setup()
    proof = _prove(device, mpk, ctx)
    assert proof.per_air[0].exposed_values_after_challenge == [[BabyBear(7)]]
    assert proof.per_air[1].exposed_values_after_challenge == []
    assert proof.commitments.after_challenge == [b"perm"]
    assert device.calls["open"][2] == ["perm-data"]


def test_transcript_is_deterministic_and_binds_public_values():
    first, second, other = RecordingDevice(), RecordingDevice(), RecordingDevice()
    _prove(first, *_two_air_setup())
    _prove(second, *_two_air_setup())
    _prove(other, *_two_air_setup(pvs0=(1, 3)))
    assert first.alpha == second.alpha
    assert first.alpha != other.alpha


def test_mismatched_context_raises():
    mpk, _ = _two_air_setup()
    ctx = ProvingContext([(0, AirProvingContext(common_main=_matrix(4)))])
    with pytest.raises(ValueError, match="Invalid proof input"):
        _prove(RecordingDevice(), mpk, ctx)


def test_air_without_main_trace_raises():
    mpk = DeviceMultiStarkProvingKey([0], [DeviceStarkProvingKey("Empty", _vk(common_main=0))])
    ctx = ProvingContext([(0, AirProvingContext())])
    with pytest.raises(ValueError, match="no main trace"):
        _prove(RecordingDevice(), mpk, ctx)


def test_non_power_of_two_height_raises():
    mpk = DeviceMultiStarkProvingKey([0], [DeviceStarkProvingKey("Odd", _vk())])
    ctx = ProvingContext([(0, AirProvingContext(common_main=_matrix(3)))])
    with pytest.raises(ValueError):
        _prove(RecordingDevice(), mpk, ctx)