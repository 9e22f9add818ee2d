import pytest

from whylab.cipher import InvalidArgument, PipelineSpec
from whylab.cipher.cryptanalysis import sbox_ddt_max, sbox_lat_max_abs
from whylab.evaluation import (
    EvaluationReport,
    analyze_permutation,
    analyze_sbox,
    compute_digest_avalanche,
    run_evaluation,
)

PRESENT_SBOX = [0xC, 0x5, 0x6, 0xB, 0x9, 0x0, 0xA, 0xD, 0x3, 0xE, 0xF, 0x8, 0x4, 0x7, 0x1, 0x2]


def test_ddt_lat_on_present_sbox():
    assert sbox_ddt_max(PRESENT_SBOX) == 4
    assert sbox_lat_max_abs(PRESENT_SBOX) == 8


def test_identity_sbox_is_linear():
    identity = list(range(16))
    assert sbox_ddt_max(identity) == 16
    assert sbox_lat_max_abs(identity) == 16


def test_analyze_pipeline_sbox():
    result = analyze_sbox()
    assert result.sbox_size == 256
    assert result.is_bijective
    assert 4 <= result.ddt_max <= 256
    assert 0 < result.lat_max_abs <= 256
    assert result.name in result.summary()


def test_analyze_permutation():
    ok = analyze_permutation(32)
    assert ok.is_bijective and ok.lost_sources == [] and ok.empty_slots == []

    lossy = analyze_permutation(7)
    assert not lossy.is_bijective
    assert lossy.lost_sources == [0, 1, 2, 3, 4, 5]
    assert lossy.empty_slots == [0, 1, 2, 4, 5, 6]
    assert "NOT bijective" in lossy.summary()


def test_digest_avalanche_is_reproducible():
    a = compute_digest_avalanche(trials=20, seed=7)
    b = compute_digest_avalanche(trials=20, seed=7)
    assert a.fractions == b.fractions
    assert a.num_output_bits == 256
    assert 0.3 < a.mean < 0.7


def test_key_avalanche_dotnet():
    r = compute_digest_avalanche(PipelineSpec(profile="dotnet"), input_type="key", trials=20)
    assert r.profile == "dotnet"
    assert r.input_bytes == 3
    assert "passes" in r.to_dict()


def test_run_evaluation_report():
    report = run_evaluation(trials=10, lengths=[7, 32])
    assert isinstance(report, EvaluationReport)
    d = report.to_dict()
    assert d["summary"]["lossy_lengths"] == [7]
    assert d["summary"]["sbox_all_bijective"] is True
    assert d["spec"]["profile"] == "standard"
    assert "Permutation Analysis" in report.to_summary()


def test_unknown_hash_rejected_by_evaluation():
    spec = PipelineSpec(hash_name="whirlpool")
    with pytest.raises(InvalidArgument):
        compute_digest_avalanche(spec, trials=1)
    with pytest.raises(InvalidArgument):
        run_evaluation(spec, trials=1)
