import pytest
from pydantic import ValidationError

from whylab.cipher import InvalidArgument, PipelineSpec, validate_spec
from whylab.config import Settings, load_settings, parse_key_list


def test_default_spec_is_valid():
    ok, errs = validate_spec(PipelineSpec())
    assert ok, errs


def test_spec_defaults():
    spec = PipelineSpec()
    assert spec.key_length == 32
    assert spec.public_exponent == 65537
    assert spec.feistel_rounds == 16
    assert spec.digest_size == 32


def test_spec_normalizes_names():
    spec = PipelineSpec(hash_name="SHA3-256", profile="DotNet")
    assert spec.hash_name == "sha3_256"
    assert spec.profile == "dotnet"


def test_spec_rejects_unknown_profile():
    with pytest.raises(ValidationError):
        PipelineSpec(profile="java")


def test_validate_flags_aes_key_size():
    ok, errs = validate_spec(PipelineSpec(hash_name="sha512"))
    assert not ok
    assert any("AES" in e for e in errs)


def test_validate_flags_lossy_permutation_only_in_strict_mode():
    ok, errs = validate_spec(PipelineSpec(hash_name="sha224", strict_permutation=True))
    assert not ok
    assert any("multiple of 7" in e for e in errs)

    _, errs = validate_spec(PipelineSpec(hash_name="sha224"))
    assert not any("multiple of 7" in e for e in errs)


def test_validate_flags_unknown_hash_and_even_exponent():
    ok, errs = validate_spec(PipelineSpec(hash_name="whirlpool"))
    assert not ok and errs == ["Unsupported hash: whirlpool"]

    ok, errs = validate_spec(PipelineSpec(public_exponent=4))
    assert not ok
    assert "public_exponent should be odd" in errs


def test_parse_key_list():
    assert parse_key_list("42, 0x11,99") == [42, 17, 99]
    with pytest.raises(ValueError):
        parse_key_list("1,256")


def test_settings_build_pipeline_spec():
    settings = Settings(profile="dotnet", hash_name="md5")
    spec = settings.pipeline_spec()
    assert spec.profile == "dotnet"
    assert spec.hash_name == "md5"
    assert settings.default_key_bytes() == bytes([42, 17, 99])


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("WHY_PROFILE", "DOTNET")
    monkeypatch.setenv("WHY_STRICT_PERMUTATION", "yes")
    monkeypatch.setenv("WHY_DEFAULT_KEY", "1,2,3")
    monkeypatch.setenv("WHY_DISPLAY_FORMAT", "hex")
    load_settings.cache_clear()
    try:
        settings = load_settings()
        assert settings.profile == "dotnet"
        assert settings.strict_permutation is True
        assert settings.default_key == [1, 2, 3]
        assert settings.display_format == "hex"
    finally:
        load_settings.cache_clear()


@pytest.mark.parametrize(
    "name,expected",
    [("SHA-256", "sha256"), ("sha-1", "sha1"), ("SHA3-256", "sha3_256"), (" Blake2s ", "blake2s")],
)
def test_spec_normalizes_hyphenated_hash_names(name, expected):
    spec = PipelineSpec(hash_name=name)
    assert spec.hash_name == expected


def test_digest_size_rejects_unknown_hash():
    with pytest.raises(InvalidArgument):
        PipelineSpec(hash_name="whirlpool").digest_size


def test_settings_hash_maps_to_supported_choice():
    from whylab.cipher.spec import SUPPORTED_HASHES

    assert Settings(hash_name="SHA-256").pipeline_spec().hash_name == "sha256"
    assert Settings(hash_name="BLAKE2s").pipeline_spec().hash_name in SUPPORTED_HASHES
