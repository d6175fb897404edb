import logging

import pytest

from policy import FixedBitPolicy, parse_enum
from qr_capacity import ErrorCorrection
from settings import Settings, load_settings


def test_parse_enum_is_case_insensitive():
    assert parse_enum(FixedBitPolicy, "Strict") is FixedBitPolicy.STRICT
    assert parse_enum(FixedBitPolicy, " lenient ") is FixedBitPolicy.LENIENT
    assert parse_enum(ErrorCorrection, "h") is ErrorCorrection.H


def test_parse_enum_lists_allowed_names():
    with pytest.raises(ValueError, match="Allowed: LENIENT, WARNING, STRICT"):
        parse_enum(FixedBitPolicy, "paranoid", "Codec.FixedBitPolicy")


def test_missing_default_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_settings() == Settings()


def test_default_file_is_read_from_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.ini").write_text("[Qr]\nErrorCorrection = L\n", encoding="utf-8")
    assert load_settings().qr_error_correction is ErrorCorrection.L


def test_missing_explicit_file_is_an_error(tmp_path):
    with pytest.raises(ValueError, match="Cannot read configuration file"):
        load_settings(tmp_path / "missing.ini")


@pytest.mark.parametrize("content", [
    "FixedBitPolicy = strict\n",
    "[Codec]\nFixedBitPolicy = strict\nFixedBitPolicy = lenient\n",
    "[Codec]\nno delimiter on this line\n",
])
def test_malformed_file(tmp_path, content):
    path = tmp_path / "config.ini"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match="Malformed configuration"):
        load_settings(path)


def test_load_settings(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "[Codec]\nFixedBitPolicy = STRICT\n"
        "[Qr]\nErrorCorrection = q\n"
        "[Logging]\nLevel = debug\nFile = codec.log\n",
        encoding="utf-8")
    settings = load_settings(path)
    assert settings.fixed_bit_policy is FixedBitPolicy.STRICT
    assert settings.qr_error_correction is ErrorCorrection.Q
    assert settings.log_level == logging.DEBUG
    assert settings.log_file == "codec.log"


def test_partial_file_keeps_other_defaults(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[Codec]\nFixedBitPolicy = warning\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.fixed_bit_policy is FixedBitPolicy.WARNING
    assert settings.qr_error_correction is ErrorCorrection.M
    assert settings.log_file is None


@pytest.mark.parametrize("content", [
    "[Codec]\nFixedBitPolicy = sometimes\n",
    "[Qr]\nErrorCorrection = X\n",
    "[Logging]\nLevel = loud\n",
])
def test_invalid_values(tmp_path, content):
    path = tmp_path / "config.ini"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(path)
