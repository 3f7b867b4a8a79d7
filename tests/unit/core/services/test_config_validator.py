from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies:
1. Defaults fill in missing keys.
2. Lenient coercion produces warnings instead of failures.
3. Strict mode rejects the same inputs.
"""

import pytest

from ooxmltree.core.services.validator import validate_config
from ooxmltree.domain.config import get_default_config


def test_validate_empty_dict_yields_defaults():
    merged, warnings = validate_config({})
    assert merged == get_default_config()
    assert warnings == []


def test_validate_non_dict_falls_back():
    merged, warnings = validate_config(["not", "a", "dict"])
    assert merged == get_default_config()
    assert len(warnings) == 1
    assert "expected dict" in warnings[0]


def test_validate_non_dict_strict_raises():
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_validate_choice_fields_are_case_insensitive():
    merged, warnings = validate_config({"compression": " Stored ", "log_level": "debug"})
    assert merged["compression"] == "stored"
    assert merged["log_level"] == "DEBUG"
    assert warnings == []


def test_validate_unknown_compression_falls_back():
    merged, warnings = validate_config({"compression": "bzip2"})
    assert merged["compression"] == "deflated"
    assert any("compression" in w for w in warnings)


def test_validate_unknown_compression_strict_raises():
    with pytest.raises(ValueError, match="compression"):
        validate_config({"compression": "bzip2"}, strict=True)


@pytest.mark.parametrize("level, expected", [(0, 0), (9, 9), (None, None)])
def test_validate_compress_level_accepts_range(level, expected):
    merged, warnings = validate_config({"compress_level": level})
    assert merged["compress_level"] == expected
    assert warnings == []


@pytest.mark.parametrize("level", [10, -1, "5", True])
def test_validate_compress_level_rejects_out_of_range(level):
    merged, warnings = validate_config({"compress_level": level})
    assert merged["compress_level"] is None
    assert len(warnings) == 1


def test_validate_bool_coercion():
    merged, warnings = validate_config({"save_error_log": "yes"})
    assert merged["save_error_log"] is True
    assert warnings == ["Field 'save_error_log' converted from 'yes' to True."]


def test_validate_bool_strict_rejects_strings():
    with pytest.raises(TypeError):
        validate_config({"save_error_log": "yes"}, strict=True)


def test_validate_suffixes_normalized():
    merged, warnings = validate_config({"accepted_suffixes": [".DOCX", "xlsm", "  ", 3]})
    assert merged["accepted_suffixes"] == [".docx", ".xlsm"]
    assert len(warnings) == 2


def test_validate_suffixes_from_csv():
    merged, _ = validate_config({"accepted_suffixes": ".docx,.pptx"})
    assert merged["accepted_suffixes"] == [".docx", ".pptx"]


def test_validate_suffixes_empty_list_uses_defaults():
    merged, _ = validate_config({"accepted_suffixes": []})
    assert merged["accepted_suffixes"] == get_default_config()["accepted_suffixes"]


def test_validate_suffixes_strict_requires_dot():
    with pytest.raises(ValueError):
        validate_config({"accepted_suffixes": ["docx"]}, strict=True)


def test_validate_keeps_unknown_keys():
    merged, _ = validate_config({"custom": 1})
    assert merged["custom"] == 1
