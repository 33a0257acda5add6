"""
Unit tests for quantity bracket configuration loading, validation and lookup.
"""

import json
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from ..services.brackets import (
    BracketValidationError,
    ConfigurationError,
    QuantityBracket,
    clear_bracket_cache,
    find_bracket,
    get_brackets,
    is_quantity_in_range,
    load_bracket_config,
    package_for_quantity,
    parse_brackets,
    validate_bracket_config,
)


def _valid_config():
    return {
        "version": "1.0",
        "services": {
            "FBA/WFS/TFS": [
                {"label": "<50", "package": "Starter", "min_units": 0, "max_units": 49},
                {"label": "50+", "package": "Standard", "min_units": 50, "max_units": None},
            ],
            "FBM": [
                {"label": "<25", "package": "Starter", "min_units": 0, "max_units": 24},
                {"label": "25+", "package": "Premium", "min_units": 25},
            ],
        },
    }


def _write_temp(content):
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        if isinstance(content, str):
            f.write(content)
        else:
            json.dump(content, f)
        return f.name


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_bracket_cache()
    yield
    clear_bracket_cache()


class TestConfigurationLoading:
    """Test configuration loading functionality"""

    def test_load_valid_configuration(self):
        temp_path = _write_temp(_valid_config())
        try:
            result = load_bracket_config(temp_path)
            assert result["version"] == "1.0"
            assert "FBM" in result["services"]
        finally:
            Path(temp_path).unlink()

    def test_load_invalid_json(self):
        temp_path = _write_temp('{"version": "1.0", "services": {')
        try:
            with pytest.raises(ConfigurationError, match="Invalid JSON"):
                load_bracket_config(temp_path)
        finally:
            Path(temp_path).unlink()

    def test_load_missing_file(self):
        with pytest.raises(ConfigurationError, match="not found"):
            load_bracket_config("/path/that/does/not/exist.json")

    def test_load_default_path_uses_bundled_file(self):
        config = load_bracket_config()
        assert validate_bracket_config(config) == []

    def test_load_with_permission_error(self):
        temp_path = _write_temp(_valid_config())
        try:
            with patch('builtins.open', side_effect=PermissionError("Access denied")):
                with pytest.raises(ConfigurationError, match="Error loading"):
                    load_bracket_config(temp_path)
        finally:
            Path(temp_path).unlink()


class TestConfigurationValidation:
    """Test bracket validation"""

    def test_valid_configuration_has_no_errors(self):
        assert validate_bracket_config(_valid_config()) == []

    def test_missing_top_level_keys(self):
        errors = validate_bracket_config({})
        assert any("Missing required top-level key: version" in e for e in errors)
        assert any("Missing required top-level key: services" in e for e in errors)

    def test_missing_service(self):
        config = _valid_config()
        del config["services"]["FBM"]
        errors = validate_bracket_config(config)
        assert any("Missing brackets for service: FBM" in e for e in errors)

    def test_unknown_service_and_package(self):
        config = _valid_config()
        config["services"]["XYZ"] = [{"label": "<1", "package": "Gold", "min_units": 0, "max_units": 0}]
        errors = validate_bracket_config(config)
        assert any("Unknown service: XYZ" in e for e in errors)
        assert any("Unknown package 'Gold'" in e for e in errors)

    def test_overlapping_brackets(self):
        config = _valid_config()
        config["services"]["FBM"][1]["min_units"] = 20
        errors = validate_bracket_config(config)
        assert any("overlaps" in e for e in errors)

    def test_bracket_after_open_ended_bracket(self):
        config = _valid_config()
        config["services"]["FBM"].append({"label": "500+", "package": "Premium", "min_units": 500})
        errors = validate_bracket_config(config)
        assert any("follows an open-ended bracket" in e for e in errors)

    def test_max_below_min(self):
        config = _valid_config()
        config["services"]["FBM"][0]["max_units"] = -1
        errors = validate_bracket_config(config)
        assert any("max_units below min_units" in e for e in errors)

    def test_duplicate_labels(self):
        config = _valid_config()
        config["services"]["FBM"][1]["label"] = "<25"
        errors = validate_bracket_config(config)
        assert any("Duplicate bracket labels" in e for e in errors)

    def test_missing_bracket_keys(self):
        config = _valid_config()
        config["services"]["FBM"][0] = {"label": "<25"}
        errors = validate_bracket_config(config)
        assert any("missing package, min_units" in e for e in errors)


class TestCaching:

    def test_get_brackets_is_cached(self):
        first = get_brackets()
        assert get_brackets() is first

    def test_invalid_configured_file_raises(self, settings):
        config = _valid_config()
        del config["services"]["FBM"]
        temp_path = _write_temp(config)
        settings.PRICING_BRACKETS_PATH = temp_path
        try:
            with pytest.raises(BracketValidationError):
                get_brackets()
        finally:
            Path(temp_path).unlink()

    def test_configured_path_is_used(self, settings):
        temp_path = _write_temp(_valid_config())
        settings.PRICING_BRACKETS_PATH = temp_path
        try:
            assert [b.label for b in get_brackets()["FBM"]] == ["<25", "25+"]
        finally:
            Path(temp_path).unlink()


class TestBundledBrackets:
    """The bracket table shipped with the portal"""

    @pytest.mark.parametrize("service,units,label", [
        ("FBA/WFS/TFS", 1, "<50"),
        ("FBA/WFS/TFS", 49, "<50"),
        ("FBA/WFS/TFS", 50, "50-500"),
        ("FBA/WFS/TFS", 500, "50-500"),
        ("FBA/WFS/TFS", 501, "501-1000"),
        ("FBA/WFS/TFS", 1000, "501-1000"),
        ("FBA/WFS/TFS", 1001, "1001+"),
        ("FBM", 24, "<25"),
        ("FBM", 25, "25+"),
        ("FBM", 49, "25+"),
        ("FBM", 50, "50+"),
        ("FBM", 100, "50+"),
        ("FBM", 101, "101+"),
    ])
    def test_quantity_in_range(self, service, units, label):
        assert is_quantity_in_range(service, label, units)

    @pytest.mark.parametrize("service,units,label", [
        ("FBA/WFS/TFS", 50, "<50"),
        ("FBA/WFS/TFS", 1001, "501-1000"),
        ("FBM", 25, "<25"),
        ("FBM", 50, "25+"),
        ("FBM", 101, "50+"),
    ])
    def test_quantity_outside_range(self, service, units, label):
        assert not is_quantity_in_range(service, label, units)

    def test_custom_range_matches_everything(self):
        assert is_quantity_in_range("FBM", "Custom", 1)
        assert is_quantity_in_range("FBA/WFS/TFS", "Custom", 100000)

    def test_unknown_label_never_matches(self):
        assert not is_quantity_in_range("FBM", "10-20", 15)

    def test_package_for_quantity(self):
        assert package_for_quantity("FBA/WFS/TFS", 10) == "Starter"
        assert package_for_quantity("FBA/WFS/TFS", 750) == "Small Business"
        assert package_for_quantity("FBM", 101) == "Premium"
        assert package_for_quantity("Other", 10) is None

    def test_find_bracket(self):
        assert find_bracket("FBM", "50+") == QuantityBracket("50+", "Small Business", 50, 100)
        assert find_bracket("FBM", "nope") is None

    def test_explicit_table_overrides_bundled(self):
        table = parse_brackets(_valid_config())
        assert is_quantity_in_range("FBA/WFS/TFS", "50+", 5000, table)
        assert package_for_quantity("FBM", 30, table) == "Premium"
