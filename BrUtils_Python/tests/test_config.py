"""Tests for AppConfig module."""
import json
import os
import tempfile
from BrUtils_Python.config import AppConfig, NumberSettings, TextSettings


def test_default_config():
    """Test default configuration."""
    from BrUtils_Python.config import BlobSettings, ClipboardSettings

    config = AppConfig(
        text=TextSettings(),
        numbers=NumberSettings(),
        clipboard=ClipboardSettings(),
        blob=BlobSettings()
    )

    assert config.text.remove_accents is True
    assert config.text.strict_accents is False
    assert config.numbers.decimal_places == 2
    assert config.clipboard.command == ""
    assert config.blob.timeout_seconds == 30
    assert config == AppConfig.default()


def test_load_config_from_json():
    """Test loading configuration from JSON file."""
    # Create a temporary config file
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        config_data = {
            "Text": {
                "StrictAccents": True
            },
            "Numbers": {
                "DecimalPlaces": 3,
                "BinarySizes": True
            },
            "Clipboard": {
                "Command": "wl-copy"
            }
        }
        json.dump(config_data, f)
        temp_path = f.name

    try:
        config = AppConfig.load(temp_path)
        assert config.text.strict_accents is True
        assert config.text.remove_accents is True
        assert config.numbers.decimal_places == 3
        assert config.numbers.binary_sizes is True
        assert config.clipboard.command == "wl-copy"
        assert config.blob.user_agent == "BrUtils/1.0"
    finally:
        os.unlink(temp_path)


def test_load_config_invalid_json():
    """Test a malformed file returns defaults."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        f.write("{not json")
        temp_path = f.name

    try:
        assert AppConfig.load(temp_path) == AppConfig.default()
    finally:
        os.unlink(temp_path)


def test_load_config_nonexistent_file():
    """Test loading config from nonexistent file returns defaults."""
    config = AppConfig.load("/nonexistent/config.json")
    assert config.numbers.decimal_places == 2


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
