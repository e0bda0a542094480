# File: tests/unit/test_config_manager.py
"""
Unit tests for Config loading and validation.
"""

import json

import pytest

from dayview.core.config_manager import Config
from dayview.models import LayoutConfig, LayoutConfigError


@pytest.fixture
def env_defaults(monkeypatch):
    """Pin environment-derived defaults for the test."""
    monkeypatch.setattr(Config, "DAY_VIEW_START_HOUR", 0)
    monkeypatch.setattr(Config, "MINUTE_HEIGHT_PX", 1.0)
    monkeypatch.setattr(Config, "ITEM_WIDTH_PERCENT", 90.0)
    monkeypatch.setattr(Config, "TARGET_TIMEZONE", None)
    monkeypatch.setattr(Config, "DAY_VIEW_END_HOUR", 24)
    monkeypatch.setattr(Config, "SLOT_MINUTES", 60)
    monkeypatch.setattr(Config, "FIRST_DAY_OF_WEEK", 1)


class TestConfig:
    
    def test_default_layout_config(self, env_defaults):
        assert Config.default_layout_config() == LayoutConfig()
    
    def test_load_from_file_overrides_env(self, env_defaults, tmp_path, sample_config_dict):
        config_file = tmp_path / "layout.json"
        config_file.write_text(json.dumps(sample_config_dict))
        
        config = Config.load_layout_config(config_file)
        
        assert config.day_view_start_hour == 6
        assert config.minute_height_px == 1.5
        assert config.timezone == "Europe/Amsterdam"
    
    def test_partial_file_keeps_env_values(self, env_defaults, tmp_path):
        config_file = tmp_path / "layout.json"
        config_file.write_text('{"itemWidthPercent": 80}')
        
        config = Config.load_layout_config(config_file)
        
        assert config.item_width_percent == 80
        assert config.minute_height_px == 1.0
    
    def test_camel_case_file_keys_override_snake_case_env(self, env_defaults, monkeypatch, tmp_path):
        monkeypatch.setattr(Config, "MINUTE_HEIGHT_PX", 3.0)
        config_file = tmp_path / "layout.json"
        config_file.write_text('{"minuteHeightPx": 2, "dayViewStartHour": 7}')
        
        config = Config.load_layout_config(config_file)
        
        assert config.minute_height_px == 2
        assert config.day_view_start_hour == 7
    
    def test_missing_explicit_file_raises(self, env_defaults, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.load_layout_config(tmp_path / "nope.json")
    
    def test_missing_default_file_uses_env(self, env_defaults, monkeypatch, tmp_path):
        monkeypatch.setattr(Config, "CONFIG_FILE", tmp_path / "absent.json")
        
        assert Config.load_layout_config() == LayoutConfig()
    
    def test_invalid_json_raises_config_error(self, env_defaults, tmp_path):
        config_file = tmp_path / "layout.json"
        config_file.write_text("{not json")
        
        with pytest.raises(LayoutConfigError, match="Invalid JSON"):
            Config.load_layout_config(config_file)
    
    def test_out_of_range_file_value_raises(self, env_defaults, tmp_path):
        config_file = tmp_path / "layout.json"
        config_file.write_text('{"minuteHeightPx": 0}')
        
        with pytest.raises(LayoutConfigError):
            Config.load_layout_config(config_file)
    
    def test_validate_ok(self, env_defaults):
        assert Config.validate() is True
    
    def test_validate_reports_bad_values(self, env_defaults, monkeypatch):
        monkeypatch.setattr(Config, "ITEM_WIDTH_PERCENT", 150.0)
        monkeypatch.setattr(Config, "SLOT_MINUTES", 0)
        
        assert Config.validate() is False
