"""Tests for configuration models."""

import json

import pytest
from pydantic import ValidationError

from imgsizes.models.config import SizerConfig


class TestSizerConfig:
    """Tests for SizerConfig model."""

    def test_default_values(self):
        config = SizerConfig()

        assert config.min_scale == 0.8
        assert len(config.devices) > 0
        assert config.devices_file is None
        assert config.sizes == {}
        assert config.report_output_dir == "./sizes-reports"

    @pytest.mark.parametrize("min_scale", [0, -0.5, 1.5])
    def test_min_scale_out_of_range(self, min_scale):
        with pytest.raises(ValidationError):
            SizerConfig(min_scale=min_scale)

    def test_min_scale_one_allowed(self):
        assert SizerConfig(min_scale=1.0).min_scale == 1.0

    def test_devices_file_replaces_devices(self, devices_file):
        config = SizerConfig(devices_file=str(devices_file))

        assert len(config.devices) == 2
        assert config.devices[1].can_rotate is True

    def test_missing_devices_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SizerConfig(devices_file=str(tmp_path / "missing.json"))

    def test_save_and_load(self, tmp_path, desktop):
        path = tmp_path / "nested" / "config.json"
        config = SizerConfig(devices=[desktop], min_scale=0.6, sizes={"hero": "100vw"})

        config.save(path)
        loaded = SizerConfig.load(path)

        assert loaded.devices == [desktop]
        assert loaded.min_scale == 0.6
        assert loaded.sizes == {"hero": "100vw"}

    def test_saved_file_is_json(self, tmp_path, desktop):
        path = tmp_path / "config.json"
        SizerConfig(devices=[desktop]).save(path)

        data = json.loads(path.read_text())
        assert data["devices"][0]["densities"] == [1]
        assert data["devices"][0]["can_rotate"] is False

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SizerConfig.load(tmp_path / "missing.json")
