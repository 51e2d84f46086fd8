"""Tests for config file safety features (backups, atomic writes, corruption handling)."""

from pathlib import Path

import pytest

from panelmap.exceptions import ConfigFileInvalidError, ConfigValidationError
from panelmap.models import MatrixConfig
from panelmap.utils import ConfigFile


@pytest.fixture
def store(tmp_path: Path) -> ConfigFile:
    return ConfigFile(tmp_path / "matrix.json", MatrixConfig)


class TestConfigFileSafety:
    """Test safety features of ConfigFile."""

    @pytest.mark.unit
    def test_save_creates_backup(self, store):
        """Test that save creates a .bak file before overwriting."""
        store.save(MatrixConfig(chain_length=2), backup=False)
        store.save(MatrixConfig(chain_length=4))

        assert store.backup_path == store.path.with_suffix(".json.bak")
        assert ConfigFile(store.backup_path, MatrixConfig).load().chain_length == 2
        assert store.load().chain_length == 4

    @pytest.mark.unit
    def test_save_without_backup(self, store):
        """Test that backup can be disabled."""
        store.save(MatrixConfig(), backup=False)
        store.save(MatrixConfig(rows=16), backup=False)

        assert not store.backup_path.exists()

    @pytest.mark.unit
    def test_no_temp_file_left_behind(self, tmp_path: Path):
        """Test that the atomic write creates parents and cleans up its temp file."""
        path = tmp_path / "nested" / "matrix.json"

        ConfigFile(path, MatrixConfig).save(MatrixConfig())

        assert path.exists()
        assert not path.with_suffix(".json.tmp").exists()

    @pytest.mark.unit
    def test_load_missing_file(self, store):
        """Test that load raises FileNotFoundError for missing files."""
        with pytest.raises(FileNotFoundError):
            store.load()

    @pytest.mark.unit
    def test_load_empty_file(self, store):
        """Test that an empty file is reported as invalid."""
        store.path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError):
            store.load()

    @pytest.mark.unit
    def test_load_invalid_value(self, store):
        """Test that a wrongly typed value becomes a validation error."""
        store.path.write_text('{"rows": "lots"}')

        with pytest.raises(ConfigValidationError) as exc_info:
            store.load()
        assert exc_info.value.field == "rows"

    @pytest.mark.unit
    def test_load_or_default_does_not_create_file(self, store):
        """Test that a missing file gives the default without writing it."""
        assert store.load_or_default() == MatrixConfig()
        assert not store.exists()

    @pytest.mark.unit
    def test_load_or_default_propagates_corruption(self, store):
        """Test that a corrupted file is not silently replaced by defaults."""
        store.path.write_text("{ not json")

        with pytest.raises(ConfigFileInvalidError):
            store.load_or_default()

    @pytest.mark.unit
    def test_check(self, tmp_path: Path, store):
        """Test pre-flight validation results."""
        store.save(MatrixConfig())
        assert store.check() is None

        bad = ConfigFile(tmp_path / "bad.json", MatrixConfig)
        bad.path.write_text('{"rows": "lots"}')
        assert "rows" in bad.check()

        missing = ConfigFile(tmp_path / "nope.json", MatrixConfig)
        assert "not found" in missing.check()
