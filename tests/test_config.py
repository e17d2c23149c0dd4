"""Tests for configuration system."""

import pytest
from pathlib import Path

from photo_album.core.config import Config, LibraryConfig, StorageConfig, get_config, set_config


class TestConfig:
    """Test configuration system."""

    def test_default_config(self, temp_dir):
        """Test default configuration values."""
        config = Config(data_dir=temp_dir / "data", log_dir=temp_dir / "logs")

        assert config.app_name == "Photo Album"
        assert config.debug is False
        assert config.log_level == "INFO"
        assert isinstance(config.storage, StorageConfig)
        assert isinstance(config.library, LibraryConfig)

    def test_library_config_defaults(self):
        """Test library defaults."""
        library = LibraryConfig()

        assert library.default_tag_types == ["location", "person"]
        assert library.stock_username == "stock"
        assert library.stock_album == "stock"
        assert ".jpg" in library.allowed_extensions

    def test_storage_layout(self, temp_dir):
        """Test derived record paths and directory creation."""
        config = Config(data_dir=temp_dir / "data", log_dir=temp_dir / "logs")

        assert config.admin_file == temp_dir / "data" / "admin.json"
        assert config.users_dir == temp_dir / "data" / "users"
        assert config.users_dir.is_dir()
        assert config.log_dir.is_dir()

    def test_stock_images_dir(self, temp_dir):
        """Test stock image directory default and override."""
        config = Config(data_dir=temp_dir / "data", log_dir=temp_dir / "logs")
        assert config.stock_images_dir == temp_dir / "data" / "stock"

        config = Config(data_dir=temp_dir / "data", log_dir=temp_dir / "logs", stock_dir=temp_dir / "pics")
        assert config.stock_images_dir == temp_dir / "pics"

    def test_config_from_env(self, temp_dir, monkeypatch):
        """Test configuration from environment variables."""
        monkeypatch.setenv("PHOTO_ALBUM_DEBUG", "true")
        monkeypatch.setenv("PHOTO_ALBUM_DATA_DIR", str(temp_dir / "env-data"))
        monkeypatch.setenv("PHOTO_ALBUM_LOG_DIR", str(temp_dir / "env-logs"))
        monkeypatch.setenv("PHOTO_ALBUM_LIBRARY__STOCK_ALBUM", "samples")

        config = Config()

        assert config.debug is True
        assert config.data_dir == temp_dir / "env-data"
        assert config.library.stock_album == "samples"

    def test_config_validation(self):
        """Test configuration validation."""
        with pytest.raises(ValueError):
            StorageConfig(indent=-1)

    def test_global_config(self, test_config):
        """Test setting the global configuration instance."""
        set_config(test_config)
        assert get_config() is test_config


class TestConfigFiles:
    """Config file loading and saving."""

    def test_yaml_file_loading(self, temp_dir):
        """Test loading configuration from a YAML file."""
        config_file = temp_dir / "config.yaml"
        config_file.write_text(
            "app_name: Test Album\n"
            f"data_dir: {temp_dir / 'yaml-data'}\n"
            f"log_dir: {temp_dir / 'yaml-logs'}\n"
            "library:\n"
            "  stock_album: samples\n"
        )

        config = Config.load_from_file(config_file)

        assert config.app_name == "Test Album"
        assert config.data_dir == temp_dir / "yaml-data"
        assert config.library.stock_album == "samples"

    def test_toml_file_loading(self, temp_dir):
        """Test loading configuration from a TOML file."""
        config_file = temp_dir / "config.toml"
        config_file.write_text(
            f'data_dir = "{temp_dir / "toml-data"}"\n'
            f'log_dir = "{temp_dir / "toml-logs"}"\n'
            "[storage]\n"
            "indent = 4\n"
        )

        config = Config(config_file=config_file)

        assert config.storage.indent == 4
        assert config.data_dir == temp_dir / "toml-data"

    def test_keyword_overrides_file(self, temp_dir):
        """Explicit keyword arguments win over file values."""
        config_file = temp_dir / "config.yaml"
        config_file.write_text(f"data_dir: {temp_dir / 'file-data'}\nlog_level: DEBUG\n")

        config = Config(config_file=config_file, data_dir=temp_dir / "kw-data", log_dir=temp_dir / "logs")

        assert config.data_dir == temp_dir / "kw-data"
        assert config.log_level == "DEBUG"

    def test_unsupported_file_format(self, temp_dir):
        """Test unsupported config file suffix."""
        config_file = temp_dir / "config.ini"
        config_file.write_text("[section]\n")

        with pytest.raises(ValueError, match="Unsupported config file format"):
            Config(config_file=config_file, data_dir=temp_dir / "data", log_dir=temp_dir / "logs")

    def test_save_config(self, temp_dir):
        """Test saving configuration and loading it back."""
        config = Config(data_dir=temp_dir / "data", log_dir=temp_dir / "logs", app_name="Saved")
        config_file = temp_dir / "saved.yaml"

        config.save_config(config_file)
        reloaded = Config(config_file=config_file, data_dir=temp_dir / "data", log_dir=temp_dir / "logs")

        assert reloaded.app_name == "Saved"
        assert reloaded.library.default_tag_types == ["location", "person"]
