"""Configuration management for the photo album library."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import toml
import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class StorageConfig(BaseModel):
    """On-disk record layout settings."""

    admin_filename: str = Field(default="admin.json", description="Admin roster record file name")
    users_dirname: str = Field(default="users", description="Directory holding one record per user")
    record_suffix: str = Field(default=".json", description="File suffix for user records")
    indent: int = Field(default=2, ge=0, description="JSON indentation for written records")


class LibraryConfig(BaseModel):
    """Library defaults and reserved accounts."""

    default_tag_types: List[str] = Field(
        default=["location", "person"],
        description="Tag types every new user starts with"
    )
    stock_username: str = Field(default="stock", description="Protected default user")
    stock_album: str = Field(default="stock", description="Album provisioned for the stock user")
    allowed_extensions: List[str] = Field(
        default=[".jpg", ".jpeg", ".png", ".gif", ".bmp"],
        description="Image file extensions accepted on import"
    )


class Config(BaseSettings):
    """Main configuration class."""

    # Application settings
    app_name: str = Field(default="Photo Album", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # Data directories
    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".local" / "share" / "photo-album",
        description="Directory holding the admin and user records"
    )
    log_dir: Path = Field(
        default_factory=lambda: Path.home() / ".local" / "share" / "photo-album" / "logs",
        description="Log directory"
    )
    stock_dir: Optional[Path] = Field(
        default=None,
        description="Directory of images imported into the stock album (defaults to <data_dir>/stock)"
    )

    # Configuration sections
    storage: StorageConfig = Field(default_factory=StorageConfig)
    library: LibraryConfig = Field(default_factory=LibraryConfig)

    class Config:
        env_prefix = "PHOTO_ALBUM_"
        env_nested_delimiter = "__"
        case_sensitive = False

    def __init__(self, config_file: Optional[Path] = None, **kwargs):
        """Initialize configuration with optional config file."""
        if config_file and config_file.exists():
            file_config = self._load_config_file(config_file)
            file_config.update(kwargs)
            kwargs = file_config

        super().__init__(**kwargs)

        self._ensure_directories()

    def _load_config_file(self, config_file: Path) -> Dict[str, Any]:
        """Load configuration from file."""
        if config_file.suffix.lower() in ['.yaml', '.yml']:
            with open(config_file, 'r') as f:
                return yaml.safe_load(f) or {}
        elif config_file.suffix.lower() == '.toml':
            return toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config file format: {config_file.suffix}")

    def _ensure_directories(self) -> None:
        """Ensure all required directories exist."""
        for directory in [self.data_dir, self.users_dir, self.log_dir]:
            directory.mkdir(parents=True, exist_ok=True)

    def save_config(self, config_file: Path) -> None:
        """Save current configuration to a YAML file."""
        config_data = self.model_dump(mode='json', exclude={'data_dir', 'log_dir', 'stock_dir'})

        with open(config_file, 'w') as f:
            yaml.dump(config_data, f, default_flow_style=False, indent=2)

    @classmethod
    def load_from_file(cls, config_file: Path) -> "Config":
        """Load configuration from file."""
        return cls(config_file=config_file)

    @property
    def admin_file(self) -> Path:
        """Path of the admin roster record."""
        return self.data_dir / self.storage.admin_filename

    @property
    def users_dir(self) -> Path:
        """Directory holding the per-user records."""
        return self.data_dir / self.storage.users_dirname

    @property
    def stock_images_dir(self) -> Path:
        """Directory scanned for the one-time stock album import."""
        return self.stock_dir if self.stock_dir is not None else self.data_dir / "stock"


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        default_config_file = Path.home() / ".config" / "photo-album" / "config.yaml"
        if default_config_file.exists():
            _config = Config.load_from_file(default_config_file)
        else:
            _config = Config()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config
    _config = None
