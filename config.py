"""Configuration management for Ecotree.

Reads configuration from ~/.config/ecotree.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    data_dir: Path
    data_filename: str
    log_level: str
    log_dir: Path
    log_to_file: bool = True
    preserve_expansion: bool = False
    tree_indent: int = 2

    @property
    def data_path(self) -> Path:
        """Get the full path of the category export (data_dir/filename)."""
        return self.data_dir / self.data_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "ecotree"
        return cls(
            base_dir=base_dir,
            data_dir=base_dir / "data",
            data_filename="categories.json",
            log_level="INFO",
            log_dir=base_dir / "logs",
            log_to_file=True,
            preserve_expansion=False,
            tree_indent=2,
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "ecotree.toml"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Args:
        config_path: Optional override of the config file location.

    Returns:
        Config object with loaded or default values.
    """
    config_path = config_path or get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config, config_path)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "ecotree"))

    data_config = data.get("data", {})
    data_dir = Path(data_config.get("data_dir", base_dir / "data"))
    data_filename = data_config.get("filename", "categories.json")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))
    log_to_file = bool(log_config.get("file", True))

    tree_config = data.get("tree", {})
    preserve_expansion = bool(tree_config.get("preserve_expansion", False))
    tree_indent = int(tree_config.get("indent", 2))

    return Config(
        base_dir=base_dir,
        data_dir=data_dir,
        data_filename=data_filename,
        log_level=log_level,
        log_dir=log_dir,
        log_to_file=log_to_file,
        preserve_expansion=preserve_expansion,
        tree_indent=tree_indent,
    )


def _write_config(config: Config, config_path: Path) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
        config_path: Destination of the TOML file.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "data": {
            "data_dir": str(config.data_dir),
            "filename": config.data_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
            "file": config.log_to_file,
        },
        "tree": {
            "preserve_expansion": config.preserve_expansion,
            "indent": config.tree_indent,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
