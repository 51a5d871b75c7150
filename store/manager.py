"""Store manager for category export files and path management."""

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Optional

import yaml

from config import Config
from logger import get_logger

logger = get_logger()

YAML_SUFFIXES = (".yaml", ".yml")


class StoreManager:
    """Manages access to the category export file.

    The export is the saved body of a categories listing response, either
    as JSON or as YAML.

    Args:
        config: Application configuration object.
        path: Optional explicit export path, overriding the configured one.
    """

    def __init__(self, config: Config, path: Optional[Path] = None):
        """Initialize the store manager.

        Args:
            config: Config object containing data configuration.
            path: Optional path to use instead of config.data_path.
        """
        self.config = config
        self.path = Path(path) if path else None

    def get_data_path(self) -> Path:
        """Get the current export path.

        Returns:
            Path: Path to the export file.
        """
        return self.path or self.config.data_path

    @contextmanager
    def open(self):
        """Open the export file with automatic cleanup.

        Yields:
            TextIO: Open handle on the export file.

        Raises:
            FileNotFoundError: If the export file does not exist.
        """
        data_path = self.get_data_path()
        if not data_path.exists():
            raise FileNotFoundError(f"Category export not found: {data_path}")

        f = open(data_path, "r", encoding="utf-8")
        try:
            yield f
        finally:
            f.close()

    def read_payload(self) -> Any:
        """Read and parse the export file.

        Returns:
            The decoded payload (usually a list or a dict with "items").

        Raises:
            FileNotFoundError: If the export file does not exist.
            ValueError: If the file is not valid JSON/YAML.
        """
        data_path = self.get_data_path()
        logger.debug(f"Reading category export from {data_path}")

        with self.open() as f:
            try:
                if data_path.suffix.lower() in YAML_SUFFIXES:
                    return yaml.safe_load(f)
                return json.load(f)
            except (json.JSONDecodeError, yaml.YAMLError) as e:
                raise ValueError(f"Could not parse {data_path}: {e}") from e
