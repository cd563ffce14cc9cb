"""Configuration management for the TinyDFS console."""

import json
import os
import shutil
from pathlib import Path
from typing import Any, Dict, Optional

from common.constants import CHUNK_SIZE_BYTES, DEFAULT_NUM_DATA_NODES, DEFAULT_STORAGE_ROOT
from common.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / '.tinydfs' / 'config.json'


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}: not an integer, using {default}")
        return default


class Config:
    """Manages cluster configuration stored in a JSON file."""

    DEFAULT_CONFIG = {
        "storage_root": os.environ.get("TINYDFS_STORAGE_ROOT", DEFAULT_STORAGE_ROOT),
        "num_data_nodes": _env_int("TINYDFS_NUM_DATA_NODES", DEFAULT_NUM_DATA_NODES),
        "chunk_size": CHUNK_SIZE_BYTES,
        "verify_checksums": _env_flag("TINYDFS_VERIFY_CHECKSUMS", True),
        "use_recorded_placement": True,
        "clean_on_start": True,
        "registry_path": None,
    }

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.tinydfs/config.json)
        """
        self.config_path = Path(config_path)
        self.data = self._load()

    def _load(self) -> Dict[str, Any]:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            import tempfile
            self.config_path = Path(tempfile.gettempdir()) / '.tinydfs' / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Config file {self.config_path} is unreadable ({e}), using defaults")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Could not back up config file: {copy_error}")
                return self.DEFAULT_CONFIG.copy()
        else:
            config = self.DEFAULT_CONFIG.copy()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except IOError as e:
                logger.warning(f"Could not write default config to {self.config_path}: {e}")
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not save config to {self.config_path}: {e}")

    def get_storage_root(self) -> Path:
        """
        Get the directory holding one sub-directory per data node.

        Returns:
            Storage root path
        """
        return Path(self.data.get('storage_root', DEFAULT_STORAGE_ROOT))

    def get_num_data_nodes(self) -> int:
        return int(self.data.get('num_data_nodes', DEFAULT_NUM_DATA_NODES))

    def get_chunk_size(self) -> int:
        return int(self.data.get('chunk_size', CHUNK_SIZE_BYTES))

    def get_registry_path(self) -> Optional[Path]:
        """
        Get the registry snapshot path.

        Returns:
            Path to the JSON snapshot, or None when the registry is kept in memory only
        """
        path = self.data.get('registry_path')
        return Path(path) if path else None

    def get_cluster_settings(self) -> Dict[str, Any]:
        """
        Get keyword arguments for DFSCluster.

        Returns:
            Dictionary of cluster constructor arguments
        """
        return {
            'storage_root': self.get_storage_root(),
            'num_data_nodes': self.get_num_data_nodes(),
            'chunk_size': self.get_chunk_size(),
            'verify_checksums': bool(self.data.get('verify_checksums', True)),
            'use_recorded_placement': bool(self.data.get('use_recorded_placement', True)),
            'clean_on_start': bool(self.data.get('clean_on_start', True)),
            'registry_path': self.get_registry_path(),
        }
