"""
Config system - resolves which database type's registry to use.

Sources, later overriding earlier:
1. Default (``sql``)
2. YAML file (``dbtypes.yaml`` if present, or an explicit path)
3. ``.env`` file
4. Environment variables (``DBTYPES_*`` prefix)
5. Manual overrides
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import dotenv_values

from .faults.domains import BackendNotFoundFault, ConfigInvalidFault, ConfigMissingFault
from .types.base import TypeValidationRegistry
from .types.factory import get_registry

logger = logging.getLogger("dbtypes.config")

__all__ = ["RegistryConfig", "DEFAULT_DATABASE_TYPE", "DEFAULT_CONFIG_FILE"]


DEFAULT_DATABASE_TYPE = "sql"
DEFAULT_CONFIG_FILE = "dbtypes.yaml"


class RegistryConfig:
    """
    Layered configuration for backend selection.

    Usage:
        config = RegistryConfig.load(env_file=".env")
        registry = config.registry()
    """

    def __init__(self, env_prefix: str = "DBTYPES_"):
        self.env_prefix = env_prefix
        self.config_data: Dict[str, Any] = {"database_type": DEFAULT_DATABASE_TYPE}

    @classmethod
    def load(
        cls,
        path: Optional[str] = None,
        env_prefix: str = "DBTYPES_",
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> "RegistryConfig":
        """
        Load configuration from every source with proper precedence.

        Args:
            path: YAML config file; defaults to ``dbtypes.yaml`` when it exists
            env_prefix: Prefix for environment variables
            env_file: Path to .env file
            overrides: Manual overrides (highest precedence)

        Returns:
            Configured RegistryConfig instance

        Raises:
            ConfigInvalidFault: if the YAML file is unreadable, malformed or not a mapping
        """
        config = cls(env_prefix=env_prefix)

        if path is None and Path(DEFAULT_CONFIG_FILE).exists():
            path = DEFAULT_CONFIG_FILE
        if path:
            config._load_yaml_file(Path(path))

        if env_file:
            config._load_env_file(env_file)

        config._load_from_env()

        if overrides:
            config.config_data.update(overrides)

        logger.debug("Resolved database_type=%r", config.database_type)
        return config

    def _load_yaml_file(self, path: Path):
        """Load config from YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigInvalidFault(str(path), f"cannot read file: {exc.strerror or exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigInvalidFault(str(path), f"malformed YAML: {exc}") from exc
        if data is None:
            return
        if not isinstance(data, dict):
            raise ConfigInvalidFault(
                str(path), f"expected a mapping, got {type(data).__name__}"
            )
        self.config_data.update(data)

    def _load_env_file(self, path: str):
        """Load config from .env file."""
        if not Path(path).exists():
            return
        self._apply_prefixed(dotenv_values(path))

    def _load_from_env(self):
        """Load config from environment variables."""
        self._apply_prefixed(os.environ)

    def _apply_prefixed(self, values):
        for key, value in values.items():
            if key.startswith(self.env_prefix) and value is not None:
                self.config_data[key[len(self.env_prefix):].lower()] = value

    @property
    def database_type(self) -> Any:
        return self.config_data.get("database_type")

    def get(self, key: str, default: Any = None) -> Any:
        return self.config_data.get(key, default)

    def registry(self) -> TypeValidationRegistry:
        """
        Registry for the configured database type.

        Raises:
            ConfigMissingFault: if a source set the database type to null
            ConfigInvalidFault: if the database type has no registry
        """
        if self.database_type is None:
            raise ConfigMissingFault("database_type")
        try:
            return get_registry(self.database_type)
        except BackendNotFoundFault as fault:
            raise ConfigInvalidFault(
                "database_type",
                fault.message,
                metadata={"available": fault.metadata["available"]},
            ) from fault

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.config_data)
