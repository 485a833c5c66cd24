"""CloneConfig: Typed, validated settings for a single workflow clone"""

import os
import json
import logging
from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, Optional

# GlueClone Imports
from glueclone.utils.name_replacer import NameReplacer

log = logging.getLogger("glueclone")


class ConfigError(Exception):
    """Exception raised for errors in the clone configuration."""


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass
class CloneConfig:
    """CloneConfig: Settings shared by both clone variants"""

    workflow_name: str
    replacer: Dict[str, str] = field(default_factory=dict)

    # Keys that must be present and non-blank
    required_keys = ("workflow_name",)

    def validate(self) -> None:
        """Check that required fields are non-blank and the replacer is well formed

        Raises:
            ConfigError: Naming the offending key
        """
        for key in self.required_keys:
            value = getattr(self, key)
            if _is_blank(value):
                raise ConfigError(f"{key} parameter not provided")
            if not isinstance(value, str):
                raise ConfigError(f"{key} must be a string, got {type(value).__name__}")

        if not isinstance(self.replacer, dict):
            raise ConfigError(f"replacer must be a map of strings, got {type(self.replacer).__name__}")
        for old, new in self.replacer.items():
            if not isinstance(old, str) or old == "":
                raise ConfigError("replacer keys must be non-empty strings")
            if not isinstance(new, str):
                raise ConfigError(f"replacer value for [{old}] must be a string")

    def name_replacer(self) -> NameReplacer:
        """Build the NameReplacer for this configuration"""
        return NameReplacer(self.replacer)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CloneConfig":
        """Build and validate a configuration from a parsed JSON object

        Args:
            data (dict): The parsed configuration

        Returns:
            CloneConfig: A validated configuration
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                log.warning(f"Ignoring unknown configuration key: {key}")
        kwargs = {key: value for key, value in data.items() if key in known}
        if kwargs.get("replacer") is None:
            kwargs.pop("replacer", None)
        kwargs.setdefault("workflow_name", None)
        config = cls(**kwargs)
        config.validate()
        return config

    @classmethod
    def load(cls, path: str) -> "CloneConfig":
        """Load and validate a configuration file

        Args:
            path (str): Path to the JSON configuration file

        Returns:
            CloneConfig: A validated configuration
        """
        if _is_blank(path):
            raise ConfigError("-conf parameter not provided")
        if not os.path.isfile(path):
            raise ConfigError(f"File [{path}] not found!")
        with open(path, "r") as file:
            try:
                data = json.load(file)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Failed to parse [{path}]: {e}") from e
        return cls.from_dict(data)


@dataclass
class RegionCopyConfig(CloneConfig):
    """RegionCopyConfig: Copy a workflow from one region to another"""

    workflow_region: str = None
    workflow_target_region: str = None

    required_keys = ("workflow_name", "workflow_region", "workflow_target_region")


@dataclass
class PrefixCopyConfig(CloneConfig):
    """PrefixCopyConfig: Duplicate a workflow in place as prefix + name"""

    workflow_prefix: str = None
    workflow_region: Optional[str] = None

    required_keys = ("workflow_name", "workflow_prefix")

    def validate(self) -> None:
        super().validate()
        if self.workflow_region is not None and not isinstance(self.workflow_region, str):
            raise ConfigError("workflow_region must be a string")


def load_region_config(path: str) -> RegionCopyConfig:
    """Load the configuration for a cross-region copy"""
    return RegionCopyConfig.load(path)


def load_prefix_config(path: str) -> PrefixCopyConfig:
    """Load the configuration for a prefixed duplication"""
    return PrefixCopyConfig.load(path)


if __name__ == "__main__":
    """Exercise the CloneConfig Classes"""
    import tempfile

    with tempfile.NamedTemporaryFile("w", suffix=".json", delete=False) as tmp:
        json.dump({"workflow_name": "dev_etl", "workflow_prefix": "copy_", "replacer": {"dev": "test"}}, tmp)
    print(load_prefix_config(tmp.name))
    os.remove(tmp.name)
