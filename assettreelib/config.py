"""Configuration system for AssetTreeLib.

This module defines the limits that every tree operation honours: how deep
folders may nest, what a folder name may contain, how breadcrumb paths are
joined, and whether read-time traversal is bounded.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


MAX_NESTING_DEPTH = 10
MAX_NAME_LENGTH = 100
INVALID_NAME_CHARS = '<>:"/\\|?*'
PATH_SEPARATOR = " > "


class AssetType(Enum):
    """Discriminator for asset nodes.

    Only folders may have children.
    """
    FILE = "file"
    FOLDER = "folder"

    @classmethod
    def parse(cls, value: Union["AssetType", str]) -> "AssetType":
        """Parse an asset type from an enum member or its wire string.

        Raises:
            ValueError: If the value is not a known asset type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        raise ValueError(f"Unknown asset type: {value!r}")


class AssetTreeError(Exception):
    """Base class for errors raised by AssetTreeLib."""


class ConfigurationError(AssetTreeError):
    """Raised when an AssetTreeConfig fails validation."""


@dataclass(frozen=True)
class AssetTreeConfig:
    """Complete configuration for asset tree operations.

    The defaults reproduce the limits the asset browsers enforce. Pass a
    custom instance through the ``config`` keyword of any API function.
    """

    # Nesting: depth(root) = 0, a node may be placed at depth < max_nesting_depth
    max_nesting_depth: int = MAX_NESTING_DEPTH

    # Folder name constraints
    max_name_length: int = MAX_NAME_LENGTH
    invalid_name_chars: str = INVALID_NAME_CHARS

    # Breadcrumb display
    path_separator: str = PATH_SEPARATOR

    # Read-time traversal bound (None = trust the acyclic invariant)
    max_traversal_steps: Optional[int] = None

    # Preview shown for folders with no preview of their own
    default_folder_preview: Optional[str] = None

    @classmethod
    def default(cls) -> "AssetTreeConfig":
        """Return the stock configuration."""
        return cls()

    @classmethod
    def guarded(cls, factor: int = 2, **kwargs) -> "AssetTreeConfig":
        """Create a config that bounds every read-time walk.

        Walks longer than ``max_nesting_depth * factor`` steps raise
        CorruptTreeError instead of recursing without end.

        Args:
            factor: Multiplier applied to the nesting limit
            **kwargs: Other AssetTreeConfig fields

        Returns:
            AssetTreeConfig with max_traversal_steps set
        """
        max_depth = kwargs.get("max_nesting_depth", MAX_NESTING_DEPTH)
        return cls(max_traversal_steps=max_depth * factor, **kwargs)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_nesting_depth < 1:
            errors.append("max_nesting_depth must be at least 1")

        if self.max_name_length < 1:
            errors.append("max_name_length must be positive")

        if not self.path_separator:
            errors.append("path_separator cannot be empty")

        if self.max_traversal_steps is not None:
            if self.max_traversal_steps < self.max_nesting_depth:
                errors.append("max_traversal_steps cannot be less than max_nesting_depth")

        return errors


DEFAULT_CONFIG = AssetTreeConfig()


def resolve_config(config: Optional[AssetTreeConfig]) -> AssetTreeConfig:
    """Return ``config`` or the module default, validated.

    Raises:
        ConfigurationError: If the configuration is inconsistent
    """
    if config is None:
        return DEFAULT_CONFIG

    errors = config.validate()
    if errors:
        raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
    return config
