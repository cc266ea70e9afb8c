"""
Root context entity: the containment boundary for every file operation.
"""

import os
from dataclasses import dataclass
from typing import Optional

from file_browser.exceptions import ConfigurationError

DEFAULT_ROOT = "./FilePool"


@dataclass(frozen=True)
class RootContext:
    """
    Absolute, normalized root directory shared by all file components.

    Instances are immutable and passed explicitly to each component, so several
    roots can coexist (e.g. one per test).
    """

    path: str

    def __post_init__(self):
        if not self.path or not os.path.isabs(self.path):
            raise ConfigurationError("Root path must be an absolute path")
        object.__setattr__(self, "path", os.path.normpath(self.path))

    @classmethod
    def from_config(
        cls, configured: Optional[str], base_dir: Optional[str] = None
    ) -> "RootContext":
        """
        Build a root context from a configured path, creating the directory if absent.

        Args:
            configured: Configured root path, absolute or relative to base_dir.
                Blank values fall back to DEFAULT_ROOT.
            base_dir: Base directory for relative roots (defaults to the current working directory)

        Returns:
            RootContext pointing at an existing directory

        Raises:
            ConfigurationError: If the root exists but is not a directory, or cannot be created
        """
        if configured is None or not configured.strip():
            configured = DEFAULT_ROOT

        base = os.path.abspath(os.path.expanduser(base_dir or os.getcwd()))
        root = os.path.join(base, os.path.expanduser(configured.strip()))
        # Symlinks in the root itself are resolved once, here.
        root = os.path.realpath(root)

        if os.path.exists(root) and not os.path.isdir(root):
            raise ConfigurationError(f"Root path is not a directory: {root}")
        try:
            os.makedirs(root, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"Cannot create root directory {root}: {e}")

        return cls(root)

    def __str__(self) -> str:
        return self.path
