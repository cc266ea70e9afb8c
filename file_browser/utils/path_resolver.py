"""Path resolution confined to a root directory.

Client paths use forward slashes and are relative to the root ("" is the root).
resolve() is pure path arithmetic: it never touches the filesystem, so a
rejected path never reaches any I/O call. verify_real_path() adds the
symbolic-link check the adapters run before opening anything.
"""

from __future__ import annotations

import os

from file_browser.entities.RootContext import RootContext
from file_browser.exceptions import AccessDeniedError

_SEPARATOR = "/"


class PathResolver:
    """Maps client-relative paths to absolute paths inside a RootContext and back."""

    def __init__(self, root: RootContext):
        self._root = root

    @property
    def root(self) -> str:
        return self._root.path

    def is_within_root(self, abs_path: str) -> bool:
        """Return True if abs_path is the root itself or one of its descendants."""
        p = os.path.normpath(abs_path)
        try:
            common = os.path.commonpath([self.root, p])
        except ValueError:
            return False
        return common == self.root

    def resolve(self, relative: str | None) -> str:
        """
        Resolve a client-relative path to an absolute path under the root.

        Raises:
            AccessDeniedError: If the path escapes the root or is malformed
        """
        if relative is None or not relative.strip():
            return self.root
        if "\0" in relative:
            raise AccessDeniedError("Access denied: path contains a NUL character")

        normalized = relative.replace("\\", _SEPARATOR).strip(_SEPARATOR)
        if not normalized:
            return self.root

        candidate = os.path.normpath(os.path.join(self.root, normalized))
        if not self.is_within_root(candidate):
            raise AccessDeniedError(f"Access denied: {relative!r} resolves outside the root")
        return candidate

    def verify_real_path(self, abs_path: str) -> str:
        """
        Re-check containment of a resolved path after following symbolic links.

        Unlike resolve(), this reads link targets from disk; adapters call it right
        before opening a path.

        Raises:
            AccessDeniedError: If a symbolic link leads outside the root
        """
        if not self.is_within_root(os.path.realpath(abs_path)):
            raise AccessDeniedError("Access denied: symbolic link leads outside the root")
        return abs_path

    def to_relative(self, abs_path: str) -> str:
        """
        Convert an absolute path under the root to its slash-separated relative form.

        Raises:
            AccessDeniedError: If abs_path lies outside the root
        """
        p = os.path.normpath(abs_path)
        if not self.is_within_root(p):
            raise AccessDeniedError("Access denied: path lies outside the root")
        rel = os.path.relpath(p, self.root)
        if rel == os.curdir:
            return ""
        return rel.replace(os.sep, _SEPARATOR)

    def parent_of(self, abs_path: str) -> str:
        """Relative path one level above abs_path, clamped to "" at the root."""
        p = os.path.normpath(abs_path)
        if p == self.root:
            return ""
        return self.to_relative(os.path.dirname(p))
