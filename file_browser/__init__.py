"""file_browser package: confined browsing, download and upload over a single root directory.

Subpackages are imported directly; keep __all__ empty.
"""

__all__: list[str] = []
