"""
Directory lister port interface defining the contract for directory listings.
"""

from abc import ABC, abstractmethod

from file_browser.entities.FileSystemItem import FileSystemResult


class DirectoryListerPort(ABC):
    """Port interface for listing directories under the root."""

    @abstractmethod
    def list_directory(self, relative_path: str) -> FileSystemResult:
        """
        List the immediate children of a directory.

        Args:
            relative_path: Client-relative path of the directory ("" for the root)

        Returns:
            FileSystemResult with folders first, then files

        Raises:
            AccessDeniedError: If the path escapes the root
            NotFoundError: If the path does not exist or is not a directory
            OSError: If enumeration fails
        """
        pass
