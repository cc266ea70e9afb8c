"""
File accessor port interface defining the contract for downloads and uploads.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

from file_browser.entities.FileSystemItem import FileDownload


class FileAccessorPort(ABC):
    """Port interface for reading and writing files under the root."""

    @abstractmethod
    def open_for_read(self, relative_path: str) -> Optional[FileDownload]:
        """
        Open a file for download.

        Args:
            relative_path: Client-relative path of the file

        Returns:
            FileDownload positioned at offset 0, or None if there is no such file.
            The caller must close the returned stream.

        Raises:
            AccessDeniedError: If the path escapes the root
        """
        pass

    @abstractmethod
    def write_new_file(
        self, target_dir_relative: str, file_name: str, content: BinaryIO
    ) -> str:
        """
        Write an uploaded file into an existing directory, overwriting any file of the same name.

        Args:
            target_dir_relative: Client-relative path of the destination directory
            file_name: Name of the file to create
            content: Binary stream with the file content

        Returns:
            Client-relative path of the written file

        Raises:
            AccessDeniedError: If the target or the file name escapes the root
            NotFoundError: If the target directory does not exist
        """
        pass
