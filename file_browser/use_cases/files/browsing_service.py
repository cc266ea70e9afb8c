"""
Use case facade for browsing, downloading and uploading files under the root.
"""

import logging
from typing import BinaryIO, Callable, Optional, TypeVar

from file_browser.entities.FileSystemItem import FileDownload, FileSystemResult
from file_browser.entities.Outcome import ErrorKind, Outcome
from file_browser.exceptions import AccessDeniedError, NotFoundError
from file_browser.ports.files.directory_lister_port import DirectoryListerPort
from file_browser.ports.files.file_accessor_port import FileAccessorPort

T = TypeVar("T")

ACCESS_DENIED_MESSAGE = "Access denied"
DIRECTORY_NOT_FOUND_MESSAGE = "Directory not found"
FILE_NOT_FOUND_MESSAGE = "File not found"
TARGET_NOT_FOUND_MESSAGE = "Target directory not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class BrowsingService:
    """
    Public facade over the directory lister and the file accessor.

    Every operation returns an Outcome instead of raising: ACCESS_DENIED when a path
    escapes the root, NOT_FOUND when the target does not exist, INTERNAL_ERROR for any
    other failure. Messages are fixed strings and never include paths.
    """

    def __init__(
        self,
        directory_lister: DirectoryListerPort,
        file_accessor: FileAccessorPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            directory_lister: Port for directory listings
            file_accessor: Port for downloads and uploads
            logger: Logger instance to use for logging
        """
        self._directory_lister = directory_lister
        self._file_accessor = file_accessor
        self._logger = logger or logging.getLogger(__name__)

    def _run(
        self, operation: str, not_found_message: str, action: Callable[[], T]
    ) -> Outcome[T]:
        try:
            return Outcome.success(action())
        except AccessDeniedError as e:
            self._logger.warning(f"{operation} rejected: {e}")
            return Outcome.failure(ErrorKind.ACCESS_DENIED, ACCESS_DENIED_MESSAGE)
        except NotFoundError as e:
            self._logger.info(f"{operation} failed: {e}")
            return Outcome.failure(ErrorKind.NOT_FOUND, not_found_message)
        except Exception as e:
            self._logger.exception(f"Error during {operation}: {e}")
            return Outcome.failure(ErrorKind.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)

    def list_directory(self, relative_path: str) -> Outcome[FileSystemResult]:
        """
        List a directory.

        Args:
            relative_path: Client-relative directory path ("" for the root)

        Returns:
            Outcome holding a FileSystemResult
        """
        self._logger.info(f"Listing directory: '{relative_path}'")
        return self._run(
            "list",
            DIRECTORY_NOT_FOUND_MESSAGE,
            lambda: self._directory_lister.list_directory(relative_path),
        )

    def download(self, relative_path: str) -> Outcome[FileDownload]:
        """
        Open a file for download. The caller closes the returned stream.

        Args:
            relative_path: Client-relative file path

        Returns:
            Outcome holding a FileDownload
        """
        self._logger.info(f"Downloading file: '{relative_path}'")
        outcome = self._run(
            "download",
            FILE_NOT_FOUND_MESSAGE,
            lambda: self._file_accessor.open_for_read(relative_path),
        )
        if outcome.ok and outcome.value is None:
            return Outcome.failure(ErrorKind.NOT_FOUND, FILE_NOT_FOUND_MESSAGE)
        return outcome

    def upload(
        self, target_dir: str, file_name: str, content: BinaryIO
    ) -> Outcome[str]:
        """
        Store an uploaded file in an existing directory, overwriting any previous file of that name.

        Args:
            target_dir: Client-relative path of the destination directory
            file_name: Uploaded file name
            content: Binary stream with the file content

        Returns:
            Outcome holding the client-relative path of the stored file
        """
        self._logger.info(f"Uploading '{file_name}' into: '{target_dir}'")
        return self._run(
            "upload",
            TARGET_NOT_FOUND_MESSAGE,
            lambda: self._file_accessor.write_new_file(target_dir, file_name, content),
        )
