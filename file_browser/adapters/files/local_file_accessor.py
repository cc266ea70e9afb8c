"""
Local file system adapter implementation for downloads and uploads.
"""

import logging
import os
import shutil
from typing import BinaryIO, Optional

from typing_extensions import override

from file_browser.entities.FileSystemItem import FileDownload
from file_browser.exceptions import AccessDeniedError, NotFoundError
from file_browser.ports.files.file_accessor_port import FileAccessorPort
from file_browser.utils.path_resolver import PathResolver

COPY_CHUNK_SIZE = 1024 * 1024

_FORBIDDEN_NAME_CHARS = ("/", "\\", "\0")


class LocalFileAccessor(FileAccessorPort):
    """Local file system implementation of the file accessor port."""

    def __init__(self, resolver: PathResolver, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            resolver: Resolver confining every path to the root directory
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._resolver = resolver
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_file_name(self, file_name: str) -> None:
        """
        Reject upload names that are not a single path component.

        Raises:
            AccessDeniedError: If the name is empty, "." or "..", or contains a separator
        """
        if not file_name or not file_name.strip() or file_name in (".", ".."):
            raise AccessDeniedError(f"Invalid file name: {file_name!r}")
        if any(c in file_name for c in _FORBIDDEN_NAME_CHARS):
            raise AccessDeniedError(f"Invalid file name: {file_name!r}")

    @override
    def open_for_read(self, relative_path: str) -> Optional[FileDownload]:
        path = self._resolver.resolve(relative_path)
        if not os.path.isfile(path):
            return None
        self._resolver.verify_real_path(path)

        try:
            stream = open(path, "rb")
        except FileNotFoundError:
            return None
        return FileDownload(stream=stream, file_name=os.path.basename(path))

    @override
    def write_new_file(
        self, target_dir_relative: str, file_name: str, content: BinaryIO
    ) -> str:
        """
        Copy an uploaded stream into target_dir_relative/file_name.

        The target directory is checked before any byte is read; an existing file is overwritten.

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
        directory = self._resolver.resolve(target_dir_relative)
        if not os.path.isdir(directory):
            raise NotFoundError(f"Target directory not found: {target_dir_relative}")
        self._resolver.verify_real_path(directory)

        self._validate_file_name(file_name)
        # An existing symlink under that name must not redirect the write
        destination = self._resolver.verify_real_path(os.path.join(directory, file_name))

        with open(destination, "wb") as out:
            shutil.copyfileobj(content, out, COPY_CHUNK_SIZE)

        written = self._resolver.to_relative(destination)
        self._logger.info(f"Stored upload {written}")
        return written
