"""
Local file system adapter implementation for directory listings.
"""

import logging
import os
from datetime import datetime, timezone

from typing_extensions import override

from file_browser.entities.FileSystemItem import FileSystemItem, FileSystemResult
from file_browser.exceptions import NotFoundError
from file_browser.ports.files.directory_lister_port import DirectoryListerPort
from file_browser.utils.path_resolver import PathResolver


class LocalDirectoryLister(DirectoryListerPort):
    """Local file system implementation of the directory lister port."""

    def __init__(self, resolver: PathResolver, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            resolver: Resolver confining every path to the root directory
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._resolver = resolver
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str, relative_path: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Absolute path to the directory to validate
            relative_path: Client-facing path, used in error messages

        Raises:
            NotFoundError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise NotFoundError(f"Directory does not exist: {relative_path}")

        if not os.path.isdir(directory):
            raise NotFoundError(f"Path is not a directory: {relative_path}")

    @staticmethod
    def _modified_at(stat: os.stat_result) -> datetime:
        return datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)

    @staticmethod
    def _count_children(directory: str) -> int:
        # Shallow: immediate entries only
        with os.scandir(directory) as it:
            return sum(1 for _ in it)

    def _folder_item(self, entry: os.DirEntry) -> FileSystemItem:
        return FileSystemItem(
            name=entry.name,
            path=self._resolver.to_relative(entry.path),
            is_folder=True,
            last_modified=self._modified_at(entry.stat()),
            child_count=self._count_children(entry.path),
        )

    def _file_item(self, entry: os.DirEntry) -> FileSystemItem:
        stat = entry.stat()
        return FileSystemItem(
            name=entry.name,
            path=self._resolver.to_relative(entry.path),
            is_folder=False,
            size=stat.st_size,
            last_modified=self._modified_at(stat),
        )

    @override
    def list_directory(self, relative_path: str) -> FileSystemResult:
        """
        List the immediate children of a directory, folders first.

        Any entry that cannot be read fails the whole listing.

        Args:
            relative_path: Client-relative path of the directory

        Returns:
            FileSystemResult

        Raises:
            AccessDeniedError: If the path escapes the root
            NotFoundError: If the directory does not exist
            OSError: If enumeration fails
        """
        directory = self._resolver.resolve(relative_path)
        self._validate_directory(directory, relative_path)
        self._resolver.verify_real_path(directory)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except (FileNotFoundError, NotADirectoryError):
            # Removed between the check and the scan
            raise NotFoundError(f"Directory does not exist: {relative_path}")

        folders = [self._folder_item(e) for e in entries if e.is_dir()]
        files = [self._file_item(e) for e in entries if not e.is_dir() and e.is_file()]

        result = FileSystemResult.from_items(
            current_path=self._resolver.to_relative(directory),
            parent_path=self._resolver.parent_of(directory),
            items=folders + files,
        )
        self._logger.debug(
            f"Listed {result.current_path or '/'}: "
            f"{result.folder_count} folders, {result.file_count} files"
        )
        return result
