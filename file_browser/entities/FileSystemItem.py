"""
File system domain entities returned by listing and download operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import BinaryIO, Optional

OCTET_STREAM = "application/octet-stream"


@dataclass(frozen=True)
class FileSystemItem:
    """One entry (file or folder) of a directory listing."""

    name: str
    path: str
    is_folder: bool
    size: int = 0
    last_modified: Optional[datetime] = None
    # Immediate children only; None for files
    child_count: Optional[int] = None


@dataclass(frozen=True)
class FileSystemResult:
    """Listing of one directory with aggregate statistics over its direct children."""

    current_path: str
    parent_path: str
    items: list[FileSystemItem] = field(default_factory=list)
    file_count: int = 0
    folder_count: int = 0
    total_size: int = 0

    @classmethod
    def from_items(
        cls, current_path: str, parent_path: str, items: list[FileSystemItem]
    ) -> "FileSystemResult":
        """
        Build a result whose counts and total size are derived from the items.

        Args:
            current_path: Relative path of the listed directory
            parent_path: Relative path one level up ("" at the root)
            items: Folders followed by files

        Returns:
            FileSystemResult
        """
        files = [i for i in items if not i.is_folder]
        return cls(
            current_path=current_path,
            parent_path=parent_path,
            items=list(items),
            file_count=len(files),
            folder_count=len(items) - len(files),
            total_size=sum(f.size for f in files),
        )


@dataclass
class FileDownload:
    """Readable stream over a file; the receiver is responsible for closing it."""

    stream: BinaryIO
    file_name: str
    content_type: str = OCTET_STREAM

    def close(self) -> None:
        self.stream.close()
