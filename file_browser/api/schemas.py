"""
Pydantic models for API requests and responses.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from file_browser.entities.FileSystemItem import FileSystemItem, FileSystemResult


class FileSystemItemInfo(BaseModel):
    """Schema for one directory entry."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Base name")
    path: str = Field(..., description="Path relative to the root, '/'-separated")
    is_folder: bool = Field(..., alias="isFolder", description="Whether the entry is a folder")
    size: int = Field(0, description="Size in bytes (0 for folders)")
    last_modified: Optional[datetime] = Field(
        None, alias="lastModified", description="Last modification time"
    )
    child_count: Optional[int] = Field(
        None, alias="childCount", description="Number of immediate children (folders only)"
    )

    @classmethod
    def from_entity(cls, item: FileSystemItem):
        """Create a FileSystemItemInfo schema from a FileSystemItem entity."""
        return cls(
            name=item.name,
            path=item.path,
            is_folder=item.is_folder,
            size=item.size,
            last_modified=item.last_modified,
            child_count=item.child_count,
        )


class FileSystemResultResponse(BaseModel):
    """Schema for a directory listing response."""

    model_config = ConfigDict(populate_by_name=True)

    current_path: str = Field(..., alias="currentPath", description="Listed directory")
    parent_path: str = Field(
        ..., alias="parentPath", description="Directory one level up ('' at the root)"
    )
    items: List[FileSystemItemInfo] = Field(
        default_factory=list, description="Folders first, then files"
    )
    file_count: int = Field(0, alias="fileCount", description="Number of files")
    folder_count: int = Field(0, alias="folderCount", description="Number of folders")
    total_size: int = Field(
        0, alias="totalSize", description="Total size of the files at this level in bytes"
    )

    @classmethod
    def from_entity(cls, result: FileSystemResult):
        """Create a FileSystemResultResponse schema from a FileSystemResult entity."""
        return cls(
            current_path=result.current_path,
            parent_path=result.parent_path,
            items=[FileSystemItemInfo.from_entity(i) for i in result.items],
            file_count=result.file_count,
            folder_count=result.folder_count,
            total_size=result.total_size,
        )


class UploadResponse(BaseModel):
    """Schema for upload response."""

    path: str = Field(..., description="Path of the stored file relative to the root")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
