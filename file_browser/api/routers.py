"""
FastAPI router definitions for the file system endpoints.

Endpoints:
- GET  /api/fs/list      directory listing (path="" lists the root)
- GET  /api/fs/download  file download
- POST /api/fs/upload    multipart upload into an existing directory
"""

from typing import Iterator, Optional
from urllib.parse import quote

from fastapi import APIRouter, File, Form, HTTPException, Query, UploadFile
from fastapi.responses import StreamingResponse

from file_browser.api.dependencies import get_browsing_service
from file_browser.api.schemas import (
    ErrorResponse,
    FileSystemResultResponse,
    UploadResponse,
)
from file_browser.entities.FileSystemItem import FileDownload
from file_browser.entities.Outcome import ErrorKind, Outcome

DOWNLOAD_CHUNK_SIZE = 64 * 1024

_STATUS_BY_ERROR = {
    ErrorKind.ACCESS_DENIED: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL_ERROR: 500,
}

_ERROR_RESPONSES = {
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

router = APIRouter(prefix="/api/fs", tags=["filesystem"])


def _raise_for_error(outcome: Outcome) -> None:
    if not outcome.ok:
        raise HTTPException(
            status_code=_STATUS_BY_ERROR[outcome.error], detail=outcome.message
        )


def _content_disposition(file_name: str) -> str:
    quoted = quote(file_name)
    if quoted != file_name:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{file_name}"'


def _iter_download(download: FileDownload) -> Iterator[bytes]:
    # Closing the generator (end of stream or client disconnect) closes the file.
    with download.stream:
        while True:
            chunk = download.stream.read(DOWNLOAD_CHUNK_SIZE)
            if not chunk:
                break
            yield chunk


@router.get("/list", response_model=FileSystemResultResponse, responses=_ERROR_RESPONSES)
def list_directory(
    path: str = Query("", description="Directory path relative to the root"),
):
    """
    List the contents of a directory.

    Args:
        path: Relative directory path; empty lists the root

    Returns:
        FileSystemResultResponse: Folders, files and aggregate counts

    Raises:
        HTTPException: 403 outside the root, 404 missing directory, 500 otherwise
    """
    outcome = get_browsing_service().list_directory(path)
    _raise_for_error(outcome)
    return FileSystemResultResponse.from_entity(outcome.value)


@router.get("/download", responses=_ERROR_RESPONSES)
def download_file(path: str = Query(..., description="File path relative to the root")):
    """
    Download a file as a binary stream.

    Raises:
        HTTPException: 403 outside the root, 404 missing file, 500 otherwise
    """
    outcome = get_browsing_service().download(path)
    _raise_for_error(outcome)
    download = outcome.value
    return StreamingResponse(
        _iter_download(download),
        media_type=download.content_type,
        headers={"Content-Disposition": _content_disposition(download.file_name)},
    )


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, **_ERROR_RESPONSES},
)
def upload_file(
    path: Optional[str] = Form(None, description="Target directory relative to the root"),
    file: Optional[UploadFile] = File(None, description="File to upload"),
):
    """
    Upload a file into an existing directory, replacing any file with the same name.

    Raises:
        HTTPException: 400 no file, 403 outside the root or invalid name,
            404 missing target directory, 500 otherwise
    """
    if file is None or not file.filename or not file.size:
        raise HTTPException(status_code=400, detail="No file uploaded")

    outcome = get_browsing_service().upload(path or "", file.filename, file.file)
    _raise_for_error(outcome)
    return UploadResponse(path=outcome.value)
