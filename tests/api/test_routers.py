"""
Tests for the API router endpoints.
"""

import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from file_browser.adapters.files.local_directory_lister import LocalDirectoryLister
from file_browser.adapters.files.local_file_accessor import LocalFileAccessor
from file_browser.entities.Outcome import ErrorKind, Outcome
from file_browser.main import create_app
from file_browser.use_cases.files.browsing_service import BrowsingService


@pytest.fixture
def service(path_resolver):
    return BrowsingService(
        LocalDirectoryLister(path_resolver), LocalFileAccessor(path_resolver)
    )


@pytest.fixture
def client(service):
    """Test client whose routes use a service rooted at the temporary directory."""
    with patch("file_browser.api.routers.get_browsing_service", return_value=service):
        yield TestClient(create_app(static_dir=""))


class TestListAPI:
    """Test cases for GET /api/fs/list."""

    def test_list_root(self, client):
        """The root listing is serialized with camelCase keys."""
        response = client.get("/api/fs/list", params={"path": ""})

        assert response.status_code == 200
        data = response.json()
        assert data["currentPath"] == ""
        assert data["parentPath"] == ""
        assert data["fileCount"] == 1
        assert data["folderCount"] == 1
        assert data["totalSize"] == 50

        docs, readme = data["items"]
        assert docs["name"] == "docs"
        assert docs["isFolder"] is True
        assert docs["childCount"] == 1
        assert readme["path"] == "readme.md"
        assert readme["size"] == 50
        assert readme["childCount"] is None
        assert readme["lastModified"] is not None

    def test_list_without_path_lists_root(self, client):
        """The path parameter defaults to the root."""
        response = client.get("/api/fs/list")

        assert response.status_code == 200
        assert response.json()["currentPath"] == ""

    def test_list_subdirectory(self, client):
        """Test listing the docs folder."""
        response = client.get("/api/fs/list", params={"path": "docs"})

        assert response.status_code == 200
        data = response.json()
        assert [i["path"] for i in data["items"]] == ["docs/a.txt"]
        assert data["totalSize"] == 100
        assert data["parentPath"] == ""

    def test_list_missing(self, client):
        """A missing directory is a 404."""
        response = client.get("/api/fs/list", params={"path": "missing"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Directory not found"

    def test_list_traversal(self, client, temp_directory):
        """Escaping the root is a 403 without path details."""
        response = client.get("/api/fs/list", params={"path": "../../etc"})

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied"
        assert temp_directory not in response.text

    def test_list_internal_error(self):
        """Internal failures are a 500 with an opaque message."""
        with patch("file_browser.api.routers.get_browsing_service") as mock_service:
            mock_service.return_value.list_directory.return_value = Outcome.failure(
                ErrorKind.INTERNAL_ERROR, "Internal server error"
            )
            response = TestClient(create_app(static_dir="")).get("/api/fs/list")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestDownloadAPI:
    """Test cases for GET /api/fs/download."""

    def test_download(self, client):
        """A file is streamed as a binary attachment."""
        response = client.get("/api/fs/download", params={"path": "docs/a.txt"})

        assert response.status_code == 200
        assert response.content == b"a" * 100
        assert response.headers["content-type"] == "application/octet-stream"
        assert response.headers["content-disposition"] == 'attachment; filename="a.txt"'

    def test_download_non_ascii_name(self, client, temp_directory):
        """Non-ASCII names are sent with RFC 5987 encoding."""
        with open(os.path.join(temp_directory, "résumé.txt"), "wb") as f:
            f.write(b"cv")

        response = client.get("/api/fs/download", params={"path": "résumé.txt"})

        assert response.status_code == 200
        assert response.content == b"cv"
        assert response.headers["content-disposition"] == (
            "attachment; filename*=utf-8''r%C3%A9sum%C3%A9.txt"
        )

    def test_download_missing(self, client):
        """A missing file is a 404."""
        response = client.get("/api/fs/download", params={"path": "docs/none.txt"})

        assert response.status_code == 404
        assert response.json()["detail"] == "File not found"

    def test_download_directory(self, client):
        """A directory cannot be downloaded."""
        response = client.get("/api/fs/download", params={"path": "docs"})

        assert response.status_code == 404

    def test_download_traversal(self, client):
        """Escaping the root is a 403."""
        response = client.get("/api/fs/download", params={"path": "../../etc/passwd"})

        assert response.status_code == 403

    def test_download_requires_path(self, client):
        """The path parameter is mandatory."""
        response = client.get("/api/fs/download")

        assert response.status_code == 422


class TestUploadAPI:
    """Test cases for POST /api/fs/upload."""

    def test_upload(self, client, temp_directory):
        """An uploaded file is stored in the target directory."""
        response = client.post(
            "/api/fs/upload",
            data={"path": "docs"},
            files={"file": ("new.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 200
        assert response.json() == {"path": "docs/new.txt"}
        with open(os.path.join(temp_directory, "docs", "new.txt"), "rb") as f:
            assert f.read() == b"hello"

    def test_upload_to_root_without_path(self, client, temp_directory):
        """Omitting the path uploads into the root."""
        response = client.post(
            "/api/fs/upload", files={"file": ("root.txt", b"top", "text/plain")}
        )

        assert response.status_code == 200
        assert os.path.isfile(os.path.join(temp_directory, "root.txt"))

    def test_upload_overwrites(self, client, temp_directory):
        """Uploading the same name twice keeps the last content."""
        for content in (b"old content", b"new"):
            response = client.post(
                "/api/fs/upload",
                data={"path": ""},
                files={"file": ("readme.md", content, "text/markdown")},
            )
            assert response.status_code == 200

        with open(os.path.join(temp_directory, "readme.md"), "rb") as f:
            assert f.read() == b"new"

    def test_upload_empty_file(self, client):
        """An empty file is rejected with 400."""
        response = client.post(
            "/api/fs/upload",
            data={"path": "docs"},
            files={"file": ("empty.txt", b"", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"

    def test_upload_without_file(self, client):
        """A request without a file is rejected with 400."""
        response = client.post("/api/fs/upload", data={"path": "docs"})

        assert response.status_code == 400

    def test_upload_missing_directory(self, client, temp_directory):
        """A missing target directory is a 404 and creates nothing."""
        response = client.post(
            "/api/fs/upload",
            data={"path": "ghost"},
            files={"file": ("a.txt", b"x", "text/plain")},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Target directory not found"
        assert not os.path.exists(os.path.join(temp_directory, "ghost"))

    def test_upload_traversal(self, client):
        """A target escaping the root is a 403."""
        response = client.post(
            "/api/fs/upload",
            data={"path": "../.."},
            files={"file": ("a.txt", b"x", "text/plain")},
        )

        assert response.status_code == 403


class TestStaticUI:
    """Test cases for serving a built UI."""

    def test_index_served_when_present(self, tmp_path, service):
        """index.html is served at / and API routes still win."""
        (tmp_path / "index.html").write_text("<html>browser</html>")

        with patch("file_browser.api.routers.get_browsing_service", return_value=service):
            ui_client = TestClient(create_app(static_dir=str(tmp_path)))
            index = ui_client.get("/")
            listing = ui_client.get("/api/fs/list")

        assert index.status_code == 200
        assert "browser" in index.text
        assert listing.status_code == 200

    def test_missing_static_dir_is_skipped(self, tmp_path):
        """Without a UI directory only the API is mounted."""
        app = create_app(static_dir=str(tmp_path / "absent"))

        assert all(getattr(r, "name", None) != "ui" for r in app.routes)
