"""Integration tests for the managed uploads directory endpoints."""

from tests.fixtures.files import FIXED_NOW, create_file


class TestGetFiles:
    """Tests for GET /files."""

    def test_empty_directory(self, client_with_store):
        client, _ = client_with_store

        response = client.get("/files")

        assert response.status_code == 200
        assert response.json() == []

    def test_entry_structure(self, client_with_store):
        """Entries carry name, size and camelCase timestamps, but no path."""
        client, store = client_with_store
        create_file(store.root, "a.txt", size=10)

        data = client.get("/files").json()

        assert len(data) == 1
        entry = data[0]
        assert entry["name"] == "a.txt"
        assert entry["size"] == 10
        assert "createdAt" in entry
        assert "modifiedAt" in entry
        assert "path" not in entry

    def test_sort_by_size_desc(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "a.txt", size=10)
        create_file(store.root, "b.txt", size=20)

        response = client.get("/files", params={"sortBy": "size", "sortOrder": "desc"})

        assert response.status_code == 200
        assert [f["name"] for f in response.json()] == ["b.txt", "a.txt"]

    def test_sort_by_name(self, client_with_store):
        client, store = client_with_store
        for name in ("c.txt", "A.txt", "b.txt"):
            create_file(store.root, name)

        data = client.get("/files", params={"sortBy": "name"}).json()

        assert [f["name"] for f in data] == ["A.txt", "b.txt", "c.txt"]

    def test_search(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "Report.pdf")
        create_file(store.root, "photo.png")

        data = client.get("/files", params={"search": "report"}).json()

        assert [f["name"] for f in data] == ["Report.pdf"]

    def test_unknown_sort_key_is_ignored(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "a.txt")

        response = client.get("/files", params={"sortBy": "owner"})

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_sort_order_other_than_desc_is_ascending(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "a.txt", size=10)
        create_file(store.root, "b.txt", size=20)

        for sort_order in ("sideways", "DESC", ""):
            response = client.get("/files", params={"sortBy": "size", "sortOrder": sort_order})

            assert response.status_code == 200
            assert [f["name"] for f in response.json()] == ["a.txt", "b.txt"]

    def test_missing_managed_directory_is_404(self, client_with_store):
        client, store = client_with_store
        store.root.rmdir()

        response = client.get("/files")

        assert response.status_code == 404
        assert response.json()["error"] == "Directory not found"


class TestUpload:
    """Tests for POST /upload."""

    def test_upload_returns_stored_file(self, client_with_store):
        client, store = client_with_store

        response = client.post(
            "/upload",
            files={"file": ("report.pdf", b"%PDF-1.7", "application/pdf")},
        )

        assert response.status_code == 200
        data = response.json()
        expected_name = f"report_{int(FIXED_NOW * 1000)}.pdf"
        assert data["message"] == "File uploaded successfully"
        assert data["file"]["name"] == expected_name
        assert data["file"]["size"] == 8
        assert data["file"]["path"] == str(store.root / expected_name)
        assert (store.root / expected_name).read_bytes() == b"%PDF-1.7"

    def test_upload_twice_keeps_both(self, client_with_store):
        client, store = client_with_store

        first = client.post("/upload", files={"file": ("report.pdf", b"one")}).json()
        second = client.post("/upload", files={"file": ("report.pdf", b"two")}).json()

        assert first["file"]["name"] != second["file"]["name"]
        assert first["file"]["name"].endswith(".pdf")
        assert second["file"]["name"].endswith(".pdf")
        assert len(list(store.root.iterdir())) == 2

    def test_uploaded_file_is_listed(self, client_with_store):
        client, _ = client_with_store

        name = client.post("/upload", files={"file": ("a.txt", b"abc")}).json()["file"]["name"]

        assert [f["name"] for f in client.get("/files").json()] == [name]

    def test_no_file_is_400(self, client_with_store):
        client, _ = client_with_store

        response = client.post("/upload", data={"other": "value"})

        assert response.status_code == 400
        assert response.json()["error"] == "No file uploaded"

    def test_non_file_field_is_400(self, client_with_store):
        client, store = client_with_store

        response = client.post("/upload", data={"file": "not-a-file"})

        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "invalid_argument"
        assert data["error"].startswith("Invalid request")
        assert data["details"]["validation_errors"]
        assert list(store.root.iterdir()) == []

    def test_oversized_upload_is_413(self, client_with_small_store):
        client, store = client_with_small_store

        response = client.post("/upload", files={"file": ("big.bin", b"x" * 17)})

        assert response.status_code == 413
        assert response.json()["type"] == "payload_too_large"
        assert list(store.root.iterdir()) == []


class TestDeleteFile:
    """Tests for DELETE /files/{filename}."""

    def test_delete(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "a.txt")

        response = client.delete("/files/a.txt")

        assert response.status_code == 200
        assert response.json() == {"message": "File deleted successfully"}
        assert not (store.root / "a.txt").exists()

    def test_delete_missing_is_404(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "keep.txt")

        response = client.delete("/files/missing.txt")

        assert response.status_code == 404
        assert response.json()["error"] == "File not found"
        assert (store.root / "keep.txt").exists()

    def test_delete_directory_is_500(self, client_with_store):
        client, store = client_with_store
        (store.root / "sub").mkdir()

        response = client.delete("/files/sub")

        assert response.status_code == 500
        assert response.json()["type"] == "internal"


class TestRenameFile:
    """Tests for PUT /files/{filename}/rename."""

    def test_rename(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "old.txt", size=3)

        response = client.put("/files/old.txt/rename", json={"newFilename": "new.txt"})

        assert response.status_code == 200
        assert response.json() == {
            "message": "File renamed successfully",
            "oldName": "old.txt",
            "newName": "new.txt",
        }
        names = [f["name"] for f in client.get("/files").json()]
        assert names == ["new.txt"]

    def test_missing_new_filename_is_400(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "old.txt")

        response = client.put("/files/old.txt/rename", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "New filename is required"

    def test_missing_body_is_400(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "old.txt")

        response = client.put("/files/old.txt/rename")

        assert response.status_code == 400

    def test_non_string_new_filename_is_400(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "old.txt")

        response = client.put("/files/old.txt/rename", json={"newFilename": 5})

        assert response.status_code == 400
        assert response.json()["type"] == "invalid_argument"
        assert "error" in response.json()
        assert (store.root / "old.txt").exists()

    def test_malformed_json_is_400(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "old.txt")

        response = client.put(
            "/files/old.txt/rename",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["type"] == "invalid_argument"

    def test_collision_is_400(self, client_with_store):
        client, store = client_with_store
        create_file(store.root, "old.txt", size=1)
        create_file(store.root, "new.txt", size=2)

        response = client.put("/files/old.txt/rename", json={"newFilename": "new.txt"})

        assert response.status_code == 400
        assert response.json()["error"] == "A file with this name already exists"
        assert (store.root / "old.txt").stat().st_size == 1
        assert (store.root / "new.txt").stat().st_size == 2

    def test_missing_source_is_404(self, client_with_store):
        client, _ = client_with_store

        response = client.put("/files/missing.txt/rename", json={"newFilename": "new.txt"})

        assert response.status_code == 404


class TestRootEndpoints:
    """Tests for / and /health."""

    def test_root(self, test_client):
        response = test_client.get("/")
        assert response.status_code == 200
        assert "version" in response.json()

    def test_health(self, test_client):
        assert test_client.get("/health").json() == {"status": "healthy"}
