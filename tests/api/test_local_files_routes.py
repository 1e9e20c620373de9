"""Integration tests for the local directory endpoints."""

from tests.fixtures.files import create_file


class TestGetLocalFiles:
    """Tests for GET /local-files."""

    def test_missing_path_is_400(self, test_client):
        response = test_client.get("/local-files")

        assert response.status_code == 400
        assert response.json()["error"] == "Directory path is required"

    def test_empty_path_is_400(self, test_client):
        response = test_client.get("/local-files", params={"path": ""})

        assert response.status_code == 400

    def test_missing_directory_is_404(self, test_client, tmp_path):
        response = test_client.get("/local-files", params={"path": str(tmp_path / "nope")})

        assert response.status_code == 404
        assert response.json()["error"] == "Directory not found"

    def test_lists_with_paths(self, test_client, sample_dir):
        response = test_client.get("/local-files", params={"path": str(sample_dir)})

        assert response.status_code == 200
        data = response.json()
        assert sorted(f["name"] for f in data) == ["Notes.md", "a.txt", "b.txt"]
        for entry in data:
            assert entry["path"] == str(sample_dir / entry["name"])

    def test_search_and_sort(self, test_client, sample_dir):
        response = test_client.get(
            "/local-files",
            params={
                "path": str(sample_dir),
                "search": "TXT",
                "sortBy": "size",
                "sortOrder": "desc",
            },
        )

        assert [f["name"] for f in response.json()] == ["b.txt", "a.txt"]

    def test_file_instead_of_directory_is_500(self, test_client, sample_dir):
        response = test_client.get("/local-files", params={"path": str(sample_dir / "a.txt")})

        assert response.status_code == 500
        assert response.json()["error"]


class TestDeleteLocalFile:
    """Tests for DELETE /local-files."""

    def test_delete(self, test_client, sample_dir):
        response = test_client.delete("/local-files", params={"path": str(sample_dir / "a.txt")})

        assert response.status_code == 200
        assert response.json() == {"message": "File deleted successfully"}
        assert not (sample_dir / "a.txt").exists()

    def test_missing_path_is_400(self, test_client):
        response = test_client.delete("/local-files")

        assert response.status_code == 400
        assert response.json()["error"] == "File path is required"

    def test_missing_file_is_404(self, test_client, sample_dir):
        response = test_client.delete(
            "/local-files", params={"path": str(sample_dir / "missing.txt")}
        )

        assert response.status_code == 404
        assert response.json()["error"] == "File not found"


class TestRenameLocalFile:
    """Tests for PUT /local-files."""

    def test_rename(self, test_client, sample_dir):
        old_path = str(sample_dir / "a.txt")

        response = test_client.put(
            "/local-files", json={"oldPath": old_path, "newName": "renamed.txt"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "message": "File renamed successfully",
            "oldPath": old_path,
            "newPath": str(sample_dir / "renamed.txt"),
        }
        listed = test_client.get("/local-files", params={"path": str(sample_dir)}).json()
        names = [f["name"] for f in listed]
        assert "renamed.txt" in names
        assert "a.txt" not in names

    def test_missing_fields_are_400(self, test_client, sample_dir):
        response = test_client.put("/local-files", json={"oldPath": str(sample_dir / "a.txt")})

        assert response.status_code == 400
        assert response.json()["error"] == "Old path and new name are required"

    def test_collision_is_400(self, test_client, sample_dir):
        response = test_client.put(
            "/local-files",
            json={"oldPath": str(sample_dir / "a.txt"), "newName": "b.txt"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "A file with this name already exists"
        assert (sample_dir / "a.txt").exists()
        assert (sample_dir / "b.txt").stat().st_size == 20

    def test_missing_source_is_404(self, test_client, tmp_path):
        create_file(tmp_path, "other.txt")

        response = test_client.put(
            "/local-files",
            json={"oldPath": str(tmp_path / "missing.txt"), "newName": "x.txt"},
        )

        assert response.status_code == 404

    def test_non_string_old_path_is_400(self, test_client, sample_dir):
        response = test_client.put("/local-files", json={"oldPath": 1, "newName": "x.txt"})

        assert response.status_code == 400
        assert response.json()["type"] == "invalid_argument"
        assert (sample_dir / "a.txt").exists()
