"""Test fixtures for the file manager.

This package provides reusable fixtures:
- files: Directory and FileStore fixtures backed by pytest's tmp_path
- api: TestClient fixtures with the FileStore dependency overridden
"""
