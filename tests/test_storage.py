"""Tests for storage manager."""

from pathlib import Path

import pytest

from timings_sync.utils import StorageManager


class TestStorageManager:
    """Test StorageManager functionality."""

    def test_init_creates_directory(self, temp_config_dir: Path) -> None:
        """Test that initialization creates the config directory."""
        nested = temp_config_dir / "nested"
        storage = StorageManager(nested)

        assert nested.exists()
        assert storage.config_file == nested / "config.yaml"

    def test_config_persistence(self, storage_manager: StorageManager) -> None:
        """Test saving and loading the configuration."""
        config = {
            "invoiceninja": {"url": "https://ninja.example.com"},
            "projects": {42: {"client_id": 5, "project_id": 9}},
        }

        storage_manager.save_config(config)

        assert storage_manager.load_config() == config

    def test_load_config_missing_file(self, storage_manager: StorageManager) -> None:
        """Test loading when no configuration exists."""
        assert storage_manager.load_config() == {}

    def test_load_config_empty_file(self, storage_manager: StorageManager) -> None:
        """Test loading an empty configuration file."""
        storage_manager.config_file.write_text("")

        assert storage_manager.load_config() == {}

    def test_token_persistence(self, storage_manager: StorageManager) -> None:
        """Test saving and loading tokens."""
        storage_manager.set_token("toggl", "toggl_token")
        storage_manager.set_token("invoiceninja", "ninja_token")

        assert storage_manager.get_token("toggl") == "toggl_token"
        assert storage_manager.get_token("invoiceninja") == "ninja_token"
        assert storage_manager.get_token("other") is None

    def test_tokens_file_permissions(self, storage_manager: StorageManager) -> None:
        """Test that the tokens file is private to the user."""
        storage_manager.set_token("toggl", "toggl_token")

        assert storage_manager.tokens_file.stat().st_mode & 0o777 == 0o600

    def test_environment_token_wins(
        self, storage_manager: StorageManager, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that tokens from the environment override the tokens file."""
        storage_manager.set_token("toggl", "file_token")
        monkeypatch.setenv("TOGGL_API_TOKEN", "env_token")

        assert storage_manager.get_token("toggl") == "env_token"
        assert storage_manager.get_token("invoiceninja") is None

    def test_unknown_service_rejected(self, storage_manager: StorageManager) -> None:
        """Test that only known services can store a token."""
        with pytest.raises(ValueError):
            storage_manager.set_token("clockify", "token")
