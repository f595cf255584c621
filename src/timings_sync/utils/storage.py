"""Storage of configuration and tokens for the timings synchronizer."""

import json
import os
from pathlib import Path
from typing import Any

import yaml

TOKEN_SERVICES = {
    "toggl": "TOGGL_API_TOKEN",
    "invoiceninja": "INVOICENINJA_API_TOKEN",
}


class StorageManager:
    """Manages configuration and token storage."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize storage manager.

        Args:
            config_dir: Directory to store configuration. Defaults to ~/.toggl-ninja-sync/
        """
        self.config_dir = config_dir or Path.home() / ".toggl-ninja-sync"
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.config_file = self.config_dir / "config.yaml"
        self.tokens_file = self.config_dir / "tokens.json"

    def load_config(self) -> dict[str, Any]:
        """Load the YAML configuration.

        Returns:
            Configuration dictionary, empty if the file does not exist.
        """
        if self.config_file.exists():
            with open(self.config_file) as f:
                return yaml.safe_load(f) or {}
        return {}

    def save_config(self, config: dict[str, Any]) -> None:
        """Save the YAML configuration.

        Args:
            config: Configuration to save.
        """
        with open(self.config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)

    def load_tokens(self) -> dict[str, str]:
        """Load the API tokens saved by ``configure``."""
        if not self.tokens_file.exists():
            return {}
        with open(self.tokens_file) as f:
            return json.load(f)

    def get_token(self, service: str) -> str | None:
        """Get the API token of a service.

        ``TOGGL_API_TOKEN`` / ``INVOICENINJA_API_TOKEN`` take precedence over
        the tokens file, so scheduled runs need no file on disk.

        Args:
            service: Service name, one of TOKEN_SERVICES.

        Returns:
            Token if available, None otherwise.
        """
        env_var = TOKEN_SERVICES.get(service)
        if env_var and os.environ.get(env_var):
            return os.environ[env_var]
        return self.load_tokens().get(service)

    def set_token(self, service: str, token: str) -> None:
        """Save the API token of a service to the tokens file."""
        if service not in TOKEN_SERVICES:
            raise ValueError(f"Unknown service '{service}'")

        tokens = {**self.load_tokens(), service: token}
        # Owner-only from creation
        fd = os.open(self.tokens_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            json.dump(tokens, f, indent=2)
        self.tokens_file.chmod(0o600)
