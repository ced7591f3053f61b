"""Configuration loading for btcrpc."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from urllib.parse import quote

from .constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_MAX_BYTES,
    DEFAULT_RPC_PASSWORD,
    DEFAULT_RPC_URL,
    DEFAULT_RPC_USER,
    WALLET_PATH_PREFIX,
)


class Config:
    """Configuration container with environment variable overrides."""

    def __init__(self, config_path: str = None):
        """
        Load configuration from YAML file with environment variable overrides.

        Configuration precedence (highest to lowest):
        1. Environment variables (BTCRPC_* prefix)
        2. config.local.yaml (if exists, local overrides)
        3. config.yaml (main config file)
        4. Default values

        Args:
            config_path: Path to config.yaml. If None, searches for config.yaml
                        in current directory and parent directories; a missing
                        file then means defaults only. An explicit path must exist.
        """
        self._raw: Dict[str, Any] = {}

        if config_path is None:
            config_path = self._find_config_file()
        elif not Path(config_path).exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        if config_path is not None:
            with open(config_path, 'r') as f:
                self._raw = yaml.safe_load(f) or {}

            # Load local overrides if config.local.yaml exists (gitignored, for secrets)
            local_config_path = Path(config_path).parent / "config.local.yaml"
            if local_config_path.exists():
                with open(local_config_path, 'r') as f:
                    local_config = yaml.safe_load(f) or {}
                    self._deep_merge(self._raw, local_config)

        self._apply_env_overrides()

    def _find_config_file(self) -> Optional[str]:
        """Find config.yaml in current directory or parents."""
        current = Path.cwd()
        for path in [current] + list(current.parents):
            config_file = path / "config.yaml"
            if config_file.exists():
                return str(config_file)
        return None

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _apply_env_overrides(self):
        """Apply environment variable overrides using BTCRPC_ prefix."""
        # RPC settings
        if os.getenv("BTCRPC_RPC_URL"):
            self._raw.setdefault("rpc", {})["url"] = os.getenv("BTCRPC_RPC_URL")
        if os.getenv("BTCRPC_RPC_USER"):
            self._raw.setdefault("rpc", {})["user"] = os.getenv("BTCRPC_RPC_USER")
        if os.getenv("BTCRPC_RPC_PASS"):
            self._raw.setdefault("rpc", {})["password"] = os.getenv("BTCRPC_RPC_PASS")
        if os.getenv("BTCRPC_RPC_WALLET"):
            self._raw.setdefault("rpc", {})["wallet"] = os.getenv("BTCRPC_RPC_WALLET")
        if os.getenv("BTCRPC_RPC_TIMEOUT"):
            self._raw.setdefault("rpc", {})["timeout"] = float(os.getenv("BTCRPC_RPC_TIMEOUT"))
        if os.getenv("BTCRPC_RPC_VERIFY"):
            self._raw.setdefault("rpc", {})["verify"] = os.getenv("BTCRPC_RPC_VERIFY").lower() == "true"

        # Logging settings
        if os.getenv("BTCRPC_LOG_LEVEL"):
            self._raw.setdefault("logging", {})["level"] = os.getenv("BTCRPC_LOG_LEVEL")
        if os.getenv("BTCRPC_LOG_FILE"):
            self._raw.setdefault("logging", {})["logfile"] = os.getenv("BTCRPC_LOG_FILE")

    @property
    def rpc_url(self) -> str:
        return self._raw.get("rpc", {}).get("url", DEFAULT_RPC_URL)

    @property
    def rpc_user(self) -> str:
        return self._raw.get("rpc", {}).get("user", DEFAULT_RPC_USER)

    @property
    def rpc_password(self) -> str:
        return self._raw.get("rpc", {}).get("password", DEFAULT_RPC_PASSWORD)

    @property
    def rpc_wallet(self) -> str:
        return self._raw.get("rpc", {}).get("wallet", "")

    @property
    def rpc_timeout(self) -> Optional[float]:
        timeout = self._raw.get("rpc", {}).get("timeout")
        return float(timeout) if timeout is not None else None

    @property
    def rpc_verify(self) -> bool:
        return bool(self._raw.get("rpc", {}).get("verify", True))

    @property
    def wallet_url(self) -> str:
        """RPC URL, scoped to rpc.wallet when one is configured."""
        if not self.rpc_wallet:
            return self.rpc_url
        return self.rpc_url.rstrip("/") + WALLET_PATH_PREFIX + quote(self.rpc_wallet, safe="")

    @property
    def log_level(self) -> str:
        return self._raw.get("logging", {}).get("level", "INFO")

    @property
    def log_file(self) -> str:
        return self._raw.get("logging", {}).get("logfile", "")

    @property
    def log_rotation(self) -> Dict[str, Any]:
        """Get log rotation configuration with defaults."""
        rotation = self._raw.get("logging", {}).get("rotation", {})
        return {
            "max_bytes": rotation.get("max_bytes", DEFAULT_LOG_MAX_BYTES),
            "backup_count": rotation.get("backup_count", DEFAULT_LOG_BACKUP_COUNT),
        }
