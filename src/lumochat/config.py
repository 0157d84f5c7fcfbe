"""Configuration management for LumoChat."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from lumochat.domain.exceptions import ConfigurationError


@dataclass
class ProviderConfig:
    """Completion provider configuration."""

    base_url: str = "https://router.huggingface.co/v1"
    model: str = "meta-llama/Llama-3.1-8B-Instruct:cerebras"
    max_tokens: int = 2000
    temperature: float = 0.9
    api_key_env: str = "HF_TOKEN"
    timeout_seconds: Optional[float] = None
    max_retries: int = 0

    def resolve_api_key(self) -> str:
        """
        Read the provider credential from the environment.

        Raises:
            ConfigurationError: If the variable is unset or empty
        """
        api_key = os.getenv(self.api_key_env)
        if not api_key:
            raise ConfigurationError(f"{self.api_key_env} environment variable is required")
        return api_key

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'base_url': self.base_url,
            'model': self.model,
            'max_tokens': self.max_tokens,
            'temperature': self.temperature,
            'api_key_env': self.api_key_env,
            'timeout_seconds': self.timeout_seconds,
            'max_retries': self.max_retries,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProviderConfig':
        """Create config from dictionary."""
        defaults = cls()
        return cls(
            base_url=data.get('base_url', defaults.base_url),
            model=data.get('model', defaults.model),
            max_tokens=int(data.get('max_tokens', defaults.max_tokens)),
            temperature=float(data.get('temperature', defaults.temperature)),
            api_key_env=data.get('api_key_env', defaults.api_key_env),
            timeout_seconds=data.get('timeout_seconds', defaults.timeout_seconds),
            max_retries=int(data.get('max_retries', defaults.max_retries)),
        )


@dataclass
class ServerConfig:
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ])

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'host': self.host,
            'port': self.port,
            'log_level': self.log_level,
            'cors_origins': list(self.cors_origins),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ServerConfig':
        """Create config from dictionary."""
        defaults = cls()
        return cls(
            host=data.get('host', defaults.host),
            port=int(data.get('port', defaults.port)),
            log_level=str(data.get('log_level', defaults.log_level)).upper(),
            cors_origins=list(data.get('cors_origins', defaults.cors_origins)),
        )


@dataclass
class StoreConfig:
    """In-memory store configuration."""

    # Reject messages whose conversation does not exist
    enforce_conversation_refs: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {'enforce_conversation_refs': self.enforce_conversation_refs}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StoreConfig':
        """Create config from dictionary."""
        return cls(
            enforce_conversation_refs=bool(data.get('enforce_conversation_refs', False)),
        )


class RelayConfig:
    """
    Main configuration for LumoChat.

    Loads configuration from:
    1. Explicit path passed to ``load``
    2. LUMOCHAT_CONFIG_PATH environment variable
    3. Project-level lumochat.yaml / .lumochat.yaml
    4. User-level ~/.lumochat/config.yaml
    5. Built-in defaults
    """

    CONFIG_SEARCH_PATHS = [
        'lumochat.yaml',
        '.lumochat.yaml',
        '~/.lumochat/config.yaml',
    ]

    def __init__(
        self,
        provider: Optional[ProviderConfig] = None,
        server: Optional[ServerConfig] = None,
        store: Optional[StoreConfig] = None,
    ):
        """
        Initialize configuration.

        Args:
            provider: Completion provider configuration
            server: HTTP server configuration
            store: Store configuration
        """
        self.provider = provider or ProviderConfig()
        self.server = server or ServerConfig()
        self.store = store or StoreConfig()

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> 'RelayConfig':
        """
        Load configuration from the first file found, or use defaults.

        An explicit ``config_path`` must exist; the environment variable and
        search paths are skipped when missing.
        """
        if config_path:
            return cls._load_from_file(Path(config_path))

        candidates = [os.getenv('LUMOCHAT_CONFIG_PATH')] + cls.CONFIG_SEARCH_PATHS
        for candidate in filter(None, candidates):
            path = Path(candidate).expanduser()
            if path.exists():
                return cls._load_from_file(path)
        return cls()

    @classmethod
    def _load_from_file(cls, path: Path) -> 'RelayConfig':
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        parsers = {'.yaml': yaml.safe_load, '.yml': yaml.safe_load, '.json': json.loads}
        parse = parsers.get(path.suffix)
        if parse is None:
            raise ValueError(f"Unsupported config format: {path.suffix}")
        return cls.from_dict(parse(path.read_text()) or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RelayConfig':
        """Create config from dictionary."""
        return cls(
            provider=ProviderConfig.from_dict(data.get('provider', {})),
            server=ServerConfig.from_dict(data.get('server', {})),
            store=StoreConfig.from_dict(data.get('store', {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'provider': self.provider.to_dict(),
            'server': self.server.to_dict(),
            'store': self.store.to_dict(),
        }

    def save(self, filepath: str) -> None:
        """Write the configuration as YAML."""
        path = Path(filepath)
        if path.suffix not in ('.yaml', '.yml'):
            raise ValueError(f"Config can only be saved as YAML, got: {path.suffix}")
        path.write_text(yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False))
