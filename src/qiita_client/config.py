from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from qiita_client import __version__

DEFAULT_BASE_URL = "https://qiita.com/api/v2"


def _load_yaml_config(path: Path) -> dict[str, Any]:
    """Load YAML config file if it exists, return empty dict otherwise."""
    if path.is_file():
        with open(path) as f:
            data = yaml.safe_load(f)
            return data if isinstance(data, dict) else {}
    return {}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="QIITA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    base_url: str = DEFAULT_BASE_URL
    access_token: str = ""
    timeout: float = 30.0
    user_agent: str = f"qiita-client-python/{__version__}"
    log_level: str = "INFO"

    @classmethod
    def from_yaml(
        cls, yaml_path: str | Path = "qiita.yaml", **overrides: Any
    ) -> Settings:
        """Create Settings by merging a YAML file with env vars.

        YAML values act as defaults; explicit overrides win over both.
        """
        yaml_data = _load_yaml_config(Path(yaml_path))
        merged = {**yaml_data, **{k: v for k, v in overrides.items() if v is not None}}
        return cls(**merged)
