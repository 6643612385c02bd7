# === FILE: wiki_watch/config.py ===
"""
Loading and validation of the WikiWatch configuration.
The schema is described and checked with Pydantic.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
)

from wiki_watch.resources import get_resource


class WatcherConfig(BaseModel):
    """Configuration of one WikiWatch run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    api_url: HttpUrl = Field(
        "https://genshin-impact.fandom.com/api.php", description="MediaWiki api.php endpoint."
    )
    user_agent: str = Field("WikiWatch/1.0", min_length=1, description="User-Agent header.")
    timeout: float = Field(10.0, gt=0, description="Timeout of one request (seconds).")
    retry_times: int = Field(3, ge=0, description="Retries on 5xx/429, timeouts and connection errors.")
    retry_backoff: float = Field(1.0, ge=0, description="Base of the exponential backoff (seconds).")
    store_dir: Path = Field(Path(".wiki_watch"), description="Directory holding stored snapshots.")
    resources: List[str] = Field(
        default_factory=lambda: ["Promotional_Codes"], description="Titles refreshed by default."
    )

    @field_validator("resources")
    def _check_resources_registered(cls, v: List[str]) -> List[str]:
        for title in v:
            get_resource(title)
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> WatcherConfig:
    """
    Read YAML or JSON and return a validated WatcherConfig.
    With ``path=None`` the default config file is used when present,
    otherwise built-in defaults. A missing explicit file raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return WatcherConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return WatcherConfig(**data)


__all__ = ["WatcherConfig", "load_config"]
