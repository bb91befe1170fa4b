"""
Loading and validation of the WordScout search configuration.
The schema is described and checked with Pydantic.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ("SearchConfig", "load_config", "DEFAULT_CONFIG_PATH")


class SearchConfig(BaseModel):
    """Settings shared by every search run: budget and HTTP fetch behaviour."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_pages: int = Field(10, ge=1, description="Default page-visit budget.")
    timeout: float = Field(10.0, gt=0, description="Total timeout of one request (seconds).")
    user_agent: str = Field("WordScoutBot/1.0", min_length=1, description="User-Agent header.")
    retry_times: int = Field(2, ge=0, description="Extra attempts on 5xx/429 and connection errors.")
    retry_backoff: float = Field(1.0, ge=0, description="Base delay of the exponential backoff (seconds).")

    @field_validator("user_agent", mode="before")
    def _strip_user_agent(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


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


def load_config(path: Union[str, Path, None]) -> SearchConfig:
    """
    Read a YAML or JSON file and return a validated SearchConfig.

    With ``path=None`` the default ``configs/default.yaml`` is used when it
    exists, otherwise the built-in defaults. An explicit path that does not
    exist raises FileNotFoundError.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.is_file():
            return SearchConfig()
        path_obj = DEFAULT_CONFIG_PATH
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

    return SearchConfig(**data)
