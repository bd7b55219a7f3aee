from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from ..errors import ConfigValidationError
from ..git import DEFAULT_COMMIT, DEFAULT_TAG_MATCH, DEFAULT_VERSION
from .schema import ReleaseConfigSchema


DEFAULT_CONFIG: Dict[str, Any] = {
    "tag_match": DEFAULT_TAG_MATCH,
    "fallback_version": DEFAULT_VERSION,
    "fallback_commit": DEFAULT_COMMIT,
    "permalink_env_var": "PERMALINK",
    "version_env_var": "VERSION",
}


def validate_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    try:
        model = ReleaseConfigSchema(**raw)
    except ValidationError as e:
        raise ConfigValidationError(str(e)) from e
    # return only explicitly set values
    return model.model_dump(exclude_unset=True)


def config_with_defaults(override: Dict[str, Any] | None = None) -> Dict[str, Any]:
    cfg = dict(DEFAULT_CONFIG)
    if override:
        cfg.update({k: v for k, v in override.items() if v is not None})
    return cfg


def load_config_file(config_path: str | None) -> Dict[str, Any]:
    if not config_path:
        return {}
    p = Path(config_path)
    if not p.exists():
        raise ConfigValidationError(f"Config file not found: {p}")

    raw_text = p.read_text(encoding="utf-8")

    if p.suffix.lower() == ".json":
        try:
            raw = json.loads(raw_text) or {}
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON in {p}: {e}") from e
    else:
        try:
            raw = yaml.safe_load(raw_text) or {}
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {p}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigValidationError("Config file must be a mapping/object at top level.")

    return validate_config(raw)
