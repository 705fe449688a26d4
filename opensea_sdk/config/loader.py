"""YAML config loader with environment fallback for the API key."""

import os
from pathlib import Path

import yaml

from opensea_sdk.config.defaults import API_KEY_ENV_VAR
from opensea_sdk.config.schema import OpenSeaAPIConfig


def load_config(path: str | Path | None = None) -> OpenSeaAPIConfig:
    """Load and validate config from a YAML file.

    A missing path or empty file yields defaults. When no `api_key` is set,
    OPENSEA_API_KEY is used if present.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    if not raw.get("api_key"):
        env_key = os.environ.get(API_KEY_ENV_VAR)
        if env_key:
            raw["api_key"] = env_key

    return OpenSeaAPIConfig(**raw)
