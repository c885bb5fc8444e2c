from __future__ import annotations

import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel


class JwsKitConfig(BaseModel):
    """Top-level configuration model."""

    signature_encoding: Literal["fixed", "legacy"] = "fixed"
    default_curve: Literal["P-256", "P-384", "P-521"] = "P-256"
    strict_curve_pairing: bool = False
    backend: str = "cryptography"


def load_config(path: Optional[str] = None) -> JwsKitConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to JWSKIT_CONFIG env
            variable or 'jwskit.yaml' in the current directory.
    """

    config_path = path or os.getenv("JWSKIT_CONFIG", "jwskit.yaml")
    data = {}
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

    env_encoding = os.getenv("JWSKIT_SIGNATURE_ENCODING")
    if env_encoding:
        data["signature_encoding"] = env_encoding.lower()
    env_backend = os.getenv("JWSKIT_BACKEND")
    if env_backend:
        data["backend"] = env_backend
    return JwsKitConfig(**data)
