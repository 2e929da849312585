from __future__ import annotations
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from google.cloud import secretmanager

logger = logging.getLogger(__name__)

_REPO_ROOT = Path(__file__).resolve().parents[1]
_SECRETS_DIR = _REPO_ROOT / "secrets"

DEFAULT_API_TIMEOUT_SECONDS = 15.0
DEFAULT_SELECTOR_PAGE_SIZE = 10


def setup_secrets(env: str) -> dict[str, Path]:
    """
    Given an env-provided ENV_FILE (container deployments), write it to disk so the
    launcher can load it like a local secrets/env.<env> file.
    Returns a mapping of the env var names to the file paths that were used.
    """
    _SECRETS_DIR.mkdir(parents=True, exist_ok=True)

    secret_files_path: dict[str, Path] = {
        "ENV_FILE": _SECRETS_DIR / f"env.{env}",
    }

    for env_var, file_path in secret_files_path.items():
        value = os.environ.get(env_var)
        if not value:
            continue
        if not file_path.exists():
            file_path.write_text(value)
        else:
            logger.info("File %s already exists, skipping", file_path)
    return secret_files_path


@lru_cache(maxsize=1)
def _sm_client() -> secretmanager.SecretManagerServiceClient:
    return secretmanager.SecretManagerServiceClient()


@lru_cache(maxsize=256)
def _sm_get(resource: str) -> str:
    """Retrieve a secret value from Google Cloud Secret Manager."""
    resp = _sm_client().access_secret_version(name=resource)
    return resp.payload.data.decode("utf-8")


def get_secret(name: str, default: Optional[str] = None) -> str:
    """
    Resolution order:
      1) NAME (env/.env)
      2) NAME_RESOURCE (Secret Manager resource path)
      3) default
      4) else raise RuntimeError
    """
    if (v := os.getenv(name)) is not None:
        return v
    if (r := os.getenv(f"{name}_RESOURCE")):
        return _sm_get(r)
    if default is not None:
        return default
    raise RuntimeError(f"Missing {name} (or {name}_RESOURCE)")


def get_api_url() -> str:
    return get_secret("API_URL", default="").strip().rstrip("/")


def get_float_setting(name: str, default: float) -> float:
    raw_value = get_secret(name, default=str(default))
    try:
        return float(raw_value)
    except (TypeError, ValueError):
        logger.warning("Invalid %s=%r; using default %s.", name, raw_value, default)
        return default


def get_int_setting(name: str, default: int) -> int:
    raw_value = get_secret(name, default=str(default))
    try:
        return int(raw_value)
    except (TypeError, ValueError):
        logger.warning("Invalid %s=%r; using default %s.", name, raw_value, default)
        return default
