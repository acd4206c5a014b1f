"""Composition root: wires concrete implementations to the application.

This is the only place in the codebase that knows about *all* layers.
Every other module receives its collaborators through its constructor.

Settings come from the environment, read at call time:

- ``GAMEHUB_API_URL``: backend base URL (default ``http://localhost:3001``)
- ``GAMEHUB_DATA_DIR``: where ``storage.json`` lives (default ``<repo>/data``)
"""

from __future__ import annotations

import os
from pathlib import Path

from gamehub.application.cart_store import CartStore
from gamehub.infrastructure.http.api_client import API_BASE_URL, ApiClient
from gamehub.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.environ.get("GAMEHUB_DATA_DIR", _DEFAULT_DATA_DIR))


def api_base_url() -> str:
    return os.environ.get("GAMEHUB_API_URL", API_BASE_URL)


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(data_dir() / "storage.json")


def cart_store() -> CartStore:
    return CartStore(cart_repository())


def api_client() -> ApiClient:
    return ApiClient(api_base_url())
