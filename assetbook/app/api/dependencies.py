from __future__ import annotations

import logging

from ..config import get_settings
from ..services.register import AssetRegister, AssetStore, InMemoryAssetStore, JsonFileAssetStore

logger = logging.getLogger(__name__)

_register: AssetRegister | None = None


def build_store(register_path: str | None) -> AssetStore:
    if register_path:
        logger.info("Using JSON asset register at %s", register_path)
        return JsonFileAssetStore(register_path)
    logger.info("Using in-memory asset register")
    return InMemoryAssetStore()


def get_register() -> AssetRegister:
    """Create the register lazily so tests can override it."""
    global _register
    if _register is None:
        _register = AssetRegister(build_store(get_settings().register_path))
    return _register
