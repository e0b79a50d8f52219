from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from ..schemas.asset import (
    Asset,
    AssetCreate,
    AssetPosition,
    AssetSummary,
    RegisterRow,
    SortKey,
    SortOrder,
)
from .depreciation import build_schedule

logger = logging.getLogger(__name__)


class AssetNotFoundError(KeyError):
    """Raised when an asset identifier is not present in the register."""


class RegisterStorageError(RuntimeError):
    """Raised when the durable register cannot be read or written."""


class AssetStore(ABC):
    """Key-value storage for assets keyed by their generated identifier."""

    @abstractmethod
    def get(self, asset_id: str) -> Optional[Asset]:
        ...

    @abstractmethod
    def put(self, asset: Asset) -> None:
        ...

    @abstractmethod
    def delete(self, asset_id: str) -> bool:
        """Remove an asset; returns False when the id was unknown."""

    @abstractmethod
    def values(self) -> List[Asset]:
        ...


class InMemoryAssetStore(AssetStore):
    def __init__(self) -> None:
        self._assets: Dict[str, Asset] = {}
        self._lock = threading.Lock()

    def get(self, asset_id: str) -> Optional[Asset]:
        with self._lock:
            return self._assets.get(asset_id)

    def put(self, asset: Asset) -> None:
        with self._lock:
            self._assets[asset.id] = asset

    def delete(self, asset_id: str) -> bool:
        with self._lock:
            return self._assets.pop(asset_id, None) is not None

    def values(self) -> List[Asset]:
        with self._lock:
            return list(self._assets.values())


class JsonFileAssetStore(InMemoryAssetStore):
    """
    Register persisted as a single JSON document.

    The whole register is loaded once and rewritten on every mutation through
    a temporary file and ``os.replace`` so a crash never leaves a partial file.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__()
        self.path = Path(path)
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            return
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            assets = [Asset.model_validate(item) for item in raw.get("assets", [])]
        except (OSError, ValueError, ValidationError) as exc:
            logger.error("Failed to load asset register from %s: %s", self.path, exc)
            raise RegisterStorageError(f"Unable to read asset register at {self.path}.") from exc

        self._assets = {asset.id: asset for asset in assets}
        logger.info("Loaded %d assets from %s", len(self._assets), self.path)

    def _flush(self, assets: Dict[str, Asset]) -> None:
        payload = {"assets": [asset.model_dump(mode="json") for asset in assets.values()]}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        except OSError as exc:
            logger.error("Failed to write asset register to %s: %s", self.path, exc)
            raise RegisterStorageError(f"Unable to write asset register at {self.path}.") from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2)
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as exc:
            os.unlink(tmp_name)
            logger.error("Failed to write asset register to %s: %s", self.path, exc)
            raise RegisterStorageError(f"Unable to write asset register at {self.path}.") from exc

    def put(self, asset: Asset) -> None:
        with self._lock:
            assets = {**self._assets, asset.id: asset}
            self._flush(assets)
            self._assets = assets

    def delete(self, asset_id: str) -> bool:
        with self._lock:
            if asset_id not in self._assets:
                return False
            assets = {key: value for key, value in self._assets.items() if key != asset_id}
            self._flush(assets)
            self._assets = assets
            return True


def _sort_value(asset: Asset, sort_by: SortKey) -> Union[str, float, date]:
    if sort_by == "name":
        return asset.name.casefold()
    if sort_by == "category":
        return asset.category.casefold()
    if sort_by == "cost":
        return asset.cost
    if sort_by == "purchase_date":
        return asset.purchase_date
    raise ValueError(f"Unsupported sort key '{sort_by}'.")


class AssetRegister:
    """Register operations over an injected :class:`AssetStore`."""

    def __init__(self, store: AssetStore) -> None:
        self.store = store

    def _build(self, asset_id: str, payload: AssetCreate) -> Asset:
        schedule = build_schedule(
            payload.method,
            payload.cost,
            payload.residual_value,
            payload.useful_life,
            payload.rate,
        )
        return Asset(id=asset_id, schedule=list(schedule), **payload.model_dump())

    def add(self, payload: AssetCreate) -> Asset:
        asset = self._build(uuid.uuid4().hex, payload)
        self.store.put(asset)
        logger.info("Registered asset %s (%s, %s)", asset.id, asset.name, asset.method)
        return asset

    def update(self, asset_id: str, payload: AssetCreate) -> Asset:
        self.get(asset_id)
        asset = self._build(asset_id, payload)
        self.store.put(asset)
        logger.info("Updated asset %s", asset_id)
        return asset

    def delete(self, asset_id: str) -> None:
        if not self.store.delete(asset_id):
            raise AssetNotFoundError(asset_id)
        logger.info("Deleted asset %s", asset_id)

    def get(self, asset_id: str) -> Asset:
        asset = self.store.get(asset_id)
        if asset is None:
            raise AssetNotFoundError(asset_id)
        return asset

    def list(
        self,
        category: Optional[str] = None,
        sort_by: SortKey = "name",
        order: SortOrder = "asc",
    ) -> List[Asset]:
        assets = self.store.values()
        if category:
            assets = [asset for asset in assets if asset.category == category]
        return sorted(assets, key=lambda asset: _sort_value(asset, sort_by), reverse=order == "desc")

    def categories(self) -> List[str]:
        return sorted({asset.category for asset in self.store.values()})

    @staticmethod
    def current_position(asset: Asset, as_of: date) -> AssetPosition:
        """
        Locate the schedule entry for the years elapsed since purchase.

        Elapsed years are counted by calendar year and clamped to the schedule,
        so an asset bought in the future reports its cost and an asset past its
        useful life reports the final entry with no further depreciation.
        """
        elapsed = as_of.year - asset.purchase_date.year
        if elapsed < 0:
            return AssetPosition(asset_id=asset.id, year=0, depreciation=0.0, book_value=asset.cost)
        if elapsed > asset.useful_life:
            final = asset.schedule[-1]
            return AssetPosition(
                asset_id=asset.id,
                year=final.year,
                depreciation=0.0,
                book_value=final.book_value,
            )
        entry = asset.schedule[elapsed]
        return AssetPosition(
            asset_id=asset.id,
            year=entry.year,
            depreciation=entry.depreciation,
            book_value=entry.book_value,
        )

    @staticmethod
    def summary(asset: Asset, year: int) -> AssetSummary:
        selected = min(max(year, 0), asset.useful_life)
        return AssetSummary(
            asset_id=asset.id,
            name=asset.name,
            category=asset.category,
            cost=asset.cost,
            residual_value=asset.residual_value,
            method=asset.method,
            rate=asset.rate,
            useful_life=asset.useful_life,
            year=selected,
            years_remaining=max(0, asset.useful_life - selected),
            book_value=asset.schedule[selected].book_value,
        )

    def register_rows(
        self,
        as_of: date,
        category: Optional[str] = None,
        sort_by: SortKey = "name",
        order: SortOrder = "asc",
    ) -> List[RegisterRow]:
        return [
            RegisterRow(
                name=asset.name,
                category=asset.category,
                cost=asset.cost,
                purchase_date=asset.purchase_date,
                useful_life=asset.useful_life,
                method=asset.method,
                current_book_value=self.current_position(asset, as_of).book_value,
            )
            for asset in self.list(category=category, sort_by=sort_by, order=order)
        ]
