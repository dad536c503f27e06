"""
Small key/value persistence for front-end state (the loan form).

The calculation modules never import this. A front end builds a LocalStore
over a backend and hands it around:

    store = LocalStore(JsonFileBackend(path))
    store.save("loan-calculator-data", form)
    form = store.load_model("loan-calculator-data", LoanFormData, EMPTY_FORM)

LocalStore.save and LocalStore.load never raise: failures are logged as
warnings and load falls back to the caller's default.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class KeyValueBackend(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryBackend:
    """Dict-backed store; nothing survives the process."""

    def __init__(self, items: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileBackend:
    """
    All keys live in one JSON object file. Writes go to a temp file in the
    same directory which then replaces the original.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return data

    def _write_all(self, items: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(items, fh, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if items.pop(key, None) is not None:
            self._write_all(items)


class LocalStore:
    def __init__(self, backend: KeyValueBackend):
        self._backend = backend

    def save(self, key: str, value: Any) -> None:
        try:
            if isinstance(value, BaseModel):
                value = value.model_dump(mode="json")
            self._backend.set_item(key, json.dumps(value))
        except Exception as exc:
            logger.warning("Failed to save %r to local storage: %s", key, exc)

    def load(self, key: str, default: T) -> T:
        try:
            stored = self._backend.get_item(key)
            if not stored:
                return default
            return json.loads(stored)
        except Exception as exc:
            logger.warning("Failed to load %r from local storage: %s", key, exc)
            return default

    def load_model(self, key: str, model_cls: type[M], default: M) -> M:
        """Load and validate into `model_cls`; anything unusable gives `default`."""
        raw = self.load(key, None)
        if raw is None:
            return default
        try:
            return model_cls.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Discarding stored %r: %s", key, exc)
            return default
