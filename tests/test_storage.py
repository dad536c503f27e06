"""
Test cases for storage.py.
"""

import json
import logging

import pytest

from calc_toolkit.form import EMPTY_FORM
from calc_toolkit.models import LoanFormData
from calc_toolkit.storage import JsonFileBackend, LocalStore, MemoryBackend


class BrokenBackend:
    """Backend whose every operation fails, like a full or disabled storage."""

    def get_item(self, key):
        raise OSError("storage unavailable")

    def set_item(self, key, value):
        raise OSError("quota exceeded")

    def remove_item(self, key):
        raise OSError("storage unavailable")


@pytest.fixture
def store() -> LocalStore:
    return LocalStore(MemoryBackend())


# ── Save / load ───────────────────────────────────────────────────────────────

def test_round_trip(store):
    store.save("prefs", {"theme": "dark", "count": 3})
    assert store.load("prefs", {}) == {"theme": "dark", "count": 3}


def test_missing_key_returns_default(store, caplog):
    with caplog.at_level(logging.WARNING):
        assert store.load("nothing-here", {"a": 1}) == {"a": 1}
    assert caplog.records == []


def test_models_are_stored_as_json(store):
    form = LoanFormData(loan_amount="1000", loan_term="12")
    store.save("form", form)
    assert store.load("form", None)["loan_amount"] == "1000"
    assert store.load_model("form", LoanFormData, EMPTY_FORM) == form


# ── Failures degrade to defaults ──────────────────────────────────────────────

def test_corrupt_json_returns_default_and_warns(caplog):
    store = LocalStore(MemoryBackend({"form": "{not json"}))
    with caplog.at_level(logging.WARNING, logger="calc_toolkit.storage"):
        assert store.load("form", "fallback") == "fallback"
    assert "Failed to load" in caplog.text


def test_backend_failures_never_raise(caplog):
    store = LocalStore(BrokenBackend())
    with caplog.at_level(logging.WARNING, logger="calc_toolkit.storage"):
        store.save("form", {"a": 1})
        assert store.load("form", 42) == 42
    assert "Failed to save" in caplog.text
    assert "Failed to load" in caplog.text


def test_unserializable_value_is_not_saved(store, caplog):
    with caplog.at_level(logging.WARNING, logger="calc_toolkit.storage"):
        store.save("bad", {"when": object()})
    assert "Failed to save" in caplog.text
    assert store.load("bad", None) is None


def test_load_model_rejects_wrong_shape(caplog):
    store = LocalStore(MemoryBackend({"form": json.dumps({"term_in_months": "maybe"})}))
    with caplog.at_level(logging.WARNING, logger="calc_toolkit.storage"):
        assert store.load_model("form", LoanFormData, EMPTY_FORM) == EMPTY_FORM
    assert "Discarding" in caplog.text


# ── JSON file backend ─────────────────────────────────────────────────────────

def test_file_backend_persists_between_instances(tmp_path):
    path = tmp_path / "state.json"
    LocalStore(JsonFileBackend(path)).save("form", {"loan_amount": "5000"})

    reopened = LocalStore(JsonFileBackend(path))
    assert reopened.load("form", None) == {"loan_amount": "5000"}


def test_file_backend_keeps_other_keys(tmp_path):
    backend = JsonFileBackend(tmp_path / "state.json")
    backend.set_item("a", "1")
    backend.set_item("b", "2")
    backend.remove_item("a")
    assert backend.get_item("a") is None
    assert backend.get_item("b") == "2"
    assert list(tmp_path.iterdir()) == [tmp_path / "state.json"]


def test_file_backend_creates_parent_directory(tmp_path):
    backend = JsonFileBackend(tmp_path / "nested" / "dir" / "state.json")
    backend.set_item("k", "v")
    assert backend.get_item("k") == "v"


def test_file_backend_missing_file(tmp_path):
    assert JsonFileBackend(tmp_path / "absent.json").get_item("k") is None


def test_file_backend_non_object_file_degrades(tmp_path, caplog):
    path = tmp_path / "state.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    store = LocalStore(JsonFileBackend(path))
    with caplog.at_level(logging.WARNING, logger="calc_toolkit.storage"):
        assert store.load("form", "default") == "default"
        store.save("form", {"x": 1})
    assert path.read_text(encoding="utf-8") == "[1, 2, 3]"
