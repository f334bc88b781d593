#!/usr/bin/env python3
"""Test page mirror storage and purge functionality"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from app.logger import Logger, session_logger
from app.storage import get_storage, reset_storage, set_storage
from app.storage.file_storage import FileStorage

SESSION_A = "session_1700000000000_aaaaaaaaa"
SESSION_B = "session_1700000000000_bbbbbbbbb"


class Clock:
    def __init__(self):
        self.now = 1_000_000.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def storage_with_pages(tmp_path, clock):
    """Create storage with pages from two sessions"""
    logger: Logger = session_logger
    storage = FileStorage(storage_dir=str(tmp_path), clock=clock)

    for page in (1, 2, 3):
        storage.save_page(SESSION_A, page, [{"uuid_1": f"a-{page}"}])
    clock.now += 500
    for page in (1, 2):
        storage.save_page(SESSION_B, page, [{"uuid_1": f"b-{page}"}])

    logger.info("Created test pages", session_a=3, session_b=2)
    return storage


def test_save_and_get_page(storage_with_pages, tmp_path):
    storage = storage_with_pages
    assert storage.get_page(SESSION_A, 2) == [{"uuid_1": "a-2"}]
    assert storage.get_page(SESSION_A, 9) is None
    assert (tmp_path / SESSION_A / "page_2.json").exists()


def test_list_pages_by_session(storage_with_pages):
    storage = storage_with_pages
    assert len(storage.list_pages()) == 5
    assert storage.list_pages(SESSION_B) == [f"{SESSION_B}/1", f"{SESSION_B}/2"]


def test_purge_all_pages(storage_with_pages, tmp_path):
    """Test purging all pages (max_age_seconds=0)"""
    storage = storage_with_pages
    deleted = storage.purge(max_age_seconds=0)
    assert deleted == 5, f"Expected 5 deleted, got {deleted}"
    assert storage.list_pages() == []
    assert not (tmp_path / SESSION_A).exists()


def test_purge_by_age(storage_with_pages, clock):
    """Only pages older than the cutoff are removed"""
    storage = storage_with_pages
    clock.now += 200
    deleted = storage.purge(max_age_seconds=600)
    assert deleted == 3
    assert storage.list_pages(SESSION_A) == []
    assert len(storage.list_pages(SESSION_B)) == 2


def test_metadata_survives_reload(storage_with_pages, tmp_path, clock):
    reloaded = FileStorage(storage_dir=str(tmp_path), clock=clock)
    assert len(reloaded.list_pages()) == 5


def test_delete_session(storage_with_pages, tmp_path):
    storage = storage_with_pages
    assert storage.delete_session(SESSION_A) == 3
    assert storage.list_pages(SESSION_A) == []
    assert not (tmp_path / SESSION_A).exists()


def test_rejects_unsafe_session_ids(tmp_path):
    storage = FileStorage(storage_dir=str(tmp_path))
    with pytest.raises(ValueError):
        storage.save_page("../escape", 1, [])


def test_global_storage_disabled_by_default(monkeypatch):
    monkeypatch.delenv("DATAGEN_MIRROR_PAGES", raising=False)
    reset_storage()
    assert get_storage() is None


def test_global_storage_with_explicit_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("DATAGEN_MIRROR_PAGES", raising=False)
    reset_storage()
    storage = get_storage(str(tmp_path))
    assert isinstance(storage, FileStorage)
    assert get_storage() is storage
    set_storage(None)
    assert get_storage() is None
