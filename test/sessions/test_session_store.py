#!/usr/bin/env python3
"""Tests for the in-memory session store: ids, sliding TTL and sweeping"""

import re
import sys
import threading
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from app.sessions.storage import SessionStore, generate_session_id
from app.validation.models import GenerationConfig

CONFIG = GenerationConfig(num_fields=3, total_records=250, records_per_page=100)
ANCHOR = datetime(2024, 1, 1)


def test_session_id_format():
    sid = generate_session_id(1_700_000_000.5)
    assert re.fullmatch(r"session_1700000000500_[0-9a-z]{9}", sid)


def test_create_and_get(session_store):
    sid = session_store.create(CONFIG, None, ANCHOR)
    session = session_store.get(sid)
    assert session is not None
    assert session.config == CONFIG
    assert session.anchor == ANCHOR
    assert session.length_schema is None
    assert sid in session_store
    assert len(session_store) == 1


def test_unknown_session_returns_none(session_store):
    assert session_store.get("session_1_doesnotex") is None


def test_session_expires_after_ttl(session_store, clock):
    sid = session_store.create(CONFIG, None, ANCHOR)
    clock.advance(601)
    assert session_store.get(sid) is None
    assert sid not in session_store


def test_access_slides_expiry(session_store, clock):
    sid = session_store.create(CONFIG, {"firstName": 5}, ANCHOR)
    clock.advance(500)
    assert session_store.get(sid) is not None
    clock.advance(500)
    session = session_store.get(sid)
    assert session is not None
    assert session.length_schema == {"firstName": 5}
    clock.advance(601)
    assert session_store.get(sid) is None


def test_sweep_expired_removes_only_stale_sessions(session_store, clock):
    old = session_store.create(CONFIG, None, ANCHOR)
    clock.advance(400)
    fresh = session_store.create(CONFIG, None, ANCHOR)
    clock.advance(300)
    removed = session_store.sweep_expired()
    assert removed == 1
    assert old not in session_store
    assert fresh in session_store


def test_create_sweeps_expired_sessions(session_store, clock):
    stale = session_store.create(CONFIG, None, ANCHOR)
    clock.advance(700)
    session_store.create(CONFIG, None, ANCHOR)
    assert stale not in session_store
    assert len(session_store) == 1


def test_delete(session_store):
    sid = session_store.create(CONFIG, None, ANCHOR)
    assert session_store.delete(sid) is True
    assert session_store.delete(sid) is False
    assert session_store.list_sessions() == []


def test_concurrent_creates_get_unique_ids(logger):
    store = SessionStore(ttl_seconds=600, logger=logger)
    ids = []
    lock = threading.Lock()

    def worker():
        for _ in range(25):
            sid = store.create(CONFIG, None, ANCHOR)
            with lock:
                ids.append(sid)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(ids) == 200
    assert len(set(ids)) == 200
    assert len(store) == 200
