import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest
from psycopg.types.json import Jsonb

from content_fetch.config.settings import Settings
from content_fetch.database.connection import close_pool, get_connection, init_pool
from content_fetch.database.models import RequestRecord

_TABLES = (
    "content_fetch_requests",
    "save_page_jobs",
    "original_contents",
    "content_fetch_events",
)

_TEST_SCHEMA = """
CREATE TABLE IF NOT EXISTS content_fetch_requests (
    id BIGSERIAL PRIMARY KEY,
    payload JSONB NOT NULL,
    status VARCHAR(32) NOT NULL DEFAULT 'pending',
    attempts INTEGER NOT NULL DEFAULT 0,
    error_message TEXT,
    locked_at TIMESTAMPTZ,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);
CREATE TABLE IF NOT EXISTS save_page_jobs (
    id BIGSERIAL PRIMARY KEY,
    user_id VARCHAR(64) NOT NULL,
    payload JSONB NOT NULL,
    is_rss BOOLEAN NOT NULL,
    is_import BOOLEAN NOT NULL,
    priority VARCHAR(8) NOT NULL,
    priority_rank INTEGER NOT NULL,
    status VARCHAR(32) NOT NULL,
    created_at TIMESTAMPTZ NOT NULL,
    updated_at TIMESTAMPTZ NOT NULL
);
CREATE TABLE IF NOT EXISTS original_contents (
    digest VARCHAR(128) PRIMARY KEY,
    content BYTEA NOT NULL,
    created_at TIMESTAMPTZ NOT NULL
);
CREATE TABLE IF NOT EXISTS content_fetch_events (
    id BIGSERIAL PRIMARY KEY,
    save_request_id TEXT NOT NULL,
    url TEXT NOT NULL,
    result VARCHAR(16) NOT NULL,
    total_time_ms INTEGER NOT NULL,
    user_ids TEXT[] NOT NULL,
    properties JSONB NOT NULL,
    created_at TIMESTAMPTZ NOT NULL
);
"""


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "content_fetch_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(_TEST_SCHEMA)
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        for table in _TABLES:
            conn.execute(f"DELETE FROM {table}")
        conn.commit()
        yield conn


@pytest.fixture
def seed_request(db_conn: psycopg.Connection[Any]) -> RequestRecord:
    payload: dict[str, object] = {
        "url": "https://a.com",
        "saveRequestId": "req-int-1",
        "priority": "high",
        "users": [{"id": "u1", "folder": "inbox"}, {"id": "u2"}],
    }
    with db_conn.cursor() as cur:
        cur.execute(
            """
            INSERT INTO content_fetch_requests (payload, status, attempts)
            VALUES (%s, 'pending', 0)
            RETURNING id
            """,
            (Jsonb(payload),),
        )
        row = cur.fetchone()
        assert row is not None
    db_conn.commit()
    return RequestRecord(id=row[0], payload=payload, attempts=0)
