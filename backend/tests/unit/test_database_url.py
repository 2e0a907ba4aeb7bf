"""Unit tests for database URL handling."""

import pytest

from salonflow.infrastructure.database.session import to_async_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("sqlite:///./salonflow.db", "sqlite+aiosqlite:///./salonflow.db"),
        ("postgresql://u:p@db:5432/salon", "postgresql+asyncpg://u:p@db:5432/salon"),
        ("postgres://u:p@db/salon", "postgresql+asyncpg://u:p@db/salon"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_to_async_url(url: str, expected: str):
    assert to_async_url(url) == expected
