"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import os
import sys
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Set required environment variables before importing app modules
# These are required for config.py to load properly
os.environ.setdefault('RUNTIME_ENVIRONMENT', 'TEST')
os.environ.setdefault('DB_URL', 'sqlite+aiosqlite:///:memory:')
os.environ.setdefault('PAGE_LIMIT_DEFAULT', '10')
os.environ.setdefault('LOG_MASK_SECRETS', 'true')

from db import Base, enable_sqlite_foreign_keys  # noqa: E402
from enums.user_role import UserRole  # noqa: E402
from models.category import Category  # noqa: E402
from models.product import Product  # noqa: E402
from models.user import User  # noqa: E402


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine (in-memory SQLite, one shared connection)."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_session(session_factory):
    """Create test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


# ============================================================================
# Seed Data
# ============================================================================

@pytest_asyncio.fixture
async def users(test_session):
    """Two customers and one admin: ids 1, 2 and 3."""
    rows = [
        User(id=1, email="alice@example.com", name="Alice", role=UserRole.USER),
        User(id=2, email="bob@example.com", name="Bob", role=UserRole.USER),
        User(id=3, email="admin@example.com", name="Admin", role=UserRole.ADMIN),
    ]
    test_session.add_all(rows)
    await test_session.commit()
    return {"alice": 1, "bob": 2, "admin": 3}


@pytest_asyncio.fixture
async def category(test_session):
    row = Category(name="Electronics", slug="electronics")
    test_session.add(row)
    await test_session.commit()
    return row.id


@pytest_asyncio.fixture
async def products(test_session, category):
    """
    Catalog used by most tests:
        keyboard  49.99 x 10
        mouse     19.99 x 2
        cable      5.50 x 100
        retired   99.00 x 5 (inactive)
    """
    rows = {
        "keyboard": Product(category_id=category, name="Keyboard", slug="keyboard-1",
                            price=Decimal("49.99"), stock=10),
        "mouse": Product(category_id=category, name="Mouse", slug="mouse-1",
                         price=Decimal("19.99"), stock=2),
        "cable": Product(category_id=category, name="USB Cable", slug="usb-cable-1",
                         price=Decimal("5.50"), stock=100),
        "retired": Product(category_id=category, name="Retired Gadget", slug="retired-gadget-1",
                           price=Decimal("99.00"), stock=5, is_active=False),
    }
    test_session.add_all(rows.values())
    await test_session.commit()
    return {key: row.id for key, row in rows.items()}
