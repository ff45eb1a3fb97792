"""
Fixtures for HTTP tests.

The app runs inside TestClient's own event loop, so it gets its own engine on
a temporary SQLite file; seeding goes through a plain synchronous engine.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from db import Base, enable_sqlite_foreign_keys
from enums.user_role import UserRole
from models.category import Category
from models.product import Product
from models.user import User
from web.dependencies import get_session


@pytest.fixture
def seeded_db(tmp_path):
    path = tmp_path / "store.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    with Session(sync_engine) as session:
        session.add_all([
            User(id=1, email="alice@example.com", name="Alice", role=UserRole.USER),
            User(id=2, email="bob@example.com", name="Bob", role=UserRole.USER),
            User(id=3, email="admin@example.com", name="Admin", role=UserRole.ADMIN),
        ])
        category = Category(name="Electronics", slug="electronics")
        session.add(category)
        session.flush()
        keyboard = Product(category_id=category.id, name="Keyboard", slug="keyboard-1",
                           price=Decimal("49.99"), stock=10)
        widget = Product(category_id=category.id, name="Widget", slug="widget-1",
                         price=Decimal("10.00"), stock=5)
        session.add_all([keyboard, widget])
        session.commit()
        ids = {"category": category.id, "keyboard": keyboard.id, "widget": widget.id}
    sync_engine.dispose()
    return path, ids


@pytest.fixture
def ids(seeded_db):
    return seeded_db[1]


@pytest.fixture
def client(seeded_db):
    from app import create_app

    path, _ = seeded_db
    engine = create_async_engine(f"sqlite+aiosqlite:///{path}", poolclass=NullPool)
    enable_sqlite_foreign_keys(engine)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session():
        async with factory() as session:
            yield session

    app = create_app()
    app.dependency_overrides[get_session] = override_get_session
    return TestClient(app)
