"""
Tests for TransactionManager.atomic_transaction against a real SQLite session.
"""

import pytest
from sqlalchemy import select, func

from models.category import Category
from utils.transaction_manager import TransactionManager


async def category_count(session) -> int:
    count = await session.execute(select(func.count(Category.id)))
    return count.scalar()


class TestAtomicTransaction:

    @pytest.mark.asyncio
    async def test_commits_on_success(self, test_session, session_factory):
        async with TransactionManager.atomic_transaction(test_session) as tx:
            tx.add(Category(name="Books", slug="books"))
            tx.add(Category(name="Toys", slug="toys"))

        async with session_factory() as other_session:
            assert await category_count(other_session) == 2

    @pytest.mark.asyncio
    async def test_rolls_back_all_writes_and_reraises(self, test_session):
        with pytest.raises(ValueError, match="boom"):
            async with TransactionManager.atomic_transaction(test_session) as tx:
                tx.add(Category(name="Books", slug="books"))
                await tx.flush()
                raise ValueError("boom")

        assert await category_count(test_session) == 0

    @pytest.mark.asyncio
    async def test_commits_pending_reads_before_starting(self, test_session):
        # Autobegun read transaction from a previous query
        await category_count(test_session)
        assert test_session.in_transaction()

        async with TransactionManager.atomic_transaction(test_session) as tx:
            tx.add(Category(name="Books", slug="books"))

        assert await category_count(test_session) == 1

    @pytest.mark.asyncio
    async def test_earlier_writes_survive_a_failed_block(self, test_session):
        test_session.add(Category(name="Books", slug="books"))
        await test_session.flush()

        with pytest.raises(RuntimeError):
            async with TransactionManager.atomic_transaction(test_session) as tx:
                tx.add(Category(name="Toys", slug="toys"))
                await tx.flush()
                raise RuntimeError()

        categories = await test_session.execute(select(Category.slug))
        assert categories.scalars().all() == ["books"]
