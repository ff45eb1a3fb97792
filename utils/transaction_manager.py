import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

import config

logger = logging.getLogger(__name__)


class TransactionManager:
    """
    Utility class for running a group of writes as one all-or-nothing database
    transaction with a fixed isolation level and a per-statement timeout.
    """

    ISOLATION_LEVEL = "READ COMMITTED"

    @staticmethod
    @asynccontextmanager
    async def atomic_transaction(session: AsyncSession,
                                 timeout: Optional[int] = None) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for atomic database transactions with timeout protection.

        Any implicit transaction already open on the session (autobegun by earlier
        reads) is committed first, so the block always runs in a fresh transaction.
        Leaving the block normally commits; any exception rolls back every write made
        inside it and is re-raised unchanged.

        Usage:
            async with TransactionManager.atomic_transaction(session) as tx:
                await tx.execute(...)
        """
        timeout = timeout or config.TRANSACTION_TIMEOUT_SECONDS

        if session.in_transaction():
            await session.commit()

        bind = session.bind
        dialect = bind.dialect.name if bind is not None else "sqlite"
        if dialect != "sqlite":
            # Must be the first thing the new transaction does
            await session.connection(execution_options={"isolation_level": TransactionManager.ISOLATION_LEVEL})
            if dialect == "postgresql":
                await session.execute(text(f"SET LOCAL statement_timeout = '{int(timeout)}s'"))
            elif dialect == "mysql":
                await session.execute(text(f"SET SESSION innodb_lock_wait_timeout = {int(timeout)}"))

        transaction_start = datetime.now()
        logger.debug(f"Transaction started at {transaction_start}")

        try:
            yield session
            await session.commit()
        except Exception as e:
            try:
                await session.rollback()
                logger.info(f"Transaction rolled back due to error: {type(e).__name__}: {e}")
            except Exception as rollback_error:
                logger.critical(f"Failed to rollback transaction: {rollback_error}")
            raise

        duration = (datetime.now() - transaction_start).total_seconds()
        if duration > timeout:
            logger.warning(f"Transaction exceeded timeout: {duration}s > {timeout}s")
        logger.debug(f"Transaction committed successfully in {duration:.2f}s")
