"""Unit of Work Interface

Groups every read-lock-write step of a procedure into one transaction.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Abstract unit of work

    A use case performs all of its repository writes, then calls commit()
    exactly once. Any failure calls rollback() so nothing is partially applied.
    """

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    @abstractmethod
    async def commit(self):
        """Commit all pending changes"""
        pass

    @abstractmethod
    async def rollback(self):
        """Discard all pending changes"""
        pass
