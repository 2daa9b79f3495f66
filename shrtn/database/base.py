"""Abstract base class for mapping store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, List

from .models import Mapping

DEFAULT_PARTITION_KEY = "default_shorten"


class MappingStoreBase(ABC):
    """Abstract base class for mapping store operations.

    Every record lives under a single partition key, so one store instance
    holds exactly one logical collection of mappings. Implementations raise
    StoreError for any failure instead of returning empty results.
    """

    def __init__(self, db_config: str, partition_key: str = DEFAULT_PARTITION_KEY):
        """Initialize store.

        Args:
            db_config: Store connection string
            partition_key: Logical partition all mappings are stored under
        """
        self.db_config = db_config
        self.partition_key = partition_key

    @abstractmethod
    async def put(self, mapping: Mapping) -> str:
        """Persist a new, immutable mapping.

        Args:
            mapping: The mapping to store

        Returns:
            Identifier of the stored record

        Raises:
            StoreError: If the write fails
        """
        pass

    @abstractmethod
    async def query_recent(self, limit: int = 10) -> List[Mapping]:
        """Return the most recently created mappings, newest first.

        Args:
            limit: Maximum number of mappings to return

        Raises:
            StoreError: If the query fails
        """
        pass

    @abstractmethod
    async def query_by_code(self, code: str) -> Optional[Mapping]:
        """Look up a mapping by its short code.

        Args:
            code: The short code to look up

        Returns:
            The first matching mapping, or None

        Raises:
            StoreError: If the query fails
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release store resources."""
        pass
