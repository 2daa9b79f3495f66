"""In-process mapping store, used for development and tests."""

import logging
import uuid
from typing import Optional, List, Dict, Tuple

from .base import MappingStoreBase, DEFAULT_PARTITION_KEY
from .models import Mapping


class MappingStoreMemory(MappingStoreBase):
    """Keeps mappings in a dict of partition key -> insertion-ordered records.

    Nothing survives a restart. Every method runs without awaiting, so
    concurrent requests on one event loop never observe a half-written record.
    """

    def __init__(
        self,
        db_config: str = "memory://",
        partition_key: str = DEFAULT_PARTITION_KEY,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(db_config, partition_key)
        self.logger = logger or logging.getLogger(__name__)
        self._partitions: Dict[str, List[Tuple[str, Mapping]]] = {}

    @property
    def _records(self) -> List[Tuple[str, Mapping]]:
        return self._partitions.setdefault(self.partition_key, [])

    async def put(self, mapping: Mapping) -> str:
        record_id = uuid.uuid4().hex
        self._records.append((record_id, mapping))
        self.logger.debug(f"Stored mapping {record_id}: {mapping.short_code} -> {mapping.long_url}")
        return record_id

    async def query_recent(self, limit: int = 10) -> List[Mapping]:
        # Newest insert first, so equal timestamps keep newest-first order after the stable sort
        newest_first = [mapping for _, mapping in reversed(self._records)]
        newest_first.sort(key=lambda m: m.created_at, reverse=True)
        return newest_first[:limit]

    async def query_by_code(self, code: str) -> Optional[Mapping]:
        for _, mapping in self._records:
            if mapping.short_code == code:
                return mapping
        return None

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self._partitions.clear()
