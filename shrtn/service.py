"""Business logic service for shrtn."""

import logging
from typing import Callable, List, Optional, Dict
from datetime import datetime, timezone

from .shortcode import ShortCodeGenerator
from .database.base import MappingStoreBase
from .database.models import Mapping
from .common.validators import get_normalizer
from .errors import NotFoundError, StoreError


class ShortenerService:
    """Service layer tying the normalizer, generator and store together."""

    def __init__(
        self,
        store: MappingStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        url_policy: str = "strict",
        url_max_length: int = 2048,
        unique_codes: bool = False,
        max_collision_retries: int = 5,
        recent_limit: int = 10,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize shortener service.

        Args:
            store: Mapping store instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            url_policy: 'strict' or 'lenient' URL normalization
            url_max_length: Longest URL the strict policy accepts
            unique_codes: Regenerate codes that already exist in the store
            max_collision_retries: Attempts at a unique code when unique_codes is set
            recent_limit: Number of mappings listed by recent_mappings()
            clock: Returns the creation timestamp (defaults to now, UTC)
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.url_policy = url_policy
        self.normalize = get_normalizer(url_policy)
        self.url_max_length = url_max_length
        self.unique_codes = unique_codes
        self.max_collision_retries = max_collision_retries
        self.recent_limit = recent_limit
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def create_mapping(self, raw_url: str) -> Mapping:
        """Create a new mapping for a user-supplied URL.

        Args:
            raw_url: The long URL as submitted

        Returns:
            The stored mapping

        Raises:
            ValidationError: If the URL is rejected by the policy
            StoreError: If the store fails or no unique code could be found
        """
        long_url = self.normalize(raw_url, max_length=self.url_max_length)

        if self.unique_codes:
            short_code = await self._generate_unique_short_code()
        else:
            short_code = self.generator.generate_random()

        mapping = Mapping(
            long_url=long_url,
            short_code=short_code,
            created_at=self.clock(),
        )
        record_id = await self.store.put(mapping)

        self.logger.info(f"Created short URL: {short_code} -> {long_url} (id={record_id})")
        return mapping

    async def resolve(self, short_code: str) -> Mapping:
        """Get the mapping for a short code.

        Raises:
            NotFoundError: If no mapping matches
            StoreError: If the store fails
        """
        # Generated codes are letters only; anything else cannot be stored
        if not self.generator.is_valid_format(short_code):
            self.logger.warning(f"Malformed short code: {short_code!r}")
            raise NotFoundError()

        mapping = await self.store.query_by_code(short_code)

        if mapping is None:
            self.logger.warning(f"Short code not found: {short_code}")
            raise NotFoundError()

        self.logger.debug(f"Resolved: {short_code} -> {mapping.long_url}")
        return mapping

    async def recent_mappings(self, limit: Optional[int] = None) -> List[Mapping]:
        """List the most recently created mappings, newest first."""
        return await self.store.query_recent(limit or self.recent_limit)

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        store_healthy = await self.store.health_check()
        return {
            "store": store_healthy,
            "overall": store_healthy,
        }

    async def _generate_unique_short_code(self) -> str:
        """Generate a code not yet present in the store.

        Raises:
            StoreError: If every attempt collided
        """
        for attempt in range(self.max_collision_retries):
            code = self.generator.generate_random()

            if await self.store.query_by_code(code) is None:
                if attempt:
                    self.logger.debug(f"Generated code after {attempt + 1} attempts: {code}")
                return code

            self.logger.warning(f"Short code collision: {code}")

        raise StoreError("Unable to allocate a unique short code")

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()
