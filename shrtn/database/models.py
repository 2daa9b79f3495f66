"""Data models for shrtn."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Mapping:
    """A short code and the long URL it redirects to. Immutable once created."""

    long_url: str
    short_code: str
    created_at: datetime
