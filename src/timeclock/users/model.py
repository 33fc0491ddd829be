from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: a person who clocks in and out, identified by display name."""

    user_id: int
    name: str
    created_at: Optional[datetime] = None
