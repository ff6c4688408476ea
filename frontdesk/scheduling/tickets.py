"""Ticket numbers printed on booking receipts.

A ticket number is a display label, not a key: uniqueness rests on the
millisecond timestamp plus a small random suffix and is never checked.
"""

import random
from datetime import datetime


def generate_ticket_number(now: datetime, rng: random.Random, prefix: str = "TKT") -> str:
    """Build ``PREFIX-<epoch ms>-<0..999>`` from an explicit clock reading and entropy source."""
    timestamp = int(now.timestamp() * 1000)
    suffix = rng.randrange(1000)
    return f"{prefix}-{timestamp}-{suffix}"
