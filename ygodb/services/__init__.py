"""
ygodb services.

Loading card and limit regulation data, and identity lookups.
"""

from ygodb.services.card_database import (
    CardDatabase,
    get_card_database,
    get_limit_regulation,
    load_card_database,
    load_limit_regulation,
)

__all__ = [
    "CardDatabase",
    "get_card_database",
    "get_limit_regulation",
    "load_card_database",
    "load_limit_regulation",
]
