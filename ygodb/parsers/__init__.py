from ygodb.parsers.card_json import (
    ParsedCards,
    RejectedRecord,
    dump_cards,
    parse_card_list,
    parse_card_records,
)

__all__ = [
    "ParsedCards",
    "RejectedRecord",
    "dump_cards",
    "parse_card_list",
    "parse_card_records",
]
