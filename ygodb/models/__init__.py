from ygodb.models.card import Card
from ygodb.models.card_kind import COMPARISON_ORDER, CardKind
from ygodb.models.documents import (
    CardDocument,
    LimitRegulationDocument,
    LinkDocument,
    PendulumScaleDocument,
)
from ygodb.models.failure import (
    CardDecodeError,
    CardNotFoundError,
    FailureKind,
    InvalidArgumentError,
    InvalidStateError,
    KnownError,
    RegulationDecodeError,
)
from ygodb.models.limit_regulation import LimitRegulation, LimitRegulationTable
from ygodb.models.monster import (
    Attack,
    Attribute,
    Defence,
    Level,
    LinkDirection,
    LinkMarkers,
    PendulumScale,
    Race,
    Rank,
)
from ygodb.models.option import Option

__all__ = [
    "Attack",
    "Attribute",
    "COMPARISON_ORDER",
    "Card",
    "CardDecodeError",
    "CardDocument",
    "CardKind",
    "CardNotFoundError",
    "Defence",
    "FailureKind",
    "InvalidArgumentError",
    "InvalidStateError",
    "KnownError",
    "Level",
    "LimitRegulation",
    "LimitRegulationDocument",
    "LimitRegulationTable",
    "LinkDirection",
    "LinkDocument",
    "LinkMarkers",
    "Option",
    "PendulumScale",
    "PendulumScaleDocument",
    "Race",
    "Rank",
    "RegulationDecodeError",
]
