"""
Persisted JSON documents.

Pydantic models describing the on-disk shape of cards and the limit
regulation table. They only validate structure; conversion to and from
the domain models lives on Card and LimitRegulationTable.

Absent monster attributes are omitted from dumped documents, never
written as null.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, StrictInt
from pydantic.alias_generators import to_camel

from ygodb.models.card_kind import CardKind

MONSTER_FIELDS: tuple[str, ...] = (
    "race",
    "attribute",
    "level",
    "rank",
    "pendulumScale",
    "link",
    "attack",
    "defence",
)


class _Document(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        """JSON-compatible dict with camelCase keys and absent fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PendulumScaleDocument(_Document):
    red: StrictInt = Field(..., ge=0)
    blue: StrictInt = Field(..., ge=0)


class LinkDocument(_Document):
    """Eight link marker flags. Missing flags read as inactive."""

    up: bool = False
    upper_right: bool = False
    right: bool = False
    lower_right: bool = False
    down: bool = False
    lower_left: bool = False
    left: bool = False
    upper_left: bool = False


class CardDocument(_Document):
    """
    A single card as stored in JSON.

    Numeric fields are strict: JSON booleans are not read as 0 or 1.
    """

    name: str = Field(..., min_length=1)
    pronunciation: str
    description: str
    kinds: list[CardKind] = Field(..., min_length=1)
    race: str | None = None
    attribute: str | None = None
    level: StrictInt | None = Field(default=None, ge=0)
    rank: StrictInt | None = Field(default=None, ge=0)
    pendulum_scale: PendulumScaleDocument | None = None
    link: LinkDocument | None = None
    attack: StrictInt | str | None = None
    defence: StrictInt | str | None = None


class LimitRegulationDocument(RootModel[dict[int, list[str]]]):
    """
    Quota -> card names, as stored in JSON.

    Keys are the quota integers written as strings ("0", "1", "2").
    Names absent from every list are unlimited.
    """
