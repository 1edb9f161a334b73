"""
Card Kind — the closed catalogue of card categories.

INVARIANTS:
- The catalogue is closed: 14 monster kinds, 6 spell kinds, 3 trap kinds
- Every kind has exactly one rank in the comparison table
- Ranks are multiples of 10 (monsters, then spells, then traps)
- Extra Deck kinds are a subset of the monster kinds
"""

from enum import Enum
from functools import total_ordering

from ygodb.models.failure import CardDecodeError


@total_ordering
class CardKind(Enum):
    """Card category, identified by its canonical label."""

    NORMAL_MONSTER = "通常"
    EFFECT_MONSTER = "効果"
    GEMINI_MONSTER = "デュアル"
    SPIRIT_MONSTER = "スピリット"
    TUNER_MONSTER = "チューナー"
    FLIP_MONSTER = "リバース"
    TOON_MONSTER = "トゥーン"
    SPECIAL_SUMMON_MONSTER = "特殊召喚"
    RITUAL_MONSTER = "儀式"
    FUSION_MONSTER = "融合"
    SYNCHRO_MONSTER = "シンクロ"
    XYZ_MONSTER = "エクシーズ"
    PENDULUM_MONSTER = "ペンデュラム"
    LINK_MONSTER = "リンク"
    NORMAL_SPELL = "通常魔法"
    RITUAL_SPELL = "儀式魔法"
    EQUIP_SPELL = "装備魔法"
    FIELD_SPELL = "フィールド魔法"
    CONTINUOUS_SPELL = "永続魔法"
    QUICK_PLAY_SPELL = "速攻魔法"
    NORMAL_TRAP = "通常罠"
    CONTINUOUS_TRAP = "永続罠"
    COUNTER_TRAP = "カウンター罠"

    @classmethod
    def parse(cls, label: str) -> "CardKind":
        """
        Look up a kind by its canonical label.

        Raises:
            CardDecodeError: If the label is not in the catalogue
        """
        try:
            return cls(label)
        except ValueError:
            raise CardDecodeError(f"unknown card kind '{label}'") from None

    @classmethod
    def monsters(cls) -> frozenset["CardKind"]:
        return _MONSTER_KINDS

    @classmethod
    def extra_deck(cls) -> frozenset["CardKind"]:
        return _EXTRA_DECK_KINDS

    @classmethod
    def spells(cls) -> frozenset["CardKind"]:
        return _SPELL_KINDS

    @classmethod
    def traps(cls) -> frozenset["CardKind"]:
        return _TRAP_KINDS

    @property
    def rank(self) -> int:
        """Position in the canonical sort order."""
        return COMPARISON_ORDER[self]

    @property
    def is_monster(self) -> bool:
        return self in _MONSTER_KINDS

    @property
    def is_extra(self) -> bool:
        """True for kinds that live in the Extra Deck."""
        return self in _EXTRA_DECK_KINDS

    @property
    def is_spell(self) -> bool:
        return self in _SPELL_KINDS

    @property
    def is_trap(self) -> bool:
        return self in _TRAP_KINDS

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CardKind):
            return NotImplemented
        return COMPARISON_ORDER[self] < COMPARISON_ORDER[other]

    def __str__(self) -> str:
        return self.value


_MONSTER_KINDS: frozenset[CardKind] = frozenset(
    {
        CardKind.NORMAL_MONSTER,
        CardKind.EFFECT_MONSTER,
        CardKind.GEMINI_MONSTER,
        CardKind.SPIRIT_MONSTER,
        CardKind.TUNER_MONSTER,
        CardKind.FLIP_MONSTER,
        CardKind.TOON_MONSTER,
        CardKind.SPECIAL_SUMMON_MONSTER,
        CardKind.RITUAL_MONSTER,
        CardKind.FUSION_MONSTER,
        CardKind.SYNCHRO_MONSTER,
        CardKind.XYZ_MONSTER,
        CardKind.PENDULUM_MONSTER,
        CardKind.LINK_MONSTER,
    }
)

_EXTRA_DECK_KINDS: frozenset[CardKind] = frozenset(
    {
        CardKind.FUSION_MONSTER,
        CardKind.SYNCHRO_MONSTER,
        CardKind.XYZ_MONSTER,
        CardKind.LINK_MONSTER,
    }
)

_SPELL_KINDS: frozenset[CardKind] = frozenset(
    {
        CardKind.NORMAL_SPELL,
        CardKind.RITUAL_SPELL,
        CardKind.EQUIP_SPELL,
        CardKind.FIELD_SPELL,
        CardKind.CONTINUOUS_SPELL,
        CardKind.QUICK_PLAY_SPELL,
    }
)

_TRAP_KINDS: frozenset[CardKind] = frozenset(
    {
        CardKind.NORMAL_TRAP,
        CardKind.CONTINUOUS_TRAP,
        CardKind.COUNTER_TRAP,
    }
)

# Adding a kind means extending the enum and this table together.
COMPARISON_ORDER: dict[CardKind, int] = {
    CardKind.NORMAL_MONSTER: 10,
    CardKind.EFFECT_MONSTER: 20,
    CardKind.GEMINI_MONSTER: 30,
    CardKind.SPIRIT_MONSTER: 40,
    CardKind.TUNER_MONSTER: 50,
    CardKind.FLIP_MONSTER: 60,
    CardKind.TOON_MONSTER: 70,
    CardKind.SPECIAL_SUMMON_MONSTER: 80,
    CardKind.RITUAL_MONSTER: 90,
    CardKind.FUSION_MONSTER: 100,
    CardKind.SYNCHRO_MONSTER: 110,
    CardKind.XYZ_MONSTER: 120,
    CardKind.PENDULUM_MONSTER: 130,
    CardKind.LINK_MONSTER: 140,
    CardKind.NORMAL_SPELL: 150,
    CardKind.RITUAL_SPELL: 160,
    CardKind.EQUIP_SPELL: 170,
    CardKind.FIELD_SPELL: 180,
    CardKind.CONTINUOUS_SPELL: 190,
    CardKind.QUICK_PLAY_SPELL: 200,
    CardKind.NORMAL_TRAP: 210,
    CardKind.CONTINUOUS_TRAP: 220,
    CardKind.COUNTER_TRAP: 230,
}
