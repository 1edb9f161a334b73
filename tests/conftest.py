import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from ygodb.models import (
    Attack,
    Attribute,
    Card,
    CardKind,
    Defence,
    Level,
    LinkDirection,
    LinkMarkers,
    PendulumScale,
    Race,
    Rank,
)


@pytest.fixture
def blue_eyes() -> Card:
    """Normal monster with level, attack and defence."""
    return Card(
        name="Blue-Eyes White Dragon",
        pronunciation="ブルーアイズ・ホワイト・ドラゴン",
        description="This legendary dragon is a powerful engine of destruction.",
        kinds=[CardKind.NORMAL_MONSTER],
        race=Race("ドラゴン族"),
        attribute=Attribute("光属性"),
        level=Level(8),
        attack=Attack.fixed(3000),
        defence=Defence.fixed(2500),
    )


@pytest.fixture
def pot_of_greed() -> Card:
    """Spell card: no monster attributes."""
    return Card(
        name="Pot of Greed",
        pronunciation="ごうよくなつぼ",
        description="Draw 2 cards.",
        kinds=[CardKind.NORMAL_SPELL],
    )


@pytest.fixture
def utopia() -> Card:
    """Xyz monster with a rank instead of a level."""
    return Card(
        name="Number 39: Utopia",
        pronunciation="ナンバーズサーティナイン きぼうおうホープ",
        description="2 Level 4 monsters",
        kinds=[CardKind.XYZ_MONSTER, CardKind.EFFECT_MONSTER],
        race=Race("戦士"),
        attribute=Attribute("光"),
        rank=Rank(4),
        attack=Attack.fixed(2500),
        defence=Defence.fixed(2000),
    )


@pytest.fixture
def decode_talker() -> Card:
    """Link monster: link markers, no defence."""
    return Card(
        name="Decode Talker",
        pronunciation="デコード・トーカー",
        description="2+ Effect Monsters",
        kinds=[CardKind.LINK_MONSTER, CardKind.EFFECT_MONSTER],
        race=Race("サイバース族"),
        attribute=Attribute("闇"),
        link=LinkMarkers.from_directions(
            LinkDirection.UP, LinkDirection.LOWER_LEFT, LinkDirection.LOWER_RIGHT
        ),
        attack=Attack.fixed(2300),
    )


@pytest.fixture
def odd_eyes() -> Card:
    """Pendulum monster with a pendulum scale."""
    return Card(
        name="Odd-Eyes Pendulum Dragon",
        pronunciation="オッドアイズ・ペンデュラム・ドラゴン",
        description="Pendulum Effect: ...",
        kinds=[CardKind.PENDULUM_MONSTER, CardKind.EFFECT_MONSTER],
        race=Race("ドラゴン"),
        attribute=Attribute("闇"),
        level=Level(7),
        pendulum_scale=PendulumScale(red=4, blue=4),
        attack=Attack.fixed(2500),
        defence=Defence.fixed(2000),
    )


@pytest.fixture
def uria() -> Card:
    """Monster with variable attack."""
    return Card(
        name="Uria, Lord of Searing Flames",
        pronunciation="しんえんおうウリア",
        description="Cannot be Normal Summoned/Set.",
        kinds=[CardKind.EFFECT_MONSTER, CardKind.SPECIAL_SUMMON_MONSTER],
        race=Race("炎族"),
        attribute=Attribute("炎"),
        level=Level(10),
        attack=Attack.VARIABLE,
        defence=Defence.fixed(0),
    )


@pytest.fixture
def blue_eyes_document() -> dict[str, Any]:
    """Persisted form of a normal monster."""
    return {
        "name": "Blue-Eyes White Dragon",
        "pronunciation": "ブルーアイズ・ホワイト・ドラゴン",
        "description": "This legendary dragon is a powerful engine of destruction.",
        "kinds": ["通常"],
        "race": "ドラゴン",
        "attribute": "光",
        "level": 8,
        "attack": 3000,
        "defence": 2500,
    }


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON value to a file under tmp_path and return its path."""

    def _write(name: str, value: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(value, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
