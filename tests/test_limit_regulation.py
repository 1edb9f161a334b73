"""
Tests for the limit regulation table.

INVARIANTS:
- Unregistered names are UNLIMITED
- The reverse index agrees with the grouping after every add()
- Concurrent first use builds a single consistent index
"""

import threading

import pytest

from ygodb.models.failure import InvalidArgumentError, RegulationDecodeError
from ygodb.models.limit_regulation import LimitRegulation, LimitRegulationTable


class TestLimitRegulation:
    """Tests for quota values."""

    def test_quota_values(self) -> None:
        assert [r.max_copies for r in LimitRegulation] == [0, 1, 2, 3]

    def test_ordered_by_quota(self) -> None:
        assert LimitRegulation.PROHIBITED < LimitRegulation.UNLIMITED


class TestLookup:
    """Tests for registering and looking up names."""

    def test_registered_name(self) -> None:
        table = LimitRegulationTable()
        table.add("Pot of Greed", LimitRegulation.PROHIBITED)
        assert table.get("Pot of Greed") == LimitRegulation.PROHIBITED

    def test_unregistered_name_is_unlimited(self) -> None:
        table = LimitRegulationTable()
        table.add("Pot of Greed", LimitRegulation.PROHIBITED)
        assert table.get("Blue-Eyes White Dragon") == LimitRegulation.UNLIMITED
        assert table.max_copies("Blue-Eyes White Dragon") == 3

    def test_empty_table(self) -> None:
        assert LimitRegulationTable().get("Anything") == LimitRegulation.UNLIMITED

    def test_add_accepts_plain_quota(self) -> None:
        table = LimitRegulationTable()
        table.add("Monster Reborn", 1)  # type: ignore[arg-type]
        assert table.get("Monster Reborn") is LimitRegulation.LIMITED

    def test_add_rejects_unknown_quota(self) -> None:
        with pytest.raises(InvalidArgumentError, match="quota"):
            LimitRegulationTable().add("Card", 4)  # type: ignore[arg-type]

    def test_add_after_query_updates_index(self) -> None:
        table = LimitRegulationTable()
        assert table.get("Raigeki") == LimitRegulation.UNLIMITED

        table.add("Raigeki", LimitRegulation.LIMITED)

        assert table.get("Raigeki") == LimitRegulation.LIMITED

    def test_duplicate_add_latest_wins(self) -> None:
        table = LimitRegulationTable()
        table.add("Graceful Charity", LimitRegulation.PROHIBITED)
        table.add("Graceful Charity", LimitRegulation.SEMI_LIMITED)

        assert table.get("Graceful Charity") == LimitRegulation.SEMI_LIMITED
        assert table.names(LimitRegulation.PROHIBITED) == ("Graceful Charity",)
        assert len(table) == 1

    def test_names_in_insertion_order(self) -> None:
        table = LimitRegulationTable()
        table.add("B", LimitRegulation.LIMITED)
        table.add("A", LimitRegulation.LIMITED)
        assert table.names(LimitRegulation.LIMITED) == ("B", "A")
        assert table.names(LimitRegulation.SEMI_LIMITED) == ()

    def test_contains(self) -> None:
        table = LimitRegulationTable()
        table.add("Change of Heart", LimitRegulation.LIMITED)
        assert "Change of Heart" in table
        assert "Mystical Space Typhoon" not in table


class TestConcurrency:
    """Tests for thread-safe index building and mutation."""

    def test_concurrent_first_use(self) -> None:
        table = LimitRegulationTable.from_dict({"0": [f"card-{i}" for i in range(500)]})
        results: list[LimitRegulation] = []
        lock = threading.Lock()

        def query() -> None:
            found = [table.get(f"card-{i}") for i in range(500)]
            with lock:
                results.extend(found)

        threads = [threading.Thread(target=query) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8 * 500
        assert set(results) == {LimitRegulation.PROHIBITED}

    def test_concurrent_adds(self) -> None:
        table = LimitRegulationTable()

        def add_batch(offset: int) -> None:
            for i in range(100):
                table.add(f"card-{offset + i}", LimitRegulation.LIMITED)

        threads = [threading.Thread(target=add_batch, args=(n * 100,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(table) == 400
        assert len(table.names(LimitRegulation.LIMITED)) == 400


class TestJson:
    """Tests for the persisted JSON form."""

    def test_decode_grouping(self) -> None:
        table = LimitRegulationTable.from_json(
            '{"0": ["Pot of Greed"], "1": ["Monster Reborn"], "2": ["Upstart Goblin"]}'
        )
        assert table.get("Pot of Greed") == LimitRegulation.PROHIBITED
        assert table.get("Monster Reborn") == LimitRegulation.LIMITED
        assert table.get("Upstart Goblin") == LimitRegulation.SEMI_LIMITED
        assert table.get("Dark Magician") == LimitRegulation.UNLIMITED

    def test_encode_writes_three_groups(self) -> None:
        table = LimitRegulationTable()
        table.add("Pot of Greed", LimitRegulation.PROHIBITED)

        assert table.to_dict() == {"0": ["Pot of Greed"], "1": [], "2": []}

    def test_round_trip(self) -> None:
        table = LimitRegulationTable()
        table.add("Pot of Greed", LimitRegulation.PROHIBITED)
        table.add("Monster Reborn", LimitRegulation.LIMITED)

        decoded = LimitRegulationTable.from_json(table.to_json())

        assert decoded.to_dict() == table.to_dict()
        assert decoded.get("Monster Reborn") == LimitRegulation.LIMITED

    def test_missing_groups_allowed(self) -> None:
        table = LimitRegulationTable.from_dict({"1": ["Harpie's Feather Duster"]})
        assert table.names(LimitRegulation.PROHIBITED) == ()

    def test_duplicate_across_groups_higher_quota_wins(self) -> None:
        table = LimitRegulationTable.from_dict({"2": ["Card"], "0": ["Card"]})
        assert table.get("Card") == LimitRegulation.SEMI_LIMITED

    def test_unknown_quota_rejected(self) -> None:
        with pytest.raises(RegulationDecodeError, match="unknown quota 7"):
            LimitRegulationTable.from_dict({"7": ["Card"]})

    def test_non_integer_key_rejected(self) -> None:
        with pytest.raises(RegulationDecodeError):
            LimitRegulationTable.from_dict({"banned": ["Card"]})

    def test_non_list_value_rejected(self) -> None:
        with pytest.raises(RegulationDecodeError):
            LimitRegulationTable.from_dict({"0": "Pot of Greed"})

    def test_malformed_json(self) -> None:
        with pytest.raises(RegulationDecodeError, match="malformed JSON"):
            LimitRegulationTable.from_json("{")

    def test_invalid_utf8_bytes(self) -> None:
        with pytest.raises(RegulationDecodeError, match="malformed JSON"):
            LimitRegulationTable.from_json(b'{"0": ["\xff"]}')
