"""Tests for era thresholds."""

import pytest

from feedtext.core.breakpoints import (
    DEFAULT_BREAKPOINTS,
    Breakpoint,
    BreakpointTable,
    EraThreshold,
    UnknownBreakpointError,
)
from feedtext.core.types import format_time, time_key

_ENCHANT = Breakpoint.SEASON1_ENCHANTMENT_CHANGE


class TestTimeKey:
    def test_unknown_day_sorts_first_in_season(self) -> None:
        assert time_key(1, None) < time_key(1, 0)

    def test_later_season_beats_any_day(self) -> None:
        assert time_key(2, None) > time_key(1, 999)

    def test_negative_season_raises(self) -> None:
        with pytest.raises(ValueError, match="season"):
            time_key(-1, 0)

    def test_negative_day_raises(self) -> None:
        with pytest.raises(ValueError, match="day"):
            time_key(1, -3)

    def test_format_time(self) -> None:
        assert format_time(1, 120) == "S1D120"
        assert format_time(2, None) == "S2D?"


class TestEraThreshold:
    def test_invalid_threshold_raises(self) -> None:
        with pytest.raises(ValueError):
            EraThreshold(season=-2)

    def test_str(self) -> None:
        assert str(EraThreshold(1, 120)) == "S1D120"
        assert str(EraThreshold(3)) == "S3"


class TestDefaultTable:
    def test_contains_every_breakpoint(self) -> None:
        assert set(DEFAULT_BREAKPOINTS) == set(Breakpoint)
        assert len(DEFAULT_BREAKPOINTS) == len(Breakpoint)

    def test_enchantment_threshold(self) -> None:
        assert DEFAULT_BREAKPOINTS[_ENCHANT] == EraThreshold(1, 120)

    @pytest.mark.parametrize(
        ("season", "day", "after"),
        [
            (0, 500, False),
            (1, 119, False),
            (1, 120, True),
            (1, 121, True),
            (2, 0, True),
            (2, None, True),
        ],
    )
    def test_after_and_before(self, season: int, day: int | None, after: bool) -> None:
        assert DEFAULT_BREAKPOINTS.after(_ENCHANT, season, day) is after
        assert DEFAULT_BREAKPOINTS.before(_ENCHANT, season, day) is not after

    def test_unknown_day_in_threshold_season_is_before(self) -> None:
        assert DEFAULT_BREAKPOINTS.before(_ENCHANT, 1, None)

    def test_same_answer_every_time(self) -> None:
        answers = {DEFAULT_BREAKPOINTS.after(_ENCHANT, 1, 120) for _ in range(5)}
        assert answers == {True}


class TestCustomTable:
    def test_season_start_threshold_includes_unknown_day(self) -> None:
        table = BreakpointTable({_ENCHANT: EraThreshold(season=2)})
        assert table.after(_ENCHANT, 2, None)
        assert table.after(_ENCHANT, 2, 0)
        assert table.before(_ENCHANT, 1, 300)

    def test_missing_breakpoint_raises(self) -> None:
        table = BreakpointTable({})
        with pytest.raises(UnknownBreakpointError, match="Unknown breakpoint"):
            table.after(_ENCHANT, 1, 1)

    def test_missing_breakpoint_is_key_and_value_error(self) -> None:
        table = BreakpointTable({})
        with pytest.raises(KeyError):
            table[_ENCHANT]
        with pytest.raises(ValueError):
            table[_ENCHANT]

    def test_partial_table_behaves_as_mapping(self) -> None:
        table = BreakpointTable({_ENCHANT: EraThreshold(1, 120)})
        missing = Breakpoint.SEASON1_ATTRIBUTE_EQUAL_CHANGE

        assert _ENCHANT in table
        assert missing not in table
        assert table.get(missing) is None
        assert table.get(missing, EraThreshold(2)) == EraThreshold(2)
        assert table.get(_ENCHANT) == EraThreshold(1, 120)

    def test_with_threshold_returns_new_table(self) -> None:
        moved = DEFAULT_BREAKPOINTS.with_threshold(_ENCHANT, EraThreshold(4, 10))
        assert moved[_ENCHANT] == EraThreshold(4, 10)
        assert DEFAULT_BREAKPOINTS[_ENCHANT] == EraThreshold(1, 120)

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_BREAKPOINTS[_ENCHANT] = EraThreshold(9)  # type: ignore[index]
