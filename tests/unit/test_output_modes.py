"""Tests for the output mode registry."""

from __future__ import annotations

import pytest

from result_printer.exceptions import InvalidModeError, PrinterError
from result_printer.modes import OutputMode, as_mode, get_valid_output_options, id_of, name_of


class TestOutputMode:
    def test_stable_ids(self) -> None:
        assert OutputMode.json == 0
        assert OutputMode.html == 1
        assert OutputMode.domhtml == 2

    def test_domhtml_is_not_collapsed_into_html(self) -> None:
        assert OutputMode.domhtml is not OutputMode.html
        assert id_of("domhtml") != id_of("html")


class TestLookups:
    @pytest.mark.parametrize("name", ["json", "html", "domhtml"])
    def test_name_round_trip(self, name: str) -> None:
        assert name_of(id_of(name)) == name

    @pytest.mark.parametrize("mode_id", [0, 1, 2])
    def test_id_round_trip(self, mode_id: int) -> None:
        assert id_of(name_of(mode_id)) == mode_id

    @pytest.mark.parametrize("name", ["bogus", "JSON", "", "pdf"])
    def test_unknown_name_raises(self, name: str) -> None:
        with pytest.raises(InvalidModeError) as exc_info:
            id_of(name)
        assert exc_info.value.mode == name

    def test_unknown_name_in_message(self) -> None:
        with pytest.raises(InvalidModeError, match="bogus"):
            id_of("bogus")

    def test_non_string_name_raises(self) -> None:
        with pytest.raises(InvalidModeError):
            id_of(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("mode_id", [-1, 3, 99])
    def test_unknown_id_raises(self, mode_id: int) -> None:
        with pytest.raises(InvalidModeError, match=str(mode_id)):
            name_of(mode_id)

    @pytest.mark.parametrize("mode_id", [True, False, 1.0, 2.0, "1", None])
    def test_non_int_ids_rejected(self, mode_id: object) -> None:
        with pytest.raises(InvalidModeError):
            name_of(mode_id)  # type: ignore[arg-type]
        with pytest.raises(InvalidModeError):
            as_mode(mode_id)  # type: ignore[arg-type]

    def test_as_mode_accepts_members_and_ints(self) -> None:
        assert as_mode(OutputMode.domhtml) is OutputMode.domhtml
        assert as_mode(1) is OutputMode.html

    def test_invalid_mode_error_is_printer_and_value_error(self) -> None:
        with pytest.raises(PrinterError):
            id_of("nope")
        with pytest.raises(ValueError):
            name_of(42)


class TestValidOutputOptions:
    def test_insertion_order(self) -> None:
        assert get_valid_output_options() == ["json", "html", "domhtml"]

    def test_returns_fresh_list(self) -> None:
        options = get_valid_output_options()
        options.append("pdf")
        assert get_valid_output_options() == ["json", "html", "domhtml"]
