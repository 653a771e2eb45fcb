"""Tests for write_report.write_report module."""

import re
from pathlib import Path

from generate_debriefings.models import Debriefing
from write_report.write_report import DIVIDER, format_entry, format_report, write_report


def _debriefings(n: int) -> list[Debriefing]:
    return [
        Debriefing(url=f"https://example.com/{i}", title=f"Title {i}", summary=f"Summary {i}")
        for i in range(1, n + 1)
    ]


class TestFormatEntry:
    def test_layout(self) -> None:
        entry = format_entry(3, Debriefing(url="https://a.com", title="A", summary="Line one\nLine two"))
        assert entry == (
            "\n=== ARTICLE 3 ===\n"
            "URL: https://a.com\n"
            "TITLE: A\n"
            "\n"
            "DEBRIEFING:\n"
            "Line one\nLine two\n"
            "\n"
            + "=" * 80 + "\n"
        )

    def test_divider_is_80_characters(self) -> None:
        assert DIVIDER == "=" * 80


class TestFormatReport:
    def test_sections_numbered_in_order(self) -> None:
        report = format_report(_debriefings(3))
        assert re.findall(r"=== ARTICLE (\d+) ===", report) == ["1", "2", "3"]

    def test_preserves_input_order(self) -> None:
        items = list(reversed(_debriefings(2)))
        report = format_report(items)
        assert report.index("Title 2") < report.index("Title 1")

    def test_entries_joined_by_newline(self) -> None:
        a, b = _debriefings(2)
        assert format_report([a, b]) == format_entry(1, a) + "\n" + format_entry(2, b)

    def test_empty_sequence(self) -> None:
        assert format_report([]) == ""


class TestWriteReport:
    def test_writes_file(self, tmp_path: Path) -> None:
        output = tmp_path / "report.txt"
        result = write_report(_debriefings(2), output)

        assert result == output
        text = output.read_text(encoding="utf-8")
        assert text.count("=== ARTICLE") == 2

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        output = tmp_path / "report.txt"
        output.write_text("old contents", encoding="utf-8")
        write_report(_debriefings(1), output)
        assert "old contents" not in output.read_text(encoding="utf-8")

    def test_empty_sequence_writes_empty_file(self, tmp_path: Path) -> None:
        output = tmp_path / "report.txt"
        write_report([], output)
        assert output.exists()
        assert "ARTICLE" not in output.read_text(encoding="utf-8")

    def test_creates_parent_directory(self, tmp_path: Path) -> None:
        output = tmp_path / "nested" / "report.txt"
        write_report(_debriefings(1), output)
        assert output.exists()

    def test_unicode(self, tmp_path: Path) -> None:
        output = tmp_path / "report.txt"
        write_report([Debriefing(url="u", title="Zürich €", summary="naïve")], output)
        assert "Zürich €" in output.read_text(encoding="utf-8")
