"""Tests for business group output formatters."""

import json

from rich.console import Console

from business_groups.output.formatters import (
    EMPTY_PLACEHOLDER,
    JSONFormatter,
    ListingFormatter,
    TableFormatter,
)


class TestListingFormatter:
    def test_empty_snapshot_placeholder(self):
        assert ListingFormatter().format([]) == "No elements found."
        assert EMPTY_PLACEHOLDER == "No elements found."

    def test_header_and_rows(self, sample_groups):
        lines = ListingFormatter().format(sample_groups[:2]).split("\n")
        assert lines == [
            "ID\tLABEL",
            "dev-7a1b\tDevelopment",
            "dev-7a2c\tQA",
        ]

    def test_keeps_snapshot_order(self, sample_groups):
        output = ListingFormatter().format(list(reversed(sample_groups)))
        rows = output.split("\n")[1:]
        assert [row.split("\t")[0] for row in rows] == [
            "hr-0002",
            "fin-0001",
            "ops-91ff",
            "dev-7a2c",
            "dev-7a1b",
        ]

    def test_format_to_file(self, sample_groups, tmp_path):
        path = tmp_path / "groups.txt"
        ListingFormatter().format_to_file(sample_groups, str(path))
        assert path.read_text(encoding="utf-8").startswith("ID\tLABEL\n")


class TestJSONFormatter:
    def test_json_rows(self, sample_groups):
        data = json.loads(JSONFormatter().format(sample_groups[:1]))
        assert data == [
            {
                "id": "/resources/groups/dev-7a1b",
                "short_id": "dev-7a1b",
                "label": "Development",
            }
        ]

    def test_empty(self):
        assert json.loads(JSONFormatter(indent=None).format([])) == []


class TestTableFormatter:
    def test_table_rows(self, sample_groups):
        table = TableFormatter().build(sample_groups)
        assert table.row_count == len(sample_groups)

        console = Console(width=120, record=True)
        console.print(table)
        text = console.export_text()
        assert "ops-91ff" in text
        assert "Operations" in text
