"""Output formatters for business group listings.

Provides multiple output formats:
- Listing: tab-separated text for the console
- JSON: Machine-readable
- Table: rich table for interactive use
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Sequence

from rich.table import Table

from ..core.models import BusinessGroup

logger = logging.getLogger(__name__)

EMPTY_PLACEHOLDER = "No elements found."


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format(self, groups: Sequence[BusinessGroup]) -> str:
        """Format the groups as a string."""
        pass

    def format_to_file(self, groups: Sequence[BusinessGroup], filepath: str) -> None:
        """Write formatted groups to a file."""
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.format(groups))


class ListingFormatter(OutputFormatter):
    """Formats groups as an ``ID<TAB>LABEL`` listing."""

    HEADER = ("ID", "LABEL")

    def format(self, groups: Sequence[BusinessGroup]) -> str:
        if not groups:
            return EMPTY_PLACEHOLDER

        lines = ["\t".join(self.HEADER)]
        for group in groups:
            lines.append(f"{group.short_id}\t{group.label}")
        return "\n".join(lines).strip()


class JSONFormatter(OutputFormatter):
    """Formats groups as a JSON array."""

    def __init__(self, indent: int = 2):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation level
        """
        self.indent = indent

    def format(self, groups: Sequence[BusinessGroup]) -> str:
        data = [
            {"id": group.full_id, "short_id": group.short_id, "label": group.label}
            for group in groups
        ]
        return json.dumps(data, indent=self.indent)


class TableFormatter:
    """Builds a rich Table of groups for console display."""

    def build(self, groups: Sequence[BusinessGroup]) -> Table:
        table = Table(title="Business Groups", show_lines=False)
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("LABEL")
        table.add_column("FULL ID", style="dim")
        for group in groups:
            table.add_row(group.short_id, group.label, group.full_id)
        return table
