"""Output formatters and exporters for carpet roll plans."""

from __future__ import annotations

import json
from typing import Any

from carpets.domain import (
    CarpetResult,
    HardwoodResult,
    Piece,
    PlacedPiece,
    format_dimensions,
    format_feet_inches,
)

from .measurement_parser import BulkParseResult


def _piece_name(piece: Piece) -> str:
    return piece.label or f"#{piece.id}"


class CarpetReportFormatter:
    """Formats a carpet calculation as a plain-text report."""

    def format(self, result: CarpetResult) -> str:
        """Format the roll plan with pieces and area totals."""
        if result.piece_count == 0:
            return "No pieces to cut."

        lines = [
            "CARPET ROLL PLAN",
            "=" * 60,
            f"Roll width:      {format_feet_inches(result.roll_width)}",
            f"Total length:    {format_feet_inches(result.total_length)} "
            f'({result.total_length}")',
        ]
        if result.is_flipped:
            lines.append("Orientation:     rotated 90 degrees (widths run along the roll)")
        if result.strategy:
            lines.append(f"Packing:         {result.strategy}")

        lines.append("")
        lines.append(f"STANDARD (full width) - {format_feet_inches(result.standard_length)}")
        lines.append("-" * 60)
        if result.standard:
            for piece in result.standard:
                lines.append(f"  {_piece_name(piece):<20} {format_dimensions(piece)}")
        else:
            lines.append("  (none)")

        lines.append("")
        lines.append(f"NEEDS (packed) - {format_feet_inches(result.needs_length)}")
        lines.append("-" * 60)
        if result.needs:
            lines.append(f"  {'Piece':<20} {'Size':<16} {'Position'}")
            for placed in result.needs:
                lines.append(
                    f"  {_piece_name(placed.piece):<20} "
                    f"{format_dimensions(placed.piece):<16} "
                    f'x={placed.x}" y={placed.y}"'
                )
        else:
            lines.append("  (none)")

        lines.append("")
        lines.append("AREA")
        lines.append("-" * 60)
        lines.append(f"  Total:  {result.total_sq_ft:.2f} sq ft ({result.total_sq_yd:.2f} sq yd)")
        lines.append(f"  Used:   {result.used_sq_ft:.2f} sq ft")
        lines.append(
            f"  Waste:  {result.waste_sq_ft:.2f} sq ft ({result.waste_percent:.1f}%)"
        )

        return "\n".join(lines)


class RollDiagramFormatter:
    """Renders the needs area of the roll as an ASCII diagram.

    The roll runs down the page; x is across the roll width.

    Attributes:
        width: Diagram width in characters, borders included.
    """

    def __init__(self, width: int = 74) -> None:
        self.width = width

    def format(self, result: CarpetResult) -> str:
        """Generate the diagram for the needs placements."""
        if not result.needs:
            return "No needs pieces to diagram."

        usable_width = self.width - 2
        scale_x = usable_width / result.roll_width
        # Terminal cells are roughly twice as tall as they are wide
        scale_y = scale_x * 0.5
        grid_height = max(int(result.needs_length * scale_y) + 1, 3)

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        for placed in result.needs:
            self._draw_piece(grid, placed, scale_x, scale_y)

        lines = [
            f"Needs layout - {format_feet_inches(result.roll_width)} wide x "
            f"{format_feet_inches(result.needs_length)} long",
            "+" + "-" * usable_width + "+",
        ]
        for row in grid:
            lines.append("|" + "".join(row) + "|")
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def _draw_piece(
        self,
        grid: list[list[str]],
        placed: PlacedPiece,
        scale_x: float,
        scale_y: float,
    ) -> None:
        grid_height = len(grid)
        grid_width = len(grid[0])
        x1 = min(int(placed.x * scale_x), grid_width - 1)
        x2 = min(int(placed.right_edge * scale_x), grid_width - 1)
        y1 = min(int(placed.y * scale_y), grid_height - 1)
        y2 = min(int(placed.top_edge * scale_y), grid_height - 1)

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for x, y in ((x1, y1), (x2, y1), (x1, y2), (x2, y2)):
            grid[y][x] = "+"

        # Label inside the box when there is room
        if y2 - y1 >= 2:
            label = _piece_name(placed.piece)[: max(x2 - x1 - 1, 0)]
            for i, char in enumerate(label):
                grid[y1 + 1][x1 + 1 + i] = char


class JsonExporter:
    """Exports carpet results as JSON."""

    def export(self, result: CarpetResult) -> str:
        """Export a result as a JSON string."""
        return json.dumps(self.to_dict(result), indent=2)

    def to_dict(self, result: CarpetResult) -> dict[str, Any]:
        return {
            "standard": [self._format_piece(piece) for piece in result.standard],
            "needs": [
                {**self._format_piece(placed.piece), "x": placed.x, "y": placed.y}
                for placed in result.needs
            ],
            "standard_length": result.standard_length,
            "needs_length": result.needs_length,
            "total_length": result.total_length,
            "total_sq_ft": round(result.total_sq_ft, 2),
            "total_sq_yd": round(result.total_sq_yd, 2),
            "used_sq_ft": round(result.used_sq_ft, 2),
            "waste_sq_ft": round(result.waste_sq_ft, 2),
            "waste_percent": round(result.waste_percent, 2),
            "is_flipped": result.is_flipped,
            "strategy": result.strategy,
            "roll_width": result.roll_width,
        }

    def _format_piece(self, piece: Piece) -> dict[str, Any]:
        return {
            "id": piece.id,
            "label": piece.label,
            "width": piece.width_total,
            "length": piece.length_total,
        }


class HardwoodReportFormatter:
    """Formats hardwood box estimates."""

    def format(self, result: HardwoodResult) -> str:
        lines = [
            "HARDWOOD ESTIMATE",
            "=" * 40,
            f"  Room area:    {result.total_sq_ft:.2f} sq ft",
            f"  Waste ({result.waste_percent:g}%): {result.waste_sq_ft:.2f} sq ft",
            f"  Total needed: {result.total_needed:.2f} sq ft",
            f"  Boxes:        {result.boxes_needed} "
            f"({result.box_sq_ft:g} sq ft per box)",
        ]
        return "\n".join(lines)


class BulkParseFormatter:
    """Formats a bulk-entry preview, one line per entry."""

    def format(self, result: BulkParseResult) -> str:
        if not result.entries:
            return "No entries."

        lines: list[str] = []
        for entry in result.entries:
            if entry.error:
                lines.append(f"  x {entry.raw:<24} {entry.error}")
                continue
            assert entry.piece is not None
            line = f"  ok {entry.raw:<23} {format_dimensions(entry.piece)}"
            if entry.warning:
                line += f"  ! {entry.warning}"
            lines.append(line)

        lines.append("")
        summary = f"{result.valid_count} valid"
        if result.error_count:
            summary += f", {result.error_count} error(s)"
        if result.warning_count:
            summary += f", {result.warning_count} warning(s)"
        lines.append(summary)
        return "\n".join(lines)
