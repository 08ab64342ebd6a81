"""Strategy protocol for needs-piece packing.

Every packing heuristic maps a list of needs pieces to a non-overlapping
placement across the roll width. Keeping them behind one protocol lets
the selector evaluate them uniformly and pick the shortest layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from carpets.domain.value_objects import Piece
    from carpets.infrastructure.packing.models import StrategyResult


@runtime_checkable
class PackingStrategy(Protocol):
    """Protocol for needs-piece packing strategies.

    Implementations must:
    - place every piece exactly once, unrotated
    - keep each piece within ``[0, roll_width)`` across the roll
    - never overlap two pieces
    - allocate any working state (shelves, height maps) per call

    Example:
        ```python
        class FirstFitByAreaStrategy:
            name = "first_fit_area"

            def pack(self, pieces: Sequence[Piece]) -> StrategyResult:
                ...
        ```
    """

    name: str

    def pack(self, pieces: Sequence["Piece"]) -> "StrategyResult":
        """Place the pieces and report the roll length consumed.

        Args:
            pieces: Needs pieces, each narrower than the roll.

        Returns:
            StrategyResult with placements in processing order and the
            maximum length reached.
        """
        ...


__all__ = [
    "PackingStrategy",
]
