"""Contracts module - protocols shared across layers.

By depending on protocols rather than concrete implementations, the
selector and calculator stay decoupled from individual heuristics.

Example:
    ```python
    from carpets.contracts import PackingStrategy

    def shortest(strategies: list[PackingStrategy], pieces) -> int:
        return min(s.pack(pieces).max_length for s in strategies)
    ```
"""

from .strategies import PackingStrategy as PackingStrategy

__all__ = [
    "PackingStrategy",
]
