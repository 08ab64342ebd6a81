"""Infrastructure layer - packing algorithms, parsing and formatters."""

from .formatters import (
    BulkParseFormatter,
    CarpetReportFormatter,
    HardwoodReportFormatter,
    JsonExporter,
    RollDiagramFormatter,
)
from .measurement_parser import (
    BulkEntry,
    BulkParseResult,
    parse_bulk_measurements,
    parse_dimension,
    parse_entry,
)
from .packing import (
    AnnealingConfig,
    HeightMap,
    PackingConfig,
    RefinementResult,
    SimulatedAnnealingRefiner,
    StrategyResult,
    StrategySelector,
    default_strategies,
)

__all__ = [
    # Packing
    "AnnealingConfig",
    "HeightMap",
    "PackingConfig",
    "RefinementResult",
    "SimulatedAnnealingRefiner",
    "StrategyResult",
    "StrategySelector",
    "default_strategies",
    # Bulk parsing
    "BulkEntry",
    "BulkParseResult",
    "parse_bulk_measurements",
    "parse_dimension",
    "parse_entry",
    # Formatters
    "BulkParseFormatter",
    "CarpetReportFormatter",
    "HardwoodReportFormatter",
    "JsonExporter",
    "RollDiagramFormatter",
]
