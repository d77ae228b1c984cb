from variantkit.generator.grid import (
    COLUMN_GAP,
    ROW_DIMENSIONS,
    ROW_GAP,
    STATE_DIMENSION,
    Dimension,
    GridCell,
    VariantGrid,
    generate,
    styling_fallback,
)
from variantkit.generator.surface import DrawingSurface, Operation, RecordingSurface, estimate_size

__all__ = [
    "COLUMN_GAP",
    "ROW_DIMENSIONS",
    "ROW_GAP",
    "STATE_DIMENSION",
    "Dimension",
    "DrawingSurface",
    "GridCell",
    "Operation",
    "RecordingSurface",
    "VariantGrid",
    "estimate_size",
    "generate",
    "styling_fallback",
]
