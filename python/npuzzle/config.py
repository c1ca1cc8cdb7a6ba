"""Central defaults and limits for the puzzle engine."""

from __future__ import annotations

# Tiles are stored as unsigned 16-bit values.
MAX_TILES = 65535

# Solver defaults
DEFAULT_ALGORITHM = "optimized"
DEFAULT_HEURISTIC = "linear-conflict"

# Accepted ranges for generate requests (inclusive)
SIZE_LIMITS = (1, 255)
COMPLEXITY_LIMITS = (0, 65535)
