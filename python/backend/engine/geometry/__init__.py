from backend.engine.geometry.geometry import (
    check_dimensions,
    coords_of,
    idx_of,
    in_bounds,
)

__all__ = ["check_dimensions", "coords_of", "idx_of", "in_bounds"]
