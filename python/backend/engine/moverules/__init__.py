from backend.engine.moverules.rules import (
    apply_click,
    is_legal_swap,
    legal_swaps_from,
    neighbour_in_direction,
)

__all__ = [
    "apply_click",
    "is_legal_swap",
    "legal_swaps_from",
    "neighbour_in_direction",
]
