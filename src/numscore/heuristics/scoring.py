"""Distance to score normalization shared by all heuristics.

Python 3.13+. Zero external dependencies.
"""

from numscore.constants import H_NOT_NULL

__all__ = ["normalize_distance"]


def normalize_distance(distance: int) -> float:
    """Map an accumulated distance onto (H_NOT_NULL, 1.0].

    score = H_NOT_NULL + (1 - H_NOT_NULL) / (distance + 1)

    Strictly decreasing in distance; exactly 1.0 at distance 0 and
    approaching H_NOT_NULL as distance grows.

    Args:
        distance: Accumulated per-character cost

    Returns:
        Normalized heuristic score

    Raises:
        ValueError: If distance is negative
    """
    if distance < 0:
        msg = f"Distance cannot be negative, got {distance}"
        raise ValueError(msg)

    # recall h in [0,1]: the higher the distance, the closer to H_NOT_NULL
    return H_NOT_NULL + ((1.0 - H_NOT_NULL) / (distance + 1))
