"""
Regular Hexagon Dimensions
==========================

Closed-form conversions between the size descriptors of a regular hexagon
oriented with two vertical sides ("pointy-top"), plus polygon construction
for a single hexagon.

Key Geometric Relations (side length s):
- Height (vertex to vertex along the vertical mid-line): h = 2s
- Width (distance between the two vertical sides): w = sqrt(3)·s
- Area: A = 3·sqrt(3)·s² / 2

All conversions accept a scalar or an ordered sequence of scalars and are
applied element-wise. Scalars come back as float, sequences as numpy arrays
of the same length and order.
"""

import logging
import math
from typing import List, Optional, Tuple

import numpy as np
from shapely.geometry import Polygon

logger = logging.getLogger(__name__)

SQRT3 = math.sqrt(3.0)
AREA_FACTOR = 3.0 * SQRT3 / 2.0  # A = AREA_FACTOR * s^2


def _elementwise(values, func):
    """Apply func to a scalar or array-like, preserving scalar-ness."""
    arr = np.asarray(values, dtype=float)
    result = func(arr)
    if arr.ndim == 0:
        return float(result)
    return result


# ============================================================================
# SIDE <-> HEIGHT
# ============================================================================

def height_to_side(height):
    """
    Side length of a hexagon with the given height.

    Formula: s = h / 2

    Args:
        height: Hexagon height (scalar or sequence)

    Returns:
        Side length(s), same shape as the input
    """
    return _elementwise(height, lambda h: h / 2.0)


def side_to_height(side):
    """
    Height of a hexagon with the given side length.

    Formula: h = 2s

    Examples:
        - s=3: h=6
        - s=0.5: h=1

    Args:
        side: Side length (scalar or sequence)

    Returns:
        Height(s), same shape as the input
    """
    return _elementwise(side, lambda s: 2.0 * s)


# ============================================================================
# SIDE <-> AREA
# ============================================================================

def side_to_area(side):
    """
    Area of a regular hexagon with the given side length.

    Formula: A = 3·sqrt(3)·s² / 2

    Derivation:
        A regular hexagon splits into six equilateral triangles of side s,
        each with area sqrt(3)·s² / 4, so A = 6·sqrt(3)·s² / 4.

    Examples:
        - s=1: A ≈ 2.5981
        - s=2: A ≈ 10.3923

    Args:
        side: Side length (scalar or sequence)

    Returns:
        Area(s), same shape as the input
    """
    return _elementwise(side, lambda s: AREA_FACTOR * s ** 2)


def area_to_side(area):
    """
    Side length of a regular hexagon with the given area.

    Formula: s = sqrt(2A / (3·sqrt(3)))

    Negative areas are not guarded against and produce nan.

    Args:
        area: Hexagon area (scalar or sequence)

    Returns:
        Side length(s), same shape as the input
    """
    with np.errstate(invalid='ignore'):
        return _elementwise(area, lambda a: np.sqrt(a / AREA_FACTOR))


# ============================================================================
# SIDE <-> WIDTH
# ============================================================================

def side_to_width(side):
    """Width (distance between the vertical sides): w = sqrt(3)·s."""
    return _elementwise(side, lambda s: SQRT3 * s)


def width_to_side(width):
    """Side length from width: s = w / sqrt(3)."""
    return _elementwise(width, lambda w: w / SQRT3)


# ============================================================================
# POLYGONS
# ============================================================================

def hexagon_vertices(xc: float, yc: float, side: float) -> List[Tuple[float, float]]:
    """
    Vertices of a pointy-top hexagon centred on (xc, yc).

    Vertices lie on a circle of radius s at angles -30°, 30°, 90°, 150°,
    210° and 270°, listed counter-clockwise from the lower-right vertex.
    The 90° and 270° vertices give the height 2s; the vertical sides sit at
    xc ± sqrt(3)·s / 2.

    Args:
        xc: Centroid X
        yc: Centroid Y
        side: Side length

    Returns:
        List of six (x, y) tuples
    """
    vertices = []
    for k in range(6):
        angle = math.radians(-30 + 60 * k)
        vertices.append((xc + side * math.cos(angle), yc + side * math.sin(angle)))
    return vertices


def hexagon_polygon(xc: float, yc: float, side: float) -> Polygon:
    """Shapely polygon for the hexagon centred on (xc, yc)."""
    return Polygon(hexagon_vertices(xc, yc, side))


# ============================================================================
# UTILITIES
# ============================================================================

def log_dimension_summary(
    side: float,
    logger_instance: Optional[logging.Logger] = None
) -> None:
    """
    Log all size descriptors of a hexagon with the given side length.

    Args:
        side: Side length
        logger_instance: Logger to use (default: module logger)
    """
    log = logger_instance or logger

    log.info("=" * 60)
    log.info("Hexagon Dimensions")
    log.info("=" * 60)
    log.info(f"  Side length: {side:g}")
    log.info(f"  Height: {side_to_height(side):g}")
    log.info(f"  Width: {side_to_width(side):g}")
    log.info(f"  Area: {side_to_area(side):g}")
    log.info("=" * 60)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    print("\n=== Hexagon Dimension Demo ===\n")

    for s in [0.5, 1.0, 2.0, 3.0]:
        print(f"  s={s}: h={side_to_height(s):g}, w={side_to_width(s):.4f}, "
              f"A={side_to_area(s):.4f}")

    print("\nRound trip (area -> side):")
    areas = side_to_area([1.0, 2.0, 3.0])
    print(f"  {areas} -> {area_to_side(areas)}")

    log_dimension_summary(1.0)
