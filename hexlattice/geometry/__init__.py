"""
Hexagon Geometry Module
=======================

Dimension conversions for regular hexagons with two vertical sides.

Key Functions:
- height_to_side / side_to_height: h = 2s
- side_to_area / area_to_side: A = 3·sqrt(3)·s² / 2
- side_to_width / width_to_side: w = sqrt(3)·s
- hexagon_polygon: shapely polygon for one hexagon
"""

from .hex_geometry import (
    # Size conversions
    height_to_side,
    side_to_height,
    side_to_area,
    area_to_side,
    side_to_width,
    width_to_side,

    # Polygons
    hexagon_vertices,
    hexagon_polygon,

    # Utilities
    log_dimension_summary,
)

__all__ = [
    'height_to_side',
    'side_to_height',
    'side_to_area',
    'area_to_side',
    'side_to_width',
    'width_to_side',
    'hexagon_vertices',
    'hexagon_polygon',
    'log_dimension_summary',
]
