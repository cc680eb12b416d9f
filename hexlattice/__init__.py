"""
hexlattice
==========

Accessor, summary and plotting utilities for lattices of regular hexagons
with two vertical sides.
"""

from hexlattice.geometry import (
    area_to_side,
    height_to_side,
    hexagon_polygon,
    side_to_area,
    side_to_height,
    side_to_width,
    width_to_side,
)
from hexlattice.lattice import (
    HexLattice,
    LatticePlain,
    LatticeWithGeometry,
    add_geometries,
    has_geometries,
    make_lattice,
    remove_geometries,
)
from hexlattice.bounds import AxisBound, BoundMode, filter_window, window
from hexlattice.accessors import head, shapes, tail
from hexlattice.summary import LatticeSummary, lattice_epsg, summary
from hexlattice.config import PlotConfig
from hexlattice.plotting import plot_lattice

__version__ = "0.1.0"

__all__ = [
    # Dimensions
    'height_to_side', 'side_to_height',
    'side_to_area', 'area_to_side',
    'side_to_width', 'width_to_side',
    'hexagon_polygon',

    # Lattices
    'HexLattice', 'LatticePlain', 'LatticeWithGeometry',
    'make_lattice', 'has_geometries', 'remove_geometries', 'add_geometries',

    # Windows
    'AxisBound', 'BoundMode', 'filter_window', 'window',

    # Accessors
    'shapes', 'head', 'tail',

    # Summary / plotting
    'LatticeSummary', 'summary', 'lattice_epsg',
    'PlotConfig', 'plot_lattice',
]
