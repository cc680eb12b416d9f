"""
Table accessors for hexagon lattices.

``shapes`` is the preferred way to get at a lattice's table. ``head`` and
``tail`` return bounded views that drop the geometry column unless it is
asked for, so the output degrades to a plain DataFrame by default.
"""

import pandas as pd

from hexlattice.lattice import HexLattice, check_lattice, remove_geometries


def shapes(lattice: HexLattice) -> pd.DataFrame:
    """Return the lattice table (a GeoDataFrame if it has geometries)."""
    return check_lattice(lattice, "shapes").shapes


def _table_for_view(lattice: HexLattice, geometry: bool) -> pd.DataFrame:
    if lattice.has_geometries and not geometry:
        return remove_geometries(lattice).shapes
    return lattice.shapes


def head(lattice: HexLattice, n: int = 6, geometry: bool = False) -> pd.DataFrame:
    """
    First rows of the lattice table.

    Args:
        lattice: Hexagon lattice.
        n: Number of rows to return or, if negative, the number of trailing
            rows to omit.
        geometry: Include the geometry column if the lattice has one.

    Returns:
        DataFrame, or GeoDataFrame when ``geometry`` is True and the lattice
        has geometries.
    """
    check_lattice(lattice, "head")
    return _table_for_view(lattice, geometry).head(n)


def tail(lattice: HexLattice, n: int = 6, geometry: bool = False) -> pd.DataFrame:
    """
    Last rows of the lattice table.

    Args:
        lattice: Hexagon lattice.
        n: Number of rows to return or, if negative, the number of leading
            rows to omit.
        geometry: Include the geometry column if the lattice has one.

    Returns:
        DataFrame, or GeoDataFrame when ``geometry`` is True and the lattice
        has geometries.
    """
    check_lattice(lattice, "tail")
    return _table_for_view(lattice, geometry).tail(n)
