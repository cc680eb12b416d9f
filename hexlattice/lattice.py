"""
Hexagon lattice types.

A lattice is a table of same-size regular hexagons (two vertical sides)
described by their centroids, plus the shared hexagon dimensions and the
configured centroid bounds. Two variants exist:

- LatticePlain: ``shapes`` is a pandas DataFrame, no geometries
- LatticeWithGeometry: ``shapes`` is a GeoDataFrame with one polygon per row
  and (optionally) a CRS

Lattices are built with ``make_lattice`` and never mutated afterwards;
``remove_geometries`` / ``add_geometries`` return new objects.

Usage::

    df = pd.DataFrame({'xc': [...], 'yc': [...]})
    lattice = make_lattice(df, side=100.0)
    lattice = add_geometries(lattice, crs="EPSG:28992")
    lattice.summary()
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Tuple

import geopandas as gpd
import numpy as np
import pandas as pd

from hexlattice.geometry import (
    hexagon_polygon,
    side_to_area,
    side_to_width,
    width_to_side,
)

logger = logging.getLogger(__name__)

CENTROID_COLUMNS = ('xc', 'yc')

Bounds = Tuple[float, float]


@dataclass(eq=False, repr=False)
class HexLattice(ABC):
    """Base class for hexagon lattices.

    Attributes:
        shapes: Table of hexagon records with at least ``xc`` and ``yc``.
        width: Hexagon width (distance between the vertical sides).
        side: Hexagon side length.
        area: Area of a single hexagon (not the lattice total).
        xbnds: (min, max) bounds of hexagon centroids in X.
        ybnds: (min, max) bounds of hexagon centroids in Y.
    """

    shapes: pd.DataFrame
    width: float
    side: float
    area: float
    xbnds: Bounds
    ybnds: Bounds

    has_geometries: ClassVar[bool] = False

    def __len__(self) -> int:
        return len(self.shapes)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(num_hexagons={len(self)}, "
                f"side={self.side:g}, xbnds={self.xbnds}, ybnds={self.ybnds})")

    @property
    @abstractmethod
    def crs(self):
        """CRS of the geometry column, or None."""

    # Convenience methods delegating to the module-level functions

    def head(self, n: int = 6, geometry: bool = False) -> pd.DataFrame:
        from hexlattice.accessors import head
        return head(self, n, geometry=geometry)

    def tail(self, n: int = 6, geometry: bool = False) -> pd.DataFrame:
        from hexlattice.accessors import tail
        return tail(self, n, geometry=geometry)

    def summary(self, verbose: bool = True):
        from hexlattice.summary import summary
        return summary(self, verbose=verbose)

    def plot(self, xbnds=None, ybnds=None, **kwargs):
        from hexlattice.plotting import plot_lattice
        return plot_lattice(self, xbnds=xbnds, ybnds=ybnds, **kwargs)


@dataclass(eq=False, repr=False)
class LatticePlain(HexLattice):
    """Lattice whose table carries no geometries."""

    has_geometries: ClassVar[bool] = False

    def __post_init__(self):
        if _active_geometry_name(self.shapes) is not None:
            raise ValueError(
                "LatticePlain cannot hold a GeoDataFrame with an active geometry "
                "column; use LatticeWithGeometry or remove_geometries()"
            )

    @property
    def crs(self):
        return None


@dataclass(eq=False, repr=False)
class LatticeWithGeometry(HexLattice):
    """Lattice whose table is a GeoDataFrame with a polygon per hexagon."""

    shapes: gpd.GeoDataFrame

    has_geometries: ClassVar[bool] = True

    def __post_init__(self):
        if _active_geometry_name(self.shapes) is None:
            raise ValueError("LatticeWithGeometry needs a GeoDataFrame with an active geometry column")
        geoms = self.shapes.geometry
        n_missing = int((geoms.isna() | geoms.is_empty).sum())
        if n_missing:
            raise ValueError(
                f"{n_missing} of {len(self.shapes)} hexagons have no geometry; "
                f"a lattice has geometries for all rows or for none"
            )

    @property
    def crs(self):
        return self.shapes.crs

    @property
    def geometry_column(self) -> str:
        return self.shapes.geometry.name


# ============================================================================
# Validation helpers
# ============================================================================

def check_lattice(obj, caller: str = "operation") -> HexLattice:
    """Raise TypeError unless ``obj`` is a hexagon lattice."""
    if not isinstance(obj, HexLattice):
        raise TypeError(
            f"{caller} expects a HexLattice, got {type(obj).__name__}"
        )
    return obj


def _active_geometry_name(df: pd.DataFrame) -> Optional[str]:
    """Name of the active geometry column of a GeoDataFrame, else None."""
    if not isinstance(df, gpd.GeoDataFrame):
        return None
    try:
        return df.geometry.name
    except AttributeError:
        # GeoDataFrame without an active geometry column
        return None


def _check_bounds(bnds: Optional[Sequence[float]], values: pd.Series, name: str) -> Bounds:
    """Validate a (min, max) pair, deriving it from ``values`` if missing."""
    if bnds is None:
        if len(values) == 0:
            raise ValueError(f"Cannot derive {name} from an empty table; pass it explicitly")
        return float(values.min()), float(values.max())

    bnds = tuple(bnds)
    if len(bnds) != 2:
        raise ValueError(f"{name} must have exactly two elements, got {len(bnds)}")
    lo, hi = float(bnds[0]), float(bnds[1])
    if lo > hi:
        raise ValueError(f"{name} must be sorted ascending, got ({lo}, {hi})")
    return lo, hi


# ============================================================================
# Construction
# ============================================================================

def make_lattice(
    shapes: pd.DataFrame,
    side: Optional[float] = None,
    width: Optional[float] = None,
    xbnds: Optional[Sequence[float]] = None,
    ybnds: Optional[Sequence[float]] = None,
) -> HexLattice:
    """
    Wrap a table of hexagon centroids as a lattice.

    Exactly one of ``side`` and ``width`` must be given; the other dimension
    and the per-hexagon area are derived from it. When ``shapes`` is a
    GeoDataFrame with an active geometry column a LatticeWithGeometry is
    returned, otherwise a LatticePlain. A geometry column that is missing on
    every row is dropped and gives a LatticePlain.

    Args:
        shapes: DataFrame or GeoDataFrame with ``xc`` and ``yc`` columns.
        side: Hexagon side length.
        width: Hexagon width (distance between the vertical sides).
        xbnds: Configured (min, max) centroid bounds in X. Defaults to the
            centroid extent of ``shapes``.
        ybnds: Same for Y.

    Returns:
        LatticePlain or LatticeWithGeometry

    Raises:
        ValueError: On missing columns, invalid sizes or bounds, or when only
            some rows carry a geometry.
    """
    if (side is None) == (width is None):
        raise ValueError("Exactly one of side or width must be given")
    if side is None:
        side = width_to_side(width)
    side = float(side)
    if not side > 0:
        raise ValueError(f"Hexagon size must be positive, got side={side}")

    missing = [col for col in CENTROID_COLUMNS if col not in shapes.columns]
    if missing:
        raise ValueError(f"Lattice table is missing centroid column(s): {missing}")

    dims = dict(
        width=side_to_width(side),
        side=side,
        area=side_to_area(side),
        xbnds=_check_bounds(xbnds, shapes['xc'], 'xbnds'),
        ybnds=_check_bounds(ybnds, shapes['yc'], 'ybnds'),
    )

    geom_name = _active_geometry_name(shapes)
    if geom_name is None:
        logger.debug(f"Creating plain lattice of {len(shapes)} hexagons (side={side:g})")
        return LatticePlain(shapes=pd.DataFrame(shapes).copy(), **dims)

    geoms = shapes.geometry
    if len(shapes) and (geoms.isna() | geoms.is_empty).all():
        logger.debug(f"All {len(shapes)} geometries are missing; creating plain lattice")
        table = pd.DataFrame(shapes.drop(columns=geom_name))
        return LatticePlain(shapes=table, **dims)

    logger.debug(f"Creating lattice of {len(shapes)} hexagons with geometries "
                 f"(side={side:g}, crs={shapes.crs})")
    return LatticeWithGeometry(shapes=shapes.copy(), **dims)


def has_geometries(lattice: HexLattice) -> bool:
    """True if the lattice carries hexagon polygons."""
    return check_lattice(lattice, "has_geometries").has_geometries


def remove_geometries(lattice: HexLattice) -> LatticePlain:
    """Return a plain copy of the lattice with the geometry column dropped."""
    check_lattice(lattice, "remove_geometries")
    if not lattice.has_geometries:
        return lattice

    table = pd.DataFrame(lattice.shapes.drop(columns=lattice.geometry_column))
    return LatticePlain(
        shapes=table,
        width=lattice.width,
        side=lattice.side,
        area=lattice.area,
        xbnds=lattice.xbnds,
        ybnds=lattice.ybnds,
    )


def add_geometries(lattice: HexLattice, crs=None) -> LatticeWithGeometry:
    """
    Build a polygon for every hexagon from its centroid and the lattice side.

    Existing geometries are replaced. When ``crs`` is None the lattice's
    current CRS (if any) is kept.

    Args:
        lattice: Lattice to attach geometries to.
        crs: Anything accepted by ``pyproj.CRS.from_user_input``.

    Returns:
        LatticeWithGeometry
    """
    check_lattice(lattice, "add_geometries")
    if crs is None:
        crs = lattice.crs

    table = remove_geometries(lattice).shapes
    polygons = [
        hexagon_polygon(xc, yc, lattice.side)
        for xc, yc in zip(np.asarray(table['xc'], dtype=float),
                          np.asarray(table['yc'], dtype=float))
    ]
    gdf = gpd.GeoDataFrame(table.copy(), geometry=polygons, crs=crs)

    logger.debug(f"Attached {len(polygons)} hexagon polygons (crs={crs})")
    return LatticeWithGeometry(
        shapes=gdf,
        width=lattice.width,
        side=lattice.side,
        area=lattice.area,
        xbnds=lattice.xbnds,
        ybnds=lattice.ybnds,
    )
