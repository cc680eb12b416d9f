"""
Centroid window filtering for hexagon lattices.

A window restricts a lattice table to the hexagons whose centroid lies inside
a rectangle, bounds inclusive. Each axis is described by an ``AxisBound``:

- EXPLICIT: caller-supplied (min, max)
- STORED: the lattice's configured ``xbnds`` / ``ybnds``
- DATA_EXTENT: the actual min/max of the centroids in the table
- UNRESTRICTED: no limit on that axis

STORED and DATA_EXTENT only select the same rows when the configured bounds
already cover every centroid.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from hexlattice.lattice import HexLattice, check_lattice

logger = logging.getLogger(__name__)

Limits = Optional[Tuple[float, float]]


class BoundMode(Enum):
    EXPLICIT = "explicit"
    STORED = "stored"
    DATA_EXTENT = "data_extent"
    UNRESTRICTED = "unrestricted"


@dataclass(frozen=True)
class AxisBound:
    """How to bound one axis of a centroid window."""
    mode: BoundMode
    limits: Limits = None

    def __post_init__(self):
        if self.mode is BoundMode.EXPLICIT:
            if self.limits is None or len(self.limits) != 2:
                raise ValueError("Explicit bounds need a (min, max) pair")
            lo, hi = float(self.limits[0]), float(self.limits[1])
            if lo > hi:
                raise ValueError(f"Bounds must be sorted ascending, got ({lo}, {hi})")
            object.__setattr__(self, 'limits', (lo, hi))
        elif self.limits is not None:
            raise ValueError(f"{self.mode.value} bounds take no limits")

    @classmethod
    def explicit(cls, lo: float, hi: float) -> 'AxisBound':
        return cls(BoundMode.EXPLICIT, (lo, hi))

    @classmethod
    def stored(cls) -> 'AxisBound':
        return cls(BoundMode.STORED)

    @classmethod
    def data_extent(cls) -> 'AxisBound':
        return cls(BoundMode.DATA_EXTENT)

    @classmethod
    def unrestricted(cls) -> 'AxisBound':
        return cls(BoundMode.UNRESTRICTED)

    def resolve(self, stored: Tuple[float, float], values: pd.Series) -> Limits:
        """Concrete (min, max) limits for this axis, or None for no limit."""
        if self.mode is BoundMode.EXPLICIT:
            return self.limits
        if self.mode is BoundMode.STORED:
            return tuple(stored)
        if self.mode is BoundMode.DATA_EXTENT:
            if len(values) == 0:
                return None
            return float(values.min()), float(values.max())
        return None


def as_axis_bound(value, default: AxisBound) -> AxisBound:
    """Coerce None, a (min, max) pair or an AxisBound to an AxisBound."""
    if value is None:
        return default
    if isinstance(value, AxisBound):
        return value
    if isinstance(value, BoundMode):
        return AxisBound(value)
    values = tuple(value)
    if len(values) != 2:
        raise ValueError(f"Bounds must have exactly two elements, got {len(values)}")
    return AxisBound.explicit(*values)


def filter_window(table: pd.DataFrame, xlim: Limits = None, ylim: Limits = None) -> pd.DataFrame:
    """
    Rows of ``table`` whose centroid lies inside the window.

    Keeps rows with ``xlim[0] <= xc <= xlim[1]`` and
    ``ylim[0] <= yc <= ylim[1]``. A limit of None leaves that axis open.
    The input table is not modified; the result is a copy and keeps the
    table type (GeoDataFrame in, GeoDataFrame out).
    """
    mask = np.ones(len(table), dtype=bool)
    if xlim is not None:
        mask &= table['xc'].between(xlim[0], xlim[1], inclusive='both').to_numpy()
    if ylim is not None:
        mask &= table['yc'].between(ylim[0], ylim[1], inclusive='both').to_numpy()
    return table.loc[mask].copy()


def window(lattice: HexLattice, xbnds=None, ybnds=None) -> pd.DataFrame:
    """
    Filter a copy of the lattice table to a centroid window.

    With both bounds None every row is returned. Otherwise a missing bound
    falls back to the lattice's stored bounds for that axis (STORED), not to
    an open axis. Pass ``AxisBound.unrestricted()`` or
    ``AxisBound.data_extent()`` to ask for those explicitly.

    Args:
        lattice: Hexagon lattice.
        xbnds: (min, max) pair, AxisBound or None.
        ybnds: (min, max) pair, AxisBound or None.

    Returns:
        Filtered copy of ``lattice.shapes``
    """
    check_lattice(lattice, "window")
    table = lattice.shapes

    if xbnds is None and ybnds is None:
        return table.copy()

    xbound = as_axis_bound(xbnds, AxisBound.stored())
    ybound = as_axis_bound(ybnds, AxisBound.stored())

    xlim = xbound.resolve(lattice.xbnds, table['xc'])
    ylim = ybound.resolve(lattice.ybnds, table['yc'])

    result = filter_window(table, xlim, ylim)
    logger.debug(f"Window x={xlim} y={ylim} keeps {len(result)} of {len(table)} hexagons")
    return result
