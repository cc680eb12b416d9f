"""
Brief description of a hexagon lattice.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, fields
from typing import Optional, Tuple

from hexlattice.lattice import HexLattice, check_lattice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LatticeSummary:
    """Lattice metadata, in report order."""
    num_hexagons: int
    has_geometries: bool
    width: float
    side: float
    area: float
    xbnds: Tuple[float, float]
    ybnds: Tuple[float, float]
    epsg: Optional[int] = None

    def to_dict(self) -> 'OrderedDict[str, object]':
        return OrderedDict((f.name, getattr(self, f.name)) for f in fields(self))

    def format(self) -> str:
        """Human-readable report."""
        epsg = self.epsg if self.epsg is not None else "undefined"
        lines = [
            f"Lattice of {self.num_hexagons} hexagons",
            f"  Geometries created: {self.has_geometries}",
            f"  Hexagon width: {self.width:g}",
            f"  Hexagon side length: {self.side:g}",
            f"  Hexagon area: {self.area:g}",
            f"  Bounds in X direction: {self.xbnds[0]:g} {self.xbnds[1]:g}",
            f"  Bounds in Y direction: {self.ybnds[0]:g} {self.ybnds[1]:g}",
            f"  Coordinate reference system (EPSG code): {epsg}",
        ]
        return "\n".join(lines)


def lattice_epsg(lattice: HexLattice) -> Optional[int]:
    """EPSG code of the lattice geometry CRS, or None."""
    crs = lattice.crs
    if crs is None:
        return None
    return crs.to_epsg()


def summary(lattice: HexLattice, verbose: bool = True) -> LatticeSummary:
    """
    Describe a hexagon lattice.

    Prints the report to stdout when ``verbose`` and always returns the
    structured record.

    Args:
        lattice: Hexagon lattice.
        verbose: Print the report.

    Returns:
        LatticeSummary
    """
    check_lattice(lattice, "summary")

    record = LatticeSummary(
        num_hexagons=len(lattice.shapes),
        has_geometries=lattice.has_geometries,
        width=lattice.width,
        side=lattice.side,
        area=lattice.area,
        xbnds=tuple(lattice.xbnds),
        ybnds=tuple(lattice.ybnds),
        epsg=lattice_epsg(lattice),
    )

    if verbose:
        print(record.format())
    logger.debug(f"Summarised lattice: {record}")

    return record
