"""
Quick plot of hexagon edges.

A short cut for drawing the polygons of a lattice with geopandas/matplotlib.
Large lattices are slow to draw and the hexagons too small to see; use the
``xbnds`` / ``ybnds`` arguments to draw only part of the lattice.
"""

import logging
import warnings
from typing import Optional

import matplotlib.pyplot as plt

from hexlattice.bounds import window
from hexlattice.config import PlotConfig
from hexlattice.lattice import HexLattice, check_lattice

logger = logging.getLogger(__name__)


def plot_lattice(
    lattice: HexLattice,
    xbnds=None,
    ybnds=None,
    ax: Optional[plt.Axes] = None,
    config: Optional[PlotConfig] = None,
) -> Optional[plt.Axes]:
    """
    Draw hexagon edges as unfilled polygons.

    If the lattice has no geometries a warning is issued and None returned.

    Args:
        lattice: Hexagon lattice.
        xbnds: Minimum and maximum X of hexagon centroids to include, or an
            AxisBound. None means the full range when ``ybnds`` is also None,
            otherwise the lattice's stored X bounds.
        ybnds: Same for Y.
        ax: Axes to draw on. A new figure is created when None.
        config: Styling; defaults to PlotConfig().

    Returns:
        The matplotlib Axes, or None when there is nothing to plot.
    """
    check_lattice(lattice, "plot_lattice")

    if not lattice.has_geometries:
        warnings.warn("Nothing to plot. Hexagon geometries not created yet", UserWarning)
        return None

    config = config or PlotConfig()
    dat = window(lattice, xbnds, ybnds)

    if ax is None:
        _, ax = plt.subplots(figsize=config.figsize)

    if len(dat) == 0:
        logger.info("No hexagon centroids inside the requested bounds")
    else:
        dat.plot(ax=ax, facecolor='none', edgecolor=config.edgecolor,
                 linewidth=config.linewidth)
        logger.debug(f"Plotted {len(dat)} of {len(lattice)} hexagons")

    ax.set_aspect(config.aspect)
    if config.title:
        ax.set_title(config.title)

    return ax
