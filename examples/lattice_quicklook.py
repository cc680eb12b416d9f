"""
Example Usage: summary, head/tail and windowed plot of a hexagon lattice

Builds a small rectangular block of pointy-top hexagon centroids in
RD New (EPSG:28992) metres, attaches polygons and writes a plot of a window
of the lattice to disk.

Usage:
    python examples/lattice_quicklook.py --side 250 --rows 12 --cols 16
    python examples/lattice_quicklook.py --config plot.yaml --output hexes.png
"""

import argparse
import logging
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import pandas as pd

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from hexlattice import (
    PlotConfig,
    add_geometries,
    make_lattice,
    plot_lattice,
    side_to_width,
)
from hexlattice.geometry import log_dimension_summary

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def centroid_block(side: float, rows: int, cols: int, x0: float, y0: float) -> pd.DataFrame:
    """Centroids of a rows x cols block of pointy-top hexagons."""
    width = side_to_width(side)
    records = []
    for r in range(rows):
        offset = width / 2 if r % 2 else 0.0
        for c in range(cols):
            records.append({
                'hex_id': r * cols + c,
                'xc': x0 + c * width + offset,
                'yc': y0 + r * 1.5 * side,
            })
    return pd.DataFrame(records)


def main():
    parser = argparse.ArgumentParser(description="Quick look at a hexagon lattice")
    parser.add_argument('--side', type=float, default=250.0, help='Hexagon side length (m)')
    parser.add_argument('--rows', type=int, default=12)
    parser.add_argument('--cols', type=int, default=16)
    parser.add_argument('--config', type=Path, default=None, help='PlotConfig YAML file')
    parser.add_argument('--output', type=Path, default=Path('hex_lattice.png'))
    args = parser.parse_args()

    log_dimension_summary(args.side)

    df = centroid_block(args.side, args.rows, args.cols, x0=80_000, y0=450_000)
    lattice = add_geometries(make_lattice(df, side=args.side), crs="EPSG:28992")

    info = lattice.summary()
    logger.info(f"Lattice has {info.num_hexagons} hexagons, EPSG {info.epsg}")

    print(lattice.head(3))
    print(lattice.tail(3, geometry=True))

    config = PlotConfig.from_yaml(args.config) if args.config else PlotConfig()
    xmid = sum(lattice.xbnds) / 2
    ax = plot_lattice(lattice, xbnds=(lattice.xbnds[0], xmid), config=config)

    ax.figure.savefig(args.output, dpi=150, bbox_inches='tight')
    plt.close(ax.figure)
    logger.info(f"Saved plot to {args.output}")


if __name__ == "__main__":
    main()
