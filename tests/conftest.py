"""Shared fixtures for hexlattice tests."""

import math

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from hexlattice import add_geometries, make_lattice


def centroid_block(rows: int, cols: int, side: float = 1.0) -> pd.DataFrame:
    """Centroids of a rows x cols block of pointy-top hexagons at the origin."""
    width = math.sqrt(3) * side
    records = []
    for r in range(rows):
        offset = width / 2 if r % 2 else 0.0
        for c in range(cols):
            records.append({
                'hex_id': r * cols + c,
                'xc': c * width + offset,
                'yc': r * 1.5 * side,
            })
    return pd.DataFrame(records)


@pytest.fixture()
def plain_lattice():
    """10 hexagons (2 rows x 5 cols), side 1, no geometries."""
    return make_lattice(centroid_block(2, 5), side=1.0)


@pytest.fixture()
def geo_lattice():
    """50 hexagons (5 rows x 10 cols), side 1, polygons in EPSG:28992."""
    return add_geometries(make_lattice(centroid_block(5, 10), side=1.0), crs="EPSG:28992")


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')
