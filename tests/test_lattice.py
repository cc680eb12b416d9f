"""
Tests for hexlattice/lattice.py: construction, validation and the
plain / with-geometry variants.
"""

import math

import geopandas as gpd
import numpy as np
import pandas as pd
import pytest
from pyproj import CRS
from shapely.geometry import Point

from hexlattice import (
    HexLattice,
    LatticePlain,
    LatticeWithGeometry,
    add_geometries,
    has_geometries,
    make_lattice,
    remove_geometries,
)
from hexlattice.lattice import check_lattice

from conftest import centroid_block


class TestMakeLattice:
    def test_plain_variant(self):
        lattice = make_lattice(centroid_block(2, 5), side=1.0)
        assert isinstance(lattice, LatticePlain)
        assert not lattice.has_geometries
        assert len(lattice) == 10

    def test_dimensions_from_side(self):
        lattice = make_lattice(centroid_block(2, 2, side=2.0), side=2.0)
        assert lattice.side == 2.0
        assert lattice.width == pytest.approx(2 * math.sqrt(3))
        assert lattice.area == pytest.approx(10.392305, rel=1e-6)

    def test_dimensions_from_width(self):
        lattice = make_lattice(centroid_block(2, 2), width=math.sqrt(3))
        assert lattice.side == pytest.approx(1.0)
        assert lattice.area == pytest.approx(2.598076, rel=1e-6)

    def test_bounds_default_to_extent(self):
        df = pd.DataFrame({'xc': [3.0, -1.0, 2.0], 'yc': [0.5, 4.0, -2.0]})
        lattice = make_lattice(df, side=1.0)
        assert lattice.xbnds == (-1.0, 3.0)
        assert lattice.ybnds == (-2.0, 4.0)

    def test_explicit_bounds_kept(self):
        lattice = make_lattice(centroid_block(2, 2), side=1.0,
                               xbnds=[-10, 10], ybnds=(0, 5))
        assert lattice.xbnds == (-10.0, 10.0)
        assert lattice.ybnds == (0.0, 5.0)

    def test_input_not_shared(self):
        df = centroid_block(2, 2)
        lattice = make_lattice(df, side=1.0)
        df.loc[0, 'xc'] = 999.0
        assert lattice.shapes.loc[0, 'xc'] != 999.0

    def test_geodataframe_gives_geometry_variant(self):
        df = centroid_block(1, 3)
        gdf = gpd.GeoDataFrame(df, geometry=[Point(x, y).buffer(0.5)
                                             for x, y in zip(df.xc, df.yc)],
                               crs="EPSG:4326")
        lattice = make_lattice(gdf, side=1.0)
        assert isinstance(lattice, LatticeWithGeometry)
        assert lattice.crs.to_epsg() == 4326

    def test_repr(self, plain_lattice):
        assert "LatticePlain(num_hexagons=10" in repr(plain_lattice)


class TestMakeLatticeErrors:
    def test_needs_one_size(self):
        with pytest.raises(ValueError, match="Exactly one"):
            make_lattice(centroid_block(1, 1))
        with pytest.raises(ValueError, match="Exactly one"):
            make_lattice(centroid_block(1, 1), side=1.0, width=2.0)

    @pytest.mark.parametrize("side", [0.0, -1.0])
    def test_non_positive_side(self, side):
        with pytest.raises(ValueError, match="positive"):
            make_lattice(centroid_block(1, 1), side=side)

    def test_missing_centroid_columns(self):
        with pytest.raises(ValueError, match="yc"):
            make_lattice(pd.DataFrame({'xc': [0.0]}), side=1.0)

    def test_unsorted_bounds(self):
        with pytest.raises(ValueError, match="ascending"):
            make_lattice(centroid_block(1, 2), side=1.0, xbnds=(5, 1))

    def test_bounds_wrong_length(self):
        with pytest.raises(ValueError, match="two elements"):
            make_lattice(centroid_block(1, 2), side=1.0, ybnds=(0, 1, 2))

    def test_empty_table_needs_bounds(self):
        empty = pd.DataFrame({'xc': pd.Series(dtype=float), 'yc': pd.Series(dtype=float)})
        with pytest.raises(ValueError, match="empty"):
            make_lattice(empty, side=1.0)
        lattice = make_lattice(empty, side=1.0, xbnds=(0, 1), ybnds=(0, 1))
        assert len(lattice) == 0

    def test_partial_geometries_rejected(self):
        df = centroid_block(1, 3)
        gdf = gpd.GeoDataFrame(df, geometry=[Point(0, 0).buffer(1), None, Point(2, 0).buffer(1)])
        with pytest.raises(ValueError, match="all rows or for none"):
            make_lattice(gdf, side=1.0)

    def test_all_null_geometries_give_plain_lattice(self):
        df = centroid_block(1, 2)
        gdf = gpd.GeoDataFrame(df, geometry=[None, None], crs="EPSG:28992")
        lattice = make_lattice(gdf, side=1.0)
        assert isinstance(lattice, LatticePlain)
        assert not isinstance(lattice.shapes, gpd.GeoDataFrame)
        assert list(lattice.shapes.columns) == ['hex_id', 'xc', 'yc']
        assert lattice.crs is None


class TestCheckLattice:
    @pytest.mark.parametrize("obj", [None, pd.DataFrame({'xc': [0], 'yc': [0]}), {"shapes": []}])
    def test_rejects_non_lattice(self, obj):
        with pytest.raises(TypeError, match="HexLattice"):
            check_lattice(obj, "test")

    def test_accepts_lattice(self, plain_lattice):
        assert check_lattice(plain_lattice) is plain_lattice


class TestGeometries:
    def test_has_geometries(self, plain_lattice, geo_lattice):
        assert has_geometries(plain_lattice) is False
        assert has_geometries(geo_lattice) is True

    def test_has_geometries_type_check(self):
        with pytest.raises(TypeError):
            has_geometries("not a lattice")

    def test_add_geometries(self, plain_lattice):
        lattice = add_geometries(plain_lattice, crs="EPSG:28992")
        assert isinstance(lattice, LatticeWithGeometry)
        assert lattice.crs == CRS.from_epsg(28992)
        assert len(lattice) == len(plain_lattice)
        np.testing.assert_allclose(lattice.shapes.geometry.area, lattice.area)

    def test_polygons_centred_on_centroids(self, geo_lattice):
        shapes = geo_lattice.shapes
        centroids = shapes.geometry.centroid
        assert (centroids.x - shapes['xc']).abs().max() < 1e-9
        assert (centroids.y - shapes['yc']).abs().max() < 1e-9

    def test_add_geometries_does_not_mutate(self, plain_lattice):
        add_geometries(plain_lattice)
        assert not plain_lattice.has_geometries
        assert 'geometry' not in plain_lattice.shapes.columns

    def test_add_geometries_keeps_crs(self, geo_lattice):
        rebuilt = add_geometries(geo_lattice)
        assert rebuilt.crs == geo_lattice.crs
        assert list(rebuilt.shapes.columns) == list(geo_lattice.shapes.columns)

    def test_remove_geometries(self, geo_lattice):
        plain = remove_geometries(geo_lattice)
        assert isinstance(plain, LatticePlain)
        assert not isinstance(plain.shapes, gpd.GeoDataFrame)
        assert 'geometry' not in plain.shapes.columns
        assert plain.side == geo_lattice.side
        assert plain.xbnds == geo_lattice.xbnds
        assert plain.crs is None
        # original untouched
        assert 'geometry' in geo_lattice.shapes.columns

    def test_remove_geometries_on_plain(self, plain_lattice):
        assert remove_geometries(plain_lattice) is plain_lattice


class TestVariantInvariants:
    """The variant classes enforce the geometry split on direct construction."""

    @staticmethod
    def _dims(lattice):
        return dict(width=lattice.width, side=lattice.side, area=lattice.area,
                    xbnds=lattice.xbnds, ybnds=lattice.ybnds)

    def test_base_not_instantiable(self, plain_lattice):
        with pytest.raises(TypeError):
            HexLattice(shapes=plain_lattice.shapes, **self._dims(plain_lattice))

    def test_plain_rejects_geodataframe(self, geo_lattice):
        with pytest.raises(ValueError, match="LatticePlain"):
            LatticePlain(shapes=geo_lattice.shapes, **self._dims(geo_lattice))

    def test_plain_accepts_dataframe(self, plain_lattice):
        lattice = LatticePlain(shapes=plain_lattice.shapes, **self._dims(plain_lattice))
        assert lattice.crs is None
        assert 'geometry' not in lattice.head(2).columns

    def test_geometry_variant_rejects_dataframe(self, plain_lattice):
        with pytest.raises(ValueError, match="active geometry"):
            LatticeWithGeometry(shapes=plain_lattice.shapes, **self._dims(plain_lattice))

    def test_geometry_variant_rejects_missing_rows(self, geo_lattice):
        gdf = geo_lattice.shapes.copy()
        gdf.loc[gdf.index[0], 'geometry'] = None
        with pytest.raises(ValueError, match="1 of 50 hexagons"):
            LatticeWithGeometry(shapes=gdf, **self._dims(geo_lattice))

    def test_geometry_variant_accepts_full_table(self, geo_lattice):
        lattice = LatticeWithGeometry(shapes=geo_lattice.shapes, **self._dims(geo_lattice))
        assert lattice.crs == geo_lattice.crs
        assert 'geometry' not in lattice.head(2).columns
