"""
Unit tests for the country and tectonic plate classifiers.
"""

import geopandas as gpd
from shapely.geometry import Polygon

from sitelogs.core.sitelog_config import SiteLogConfig
from sitelogs.geography import (NearestCountryClassifier, PolygonClassifier, CountryPolygonClassifier,
                                country_name, unclassified, build_classifiers)


def plates():
    return gpd.GeoDataFrame({'PlateName': ['Pacific', 'Australia']},
                            geometry=[Polygon([(170, -50), (180, -50), (180, -35), (170, -35)]),
                                      Polygon([(160, -50), (170, -50), (170, -35), (160, -35)])],
                            crs='EPSG:4326')


class TestNearestCountry:
    """Test the nearest reference point classifier."""

    def test_default_reference_points(self):
        classifier = NearestCountryClassifier(SiteLogConfig().countries.reference_points)

        assert classifier(-41.3, 174.8) == 'New Zealand'
        assert classifier(-21.1, -175.2) == 'Tonga'
        assert classifier(-13.8, -171.8) == 'Samoa'
        assert classifier(-19.05, -169.9) == 'Niue'

    def test_no_reference_points(self):
        assert NearestCountryClassifier([], unknown='Unknown')(-41.0, 175.0) == 'Unknown'

    def test_tie_keeps_first(self):
        classifier = NearestCountryClassifier([('A', -40.0, 174.0), ('B', -40.0, 174.0)])

        assert classifier(-41.0, 175.0) == 'A'


class TestPolygonClassifier:
    """Test point in polygon lookups."""

    def test_plate(self):
        classifier = PolygonClassifier(plates(), 'PlateName')

        assert classifier(-41.0, 175.0) == 'Pacific'
        assert classifier(-41.0, 165.0) == 'Australia'

    def test_outside(self):
        assert PolygonClassifier(plates(), 'PlateName', default='none')(10.0, 10.0) == 'none'

    def test_country_polygons(self):
        countries = gpd.GeoDataFrame({'ISO_A3': ['NZL']},
                                     geometry=[Polygon([(165, -48), (179, -48), (179, -34), (165, -34)])],
                                     crs='EPSG:4326')
        classifier = CountryPolygonClassifier(countries)

        assert classifier(-41.0, 175.0) == 'New Zealand'
        assert classifier(10.0, 10.0) == 'Unknown'


class TestCountryName:
    """Test ISO code conversion."""

    def test_known(self):
        assert country_name('TON') == 'Tonga'

    def test_empty(self):
        assert country_name('', 'Unknown') == 'Unknown'
        assert country_name(None, 'X') == 'X'


class TestBuildClassifiers:
    """Test classifier construction from the configuration."""

    def test_defaults(self):
        country, plate = build_classifiers(SiteLogConfig())

        assert isinstance(country, NearestCountryClassifier)
        assert plate is unclassified
        assert plate(-41.0, 175.0) == ''

    def test_polygon_files(self, tmp_path):
        filename = str(tmp_path / 'plates.geojson')
        plates().to_file(filename, driver='GeoJSON')

        config = SiteLogConfig({'geography': {'plates_file': filename}})
        _, plate = build_classifiers(config)

        assert plate(-41.0, 175.0) == 'Pacific'
