"""
Geographic classification of a mark position: country and tectonic plate.

Both classifiers are plain callables (lat, lon) -> str so any other implementation can be
injected into the station resolver.
"""

import logging
from typing import List, Sequence, Tuple, Union, Optional

# deps
import numpy as np
import geopandas as gpd
import country_converter as coco
from shapely.geometry import Point

# app
from .Utils import lla2ecef

logger = logging.getLogger(__name__)


class NearestCountryClassifier:
    """
    Country whose reference point is closest to the mark, measured in the equatorial (X, Y) plane
    of the geocentric frame.
    """

    def __init__(self, reference_points: Sequence[Tuple[str, float, float]], unknown: str = 'Unknown'):
        self.names: List[str] = [p[0] for p in reference_points]
        self.unknown = unknown

        if self.names:
            lla = np.array([[p[1], p[2], 0.0] for p in reference_points])
            x, y, _ = lla2ecef(lla)
            self.xy = np.column_stack((x, y))
        else:
            self.xy = np.zeros((0, 2))

    def __call__(self, lat: float, lon: float) -> str:
        if not self.names:
            return self.unknown

        x, y, _ = lla2ecef([lat, lon, 0.0])
        dist = np.sqrt(np.square(self.xy[:, 0] - x[0]) + np.square(self.xy[:, 1] - y[0]))

        # argmin keeps the first reference point on ties
        return self.names[int(np.argmin(dist))]


class PolygonClassifier:
    """
    Point in polygon lookup over a GeoDataFrame (tectonic plates such as PB2002_plates.json or a
    Natural Earth country shapefile).
    """

    def __init__(self, source: Union[str, gpd.GeoDataFrame], name_column: str, default: str = ''):
        if isinstance(source, gpd.GeoDataFrame):
            self.polygons = source
        else:
            logger.debug(f'Loading polygons from {source}')
            self.polygons = gpd.read_file(source)

        self.name_column = name_column
        self.default = default

    def __call__(self, lat: float, lon: float) -> str:
        point = Point(lon, lat)  # Note: Point takes (lon, lat)

        match = self.polygons[self.polygons.contains(point)]

        if not match.empty:
            return str(match.iloc[0][self.name_column])

        return self.default


def country_name(iso3: Optional[str], default: str = 'Unknown') -> str:
    """short country name from an ISO 3166 alpha-3 code"""
    if not iso3:
        return default

    name = coco.convert(names=iso3, src='ISO3', to='name_short', not_found='')

    return name if isinstance(name, str) and name else default


class CountryPolygonClassifier(PolygonClassifier):
    """Country lookup on a polygon layer keyed by ISO_A3, reported by short name"""

    def __init__(self, source: Union[str, gpd.GeoDataFrame], iso_column: str = 'ISO_A3',
                 default: str = 'Unknown'):
        super().__init__(source, iso_column, default='')
        self.unknown = default

    def __call__(self, lat: float, lon: float) -> str:
        return country_name(super().__call__(lat, lon), self.unknown)


def unclassified(lat: float, lon: float) -> str:
    return ''


def build_classifiers(config):
    """country and tectonic plate classifiers described by a SiteLogConfig"""
    if config.geography.countries_file:
        country = CountryPolygonClassifier(config.geography.countries_file,
                                           config.geography.country_iso_column,
                                           config.countries.unknown)
    else:
        country = NearestCountryClassifier(config.countries.reference_points, config.countries.unknown)

    if config.geography.plates_file:
        plate = PolygonClassifier(config.geography.plates_file, config.geography.plate_name_column)
    else:
        plate = unclassified

    return country, plate
