import os
import json
import math
import datetime
from typing import Union, Optional

# deps
import numpy
from importlib.metadata import version, PackageNotFoundError

DATETIME_FORMAT = '%Y-%m-%dT%H:%MZ'
DATE_FORMAT = '%Y-%m-%d'


def add_version_argument(parser):
    try:
        __version__ = version('sitelogs')
    except PackageNotFoundError:
        __version__ = '0.0.0'
    parser.add_argument('-version', '--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def markID(m):
    """network.code identifier of a mark"""
    return "%s.%s" % (m.network, m.code)


def lla2ecef(llaArr):
    # convert LLA coordinates to ECEF
    # test data : test_coord = [-66.8765400174 23.876539914 999.998386689]
    # expected result : 2297292.91, 1016894.94, -5843939.62

    llaArr = numpy.atleast_1d(llaArr)

    # transpose to work on both vectors and scalars
    lat = llaArr.T[0]
    lon = llaArr.T[1]
    alt = llaArr.T[2]

    rad_lat = lat * (numpy.pi / 180.0)
    rad_lon = lon * (numpy.pi / 180.0)

    # WGS84
    a = 6378137.0
    finv = 298.257223563
    f = 1 / finv
    e2 = 1 - (1 - f) * (1 - f)
    v = a / numpy.sqrt(1 - e2 * numpy.sin(rad_lat) * numpy.sin(rad_lat))

    x = (v + alt) * numpy.cos(rad_lat) * numpy.cos(rad_lon)
    y = (v + alt) * numpy.cos(rad_lat) * numpy.sin(rad_lon)
    z = (v * (1 - e2) + alt) * numpy.sin(rad_lat)

    return numpy.round(x, 4).ravel(), numpy.round(y, 4).ravel(), numpy.round(z, 4).ravel()


def to_float(value) -> Optional[float]:
    """finite float or None"""
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None

    return f if math.isfinite(f) else None


def format_float(value, fmt: str = '') -> str:
    """format a number, empty string if it can't be interpreted as one"""
    f = to_float(value)
    if f is None:
        return ''

    if not fmt:
        # shortest representation that round trips
        s = repr(f)
        return s[:-2] if s.endswith('.0') else s

    return format(f, fmt)


def format_dms(value) -> str:
    """decimal degrees as +DDDMMSS.SS (empty if not a number)"""
    f = to_float(value)
    if f is None:
        return ''

    m = abs(f - float(int(f))) * 60.0
    return '%+3d%02d%05.2f' % (int(f), int(m), (m - float(int(m))) * 60.0)


def format_datetime(value: Optional[datetime.datetime], fmt: str = DATETIME_FORMAT) -> str:
    return value.strftime(fmt) if value else ''


def load_json(input_json: Union[str, dict] = None):
    """load json file, string, or dict, will always return dict"""
    if isinstance(input_json, dict):
        return input_json
    elif isinstance(input_json, str) and os.path.isfile(input_json):
        with open(input_json, 'r') as f:
            return json.load(f)
    elif isinstance(input_json, str):
        return json.loads(input_json)
    else:
        raise ValueError("Either filepath or json_dict or json_string must be provided")
