"""
Unit tests for the numeric and date formatting helpers.
"""

import pytest
from datetime import datetime

from sitelogs.Utils import lla2ecef, to_float, format_float, format_dms, format_datetime, markID

from conftest import mark


class TestFormatting:
    """Test number and date formatting."""

    def test_to_float(self):
        assert to_float('1.5') == 1.5
        assert to_float('abc') is None
        assert to_float(None) is None
        assert to_float(float('nan')) is None

    def test_format_float(self):
        assert format_float(-41.0) == '-41'
        assert format_float(174.83444) == '174.83444'
        assert format_float(2.0, '.1f') == '2.0'
        assert format_float(float('nan'), '.1f') == ''
        assert format_float('') == ''

    def test_format_dms(self):
        assert format_dms(174.5) == '+1743000.00'
        assert format_dms(-41.25) == '-411500.00'
        assert format_dms(float('nan')) == ''

    def test_format_datetime(self):
        assert format_datetime(datetime(2010, 1, 2, 3, 4)) == '2010-01-02T03:04Z'
        assert format_datetime(None) == ''

    def test_mark_id(self):
        assert markID(mark('AUCK', 'LI')) == 'LI.AUCK'


class TestCoordinates:
    """Test the geodetic to geocentric conversion."""

    def test_lla2ecef(self):
        x, y, z = lla2ecef([-66.8765400174, 23.876539914, 999.998386689])

        assert x[0] == pytest.approx(2297292.91, abs=0.05)
        assert y[0] == pytest.approx(1016894.94, abs=0.05)
        assert z[0] == pytest.approx(-5843939.62, abs=0.05)

    def test_vectorized(self):
        x, y, z = lla2ecef([[0.0, 0.0, 0.0], [0.0, 90.0, 0.0]])

        assert x[0] == pytest.approx(6378137.0)
        assert y[1] == pytest.approx(6378137.0)
