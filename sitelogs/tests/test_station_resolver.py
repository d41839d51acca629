"""
Unit tests for the station resolver.

Tests station filtering, site log assembly, agency selection and the handling of malformed
numeric values.
"""

import logging
from datetime import datetime

from sitelogs.core.data_classes import Mark, Monument, LINZ_AGENCY, GNS_AGENCY
from sitelogs.core.reconciliation import EquipmentIndexes
from sitelogs.core.sitelog_config import SiteLogConfig
from sitelogs.core.station_resolver import StationResolver

from conftest import NOW, mark, monument, session, antenna, receiver, firmware


def resolver(marks, indexes, config=None):
    return StationResolver(marks, indexes, config, country=lambda lat, lon: 'New Zealand',
                           plate=lambda lat, lon: 'Pacific', now=NOW)


class TestStationFilter:
    """Test marks skipped for missing metadata."""

    def test_skips_incomplete_marks(self, simple_indexes):
        records = list(resolver([mark('NONE'), mark(), mark('ALSO')], simple_indexes).resolve_all())

        assert [r.code for r in records] == ['TEST']

    def test_resolve_returns_none(self, simple_indexes):
        assert resolver([], simple_indexes).resolve(mark('NONE')) is None

    def test_no_marks(self, simple_indexes):
        assert list(resolver([], simple_indexes).resolve_all()) == []


class TestRecordAssembly:
    """Test the content of an assembled site log record."""

    def test_form(self, simple_indexes):
        record = resolver([mark()], simple_indexes).resolve(mark())

        assert record.form_information.prepared_by == "Elisabetta D'Anastasio"
        assert record.form_information.date_prepared == '2024-01-01'
        assert record.form_information.report_type == 'DYNAMIC'

    def test_identification(self, simple_indexes):
        site = resolver([mark()], simple_indexes).resolve(mark()).site_identification

        assert site.site_name == 'TEST Station'
        assert site.four_character_id == 'TEST'
        assert site.iers_domes_number == '50217M001'
        assert site.monument_description == 'Wyatt/Agnew Drilled-Braced'
        assert site.height_of_the_monument == '1.5'
        assert site.monument_foundation == 'Concrete'
        assert site.foundation_depth == '2.0'
        assert site.marker_description == 'Forced Centering'
        assert site.date_installed == datetime(2000, 1, 1)

    def test_marker_description_unknown(self):
        site = StationResolver.site_identification(mark(), Monument(mark_code='TEST', mark_type='Pillar'))

        assert site.marker_description == 'unknown'

    def test_location(self, simple_indexes):
        location = resolver([mark()], simple_indexes).resolve(mark()).site_location
        position = location.approximate_position

        assert location.country == 'New Zealand'
        assert location.tectonic_plate == 'Pacific'
        assert position.latitude_north == '-41'
        assert position.longitude_east == '175'
        assert position.elevation_m_ellips == '100.0'
        assert position.x_coordinate_in_meters != ''
        assert float(position.z_coordinate_in_meters) < 0
        assert float(position.x_coordinate_in_meters) < 0

    def test_more_information(self, simple_indexes):
        info = resolver([mark()], simple_indexes).resolve(mark()).more_information

        assert info.primary_data_center == 'ftp.geonet.org.nz'
        assert info.url_for_more_information == 'www.geonet.org.nz'
        assert info.notes.endswith('then search for CGPS mark TEST')

    def test_equipment(self, simple_indexes):
        record = resolver([mark()], simple_indexes).resolve(mark())

        assert len(record.antennas) == 1
        assert len(record.receivers) == 1
        assert record.metsensors == []


class TestAntennaGraphics:
    """Test the antenna graphics built from the configured model table."""

    GRAPHICS = {'TRM41249.00': 'TRM41249.00 graphic', 'LEIAR25.R3': 'LEIAR25.R3 graphic', 'UNUSED': 'unused'}

    def indexes(self):
        return EquipmentIndexes.from_records(
            monuments=[monument()],
            sessions=[session()],
            antennas=[antenna(start='2005-01-01', end='2010-01-01', serial='1'),
                      antenna(start='2010-01-01', end='2012-01-01', model='LEIAR25.R3', serial='2'),
                      antenna(start='2012-01-01', serial='3'),
                      antenna(start='2013-01-01', model='ASH701945C_M', serial='4')],
            receivers=[receiver()],
            firmware=[firmware()])

    def test_unique_models_in_order(self):
        config = SiteLogConfig({'antenna': {'graphics': self.GRAPHICS}})

        info = resolver([], self.indexes(), config).resolve(mark()).more_information

        assert info.antenna_graphics_with_dimensions == 'TRM41249.00 graphic\nLEIAR25.R3 graphic\n'

    def test_no_graphics_configured(self):
        info = resolver([], self.indexes()).resolve(mark()).more_information

        assert info.antenna_graphics_with_dimensions == '\n'


class TestAgencies:
    """Test agency selection by network."""

    def test_linz_network(self, simple_indexes):
        record = resolver([], simple_indexes).resolve(mark(network='LI'))

        assert record.contact_agency == GNS_AGENCY
        assert record.responsible_agency == LINZ_AGENCY

    def test_other_network(self, simple_indexes):
        record = resolver([], simple_indexes).resolve(mark(network='GN'))

        assert record.responsible_agency.agency == ''
        assert record.responsible_agency.mailing_address == '\n'

    def test_configured_agency(self, simple_indexes):
        config = SiteLogConfig({'agencies': {'responsible': {'GN': {'agency': 'GeoNet',
                                                                    'primary_contact': {'name': 'Duty'}}}}})

        record = resolver([], simple_indexes, config).resolve(mark(network='GN'))

        assert record.responsible_agency.agency == 'GeoNet'
        assert record.responsible_agency.primary_contact.name == 'Duty'


class TestMalformedValues:
    """Test that malformed numeric values leave empty fields and log a warning."""

    def test_invalid_position(self, simple_indexes, caplog):
        bad = Mark(network='GN', code='TEST', name='Bad', latitude=float('nan'), longitude=175.0,
                   elevation=float('nan'), start=datetime(2000, 1, 1))

        with caplog.at_level(logging.WARNING, logger='sitelogs'):
            record = resolver([], simple_indexes).resolve(bad)

        position = record.site_location.approximate_position
        assert position.latitude_north == ''
        assert position.x_coordinate_in_meters == ''
        assert record.site_location.country == ''
        assert 'invalid position' in caplog.text

    def test_invalid_elevation(self, simple_indexes, caplog):
        bad = Mark(network='GN', code='TEST', name='Bad', latitude=-41.0, longitude=175.0,
                   elevation=float('nan'), start=datetime(2000, 1, 1))

        with caplog.at_level(logging.WARNING, logger='sitelogs'):
            record = resolver([], simple_indexes).resolve(bad)

        position = record.site_location.approximate_position
        assert position.latitude_north == '-41'
        assert position.x_coordinate_in_meters == ''
        assert record.site_location.country == 'New Zealand'
        assert 'invalid elevation' in caplog.text

    def test_invalid_monument(self, caplog):
        bad = Monument(mark_code='TEST', ground_relationship=float('nan'), foundation_depth=float('nan'))

        with caplog.at_level(logging.WARNING, logger='sitelogs'):
            site = StationResolver.site_identification(mark(), bad)

        assert site.height_of_the_monument == ''
        assert site.foundation_depth == ''
        assert 'invalid monument dimensions' in caplog.text

    def test_valid_monument_no_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger='sitelogs'):
            StationResolver.site_identification(mark(), monument())

        assert caplog.text == ''
