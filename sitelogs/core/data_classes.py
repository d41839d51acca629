"""
Project: GNSS Site Log Builder
Date: 10/17/26 9:30 AM
"""

import datetime
from dataclasses import dataclass, field
from typing import List, Optional, Any, Tuple

# app
from sitelogs.core.interval import Interval


@dataclass
class BaseDataClass:
    """
    base class for data manipulated by user preventing adding non-existent elements to the class
    """
    def __post_init__(self):
        # after initialization
        self._allowed_attributes = {item for item in dir(self) if item[0] != '_'}

    def __setattr__(self, name: str, value: Any) -> None:
        if (not name.startswith('_') and hasattr(self, '_allowed_attributes')
                and name not in self._allowed_attributes):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'. ")
        super().__setattr__(name, value)


# ---------------------------------------------------------------------------------------------------------------------
# input records
# ---------------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Mark:
    """A geodetic monitoring station"""
    network: str
    code: str
    name: str = ''
    latitude: float = 0.0
    longitude: float = 0.0
    elevation: float = 0.0
    start: Optional[datetime.datetime] = None
    reference_code: str = ''

    @property
    def reference(self) -> str:
        """code used to attribute met sensors to this mark"""
        return self.reference_code or self.code


@dataclass(frozen=True)
class Monument:
    mark_code: str
    domes_number: str = ''
    mark_type: str = ''
    monument_type: str = ''
    ground_relationship: float = 0.0
    foundation_type: str = ''
    foundation_depth: float = 0.0


@dataclass(frozen=True)
class Session:
    """Window of station operation with fixed acquisition parameters"""
    mark_code: str
    span: Interval
    satellite_system: str = ''
    elevation_mask: float = 0.0
    interval: str = ''


@dataclass(frozen=True)
class Installation:
    """Common part of every equipment installation record"""
    make: str
    model: str
    serial: str
    span: Interval

    @property
    def sort_key(self) -> datetime.datetime:
        return self.span.start


@dataclass(frozen=True)
class InstalledAntenna(Installation):
    mark_code: str = ''
    height: float = 0.0
    north: float = 0.0
    east: float = 0.0


@dataclass(frozen=True)
class InstalledRadome(Installation):
    mark_code: str = ''


@dataclass(frozen=True)
class DeployedReceiver(Installation):
    mark_code: str = ''


@dataclass(frozen=True)
class FirmwareHistory(Installation):
    version: str = ''
    notes: str = ''


@dataclass(frozen=True)
class InstalledMetSensor(Installation):
    mark_code: str = ''


# ---------------------------------------------------------------------------------------------------------------------
# resolved records
# ---------------------------------------------------------------------------------------------------------------------

@dataclass
class GnssAntenna:
    antenna_type: str
    serial_number: str
    installed: datetime.datetime
    removed: Optional[datetime.datetime] = None
    antenna_reference_point: str = 'BAM'
    marker_arp_up_ecc: str = ''
    marker_arp_north_ecc: str = ''
    marker_arp_east_ecc: str = ''
    alignment_from_true_north: str = '0'
    antenna_radome_type: str = 'NONE'
    radome_serial_number: str = ''
    antenna_cable_type: str = ''
    antenna_cable_length: str = ''
    notes: str = ''


@dataclass
class GnssReceiver:
    receiver_type: str
    serial_number: str
    installed: datetime.datetime
    removed: Optional[datetime.datetime] = None
    satellite_system: str = ''
    firmware_version: str = ''
    elevation_cutoff_setting: str = ''
    temperature_stabilization: str = ''
    notes: str = ''


@dataclass
class GnssMetSensor:
    manufacturer: str
    met_sensor_model: str
    serial_number: str
    data_sampling_interval: str = ''
    effective_dates: str = ''
    notes: str = ''


@dataclass(frozen=True)
class ResolvedEquipment:
    """Output of the reconciliation engine for a single mark"""
    antennas: Tuple[GnssAntenna, ...] = ()
    receivers: Tuple[GnssReceiver, ...] = ()
    metsensors: Tuple[GnssMetSensor, ...] = ()


@dataclass(frozen=True)
class Contact:
    name: str = ''
    telephone_primary: str = ''
    telephone_secondary: str = ''
    fax: str = ''
    email: str = ''


@dataclass(frozen=True)
class Agency:
    agency: str = ''
    preferred_abbreviation: str = ''
    mailing_address: str = ''
    primary_contact: Contact = field(default_factory=Contact)
    secondary_contact: Contact = field(default_factory=Contact)
    notes: str = ''


@dataclass
class FormInformation:
    prepared_by: str = ''
    date_prepared: str = ''
    report_type: str = 'DYNAMIC'


@dataclass
class SiteIdentification:
    site_name: str = ''
    four_character_id: str = ''
    monument_inscription: str = ''
    iers_domes_number: str = ''
    cdp_number: str = ''
    monument_description: str = ''
    height_of_the_monument: str = ''
    monument_foundation: str = ''
    foundation_depth: str = ''
    marker_description: str = ''
    date_installed: Optional[datetime.datetime] = None
    geologic_characteristic: str = ''
    bedrock_type: str = ''
    bedrock_condition: str = ''
    fracture_spacing: str = ''
    fault_zones_nearby: str = ''
    distance_activity: str = ''
    notes: str = ''


@dataclass
class ApproximatePosition:
    x_coordinate_in_meters: str = ''
    y_coordinate_in_meters: str = ''
    z_coordinate_in_meters: str = ''
    latitude_north: str = ''
    longitude_east: str = ''
    elevation_m_ellips: str = ''


@dataclass
class SiteLocation:
    city: str = ''
    state: str = ''
    country: str = ''
    tectonic_plate: str = ''
    approximate_position: ApproximatePosition = field(default_factory=ApproximatePosition)
    notes: str = ''


@dataclass
class MoreInformation:
    primary_data_center: str = ''
    secondary_data_center: str = ''
    url_for_more_information: str = ''
    hard_copy_on_file: str = ''
    site_map: str = ''
    site_diagram: str = ''
    horizon_mask: str = ''
    monument_description: str = ''
    site_pictures: str = ''
    notes: str = ''
    antenna_graphics_with_dimensions: str = ''
    insert_text_graphic_from_antenna: str = ''


@dataclass
class SiteLogRecord:
    """Resolved station record: everything a serializer needs for one mark"""
    mark: Mark
    monument: Monument
    form_information: FormInformation
    site_identification: SiteIdentification
    site_location: SiteLocation
    antennas: List[GnssAntenna] = field(default_factory=list)
    receivers: List[GnssReceiver] = field(default_factory=list)
    metsensors: List[GnssMetSensor] = field(default_factory=list)
    contact_agency: Agency = field(default_factory=Agency)
    responsible_agency: Agency = field(default_factory=Agency)
    more_information: MoreInformation = field(default_factory=MoreInformation)

    @property
    def code(self) -> str:
        return self.mark.code


# ---------------------------------------------------------------------------------------------------------------------
# configuration sections
# ---------------------------------------------------------------------------------------------------------------------

def agency_from_dict(data: dict) -> Agency:
    data = dict(data)
    for key in ('primary_contact', 'secondary_contact'):
        if isinstance(data.get(key), dict):
            data[key] = Contact(**data[key])
    return Agency(**data)


GNS_AGENCY = Agency(
    agency='GNS Science',
    preferred_abbreviation='GNS',
    mailing_address='1 Fairway Drive, Avalon 5010,\nPO Box 30-368, Lower Hutt\nNew Zealand',
    primary_contact=Contact(name='GeoNet reception',
                            telephone_primary='+64 4 570 1444',
                            fax='+64 4 570 4676',
                            email='info@geonet.org.nz'),
    secondary_contact=Contact(name="Elisabetta D'Anastasio",
                              telephone_primary='+64 4 570 4744',
                              email='e.danastasio@gns.cri.nz'))

LINZ_AGENCY = Agency(
    agency='Land Information New Zealand',
    preferred_abbreviation='LINZ',
    mailing_address='155 The Terrace, PO Box 5501, Wellington 6145 New Zealand',
    primary_contact=Contact(name='LINZ Reception',
                            telephone_primary='+64 4 460 0110',
                            fax='+64 4 472 2244',
                            email='positionz@linz.govt.nz'),
    secondary_contact=Contact(name='Paula Gentle',
                              telephone_primary='+64 4 460 2757',
                              email='pgentle@linz.govt.nz'),
    notes='CGPS site is part of the LINZ PositioNZ Network http://www.linz.govt.nz/positionz')


@dataclass
class FormOptions(BaseDataClass):
    prepared_by: str = "Elisabetta D'Anastasio"
    report_type: str = 'DYNAMIC'


@dataclass
class AntennaOptions(BaseDataClass):
    reference_point: str = 'BAM'
    alignment_from_true_north: str = '0'
    no_radome: str = 'NONE'
    # antenna model -> text graphic with dimensions, as in the IGS antenna.gra file
    graphics: dict = field(default_factory=dict)


@dataclass
class MetSensorOptions(BaseDataClass):
    # reported for every met sensor regardless of its install dates
    data_sampling_interval: str = '360 sec'
    effective_dates: str = '2000-02-05/CCYY-MM-DD'


@dataclass
class MoreInformationOptions(BaseDataClass):
    primary_data_center: str = 'ftp.geonet.org.nz'
    url_for_more_information: str = 'www.geonet.org.nz'
    extra_notes: str = ('additional information and pictures could be\n'
                        'found at http://magma.geonet.org.nz/delta/app\n'
                        'then search for CGPS mark')


@dataclass
class AgencyOptions(BaseDataClass):
    contact: Agency = GNS_AGENCY
    # network code -> responsible agency, anything else gets default_responsible
    responsible: dict = field(default_factory=lambda: {'LI': LINZ_AGENCY})
    default_responsible: Agency = Agency(mailing_address='\n')

    def __post_init__(self):
        super().__post_init__()

        if isinstance(self.contact, dict):
            self.contact = agency_from_dict(self.contact)

        if isinstance(self.default_responsible, dict):
            self.default_responsible = agency_from_dict(self.default_responsible)

        self.responsible = {network: agency_from_dict(agency) if isinstance(agency, dict) else agency
                            for network, agency in self.responsible.items()}

    def responsible_for(self, network: str) -> Agency:
        return self.responsible.get(network, self.default_responsible)


@dataclass
class CountryOptions(BaseDataClass):
    # name, latitude, longitude of the reference point of each country
    reference_points: List = field(default_factory=lambda: [
        ('New Zealand', -40.0, 174.0),
        ('Tonga', -21.2, -175.2),
        ('Samoa', -13.8, -172.1),
        ('Niue', -19.0, -169.9)
    ])
    unknown: str = 'Unknown'

    def __post_init__(self):
        super().__post_init__()
        self.reference_points = [tuple(point) for point in self.reference_points]


@dataclass
class GeographyOptions(BaseDataClass):
    # optional polygon layers, when not given countries use the nearest reference point
    # and the tectonic plate is left empty
    plates_file: str = ''
    plate_name_column: str = 'PlateName'
    countries_file: str = ''
    country_iso_column: str = 'ISO_A3'
