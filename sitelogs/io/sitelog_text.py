"""
Project: GNSS Site Log Builder
Date: 10/17/26 3:40 PM

IGS ASCII site log rendering of a SiteLogRecord.
"""

from typing import List

# app
from ..Utils import format_dms, format_datetime
from ..core.data_classes import SiteLogRecord, Agency, Contact

# continuation of a multi line value, aligned with the colon of the labels
CONTINUATION = ' ' * 30 + ': '

MONUMENT_DESCRIPTIONS = {
    'wyatt/agnew drilled-braced': 'Deep Wyatt/Agnew drilled-braced'
}


def lines(value: str, prefix: str = CONTINUATION) -> str:
    """indent the continuation lines of a multi line value"""
    return ('\n' + prefix).join(value.split('\n')) if value else value


def empty(default: str, value: str) -> str:
    return value if value else default


def monument_description(value: str) -> str:
    lower = value.lower()
    return MONUMENT_DESCRIPTIONS.get(lower, lower)


def field(label: str, value: str = '', indent: int = 5) -> str:
    return f'{" " * indent}{label:<{25 - indent + 5}}: {lines(value)}'.rstrip()


def _header(record: SiteLogRecord) -> List[str]:
    form = record.form_information
    return [
        f'     {record.code.upper()} Site Information Form (site log)',
        '     International GNSS Service',
        '     See Instructions at:',
        '       https://files.igs.org/pub/station/general/sitelog_instr.txt',
        '',
        '0.   Form',
        '',
        field('Prepared by (full name)', form.prepared_by),
        field('Date Prepared', form.date_prepared),
        field('Report Type', form.report_type),
        '     If Update:',
        field('Previous Site Log', '(ssss_ccyymmdd.log)', 6),
        field('Modified/Added Sections', '(n.n,n.n,...)', 6),
        '',
        ''
    ]


def _identification(record: SiteLogRecord) -> List[str]:
    site = record.site_identification
    return [
        '1.   Site Identification of the GNSS Monument',
        '',
        field('Site Name', site.site_name),
        field('Four Character ID', site.four_character_id.upper()),
        field('Monument Inscription', site.monument_inscription),
        field('IERS DOMES Number', site.iers_domes_number),
        field('CDP Number', site.cdp_number),
        field('Monument Description', monument_description(site.monument_description)),
        field('Height of the Monument', f'{site.height_of_the_monument} m' if site.height_of_the_monument else '', 7),
        field('Monument Foundation', site.monument_foundation.lower(), 7),
        field('Foundation Depth', f'{site.foundation_depth} m' if site.foundation_depth else '', 7),
        field('Marker Description', site.marker_description),
        field('Date Installed', format_datetime(site.date_installed)),
        field('Geologic Characteristic', site.geologic_characteristic),
        field('Bedrock Type', site.bedrock_type, 7),
        field('Bedrock Condition', site.bedrock_condition, 7),
        field('Fracture Spacing', site.fracture_spacing, 7),
        field('Fault zones nearby', site.fault_zones_nearby, 7),
        field('Distance/activity', site.distance_activity, 9),
        field('Additional Information', empty('(multiple lines)', site.notes)),
        '',
        ''
    ]


def _location(record: SiteLogRecord) -> List[str]:
    loc = record.site_location
    pos = loc.approximate_position
    return [
        '2.   Site Location Information',
        '',
        field('City or Town', loc.city),
        field('State or Province', loc.state),
        field('Country', loc.country),
        field('Tectonic Plate', loc.tectonic_plate),
        '     Approximate Position (ITRF)',
        field('X coordinate (m)', pos.x_coordinate_in_meters, 7),
        field('Y coordinate (m)', pos.y_coordinate_in_meters, 7),
        field('Z coordinate (m)', pos.z_coordinate_in_meters, 7),
        field('Latitude (N is +)', format_dms(pos.latitude_north), 7),
        field('Longitude (E is +)', format_dms(pos.longitude_east), 7),
        field('Elevation (m,ellips.)', pos.elevation_m_ellips, 7),
        field('Additional Information', empty('(multiple lines)', loc.notes)),
        '',
        ''
    ]


def _receivers(record: SiteLogRecord) -> List[str]:
    out = ['3.   GNSS Receiver Information', '']
    for n, r in enumerate(record.receivers, 1):
        out += [
            f'3.{n:<2} Receiver Type            : {r.receiver_type}',
            field('Satellite System', r.satellite_system),
            field('Serial Number', r.serial_number),
            field('Firmware Version', r.firmware_version),
            field('Elevation Cutoff Setting',
                  f'{r.elevation_cutoff_setting} deg' if r.elevation_cutoff_setting else ''),
            field('Date Installed', format_datetime(r.installed)),
            field('Date Removed', empty('(CCYY-MM-DDThh:mmZ)', format_datetime(r.removed))),
            field('Temperature Stabiliz.', empty('none', r.temperature_stabilization)),
            field('Additional Information', r.notes),
            ''
        ]
    return out + ['']


def _antennas(record: SiteLogRecord) -> List[str]:
    out = ['4.   GNSS Antenna Information', '']
    for n, a in enumerate(record.antennas, 1):
        out += [
            f'4.{n:<2} Antenna Type             : {a.antenna_type:<16}{a.antenna_radome_type}'.rstrip(),
            field('Serial Number', a.serial_number),
            field('Antenna Reference Point', a.antenna_reference_point),
            field('Marker->ARP Up Ecc. (m)', a.marker_arp_up_ecc),
            field('Marker->ARP North Ecc(m)', a.marker_arp_north_ecc),
            field('Marker->ARP East Ecc(m)', a.marker_arp_east_ecc),
            field('Alignment from True N', f'{a.alignment_from_true_north} deg'),
            field('Antenna Radome Type', a.antenna_radome_type),
            field('Radome Serial Number', a.radome_serial_number),
            field('Antenna Cable Type', a.antenna_cable_type),
            field('Antenna Cable Length', a.antenna_cable_length),
            field('Date Installed', format_datetime(a.installed)),
            field('Date Removed', empty('(CCYY-MM-DDThh:mmZ)', format_datetime(a.removed))),
            field('Additional Information', a.notes),
            ''
        ]
    return out + ['']


def _metsensors(record: SiteLogRecord) -> List[str]:
    out = ['8.   Meteorological Instrumentation', '']
    for n, m in enumerate(record.metsensors, 1):
        out += [
            f'8.{n:<2} Met Sensor Model         : {m.met_sensor_model}',
            field('Manufacturer', m.manufacturer),
            field('Serial Number', m.serial_number),
            field('Data Sampling Interval', m.data_sampling_interval),
            field('Effective Dates', m.effective_dates),
            field('Notes', m.notes),
            ''
        ]
    return out + ['']


def _contact(title: str, contact: Contact) -> List[str]:
    return [
        f'     {title}',
        field('Contact Name', contact.name, 7),
        field('Telephone (primary)', contact.telephone_primary, 7),
        field('Telephone (secondary)', contact.telephone_secondary, 7),
        field('Fax', contact.fax, 7),
        field('E-mail', contact.email, 7)
    ]


def _agency(title: str, agency: Agency) -> List[str]:
    return [title, '',
            field('Agency', agency.agency),
            field('Preferred Abbreviation', agency.preferred_abbreviation),
            field('Mailing Address', agency.mailing_address.strip('\n'))] + \
        _contact('Primary Contact', agency.primary_contact) + \
        _contact('Secondary Contact', agency.secondary_contact) + \
        [field('Additional Information', agency.notes), '', '']


def _more_information(record: SiteLogRecord) -> List[str]:
    info = record.more_information
    return [
        '13.  More Information',
        '',
        field('Primary Data Center', info.primary_data_center),
        field('Secondary Data Center', info.secondary_data_center),
        field('URL for More Information', info.url_for_more_information),
        '     Hardcopy on File',
        field('Site Map', info.site_map, 7),
        field('Site Diagram', info.site_diagram, 7),
        field('Horizon Mask', info.horizon_mask, 7),
        field('Monument Description', info.monument_description, 7),
        field('Site Pictures', info.site_pictures, 7),
        field('Additional Information', info.notes),
        '     Antenna Graphics with Dimensions',
        '',
        info.antenna_graphics_with_dimensions.rstrip('\n')
    ]


def to_text(record: SiteLogRecord) -> str:
    out = (_header(record) +
           _identification(record) +
           _location(record) +
           _receivers(record) +
           _antennas(record) +
           _metsensors(record) +
           _agency('11.  On-Site, Point of Contact Agency Information', record.contact_agency) +
           _agency('12.  Responsible Agency (if different from 11.)', record.responsible_agency) +
           _more_information(record))

    return '\n'.join(out).rstrip('\n') + '\n'
