"""
Project: GNSS Site Log Builder
Date: 10/17/26 3:10 PM

IGS site log XML (2004 schema) encoding of a SiteLogRecord.
"""

import xml.etree.ElementTree as ET

# app
from ..Utils import format_datetime
from ..core.data_classes import SiteLogRecord, Agency, Contact, GnssAntenna, GnssReceiver, GnssMetSensor

SITELOG_NS = 'http://sopac.ucsd.edu/ns/geodesy/doc/igsSiteLog/2004'
EQUIP_NS = 'http://sopac.ucsd.edu/ns/geodesy/doc/igsSiteLog/equipment/2004'
CONTACT_NS = 'http://sopac.ucsd.edu/ns/geodesy/doc/igsSiteLog/contact/2004'
MI_NS = 'http://sopac.ucsd.edu/ns/geodesy/doc/igsSiteLog/monumentInfo/2004'
LI_NS = 'http://sopac.ucsd.edu/ns/geodesy/doc/igsSiteLog/localInterferences/2004'
XSI_NS = 'http://www.w3.org/2001/XMLSchema-instance'
SCHEMA_LOCATION = SITELOG_NS + ' http://sopac.ucsd.edu/ns/geodesy/doc/igsSiteLog/2004/igsSiteLog.xsd'

NAMESPACES = {
    '': SITELOG_NS,
    'equip': EQUIP_NS,
    'contact': CONTACT_NS,
    'mi': MI_NS,
    'li': LI_NS,
    'xsi': XSI_NS
}

for _prefix, _uri in NAMESPACES.items():
    ET.register_namespace(_prefix, _uri)


def _sub(parent: ET.Element, ns: str, tag: str, text: str = None) -> ET.Element:
    element = ET.SubElement(parent, f'{{{ns}}}{tag}')
    if text is not None:
        element.text = text
    return element


def _fields(parent: ET.Element, ns: str, values) -> None:
    for tag, text in values:
        _sub(parent, ns, tag, text)


def _receiver(parent: ET.Element, r: GnssReceiver) -> None:
    element = _sub(parent, SITELOG_NS, 'gnssReceiver')
    _fields(element, EQUIP_NS, (
        ('receiverType', r.receiver_type),
        ('satelliteSystem', r.satellite_system),
        ('serialNumber', r.serial_number),
        ('firmwareVersion', r.firmware_version),
        ('elevationCutoffSetting', r.elevation_cutoff_setting),
        ('dateInstalled', format_datetime(r.installed)),
        ('dateRemoved', format_datetime(r.removed)),
        ('temperatureStabilization', r.temperature_stabilization),
        ('notes', r.notes)))


def _antenna(parent: ET.Element, a: GnssAntenna) -> None:
    element = _sub(parent, SITELOG_NS, 'gnssAntenna')
    _fields(element, EQUIP_NS, (
        ('antennaType', a.antenna_type),
        ('serialNumber', a.serial_number),
        ('antennaReferencePoint', a.antenna_reference_point),
        ('marker-arpUpEcc.', a.marker_arp_up_ecc),
        ('marker-arpNorthEcc.', a.marker_arp_north_ecc),
        ('marker-arpEastEcc.', a.marker_arp_east_ecc),
        ('alignmentFromTrueNorth', a.alignment_from_true_north),
        ('antennaRadomeType', a.antenna_radome_type),
        ('radomeSerialNumber', a.radome_serial_number),
        ('antennaCableType', a.antenna_cable_type),
        ('antennaCableLength', a.antenna_cable_length),
        ('dateInstalled', format_datetime(a.installed)),
        ('dateRemoved', format_datetime(a.removed)),
        ('notes', a.notes)))


def _metsensor(parent: ET.Element, m: GnssMetSensor) -> None:
    element = _sub(parent, SITELOG_NS, 'gnssMetSensor')
    _fields(element, EQUIP_NS, (
        ('manufacturer', m.manufacturer),
        ('metSensorModel', m.met_sensor_model),
        ('serialNumber', m.serial_number),
        ('dataSamplingInterval', m.data_sampling_interval),
        ('effectiveDates', m.effective_dates),
        ('notes', m.notes)))


def _contact(parent: ET.Element, tag: str, c: Contact) -> None:
    element = _sub(parent, CONTACT_NS, tag)
    _fields(element, CONTACT_NS, (
        ('name', c.name),
        ('telephonePrimary', c.telephone_primary),
        ('telephoneSecondary', c.telephone_secondary),
        ('fax', c.fax),
        ('email', c.email)))


def _agency(parent: ET.Element, tag: str, a: Agency) -> None:
    element = _sub(parent, SITELOG_NS, tag)
    _fields(element, CONTACT_NS, (
        ('agency', a.agency),
        ('preferredAbbreviation', a.preferred_abbreviation),
        ('mailingAddress', a.mailing_address)))
    _contact(element, 'primaryContact', a.primary_contact)
    _contact(element, 'secondaryContact', a.secondary_contact)
    _sub(element, CONTACT_NS, 'notes', a.notes)


def to_element(record: SiteLogRecord) -> ET.Element:
    root = ET.Element(f'{{{SITELOG_NS}}}igsSiteLog')
    root.set(f'{{{XSI_NS}}}schemaLocation', SCHEMA_LOCATION)

    form = _sub(root, SITELOG_NS, 'formInformation')
    _fields(form, MI_NS, (
        ('preparedBy', record.form_information.prepared_by),
        ('datePrepared', record.form_information.date_prepared),
        ('reportType', record.form_information.report_type)))

    site = record.site_identification
    identification = _sub(root, SITELOG_NS, 'siteIdentification')
    _fields(identification, MI_NS, (
        ('siteName', site.site_name),
        ('fourCharacterID', site.four_character_id),
        ('monumentInscription', site.monument_inscription),
        ('iersDOMESNumber', site.iers_domes_number),
        ('cdpNumber', site.cdp_number),
        ('monumentDescription', site.monument_description),
        ('heightOfTheMonument', site.height_of_the_monument),
        ('monumentFoundation', site.monument_foundation),
        ('foundationDepth', site.foundation_depth),
        ('markerDescription', site.marker_description),
        ('dateInstalled', format_datetime(site.date_installed)),
        ('geologicCharacteristic', site.geologic_characteristic),
        ('bedrockType', site.bedrock_type),
        ('bedrockCondition', site.bedrock_condition),
        ('fractureSpacing', site.fracture_spacing),
        ('faultZonesNearby', site.fault_zones_nearby),
        ('distance-Activity', site.distance_activity),
        ('notes', site.notes)))

    loc = record.site_location
    location = _sub(root, SITELOG_NS, 'siteLocation')
    _fields(location, MI_NS, (
        ('city', loc.city),
        ('state', loc.state),
        ('country', loc.country),
        ('tectonicPlate', loc.tectonic_plate)))
    pos = loc.approximate_position
    _fields(_sub(location, MI_NS, 'approximatePositionITRF'), MI_NS, (
        ('xCoordinateInMeters', pos.x_coordinate_in_meters),
        ('yCoordinateInMeters', pos.y_coordinate_in_meters),
        ('zCoordinateInMeters', pos.z_coordinate_in_meters),
        ('latitude-North', pos.latitude_north),
        ('longitude-East', pos.longitude_east),
        ('elevation-m_ellips.', pos.elevation_m_ellips)))
    _sub(location, MI_NS, 'notes', loc.notes)

    for r in record.receivers:
        _receiver(root, r)

    for a in record.antennas:
        _antenna(root, a)

    for m in record.metsensors:
        _metsensor(root, m)

    _agency(root, 'contactAgency', record.contact_agency)
    _agency(root, 'responsibleAgency', record.responsible_agency)

    info = record.more_information
    more = _sub(root, SITELOG_NS, 'moreInformation')
    _fields(more, MI_NS, (
        ('primaryDataCenter', info.primary_data_center),
        ('secondaryDataCenter', info.secondary_data_center),
        ('urlForMoreInformation', info.url_for_more_information),
        ('hardCopyOnFile', info.hard_copy_on_file),
        ('siteMap', info.site_map),
        ('siteDiagram', info.site_diagram),
        ('horizonMask', info.horizon_mask),
        ('monumentDescription', info.monument_description),
        ('sitePictures', info.site_pictures),
        ('notes', info.notes),
        ('antennaGraphicsWithDimensions', info.antenna_graphics_with_dimensions),
        ('insertTextGraphicFromAntenna', info.insert_text_graphic_from_antenna)))

    return root


def to_xml(record: SiteLogRecord) -> bytes:
    """XML document with declaration, indented"""
    root = to_element(record)
    ET.indent(root, space='  ')
    return ET.tostring(root, encoding='utf-8', xml_declaration=True) + b'\n'
