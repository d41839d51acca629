"""
Project: GNSS Site Log Builder
Date: 10/17/26 1:45 PM

Drives the reconciliation engine over every mark and assembles one site log record per mark.
"""

import datetime
import logging
from typing import Callable, Iterable, Iterator, Optional

# deps
from tqdm import tqdm

logger = logging.getLogger(__name__)

# app
from ..Utils import lla2ecef, to_float, format_float, markID, DATE_FORMAT
from ..geography import build_classifiers
from .interval import utc_now
from .reconciliation import EquipmentIndexes, ReconciliationEngine
from .sitelog_config import SiteLogConfig
from .data_classes import (Mark, Monument, GnssAntenna, SiteLogRecord, FormInformation, SiteIdentification,
                           SiteLocation, ApproximatePosition, MoreInformation)

Classifier = Callable[[float, float], str]

FORCED_CENTERING = 'Forced Centering'


class StationResolver:
    """
    Builds the site log records of a list of marks.

    Marks without a monument, sessions, antenna installs or receiver deployments are skipped.
    Country and tectonic plate come from injected (lat, lon) -> str classifiers; when not given,
    they are built from the configuration.
    """

    def __init__(self,
                 marks: Iterable[Mark],
                 indexes: EquipmentIndexes,
                 config: SiteLogConfig = None,
                 country: Optional[Classifier] = None,
                 plate: Optional[Classifier] = None,
                 now: datetime.datetime = None,
                 progress: bool = False):

        self.marks = tuple(marks)
        self.indexes = indexes
        self.config = config if config else SiteLogConfig()
        self.engine = ReconciliationEngine(indexes, self.config)
        self.now = now
        self.progress = progress

        if country is None or plate is None:
            default_country, default_plate = build_classifiers(self.config)
            country = country if country else default_country
            plate = plate if plate else default_plate

        self.country = country
        self.plate = plate

    def resolve_all(self) -> Iterator[SiteLogRecord]:
        """yield the records one at a time, in mark order"""
        now = self.now if self.now else utc_now()

        for mark in tqdm(self.marks, ncols=160, desc=' -- Resolving site logs',
                         disable=not self.progress):
            record = self.resolve(mark, now)
            if record is not None:
                yield record

    def resolve(self, mark: Mark, now: datetime.datetime = None) -> Optional[SiteLogRecord]:
        """site log record of the mark, None if the mark lacks the required metadata"""
        now = now if now else (self.now if self.now else utc_now())

        missing = self.indexes.missing_prerequisites(mark)
        if missing:
            logger.debug(f'{markID(mark)}: skipped, no {", ".join(missing)}')
            return None

        monument = self.indexes.monuments[mark.code]
        equipment = self.engine.resolve(mark, now)

        logger.info(f'{markID(mark)}: {len(equipment.antennas)} antennas, {len(equipment.receivers)} receivers, '
                    f'{len(equipment.metsensors)} met sensors')

        return SiteLogRecord(
            mark=mark,
            monument=monument,
            form_information=FormInformation(prepared_by=self.config.form.prepared_by,
                                             date_prepared=now.strftime(DATE_FORMAT),
                                             report_type=self.config.form.report_type),
            site_identification=self.site_identification(mark, monument),
            site_location=self.site_location(mark),
            antennas=list(equipment.antennas),
            receivers=list(equipment.receivers),
            metsensors=list(equipment.metsensors),
            contact_agency=self.config.agencies.contact,
            responsible_agency=self.config.agencies.responsible_for(mark.network),
            more_information=MoreInformation(
                primary_data_center=self.config.more_information.primary_data_center,
                url_for_more_information=self.config.more_information.url_for_more_information,
                notes=self.config.more_information.extra_notes + ' ' + mark.code,
                antenna_graphics_with_dimensions=self.antenna_graphics(equipment.antennas)))

    def antenna_graphics(self, antennas: Iterable[GnssAntenna]) -> str:
        """graphics of each antenna model once, in installation order"""
        graphics = []
        seen = set()
        for a in antennas:
            if a.antenna_type in seen:
                continue
            seen.add(a.antenna_type)
            if a.antenna_type in self.config.antenna.graphics:
                graphics.append(self.config.antenna.graphics[a.antenna_type])

        return '\n'.join(graphics) + '\n'

    @staticmethod
    def site_identification(mark: Mark, monument: Monument) -> SiteIdentification:
        ground = to_float(monument.ground_relationship)
        if ground is None or to_float(monument.foundation_depth) is None:
            logger.warning(f'{markID(mark)}: invalid monument dimensions, leaving them empty')

        return SiteIdentification(
            site_name=mark.name,
            four_character_id=mark.code,
            iers_domes_number=monument.domes_number,
            monument_description=monument.monument_type,
            # the ground relationship is negative above ground
            height_of_the_monument=format_float(-ground) if ground is not None else '',
            monument_foundation=monument.foundation_type,
            foundation_depth=format_float(monument.foundation_depth, '.1f'),
            marker_description=FORCED_CENTERING if monument.mark_type == FORCED_CENTERING else 'unknown',
            date_installed=mark.start)

    def site_location(self, mark: Mark) -> SiteLocation:
        lat = to_float(mark.latitude)
        lon = to_float(mark.longitude)
        height = to_float(mark.elevation)

        position = ApproximatePosition(latitude_north=format_float(lat),
                                       longitude_east=format_float(lon),
                                       elevation_m_ellips=format_float(height, '.1f'))

        if lat is None or lon is None:
            logger.warning(f'{markID(mark)}: invalid position ({mark.latitude}, {mark.longitude}), '
                           f'leaving location fields empty')
            return SiteLocation(approximate_position=position)

        if height is None:
            logger.warning(f'{markID(mark)}: invalid elevation {mark.elevation}, leaving ITRF position empty')
        else:
            x, y, z = lla2ecef([lat, lon, height])
            position.x_coordinate_in_meters = format_float(x[0], '.1f')
            position.y_coordinate_in_meters = format_float(y[0], '.1f')
            position.z_coordinate_in_meters = format_float(z[0], '.1f')

        return SiteLocation(country=self.country(lat, lon),
                            tectonic_plate=self.plate(lat, lon),
                            approximate_position=position)
