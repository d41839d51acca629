"""
Project: GNSS Site Log Builder
Date: 10/17/26 2:30 PM

Loader for the delta metadata tables (network/*.csv and install/*.csv).
"""

import datetime
import logging
import os
from typing import Dict, List, Optional, Sequence, Tuple

# deps
import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

# app
from ..core.interval import Interval
from ..core.reconciliation import EquipmentIndexes
from ..core.type_declarations import SiteLogLoadException, EquipmentCategory
from ..core.data_classes import (Mark, Monument, Session, InstalledAntenna, InstalledRadome, DeployedReceiver,
                                 FirmwareHistory, InstalledMetSensor)

# dates at or beyond this year mean the record is still open
OPEN_ENDED_YEAR = 9999

START_DATE = 'start date'
END_DATE = 'end date'


def parse_date(value: str) -> Optional[datetime.datetime]:
    """naive UTC datetime, None for empty or open ended values"""
    value = value.strip() if isinstance(value, str) else ''
    if not value:
        return None

    year = value[:4]
    if year.isdigit() and int(year) >= OPEN_ENDED_YEAR:
        return None

    stamp = pd.Timestamp(value)
    if stamp.tzinfo is not None:
        stamp = stamp.tz_convert('UTC').tz_localize(None)

    return stamp.to_pydatetime()


class DeltaTable:
    """One csv table with lower case column names and string values"""

    def __init__(self, filename: str, required: Sequence[str]):
        self.filename = filename

        if not os.path.isfile(filename):
            raise SiteLogLoadException('file not found', filename)

        try:
            frame = pd.read_csv(filename, dtype=str, keep_default_na=False, skipinitialspace=True)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise SiteLogLoadException(f'unable to parse csv: {e}', filename) from e

        frame.columns = [str(c).strip().lower() for c in frame.columns]

        missing = [c for c in required if c not in frame.columns]
        if missing:
            raise SiteLogLoadException(f'missing column(s) {", ".join(missing)}', filename)

        self.frame = frame
        logger.debug(f'Loaded {len(frame)} rows from {filename}')

    def numbers(self, column: str) -> np.ndarray:
        """numeric column, NaN where the value is missing or malformed"""
        if column not in self.frame.columns:
            return np.full(len(self.frame), np.nan)

        return pd.to_numeric(self.frame[column].str.strip(), errors='coerce').to_numpy(dtype=float)

    def rows(self) -> List[Dict[str, str]]:
        return [{k: v.strip() for k, v in row.items()} for row in self.frame.to_dict('records')]

    def span(self, row: Dict[str, str], index: int) -> Interval:
        try:
            start = parse_date(row[START_DATE])
            end = parse_date(row[END_DATE])
            if start is None:
                raise ValueError('empty start date')
        except (ValueError, OverflowError) as e:
            # line numbers are 1 based and the header is line 1
            raise SiteLogLoadException(f'line {index + 2}: invalid dates ({e})', self.filename) from e

        span = Interval(start, end)
        if span.is_reversed:
            logger.warning(f'{self.filename}: line {index + 2}: end date {end} is before start date {start}')

        return span


class DeltaLoader:
    """Reads the delta tables and builds the lookup indexes used by the station resolver"""

    def __init__(self, network_dir: str, install_dir: str):
        self.network_dir = network_dir
        self.install_dir = install_dir

    def _install(self, filename: str) -> str:
        return os.path.join(self.install_dir, filename)

    def marks(self) -> List[Mark]:
        table = DeltaTable(os.path.join(self.network_dir, 'marks.csv'),
                           ('network', 'mark', 'name', 'latitude', 'longitude', 'height', START_DATE))

        lat, lon, height = table.numbers('latitude'), table.numbers('longitude'), table.numbers('height')

        marks = []
        for i, row in enumerate(table.rows()):
            try:
                start = parse_date(row[START_DATE])
            except ValueError as e:
                raise SiteLogLoadException(f'line {i + 2}: invalid start date ({e})', table.filename) from e

            marks.append(Mark(network=row['network'],
                              code=row['mark'],
                              name=row['name'],
                              latitude=lat[i],
                              longitude=lon[i],
                              elevation=height[i],
                              start=start,
                              reference_code=row.get('reference', '')))
        return marks

    def monuments(self) -> List[Monument]:
        table = DeltaTable(os.path.join(self.network_dir, 'monuments.csv'),
                           ('mark', 'domes number', 'mark type', 'type', 'ground relationship',
                            'foundation type', 'foundation depth'))

        ground, depth = table.numbers('ground relationship'), table.numbers('foundation depth')

        return [Monument(mark_code=row['mark'],
                         domes_number=row['domes number'],
                         mark_type=row['mark type'],
                         monument_type=row['type'],
                         ground_relationship=ground[i],
                         foundation_type=row['foundation type'],
                         foundation_depth=depth[i])
                for i, row in enumerate(table.rows())]

    def sessions(self) -> List[Session]:
        table = DeltaTable(self._install('sessions.csv'),
                           ('mark', 'satellite system', 'interval', 'elevation mask', START_DATE, END_DATE))

        mask = table.numbers('elevation mask')

        return [Session(mark_code=row['mark'],
                        span=table.span(row, i),
                        satellite_system=row['satellite system'],
                        elevation_mask=mask[i],
                        interval=row['interval'])
                for i, row in enumerate(table.rows())]

    def antennas(self) -> List[InstalledAntenna]:
        table = DeltaTable(self._install(EquipmentCategory.ANTENNA.filename),
                           ('make', 'model', 'serial', 'mark', 'height', 'north', 'east', START_DATE, END_DATE))

        height, north, east = table.numbers('height'), table.numbers('north'), table.numbers('east')

        return [InstalledAntenna(make=row['make'], model=row['model'], serial=row['serial'],
                                 span=table.span(row, i), mark_code=row['mark'],
                                 height=height[i], north=north[i], east=east[i])
                for i, row in enumerate(table.rows())]

    def radomes(self) -> List[InstalledRadome]:
        table = DeltaTable(self._install(EquipmentCategory.RADOME.filename),
                           ('make', 'model', 'serial', 'mark', START_DATE, END_DATE))

        return [InstalledRadome(make=row['make'], model=row['model'], serial=row['serial'],
                                span=table.span(row, i), mark_code=row['mark'])
                for i, row in enumerate(table.rows())]

    def receivers(self) -> List[DeployedReceiver]:
        table = DeltaTable(self._install(EquipmentCategory.RECEIVER.filename),
                           ('make', 'model', 'serial', 'mark', START_DATE, END_DATE))

        return [DeployedReceiver(make=row['make'], model=row['model'], serial=row['serial'],
                                 span=table.span(row, i), mark_code=row['mark'])
                for i, row in enumerate(table.rows())]

    def metsensors(self) -> List[InstalledMetSensor]:
        table = DeltaTable(self._install(EquipmentCategory.METSENSOR.filename),
                           ('make', 'model', 'serial', 'mark', START_DATE, END_DATE))

        return [InstalledMetSensor(make=row['make'], model=row['model'], serial=row['serial'],
                                   span=table.span(row, i), mark_code=row['mark'])
                for i, row in enumerate(table.rows())]

    def firmware(self) -> List[FirmwareHistory]:
        table = DeltaTable(self._install(EquipmentCategory.FIRMWARE.filename),
                           ('make', 'model', 'serial', 'version', START_DATE, END_DATE))

        return [FirmwareHistory(make=row['make'], model=row['model'], serial=row['serial'],
                                span=table.span(row, i), version=row['version'], notes=row.get('notes', ''))
                for i, row in enumerate(table.rows())]

    def load(self) -> Tuple[List[Mark], EquipmentIndexes]:
        """every table, marks in file order plus the indexes built from the rest"""
        marks = self.marks()

        equipment = {EquipmentCategory.ANTENNA: self.antennas(),
                     EquipmentCategory.RADOME: self.radomes(),
                     EquipmentCategory.RECEIVER: self.receivers(),
                     EquipmentCategory.METSENSOR: self.metsensors(),
                     EquipmentCategory.FIRMWARE: self.firmware()}

        for category, records in equipment.items():
            logger.debug(f'{category.description}: {len(records)} records')

        indexes = EquipmentIndexes.from_records(monuments=self.monuments(),
                                                sessions=self.sessions(),
                                                antennas=equipment[EquipmentCategory.ANTENNA],
                                                radomes=equipment[EquipmentCategory.RADOME],
                                                receivers=equipment[EquipmentCategory.RECEIVER],
                                                metsensors=equipment[EquipmentCategory.METSENSOR],
                                                firmware=equipment[EquipmentCategory.FIRMWARE])

        logger.info(f'Loaded {len(marks)} marks, {len(indexes.sessions)} marks with sessions, '
                    f'{len(indexes.firmware)} receivers with firmware history')

        return marks, indexes
