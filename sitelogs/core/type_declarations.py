"""
Project: GNSS Site Log Builder
Date: 10/17/26 9:05 AM
"""

from enum import IntEnum, auto


class SiteLogException(Exception):
    """Base exception for site log errors."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        return str(self.value)


class SiteLogLoadException(SiteLogException):
    """Input table could not be read or interpreted."""

    def __init__(self, value: str, filename: str = None):
        self.filename = filename
        super().__init__(f'{filename}: {value}' if filename else value)


class SiteLogWriteException(SiteLogException):
    """Output document could not be written."""

    def __init__(self, value: str, station_code: str = None, filename: str = None):
        self.station_code = station_code
        self.filename = filename
        super().__init__(f'{station_code} -> {filename}: {value}' if filename else value)


class SiteLogConfigException(SiteLogException):
    pass


class MatchPolicy(IntEnum):
    """Tie-break used when several candidates overlap a target interval"""
    FIRST = auto()
    LAST = auto()

    @property
    def description(self) -> str:
        descriptions = {
            MatchPolicy.FIRST: 'First candidate in stored order',
            MatchPolicy.LAST: 'Last candidate in stored order'
        }
        return descriptions.get(self, 'UNKNOWN')


class EquipmentCategory(IntEnum):
    """Enum for the equipment categories reported in a site log"""
    ANTENNA = auto()
    RADOME = auto()
    RECEIVER = auto()
    FIRMWARE = auto()
    METSENSOR = auto()

    @property
    def description(self) -> str:
        descriptions = {
            EquipmentCategory.ANTENNA: 'GNSS Antenna',
            EquipmentCategory.RADOME: 'Antenna Radome',
            EquipmentCategory.RECEIVER: 'GNSS Receiver',
            EquipmentCategory.FIRMWARE: 'Receiver Firmware',
            EquipmentCategory.METSENSOR: 'Meteorological Sensor'
        }
        return descriptions.get(self, 'UNKNOWN')

    @property
    def filename(self) -> str:
        filenames = {
            EquipmentCategory.ANTENNA: 'antennas.csv',
            EquipmentCategory.RADOME: 'radomes.csv',
            EquipmentCategory.RECEIVER: 'receivers.csv',
            EquipmentCategory.FIRMWARE: 'firmware.csv',
            EquipmentCategory.METSENSOR: 'metsensors.csv'
        }
        return filenames.get(self, '')
