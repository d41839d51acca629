"""
Shared builders for the site log tests.
"""

import pytest
from datetime import datetime

from sitelogs.core.interval import Interval
from sitelogs.core.reconciliation import EquipmentIndexes
from sitelogs.io.delta_csv import DeltaLoader
from sitelogs.core.data_classes import (Mark, Monument, Session, InstalledAntenna, InstalledRadome,
                                        DeployedReceiver, FirmwareHistory, InstalledMetSensor)

NOW = datetime(2024, 1, 1)


def span(start, end=None):
    return Interval(datetime.fromisoformat(start), datetime.fromisoformat(end) if end else None)


def mark(code='TEST', network='GN', reference=''):
    return Mark(network=network, code=code, name=f'{code} Station', latitude=-41.0, longitude=175.0,
                elevation=100.0, start=datetime(2000, 1, 1), reference_code=reference)


def monument(code='TEST'):
    return Monument(mark_code=code, domes_number='50217M001', mark_type='Forced Centering',
                    monument_type='Wyatt/Agnew Drilled-Braced', ground_relationship=-1.5,
                    foundation_type='Concrete', foundation_depth=2.0)


def session(code='TEST', start='2000-01-01', end=None, system='GPS', mask=0.0):
    return Session(mark_code=code, span=span(start, end), satellite_system=system, elevation_mask=mask,
                   interval='30s')


def antenna(code='TEST', start='2010-01-01', end=None, model='TRM41249.00', serial='A1'):
    return InstalledAntenna(make='Trimble', model=model, serial=serial, span=span(start, end), mark_code=code,
                            height=0.055, north=0.0, east=0.0)


def radome(code='TEST', start='2010-01-01', end=None, model='SCIS', serial='R1'):
    return InstalledRadome(make='Trimble', model=model, serial=serial, span=span(start, end), mark_code=code)


def receiver(code='TEST', start='2010-01-01', end=None, model='TRIMBLE NETR9', serial='S1'):
    return DeployedReceiver(make='Trimble', model=model, serial=serial, span=span(start, end), mark_code=code)


def firmware(start='2000-01-01', end=None, version='4.17', model='TRIMBLE NETR9', serial='S1'):
    return FirmwareHistory(make='Trimble', model=model, serial=serial, span=span(start, end), version=version)


def metsensor(code='TEST', start='2010-01-01', end=None, model='MET4A', serial='M1'):
    return InstalledMetSensor(make='Paroscientific', model=model, serial=serial, span=span(start, end),
                              mark_code=code)


@pytest.fixture
def simple_indexes():
    """one mark with a session, an antenna, a radome and a receiver with one firmware entry"""
    return EquipmentIndexes.from_records(monuments=[monument()],
                                         sessions=[session()],
                                         antennas=[antenna()],
                                         radomes=[radome()],
                                         receivers=[receiver()],
                                         firmware=[firmware()])


# delta tables for two marks, AUCK is complete and WGTN has no equipment
TABLES = {
    'network/marks.csv': [
        'Network,Mark,Name,Latitude,Longitude,Height,Datum,Start Date,End Date,Reference',
        'LI,AUCK,Auckland,-36.60284,174.83444,132.69,NZGD2000,1995-12-05T00:00:00Z,9999-01-01T00:00:00Z,',
        'GN,WGTN,Wellington,-41.32342,174.80561,26.0,NZGD2000,1996-03-19T00:00:00Z,9999-01-01T00:00:00Z,WGTT',
    ],
    'network/monuments.csv': [
        'Mark,Domes Number,Mark Type,Type,Ground Relationship,Foundation Type,Foundation Depth,Start Date,End Date',
        'AUCK,50209M001,Forced Centering,Pillar,-1.5,Concrete,1.0,1995-12-05T00:00:00Z,9999-01-01T00:00:00Z',
        'WGTN,50208M001,Other,Wyatt/Agnew Drilled-Braced,0,Rock,10,1996-03-19T00:00:00Z,9999-01-01T00:00:00Z',
    ],
    'install/sessions.csv': [
        'Mark,Operator,Agency,Model,Satellite System,Interval,Elevation Mask,Header Comment,Format,'
        'Start Date,End Date',
        'AUCK,GNS,GNS,TRIMBLE NETR9,GPS+GLO,30s,0,x,x,2000-01-01T00:00:00Z,9999-01-01T00:00:00Z',
        'WGTN,GNS,GNS,TRIMBLE NETR9,GPS,30s,10,x,x,2000-01-01T00:00:00Z,9999-01-01T00:00:00Z',
    ],
    'install/antennas.csv': [
        'Make,Model,Serial,Mark,Height,North,East,Azimuth,Start Date,End Date',
        'Trimble,TRM41249.00,A2,AUCK,0.055,0,0,0,2012-01-01T00:00:00Z,9999-01-01T00:00:00Z',
        'Trimble,TRM41249.00,A1,AUCK,0.055,0,0,0,2005-01-01T00:00:00Z,2012-01-01T00:00:00Z',
    ],
    'install/radomes.csv': [
        'Make,Model,Serial,Mark,Start Date,End Date',
        'Trimble,SCIS,R1,AUCK,2005-01-01T00:00:00Z,9999-01-01T00:00:00Z',
    ],
    'install/receivers.csv': [
        'Make,Model,Serial,Mark,Start Date,End Date',
        'Trimble,TRIMBLE NETR9,S1,AUCK,2010-01-01T00:00:00Z,9999-01-01T00:00:00Z',
    ],
    'install/firmware.csv': [
        'Make,Model,Serial,Version,Start Date,End Date,Notes',
        'Trimble,TRIMBLE NETR9,S1,4.85,2012-06-01T00:00:00Z,9999-01-01T00:00:00Z,upgrade',
        'Trimble,TRIMBLE NETR9,S1,4.17,2009-01-01T00:00:00Z,2012-06-01T00:00:00Z,',
    ],
    'install/metsensors.csv': [
        'Make,Model,Serial,Mark,IMS Comment,Start Date,End Date',
        'Paroscientific,MET4A,M1,WGTT,x,2001-01-01T00:00:00Z,9999-01-01T00:00:00Z',
    ],
}


def write_tables(root, replace=None):
    tables = dict(TABLES, **(replace or {}))
    for name, rows in tables.items():
        filename = root / name
        filename.parent.mkdir(parents=True, exist_ok=True)
        filename.write_text('\n'.join(rows) + '\n')

    return DeltaLoader(str(root / 'network'), str(root / 'install'))
