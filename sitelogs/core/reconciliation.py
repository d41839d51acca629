"""
Project: GNSS Site Log Builder
Date: 10/17/26 11:20 AM

Equipment history reconciliation. Installation, firmware and radome records are
intersected with the observation sessions of a mark to build the time-bounded
configuration lists reported in its site log.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)

# app
from ..Utils import format_float, markID
from ..metadata.ledger import EquipmentLedger, FirmwareLedger
from ..metadata.sessions import SessionIndex, match_overlapping
from .interval import Interval, utc_now
from .sitelog_config import SiteLogConfig
from .type_declarations import MatchPolicy
from .data_classes import (Mark, Monument, Session, InstalledAntenna, InstalledRadome, DeployedReceiver,
                           FirmwareHistory, InstalledMetSensor, GnssAntenna, GnssReceiver, GnssMetSensor,
                           ResolvedEquipment)


def removal_date(span: Interval, now: datetime.datetime) -> Optional[datetime.datetime]:
    """end of the span if it already happened, None while the equipment is still in place"""
    return span.end if span.is_past(now) else None


@dataclass(frozen=True)
class EquipmentIndexes:
    """Every lookup table needed to resolve a mark. Built once, only read afterwards."""
    monuments: Mapping[str, Monument] = field(default_factory=lambda: MappingProxyType({}))
    sessions: SessionIndex = field(default_factory=lambda: SessionIndex({}))
    antennas: EquipmentLedger = field(default_factory=lambda: EquipmentLedger({}))
    radomes: EquipmentLedger = field(default_factory=lambda: EquipmentLedger({}))
    receivers: EquipmentLedger = field(default_factory=lambda: EquipmentLedger({}))
    metsensors: EquipmentLedger = field(default_factory=lambda: EquipmentLedger({}))
    firmware: FirmwareLedger = field(default_factory=lambda: FirmwareLedger({}))

    @classmethod
    def from_records(cls,
                     monuments: Iterable[Monument] = (),
                     sessions: Iterable[Session] = (),
                     antennas: Iterable[InstalledAntenna] = (),
                     radomes: Iterable[InstalledRadome] = (),
                     receivers: Iterable[DeployedReceiver] = (),
                     metsensors: Iterable[InstalledMetSensor] = (),
                     firmware: Iterable[FirmwareHistory] = ()) -> EquipmentIndexes:

        return cls(monuments=MappingProxyType({m.mark_code: m for m in monuments}),
                   sessions=SessionIndex.from_records(sessions),
                   antennas=EquipmentLedger.from_records(antennas),
                   radomes=EquipmentLedger.from_records(radomes),
                   receivers=EquipmentLedger.from_records(receivers),
                   metsensors=EquipmentLedger.from_records(metsensors),
                   firmware=FirmwareLedger.from_records(firmware))

    def missing_prerequisites(self, mark: Mark) -> List[str]:
        """names of the record types a mark needs but does not have"""
        missing = []
        if mark.code not in self.monuments:
            missing.append('monument')
        if mark.code not in self.sessions:
            missing.append('sessions')
        if mark.code not in self.antennas:
            missing.append('antennas')
        if mark.code not in self.receivers:
            missing.append('receivers')
        return missing


class ReconciliationEngine:
    """
    Stateless resolver of the equipment history of a mark.

    Session attribution uses the first session (in stored order) that overlaps the candidate
    record; candidates without a session are dropped. Radomes use the last overlapping install.
    """

    def __init__(self, indexes: EquipmentIndexes, config: SiteLogConfig = None,
                 session_policy: MatchPolicy = MatchPolicy.FIRST,
                 radome_policy: MatchPolicy = MatchPolicy.LAST):
        self.indexes = indexes
        self.config = config if config else SiteLogConfig()
        self.session_policy = session_policy
        self.radome_policy = radome_policy

        logger.debug(f'Session match: {session_policy.description}, radome match: {radome_policy.description}')

    def resolve(self, mark: Mark, now: datetime.datetime = None) -> ResolvedEquipment:
        now = now if now else utc_now()

        return ResolvedEquipment(antennas=tuple(self.resolve_antennas(mark, now)),
                                 receivers=tuple(self.resolve_receivers(mark, now)),
                                 metsensors=tuple(self.resolve_metsensors(mark)))

    def _session(self, mark_code: str, *intervals: Interval) -> Optional[Session]:
        return self.indexes.sessions.match(mark_code, *intervals, policy=self.session_policy)

    def resolve_antennas(self, mark: Mark, now: datetime.datetime) -> List[GnssAntenna]:
        antennas = []
        options = self.config.antenna
        radomes = self.indexes.radomes.records_for(mark.code)

        for a in self.indexes.antennas.records_for(mark.code):
            if self._session(mark.code, a.span) is None:
                logger.debug(f'{markID(mark)}: antenna {a.model} {a.serial} ({a.span}) matches no session')
                continue

            radome = match_overlapping(radomes, [a.span], self.radome_policy)

            antennas.append(GnssAntenna(
                antenna_type=a.model,
                serial_number=a.serial,
                antenna_reference_point=options.reference_point,
                marker_arp_up_ecc=format_float(a.height, '.4f'),
                marker_arp_north_ecc=format_float(a.north, '.4f'),
                marker_arp_east_ecc=format_float(a.east, '.4f'),
                alignment_from_true_north=options.alignment_from_true_north,
                antenna_radome_type=radome.model if radome else options.no_radome,
                radome_serial_number=radome.serial if radome else '',
                installed=a.span.start,
                removed=removal_date(a.span, now)))

        return sorted(antennas, key=lambda r: r.installed)

    def resolve_receivers(self, mark: Mark, now: datetime.datetime) -> List[GnssReceiver]:
        receivers = []

        for r in self.indexes.receivers.records_for(mark.code):
            history = self.indexes.firmware.history(r.model, r.serial)
            if not history:
                logger.debug(f'{markID(mark)}: receiver {r.model} {r.serial} has no firmware history')
                continue

            # latest firmware first, a deployment spanning upgrades yields one record per version
            for f in reversed(history):
                span = r.span.intersection(f.span)
                if span is None:
                    continue

                session = self._session(mark.code, r.span, f.span)
                if session is None:
                    logger.debug(f'{markID(mark)}: receiver {r.model} {r.serial} firmware {f.version} '
                                 f'({span}) matches no session')
                    continue

                receivers.append(GnssReceiver(
                    receiver_type=r.model,
                    serial_number=r.serial,
                    satellite_system=session.satellite_system,
                    firmware_version=f.version,
                    elevation_cutoff_setting=format_float(session.elevation_mask),
                    installed=span.start,
                    removed=removal_date(span, now)))

        return sorted(receivers, key=lambda r: r.installed)

    def resolve_metsensors(self, mark: Mark) -> List[GnssMetSensor]:
        metsensors = []
        options = self.config.metsensor

        # met sensors belong to the reference mark, which is not necessarily this one
        for m in self.indexes.metsensors.records_for(mark.reference):
            if self._session(m.mark_code, m.span) is None:
                logger.debug(f'{markID(mark)}: met sensor {m.model} {m.serial} matches no session')
                continue

            metsensors.append(GnssMetSensor(
                manufacturer=m.make,
                met_sensor_model=m.model,
                serial_number=m.serial,
                data_sampling_interval=options.data_sampling_interval,
                effective_dates=options.effective_dates))

        return metsensors
