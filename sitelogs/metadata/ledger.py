"""
Project: GNSS Site Log Builder
Date: 10/17/26 10:40 AM

Read-only indexes of the equipment installation records. Built once per run and
shared by every station resolution.
"""

from __future__ import annotations

from collections import defaultdict
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Mapping, Tuple, Generic, TypeVar

# app
from ..core.data_classes import Installation, FirmwareHistory

T = TypeVar('T', bound=Installation)


def _chronological(records) -> Tuple:
    # sorted() is stable: records with the same start keep their source order
    return tuple(sorted(records, key=lambda r: r.sort_key))


class EquipmentLedger(Generic[T]):
    """
    Installation records of one equipment category grouped by mark code, each group in
    chronological order.
    """

    def __init__(self, groups: Mapping[str, Tuple[T, ...]]):
        self._groups = MappingProxyType(dict(groups))

    @classmethod
    def from_records(cls, records: Iterable[T],
                     key: Callable[[T], str] = lambda r: r.mark_code) -> EquipmentLedger[T]:
        groups: Dict[str, list] = defaultdict(list)
        for record in records:
            groups[key(record)].append(record)

        return cls({code: _chronological(group) for code, group in groups.items()})

    def records_for(self, mark_code: str) -> Tuple[T, ...]:
        """records for the mark, empty when there is no data"""
        return self._groups.get(mark_code, ())

    def __contains__(self, mark_code: str) -> bool:
        return mark_code in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self):
        return iter(self._groups)


class FirmwareLedger:
    """Firmware history indexed by receiver model and serial number"""

    def __init__(self, models: Mapping[str, Mapping[str, Tuple[FirmwareHistory, ...]]]):
        self._models = MappingProxyType({model: MappingProxyType(dict(serials))
                                         for model, serials in models.items()})

    @classmethod
    def from_records(cls, records: Iterable[FirmwareHistory]) -> FirmwareLedger:
        models: Dict[str, Dict[str, list]] = defaultdict(lambda: defaultdict(list))
        for record in records:
            models[record.model][record.serial].append(record)

        return cls({model: {serial: _chronological(history) for serial, history in serials.items()}
                    for model, serials in models.items()})

    def history(self, model: str, serial: str) -> Tuple[FirmwareHistory, ...]:
        """firmware entries of a receiver, empty when the receiver is unknown"""
        return self._models.get(model, {}).get(serial, ())

    def __len__(self) -> int:
        return sum(len(serials) for serials in self._models.values())
