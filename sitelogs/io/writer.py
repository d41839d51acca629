"""
Project: GNSS Site Log Builder
Date: 10/17/26 4:05 PM
"""

import logging
import os
from typing import Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

# app
from ..core.data_classes import SiteLogRecord
from ..core.type_declarations import SiteLogWriteException
from .sitelog_xml import to_xml
from .sitelog_text import to_text


class SiteLogWriter:
    """
    Writes one <code>.xml document and one <code>.log text file per record. Either directory
    can be None to skip that output.
    """

    def __init__(self, xml_dir: Optional[str] = 'output', log_dir: Optional[str] = 'logs'):
        self.xml_dir = xml_dir
        self.log_dir = log_dir
        self.written = 0

    @staticmethod
    def _write(station_code: str, filename: str, data: bytes) -> None:
        try:
            os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
            with open(filename, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise SiteLogWriteException(str(e), station_code, filename) from e

    def write(self, record: SiteLogRecord) -> Tuple[Optional[str], Optional[str]]:
        code = record.code.lower()
        xml_file = log_file = None

        if self.xml_dir is not None:
            xml_file = os.path.join(self.xml_dir, code + '.xml')
            self._write(record.code, xml_file, to_xml(record))

        if self.log_dir is not None:
            log_file = os.path.join(self.log_dir, code + '.log')
            self._write(record.code, log_file, to_text(record).encode('utf-8'))

        self.written += 1
        logger.debug(f'{record.code}: wrote {xml_file} {log_file}')

        return xml_file, log_file

    def write_all(self, records: Iterable[SiteLogRecord]) -> int:
        """consume the records one at a time, returns how many were written"""
        count = 0
        for record in records:
            self.write(record)
            count += 1

        return count
