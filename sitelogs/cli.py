#!/usr/bin/env python

"""
Project: GNSS Site Log Builder
Date: 10/17/26 4:30 PM

Build IGS site logs (XML and ASCII) for every mark in the delta metadata tables.
"""

import argparse
import logging
import sys

# app
from sitelogs.Utils import add_version_argument
from sitelogs.core.logging_config import setup_sitelog_logging
from sitelogs.core.sitelog_config import SiteLogConfig
from sitelogs.core.station_resolver import StationResolver
from sitelogs.core.type_declarations import SiteLogLoadException, SiteLogWriteException, SiteLogConfigException
from sitelogs.io.delta_csv import DeltaLoader
from sitelogs.io.writer import SiteLogWriter

logger = logging.getLogger('sitelogs.cli')

# Map verbosity to logging levels
VERBOSITY_MAP = {
    'quiet': logging.CRITICAL,
    'info': logging.INFO,
    'debug': logging.DEBUG
}


def build_parser():
    parser = argparse.ArgumentParser(description='Build GNSS site logs from the delta network and install tables')

    parser.add_argument('-network', '--network', type=str, default='../../network', metavar='dir',
                        help="Directory holding marks.csv and monuments.csv. Default is ../../network")

    parser.add_argument('-install', '--install', type=str, default='../../install', metavar='dir',
                        help="Directory holding the sessions and equipment tables. Default is ../../install")

    parser.add_argument('-output', '--output', type=str, default='output', metavar='dir',
                        help="Directory for the XML site logs. Default is output")

    parser.add_argument('-logs', '--logs', type=str, default='logs', metavar='dir',
                        help="Directory for the ASCII site logs. Default is logs")

    parser.add_argument('-config', '--config', type=str, default=None, metavar='json',
                        help="JSON file (or string) with configuration overrides")

    parser.add_argument('-verbosity', '--verbosity',
                        choices=['quiet', 'info', 'debug'], default='info',
                        help="Determine how detailed the execution messages should be. "
                             "Default is 'info'")

    add_version_argument(parser)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    setup_sitelog_logging(level=VERBOSITY_MAP[args.verbosity])

    try:
        config = SiteLogConfig(json_file=args.config)

        for issue in config.validate_config():
            logger.warning(f'Configuration: {issue}')

        marks, indexes = DeltaLoader(args.network, args.install).load()

        resolver = StationResolver(marks, indexes, config, progress=args.verbosity == 'info')
        written = SiteLogWriter(args.output, args.logs).write_all(resolver.resolve_all())

    except (SiteLogLoadException, SiteLogWriteException, SiteLogConfigException) as e:
        logger.error(str(e))
        return 1

    logger.info(f'Wrote {written} site logs for {len(marks)} marks')
    return 0


if __name__ == '__main__':
    sys.exit(main())
