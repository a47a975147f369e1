#!/usr/bin/env python3

import argparse
import json
import logging
import sys
from typing import List, Optional

import requests

from openair_airspace.models.airspace import AirspacePolygon
from openair_airspace.models.validation import OpenAirParseError
from openair_airspace.parsers.openair_parser import OpenAirParser
from openair_airspace.sources.openair_source import OpenAirSource, load_file
from openair_airspace.utils.summary import pretty_print_polygons

logger = logging.getLogger(__name__)


class Command:
    """Command-line interface for parsing OpenAir airspace files."""

    def __init__(self, args):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
        """
        self.args = args
        self.parser = OpenAirParser(strict=args.strict)

    def load(self) -> List[AirspacePolygon]:
        """Load polygons from a URL or a local file."""
        source = self.args.source
        if source.startswith(('http://', 'https://')):
            return OpenAirSource(parser=self.parser).fetch(source)
        return load_file(source, parser=self.parser)

    def filter(self, polygons: List[AirspacePolygon]) -> List[AirspacePolygon]:
        if not self.args.airspace_class:
            return polygons
        wanted = {c.upper() for c in self.args.airspace_class}
        return [p for p in polygons if p.airspace_class in wanted]

    def run(self) -> int:
        try:
            polygons = self.filter(self.load())
        except OpenAirParseError as e:
            logger.error(f"Strict parsing failed: {e}")
            return 1
        except (OSError, requests.RequestException) as e:
            logger.error(f"Could not load {self.args.source}: {e}")
            return 1

        if self.args.json:
            json.dump([p.to_dict() for p in polygons], sys.stdout, indent=2)
            sys.stdout.write('\n')
        else:
            pretty_print_polygons(polygons)
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Parse OpenAir airspace definitions')
    parser.add_argument('source', help='OpenAir file path or http(s) URL')
    parser.add_argument('--strict', help='Fail on malformed coordinates', action='store_true')
    parser.add_argument('--json', help='Print polygons as JSON', action='store_true')
    parser.add_argument('-c', '--class', dest='airspace_class', action='append',
                        help='Only keep this airspace class (repeatable)')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    return Command(args).run()


if __name__ == '__main__':
    sys.exit(main())
