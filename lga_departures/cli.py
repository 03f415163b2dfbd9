#!/usr/bin/env python3

import sys
import argparse
import logging
from typing import Optional, List

from lga_departures import config
from lga_departures.context import ReferenceData
from lga_departures.models.navaid import norm
from lga_departures.models.validation import LgaDeparturesError
from lga_departures.preferences import PreferenceStore
from lga_departures.sources import DirectoryTableSource, HttpTableSource
from lga_departures.tool import DepartureTool
from lga_departures.weather.poller import WeatherBoard, WeatherPoller
from lga_departures.weather.source import MetarSource

logger = logging.getLogger(__name__)


class Command:
    """Command-line interface for lga_departures."""

    def __init__(self, args):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
        """
        self.args = args
        self.prefs = PreferenceStore(args.state_file)
        self._reference: Optional[ReferenceData] = None

    @property
    def reference(self) -> ReferenceData:
        """Tables are only loaded by commands that need them."""
        if self._reference is None:
            if self.args.data_url:
                source = HttpTableSource(self.args.data_url)
            else:
                source = DirectoryTableSource(self.args.data_dir)
            self._reference = ReferenceData.load(source)
        return self._reference

    def run_exec(self):
        """Resolve the departure procedure and routes for the selections."""
        reference = self.reference
        lga_config = self.args.lga_config or (reference.lga_config_labels[0] if reference.lga_configs else "")
        jfk_config = self.args.jfk_config or (reference.jfk_config_labels[0] if reference.jfk_configs else "")
        result = DepartureTool(reference).run(
            lga_config, jfk_config, self.args.exit_fix, self.args.acft_type, self.args.dest
        )
        print(result.text())

    def run_configs(self):
        """List the configurations available for selection."""
        print("LGA configurations:")
        for label in self.reference.lga_config_labels:
            print(f"  {label}")
        print("JFK configurations:")
        for label in self.reference.jfk_config_labels:
            print(f"  {label}")

    def run_search(self):
        query = " ".join(self.args.terms)
        if not norm(query):
            return
        hits = self.reference.index.search(query)
        if not hits:
            print("No matches.")
            return
        for hit in hits:
            print(hit.row_text())

    def run_navaid(self):
        for ident in self.args.terms:
            navaid, group = self.reference.index.select_navaid(ident, self.args.index)
            if navaid is not None:
                print(navaid.info_text())
                print()
                print(self.reference.index.overlaps_text(ident, group.index(navaid)))
            else:
                print(self.reference.index.overlaps_text(ident))

    def run_airport(self):
        for ident in self.args.terms:
            print(self.reference.index.airport_info_text(ident))

    def run_routes(self):
        dest = " ".join(self.args.terms)
        print(self.reference.route_finder().routes_text(dest))

    def run_weather(self):
        stations = [s.upper() for s in self.args.terms] or self.prefs.watchlist
        source = MetarSource()
        poller = WeatherPoller(
            source.fetch_report,
            lambda: stations,
            board=WeatherBoard(),
            concurrency=self.args.concurrency,
        )
        poller.refresh()
        for entry in poller.board.entries:
            print(entry.summary())

    def run_watch(self):
        action = self.args.terms[0] if self.args.terms else "list"
        stations = self.args.terms[1:]
        secondary = self.args.secondary
        if action == "add":
            for station in stations:
                if secondary:
                    self.prefs.add_to_secondary_watchlist(station)
                else:
                    self.prefs.add_to_watchlist(station)
        elif action == "remove":
            for station in stations:
                if secondary:
                    self.prefs.remove_from_secondary_watchlist(station)
                else:
                    self.prefs.remove_from_watchlist(station)
        elif action != "list":
            raise ValueError(f"Unknown watch action {action!r}, expected add, remove or list")
        watchlist = self.prefs.secondary_watchlist if secondary else self.prefs.watchlist
        print(" ".join(watchlist) if watchlist else "(empty)")

    def run_prefs(self):
        terms = self.args.terms
        if terms and terms[0] == "theme":
            if len(terms) > 1:
                self.prefs.set_theme(terms[1])
            else:
                self.prefs.toggle_theme()
        elif terms and terms[0] == "panel":
            if len(terms) != 3 or terms[2] not in ("on", "off"):
                raise ValueError("Usage: prefs panel NAME on|off")
            self.prefs.set_panel(terms[1], terms[2] == "on")
        print(f"theme: {self.prefs.theme}")
        for name, visible in self.prefs.panels.items():
            print(f"panel {name}: {'on' if visible else 'off'}")

    def run(self):
        """Run the specified command."""
        getattr(self, f'run_{self.args.command}')()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='LaGuardia departure reference tool')
    parser.add_argument('command', help='Command to execute',
                        choices=['exec', 'configs', 'search', 'navaid', 'airport', 'routes', 'weather', 'watch', 'prefs'])
    parser.add_argument('terms', help='Command arguments (search text, identifiers, stations, ...)', nargs='*')
    parser.add_argument('-d', '--data-dir', help='Directory holding the TSV snapshots', default=config.DATA_DIR)
    parser.add_argument('-u', '--data-url', help='Base URL serving the TSV snapshots', default=config.DATA_URL)
    parser.add_argument('-s', '--state-file', help='Preference file', default=config.STATE_FILE)
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    # exec arguments
    parser.add_argument('--lga-config', help='LGA ATIS configuration label (default: first in table)')
    parser.add_argument('--jfk-config', help='JFK ATIS configuration label (default: first in table)')
    parser.add_argument('--exit-fix', help='Exit fix', default='')
    parser.add_argument('--acft-type', help='Aircraft type filter', default='')
    parser.add_argument('--dest', help='Destination identifier', default='')

    parser.add_argument('-i', '--index', help='Navaid index within an identifier group', type=int, default=0)
    parser.add_argument('--secondary', help='Use the secondary watchlist', action='store_true')
    parser.add_argument('--concurrency', help='Concurrent weather fetches', type=int, default=config.WX_CONCURRENCY)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format=config.LOG_FORMAT
    )
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        Command(args).run()
    except (LgaDeparturesError, ValueError) as e:
        logger.error(f"ERROR: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
