#!/usr/bin/env python3
"""
Unified CLI for the fleet dispatch simulator.

Commands:
  roster    - List the garages and vehicles in a fleet file
  simulate  - Run one day, releasing every trip listed in the fleet file
  shell     - Interactive dispatch console seeded from the fleet file
"""

import argparse
import cmd
import logging
import sys
from datetime import datetime
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from fleet import (
    DaySummary,
    DispatchError,
    DispatchSession,
    GarageReport,
    GarageSummary,
    Trip,
    VehicleStatus,
    build_session,
    load_fleet,
)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# Formatting helpers
# =============================================================================


def format_timestamp(timestamp: Optional[datetime]) -> str:
    """Format a trip timestamp for display."""
    return f"{timestamp:%Y-%m-%d %H:%M:%S}" if timestamp is not None else "-"


def format_plate(plate: Optional[str]) -> str:
    return plate or "-"


def make_vehicle_table(vehicles: List[VehicleStatus]) -> List[List[str]]:
    """Convert vehicle statuses to table rows."""
    return [
        [
            f"V{v.id}",
            format_plate(v.plate),
            str(v.capacity),
            str(v.trips_done),
            str(v.passengers_today),
        ]
        for v in vehicles
    ]


def make_garage_table(garages: List[GarageSummary]) -> List[List[str]]:
    """Convert garage summaries to table rows."""
    return [[f"G{g.id}", g.name, str(g.vehicle_count)] for g in garages]


def make_trip_table(trips: List[Trip]) -> List[List[str]]:
    """Convert trips to table rows."""
    return [
        [
            f"#{t.id}",
            format_timestamp(t.timestamp),
            f"G{t.origin_id} -> G{t.destination_id}",
            f"V{t.vehicle_id}",
            str(t.passengers),
        ]
        for t in trips
    ]


def make_route_table(trips: List[Trip]) -> List[List[str]]:
    """Aggregate trips per route: trip count and passengers, in first-seen order."""
    totals = {}
    for t in trips:
        count, pax = totals.get(t.route, (0, 0))
        totals[t.route] = (count + 1, pax + t.passengers)
    return [
        [f"G{origin} -> G{dest}", str(count), str(pax)]
        for (origin, dest), (count, pax) in totals.items()
    ]


VEHICLE_HEADERS = ["Vehicle", "Plate", "Capacity", "Trips", "Passengers"]
GARAGE_HEADERS = ["Garage", "Name", "Vehicles"]
TRIP_HEADERS = ["Trip", "Time", "Route", "Vehicle", "Passengers"]
ROUTE_HEADERS = ["Route", "Trips", "Passengers"]


def render_roster(session: DispatchSession) -> str:
    """Garages and vehicles, as two tables."""
    lines = ["Garages:"]
    lines.append(
        tabulate(
            make_garage_table(session.list_garages()),
            headers=GARAGE_HEADERS,
            tablefmt="simple",
        )
    )
    lines.append("")
    lines.append("Vehicles:")
    lines.append(
        tabulate(
            make_vehicle_table(session.list_vehicles()),
            headers=VEHICLE_HEADERS,
            tablefmt="simple",
        )
    )
    return "\n".join(lines)


def render_garage_report(report: GarageReport) -> str:
    """Vehicles parked in a garage, next-to-depart first, and its potential capacity."""
    lines = [f"Garage G{report.id} - {report.name}"]
    lines.append(f"Vehicles: {report.vehicle_count}")
    if report.vehicles:
        lines.append("Next to depart first:")
        lines.append(
            tabulate(
                make_vehicle_table(report.vehicles),
                headers=VEHICLE_HEADERS,
                tablefmt="simple",
            )
        )
    else:
        lines.append("[Empty]")
    lines.append(f"Potential capacity: {report.potential_capacity}")
    return "\n".join(lines)


def render_day_summary(summary: DaySummary) -> str:
    """Per-vehicle totals and per-route totals for a finished day."""
    lines = ["Day summary by vehicle:"]
    lines.append(
        tabulate(
            make_vehicle_table(summary.vehicles),
            headers=VEHICLE_HEADERS,
            tablefmt="simple",
        )
    )
    lines.append("")
    if summary.trips:
        lines.append("Routes:")
        lines.append(
            tabulate(
                make_route_table(summary.trips),
                headers=ROUTE_HEADERS,
                tablefmt="simple",
            )
        )
        lines.append("")
    lines.append(f"Total trips: {summary.total_trips}")
    lines.append(f"Total passengers: {summary.total_passengers}")
    return "\n".join(lines)


# =============================================================================
# Roster command
# =============================================================================


def cmd_roster(args):
    """List the garages and vehicles in a fleet file."""
    session = build_session(load_fleet(args.fleet_file))
    print(render_roster(session))
    return 0


# =============================================================================
# Simulate command
# =============================================================================


def cmd_simulate(args):
    """Run one day, releasing every trip listed in the fleet file in order."""
    config = load_fleet(args.fleet_file)
    session = build_session(config)

    try:
        session.start_day()
    except DispatchError as e:
        print(f"Error: {e}")
        return 1

    print(f"Day started: {len(session.vehicles)} vehicles, "
          f"{len(session.garage_ids())} garages")
    print(f"Trips requested: {len(config.trips)}")
    print()

    failures = 0
    for request in config.trips:
        try:
            trip = session.release_trip(
                request.origin, request.destination, request.passengers
            )
        except DispatchError as e:
            failures += 1
            print(f"FAIL: {request!r}: {e}")
            if args.stop_on_error:
                break
        else:
            print(f"OK:   {trip}")
    print()

    if args.garages:
        for garage_id in session.garage_ids():
            print(render_garage_report(session.garage_report(garage_id)))
            print()

    summary = session.end_day()
    print(render_day_summary(summary))

    return 1 if failures else 0


# =============================================================================
# Shell command
# =============================================================================


class DispatchShell(cmd.Cmd):
    """Line-based dispatch console. Type 'help' for the list of commands."""

    intro = "Fleet dispatch console. Type 'help' for commands."
    prompt = "(dispatch) "

    def __init__(self, session: DispatchSession, stdin=None, stdout=None):
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.session = session

    def _print(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _ints(self, arg: str, count: int) -> Optional[List[int]]:
        """Parse exactly `count` integers from the argument line."""
        parts = arg.split()
        try:
            values = [int(p) for p in parts]
        except ValueError:
            values = []
        if len(values) != count:
            self._print(f"Error: expected {count} integer(s)")
            return None
        return values

    def onecmd(self, line):
        try:
            return super().onecmd(line)
        except DispatchError as e:
            self._print(f"Error: {e}")
            return False

    def emptyline(self):
        return False

    def default(self, line):
        self._print(f"Unknown command: {line}")

    def do_vehicle(self, arg):
        """vehicle [CAPACITY] [PLATE] - register a vehicle (default capacity if omitted)"""
        parts = arg.strip().split(None, 1)
        capacity = None
        if parts:
            try:
                capacity = int(parts[0])
            except ValueError:
                self._print(f"Error: invalid capacity: {parts[0]}")
                return
        plate = parts[1] if len(parts) > 1 else ""
        vehicle_id = self.session.add_vehicle(capacity, plate)
        vehicle = self.session.vehicle(vehicle_id)
        self._print(f"Vehicle registered: V{vehicle.id} (Cap:{vehicle.capacity})")

    def do_garage(self, arg):
        """garage NAME - register a garage"""
        name = arg.strip()
        if not name:
            self._print("Error: garage name required")
            return
        garage_id = self.session.add_garage(name)
        self._print(f"Garage registered: G{garage_id} - {name}")

    def do_start(self, arg):
        """start - start the day and distribute vehicles across garages"""
        if self.session.start_day():
            self._print("Day started. Vehicles distributed across garages.")
        else:
            self._print("Day already in progress.")

    def do_end(self, arg):
        """end - end the day and show the per-vehicle summary"""
        summary = self.session.end_day()
        if summary is None:
            self._print("No day in progress.")
            return
        self._print(render_day_summary(summary))
        self._print("Day ended. Trip log cleared.")

    def do_trip(self, arg):
        """trip ORIGIN DEST PASSENGERS - release a trip"""
        values = self._ints(arg, 3)
        if values is None:
            return
        trip = self.session.release_trip(*values)
        self._print(f"Trip released: {trip}")

    def do_list(self, arg):
        """list GARAGE - list vehicles parked in a garage"""
        values = self._ints(arg, 1)
        if values is None:
            return
        self._print(render_garage_report(self.session.garage_report(values[0])))

    def do_count(self, arg):
        """count ORIGIN DEST - number of trips on a route"""
        values = self._ints(arg, 2)
        if values is None:
            return
        origin, dest = values
        self._print(f"Trips G{origin} -> G{dest}: {self.session.trips_count(origin, dest)}")

    def do_trips(self, arg):
        """trips ORIGIN DEST - list trips on a route"""
        values = self._ints(arg, 2)
        if values is None:
            return
        trips = self.session.list_trips(*values)
        if not trips:
            self._print("No trips found for that route.")
            return
        self._print(tabulate(make_trip_table(trips), headers=TRIP_HEADERS, tablefmt="simple"))

    def do_passengers(self, arg):
        """passengers ORIGIN DEST - passengers carried on a route"""
        values = self._ints(arg, 2)
        if values is None:
            return
        origin, dest = values
        self._print(
            f"Passengers G{origin} -> G{dest}: "
            f"{self.session.passengers_count(origin, dest)}"
        )

    def do_show(self, arg):
        """show - list all garages and vehicles"""
        self._print(render_roster(self.session))

    def do_quit(self, arg):
        """quit - leave the console"""
        self._print("Bye.")
        return True

    do_EOF = do_quit


def cmd_shell(args):
    """Interactive dispatch console seeded from the fleet file."""
    session = build_session(load_fleet(args.fleet_file))
    DispatchShell(session).cmdloop()
    return 0


# =============================================================================
# Main
# =============================================================================


def main():
    parser = argparse.ArgumentParser(
        description="Fleet dispatch simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fleets/example.yaml roster
  %(prog)s fleets/example.yaml simulate
  %(prog)s fleets/example.yaml simulate --garages --stop-on-error
  %(prog)s --log-level INFO fleets/example.yaml shell
""",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "fleet_file",
        type=Path,
        help="Path to fleet YAML file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Roster subcommand
    subparsers.add_parser("roster", help="List garages and vehicles")

    # Simulate subcommand
    simulate_parser = subparsers.add_parser(
        "simulate", help="Run one day with the trips listed in the fleet file"
    )
    simulate_parser.add_argument(
        "--stop-on-error",
        action="store_true",
        help="Stop at the first rejected trip (any rejected trip exits with status 1)",
    )
    simulate_parser.add_argument(
        "--garages",
        action="store_true",
        help="Show every garage's parked vehicles before ending the day",
    )

    # Shell subcommand
    subparsers.add_parser("shell", help="Interactive dispatch console")

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT
    )

    # Validate fleet file exists
    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    # Dispatch to command handler
    if args.command == "roster":
        return cmd_roster(args)
    elif args.command == "simulate":
        return cmd_simulate(args)
    elif args.command == "shell":
        return cmd_shell(args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
