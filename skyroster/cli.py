"""Command-line entry point: log in as a passenger or as staff."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Optional, TextIO, TypeVar

from skyroster.booking import Flight, Passenger
from skyroster.records import read_flights, read_passengers
from skyroster.ui import EmployeeUI, PassengerUI, UserInterface, _TokenReader

T = TypeVar("T")


def login_menu(
    flights: list[Flight],
    passengers: list[Passenger],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Offer the passenger and employee menus until the user exits."""
    reader = _TokenReader(stdin if stdin is not None else sys.stdin)
    out = stdout if stdout is not None else sys.stdout
    interfaces: dict[int, type[UserInterface]] = {1: PassengerUI, 2: EmployeeUI}
    while True:
        out.write("\nLOGIN AS:\n1) Passenger\n2) Employee\n3) Exit Program\nSelect: ")
        try:
            option = reader.integer()
        except EOFError:
            return
        out.write("\n")
        if option is None:
            reader.discard_line()
            out.write("Invalid option.\n")
            continue
        if option == 3:
            out.write("Exiting program...\n")
            return
        interface = interfaces.get(option)
        if interface is None:
            out.write("Invalid option.\n")
            continue
        interface(reader, out).menu(flights, passengers)
        reader.discard_line()


def _load(reader: Callable[[str], list[T]], path: str) -> list[T]:
    try:
        return reader(path)
    except OSError:
        print(f"Error opening file: {path}", file=sys.stderr)
        return []


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load passengers and flights, then run the login menu."""
    parser = argparse.ArgumentParser(
        prog="skyroster", description="Book and manage flights."
    )
    parser.add_argument("--passengers", default="Passenger.csv", help="passenger records")
    parser.add_argument("--flights", default="Flight.csv", help="flight records")
    args = parser.parse_args(argv)

    print()
    try:
        passengers = _load(read_passengers, args.passengers)
        flights = _load(read_flights, args.flights)
    except ValueError as error:
        print(f"Malformed record: {error}", file=sys.stderr)
        return 1

    login_menu(flights, passengers, sys.stdin, sys.stdout)

    passengers.clear()
    print("Container cleared.")
    flights.clear()
    print("Container cleared.")
    print()
    return 0