"""Staff operations on the list of scheduled flights."""

from __future__ import annotations

from typing import Optional

from skyroster.booking import Flight


class FlightNotFoundError(LookupError):
    """No flight carries the requested id."""


def add_flight(
    flights: list[Flight],
    airport: str,
    flight_id: int,
    time: str,
    day: str,
    max_seats: int,
) -> Flight:
    """Create a flight, append it to ``flights`` and return it."""
    flight = Flight(airport, flight_id, time, day, max_seats)
    flights.append(flight)
    return flight


def find_flight(flights: list[Flight], flight_id: int) -> Optional[Flight]:
    """The first flight with ``flight_id``, or None if there is none."""
    return next((flight for flight in flights if flight.flight_id == flight_id), None)


def cancel_flight(flights: list[Flight], flight_id: int) -> Flight:
    """Cancel the first flight with ``flight_id`` and remove it from ``flights``.

    Every passenger loses the booking. Returns the cancelled flight and
    raises FlightNotFoundError when no flight has that id.
    """
    for position, flight in enumerate(flights):
        if flight.flight_id == flight_id:
            flight.cancel()
            del flights[position]
            return flight
    raise FlightNotFoundError("Flight not found.")