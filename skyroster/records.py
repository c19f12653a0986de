"""Loading passengers and flights from comma-separated files."""

from __future__ import annotations

import os
from typing import Union

from skyroster.booking import Flight, Passenger

PathType = Union[str, "os.PathLike[str]"]


def _fields(line: str, count: int) -> list[str]:
    parts = line.rstrip("\r\n").split(",")
    parts.extend([""] * (count - len(parts)))
    return parts[:count]


def read_passengers(path: PathType) -> list[Passenger]:
    """Read ``name,id,country`` lines into passengers, one per line."""
    passengers = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            name, passenger_id, country = _fields(line, 3)
            passengers.append(Passenger(name, int(passenger_id), country))
    return passengers


def read_flights(path: PathType) -> list[Flight]:
    """Read ``airport,id,time,day,max_seats`` lines into flights.

    Blank lines are skipped.
    """
    flights = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if not line.rstrip("\r\n"):
                continue
            airport, flight_id, time, day, max_seats = _fields(line, 5)
            flights.append(Flight(airport, int(flight_id), time, day, int(max_seats)))
    return flights