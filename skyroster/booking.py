"""Passengers, flights, and the bookings that link them."""

from __future__ import annotations

from typing import Optional


class BookingError(Exception):
    """A booking could not be made."""


class AlreadyBookedError(BookingError):
    """The passenger and flight are already linked."""


class FlightFullError(BookingError):
    """The flight has no free seats."""


def _contains(items: list, target: object) -> bool:
    return any(item is target for item in items)


def _remove(items: list, target: object) -> bool:
    for position, item in enumerate(items):
        if item is target:
            del items[position]
            return True
    return False


class Passenger:
    """A traveller and the flights they have booked."""

    def __init__(self, name: str = "", passenger_id: int = 0, country: str = "") -> None:
        self.name = name
        self.passenger_id = passenger_id
        self.country = country
        self._flights: list[Flight] = []

    def clear(self) -> None:
        """Reset every field and forget all booked flights."""
        self.name = ""
        self.passenger_id = 0
        self.country = ""
        self._flights.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Passenger):
            return NotImplemented
        return (
            self.name == other.name
            and self.passenger_id == other.passenger_id
            and self.country == other.country
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Passenger Name: {self.name}, ID: {self.passenger_id}, Country: {self.country}"

    def __repr__(self) -> str:
        return (
            f"Passenger({self.name!r}, {self.passenger_id!r}, {self.country!r})"
        )

    def describe(self) -> str:
        """The passenger's details followed by a numbered list of flights."""
        lines = [
            f"{self}, Number of Flights: {len(self._flights)}):",
        ]
        if not self._flights:
            lines.append(" No booked flights.")
        else:
            lines.extend(
                f"  {number}. {flight}"
                for number, flight in enumerate(self._flights, start=1)
            )
        return "\n".join(lines) + "\n"

    @property
    def flights(self) -> list["Flight"]:
        """A copy of the flights this passenger has booked, in booking order."""
        return list(self._flights)

    def book_flight(self, flight: Optional["Flight"]) -> None:
        """Add ``flight`` to this passenger's bookings.

        Raises AlreadyBookedError if the very same flight is already booked.
        """
        if flight is None:
            return
        if _contains(self._flights, flight):
            raise AlreadyBookedError("Flight already booked for this passenger.")
        self._flights.append(flight)

    def cancel_flight(self, flight: Optional["Flight"]) -> None:
        """Drop ``flight`` from this passenger's bookings if it is there."""
        if flight is None:
            return
        _remove(self._flights, flight)

    def _attach(self, flight: "Flight") -> None:
        if not _contains(self._flights, flight):
            self._flights.append(flight)


class Flight:
    """A scheduled flight with a seat limit and a passenger list."""

    def __init__(
        self,
        airport: str = "",
        flight_id: int = 0,
        time: str = "",
        day: str = "",
        max_seats: int = 0,
    ) -> None:
        self.airport = airport
        self.flight_id = flight_id
        self.time = time
        self.day = day
        self.max_seats = max_seats
        self._passengers: list[Passenger] = []

    def clear(self) -> None:
        """Reset every field and forget all passengers."""
        self.airport = ""
        self.flight_id = 0
        self.time = ""
        self.day = ""
        self.max_seats = 0
        self._passengers.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flight):
            return NotImplemented
        return (
            self.airport == other.airport
            and self.flight_id == other.flight_id
            and self.time == other.time
            and self.day == other.day
            and self.max_seats == other.max_seats
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"Flight(Airport: {self.airport}, ID: {self.flight_id}, "
            f"Time: {self.time}, Day: {self.day}, MaxSeats: {self.max_seats})"
        )

    def __repr__(self) -> str:
        return (
            f"Flight({self.airport!r}, {self.flight_id!r}, {self.time!r}, "
            f"{self.day!r}, {self.max_seats!r})"
        )

    def describe(self) -> str:
        """The flight's id and airport followed by a numbered passenger list."""
        lines = [f"Flight {self.flight_id}({self.airport}) Passengers: "]
        if not self._passengers:
            lines.append("No passengers booked. ")
        else:
            lines.extend(
                f" {number}. {passenger}"
                for number, passenger in enumerate(self._passengers, start=1)
            )
        return "\n".join(lines) + "\n"

    @property
    def passengers(self) -> list[Passenger]:
        """A copy of the passengers on board, in booking order."""
        return list(self._passengers)

    def is_full(self) -> bool:
        """True when no seats are left."""
        return len(self._passengers) >= self.max_seats

    def cancel(self) -> None:
        """Cancel the flight: every passenger loses it and the list empties."""
        for passenger in self._passengers:
            passenger.cancel_flight(self)
        self._passengers.clear()

    def add_passenger(self, passenger: Optional[Passenger]) -> None:
        """Seat ``passenger`` and record the flight in their bookings.

        Raises AlreadyBookedError if they are already on board and
        FlightFullError if every seat is taken.
        """
        if passenger is None:
            return
        if _contains(self._passengers, passenger):
            raise AlreadyBookedError("Passenger already on this flight.")
        if self.is_full():
            raise FlightFullError("Flight is full! Cannot add passenger.")
        self._passengers.append(passenger)
        passenger._attach(self)

    def remove_passenger(self, passenger: Optional[Passenger]) -> None:
        """Take ``passenger`` off the flight and out of its bookings."""
        if passenger is None:
            return
        if _remove(self._passengers, passenger):
            passenger.cancel_flight(self)