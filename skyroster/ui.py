"""Interactive console menus for passengers and staff."""

from __future__ import annotations

import re
import sys
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable
from typing import Optional, TextIO, Union

from skyroster import employee
from skyroster.booking import AlreadyBookedError, Flight, Passenger

_RULE = "-" * 30
_LEADING_INT = re.compile(r"[+-]?\d+")


class _TokenReader:
    """Whitespace-separated console input, read one token at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def word(self) -> str:
        """The next token; raises EOFError when the input is exhausted."""
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def char(self) -> str:
        """The next non-blank character."""
        token = self.word()
        if len(token) > 1:
            self._pending.appendleft(token[1:])
        return token[0]

    def integer(self) -> Optional[int]:
        """The leading integer of the next token, or None if it has none."""
        token = self.word()
        match = _LEADING_INT.match(token)
        if match is None:
            return None
        rest = token[match.end():]
        if rest:
            self._pending.appendleft(rest)
        return int(match.group())

    def discard_line(self) -> None:
        """Forget whatever is left of the line being read."""
        self._pending.clear()


class UserInterface(ABC):
    """A menu driven through text streams."""

    def __init__(
        self,
        stdin: Union[TextIO, _TokenReader, None] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        if isinstance(stdin, _TokenReader):
            self._reader = stdin
        else:
            self._reader = _TokenReader(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)

    @abstractmethod
    def menu(self, flights: list[Flight], passengers: list[Passenger]) -> None:
        """Run the menu until the user leaves it or the input ends."""

    def display(self, items: Iterable[object]) -> None:
        """Print every item between two rules."""
        items = list(items)
        self._write(_RULE + "\n")
        if not items:
            self._write("List is empty\n")
        else:
            for item in items:
                self._write(f"{item}\n")
        self._write(_RULE + "\n")

    def select_passenger(self, passengers: list[Passenger]) -> Optional[Passenger]:
        """Ask for a passenger id; the matching passenger, or None."""
        self._write("\n--- Select a passenger ---\n")
        self.display(passengers)
        if not passengers:
            return None
        self._write("Enter the ID of the passenger.:")
        wanted = self._reader.integer()
        for passenger in passengers:
            if wanted is not None and passenger.passenger_id == wanted:
                self._write(f"Selected: {passenger.name}\n")
                return passenger
        self._write("Error: Passenger ID not found .\n")
        return None

    def select_flight(self, flights: list[Flight]) -> Optional[Flight]:
        """Ask for a flight id; the matching flight, or None."""
        self._write("\n--- Select a flight ---\n")
        self.display(flights)
        if not flights:
            return None
        self._write("Enter Flight ID to select  ")
        wanted = self._reader.integer()
        for flight in flights:
            if wanted is not None and flight.flight_id == wanted:
                self._write(f"Flight {wanted} selected\n")
                return flight
        self._write("Error: Flight ID not found.\n")
        return None


class PassengerUI(UserInterface):
    """Booking and cancelling flights on behalf of a chosen passenger."""

    def menu(self, flights: list[Flight], passengers: list[Passenger]) -> None:
        try:
            while True:
                passenger = self.select_passenger(passengers)
                if passenger is None:
                    return
                if not self._passenger_menu(passenger, flights):
                    return
        except EOFError:
            return

    def _passenger_menu(self, passenger: Passenger, flights: list[Flight]) -> bool:
        """Serve one passenger; True to switch passenger, False to leave."""
        while True:
            self._write("\n-------------------------\n")
            self._write(f"PASSSENGER MENU: {passenger.name}\n")
            self._write("-------------------------\n")
            self._write(
                "a. Display all flights\n"
                "b. Book a flight\n"
                "c. Cancel a flight\n"
                "d. Display booked flights\n"
                "e. Switch to a different passenger\n"
                "f. Exit to main menu\n"
                "Enter option: "
            )
            option = self._reader.char()
            if option == "a":
                self.display(flights)
            elif option == "b":
                self.book_flight(passenger, flights)
            elif option == "c":
                self.cancel_flight(passenger)
            elif option == "d":
                self._write(passenger.describe())
            elif option == "e":
                return True
            elif option == "f":
                return False
            else:
                self._write("Invalid Option. Try again. \n")

    def book_flight(self, passenger: Passenger, flights: list[Flight]) -> None:
        """Let the passenger pick a flight and book it."""
        flight = self.select_flight(flights)
        if flight is None:
            self._write("Booking cancelled.\n")
            return
        try:
            passenger.book_flight(flight)
        except AlreadyBookedError as error:
            self._write(f"{error}\n")
        self._write("Booking attempt complete. \n")

    def cancel_flight(self, passenger: Passenger) -> None:
        """Let the passenger pick one of their flights and cancel it."""
        booked = passenger.flights
        if not booked:
            self._write("You have no booked flights.\n")
            return
        self.display(booked)
        self._write("Enter Flight ID to cancel: ")
        wanted = self._reader.integer()
        for flight in booked:
            if wanted is not None and flight.flight_id == wanted:
                passenger.cancel_flight(flight)
                flight.remove_passenger(passenger)
                self._write(f"Flight {wanted} cancelled.\n")
                return
        self._write("Flight not found in your booked list.\n")


class EmployeeUI(UserInterface):
    """Listing, scheduling and removing flights."""

    def menu(self, flights: list[Flight], passengers: list[Passenger]) -> None:
        try:
            while True:
                self._write(
                    "\n--- EMPLOYEE MENU ---\n"
                    "1) Display all flights\n"
                    "2) Add a flight\n"
                    "3) Remove a flight\n"
                    "4) Exit to main menu\n"
                    "Select: "
                )
                option = self._reader.integer()
                if option == 1:
                    self.display(flights)
                elif option == 2:
                    self.add_flight(flights)
                elif option == 3:
                    if not flights:
                        self._write("No flights to delete.\n")
                        continue
                    flight = self.select_flight(flights)
                    if flight is not None:
                        self.remove_flight(flights, flight)
                elif option == 4:
                    return
                else:
                    self._write("Invalid option.\n")
        except EOFError:
            return

    def add_flight(self, flights: list[Flight]) -> Optional[Flight]:
        """Ask for a flight's details and schedule it; the new flight or None."""
        self._write("Enter flight ID: ")
        flight_id = self._reader.integer()
        self._write("Enter airport: ")
        airport = self._reader.word()
        self._write("Enter time (XX:XX): ")
        time = self._reader.word()
        self._write("Enter day: ")
        day = self._reader.word()
        self._write("Enter max seats: ")
        max_seats = self._reader.integer()
        if flight_id is None or max_seats is None:
            self._write("Invalid input. Flight not added.\n")
            return None
        flight = employee.add_flight(flights, airport, flight_id, time, day, max_seats)
        self._write("Flight added.\n")
        return flight

    def remove_flight(self, flights: list[Flight], flight: Flight) -> None:
        """Cancel ``flight`` for its passengers and take it off the schedule."""
        for position, scheduled in enumerate(flights):
            if scheduled is flight:
                flight.cancel()
                del flights[position]
                self._write("Flight removed.\n")
                return
        raise ValueError("flight is not on the schedule")