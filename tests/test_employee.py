import pytest

from skyroster.booking import Flight, Passenger
from skyroster.employee import (
    FlightNotFoundError,
    add_flight,
    cancel_flight,
    find_flight,
)


@pytest.fixture
def flights():
    return [Flight("JFK", 1, "09:00", "Monday", 3), Flight("LAX", 2, "12:00", "Tuesday", 3)]


def test_add_flight_appends(flights):
    created = add_flight(flights, "TestAirport", 999, "12:00", "Friday", 100)
    assert flights[-1] is created
    assert created == Flight("TestAirport", 999, "12:00", "Friday", 100)
    assert len(flights) == 3


def test_find_flight(flights):
    assert find_flight(flights, 2) is flights[1]


def test_find_flight_missing(flights):
    assert find_flight(flights, 42) is None


def test_find_flight_returns_first_match(flights):
    duplicate = add_flight(flights, "SFO", 1, "20:00", "Sunday", 5)
    assert find_flight(flights, 1) is flights[0]
    assert find_flight(flights, 1) is not duplicate


def test_cancel_flight_removes_and_unbooks(flights):
    add_flight(flights, "TestAirport", 999, "12:00", "Friday", 100)
    passenger = Passenger("Alice", 1, "USA")
    target = find_flight(flights, 999)
    target.add_passenger(passenger)
    cancelled = cancel_flight(flights, 999)
    assert cancelled is target
    assert find_flight(flights, 999) is None
    assert passenger.flights == []
    assert cancelled.passengers == []


def test_cancel_flight_keeps_other_bookings(flights):
    passenger = Passenger("Bob", 2, "UK")
    flights[0].add_passenger(passenger)
    flights[1].add_passenger(passenger)
    cancel_flight(flights, 1)
    assert passenger.flights == [flights[0]]
    assert [f.flight_id for f in flights] == [2]


def test_cancel_missing_flight_raises(flights):
    with pytest.raises(FlightNotFoundError):
        cancel_flight(flights, 404)
    assert len(flights) == 2