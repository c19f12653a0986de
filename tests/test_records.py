import pytest

from skyroster.booking import Flight, Passenger
from skyroster.records import read_flights, read_passengers


def test_read_passengers(tmp_path):
    path = tmp_path / "Passenger.csv"
    path.write_text("Alice,1,USA\nBob,2,UK\n", encoding="utf-8")
    assert read_passengers(path) == [
        Passenger("Alice", 1, "USA"),
        Passenger("Bob", 2, "UK"),
    ]


def test_read_passengers_without_final_newline(tmp_path):
    path = tmp_path / "Passenger.csv"
    path.write_text("Carol,7,Peru", encoding="utf-8")
    people = read_passengers(path)
    assert people == [Passenger("Carol", 7, "Peru")]
    assert people[0].flights == []


def test_read_passengers_bad_id(tmp_path):
    path = tmp_path / "Passenger.csv"
    path.write_text("Alice,abc,USA\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_passengers(path)


def test_read_passengers_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_passengers(tmp_path / "absent.csv")


def test_read_flights(tmp_path):
    path = tmp_path / "Flight.csv"
    path.write_text(
        "JFK,101,10:30,Monday,150\n\nLAX,202,18:45,Friday,90\n", encoding="utf-8"
    )
    assert read_flights(path) == [
        Flight("JFK", 101, "10:30", "Monday", 150),
        Flight("LAX", 202, "18:45", "Friday", 90),
    ]


def test_read_flights_crlf(tmp_path):
    path = tmp_path / "Flight.csv"
    path.write_bytes(b"ORD,3,06:00,Sunday,20\r\n")
    flights = read_flights(path)
    assert flights[0].max_seats == 20
    assert flights[0].day == "Sunday"


def test_read_flights_missing_seats(tmp_path):
    path = tmp_path / "Flight.csv"
    path.write_text("JFK,101,10:30,Monday\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_flights(path)


def test_read_flights_empty_file(tmp_path):
    path = tmp_path / "Flight.csv"
    path.write_text("", encoding="utf-8")
    assert read_flights(path) == []