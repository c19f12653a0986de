# skyroster

A small flight-booking roster driven from the terminal. It loads passengers
and flights from CSV files and lets you log in either as a passenger (to book
and cancel flights) or as an employee (to add and remove flights).

The package also contains a few standalone utilities: a growable integer
array, sequence rotation helpers, a singly linked list with cursors, and a
simple `Person` record.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Running the booking menu

```
skyroster
```

Passengers are read from `Passenger.csv` and flights from `Flight.csv` in the
current directory. Other files can be named with options:

```
skyroster --passengers people.csv --flights schedule.csv
```

`Passenger.csv` holds one passenger per line:

```
name,id,country
```

`Flight.csv` holds one flight per line (blank lines are skipped):

```
airport,id,time,day,max_seats
```

If a file cannot be opened, an `Error opening file: ...` message goes to
standard error and the menu starts with an empty list. If a record has an id
or seat count that is not an integer, the command prints `Malformed record:
...` and exits with status 1.

At the login prompt choose `1` for the passenger menu, `2` for the employee
menu, or `3` to exit. Input is read as whitespace-separated words, so
airports, times and days entered in the employee menu are single words.

- **Passenger menu**: select yourself by ID, then choose
  `a` display all flights, `b` book a flight, `c` cancel a booked flight,
  `d` display your bookings, `e` switch to a different passenger, or
  `f` go back to the login prompt.
- **Employee menu**: `1` display all flights, `2` add a flight (you are asked
  for its ID, airport, time, day and seat count), `3` remove a flight (its
  passengers lose the booking), or `4` go back to the login prompt.

## What it does not do

Changes made in the menus live only in memory. Nothing is written back to
`Passenger.csv` or `Flight.csv`, and all bookings, added flights and removed
flights are lost when the program exits. There is no way to add or remove
passengers from the menus.

## Using the library

### Bookings

`skyroster.booking` holds `Passenger` and `Flight`. `Flight.add_passenger`
links both sides: the passenger joins the flight and the flight joins the
passenger's bookings. It raises `AlreadyBookedError` when the passenger is
already on board and `FlightFullError` when no seats are left (both derive
from `BookingError`). `Passenger.book_flight` records a flight on the
passenger only, and raises `AlreadyBookedError` for a repeat booking.

```python
from skyroster.booking import Passenger
from skyroster.employee import add_flight, find_flight, cancel_flight

flights = []
add_flight(flights, "JFK", 101, "09:30", "Monday", 2)

alice = Passenger("Alice", 1, "USA")
flight = find_flight(flights, 101)
flight.add_passenger(alice)
print(flight.describe())
print(alice.describe())

cancel_flight(flights, 101)      # every passenger loses the booking
```

`find_flight` returns `None` when no flight has the id; `cancel_flight`
raises `skyroster.employee.FlightNotFoundError`. `Flight.remove_passenger`
and `Flight.cancel` undo bookings on both sides; `Flight.is_full()` reports
whether the seats are taken. `Flight.passengers` and `Passenger.flights` are
copies of the current lists.

### Loading records

```python
from skyroster.records import read_flights, read_passengers

passengers = read_passengers("Passenger.csv")
flights = read_flights("Flight.csv")
```

### Menus

`skyroster.ui` has `PassengerUI` and `EmployeeUI`, which read from and write
to any text streams, and `skyroster.cli.login_menu(flights, passengers,
stdin, stdout)` runs the login loop on given streams.

### Containers and algorithms

```python
from skyroster.intarray import IntArray
from skyroster.rotation import rotate, is_rotated
from skyroster.linkedlist import LinkedList

arr = IntArray(5)
for value in (10, 20, 30, 40, 50):
    arr.append(value)
rotate(arr, 2)
print(arr)                       # 40 50 10 20 30
print(is_rotated([1, 2, 3], [2, 3, 1]))   # True

lst = LinkedList()
lst.push_back(200)
lst.push_front(100)
lst.insert_after(lst.find(200), 300)
print(lst)                       # 100 200 300
```

- `IntArray` keeps an explicit capacity (`max_size`) that doubles when full;
  it supports `reserve`, `resize`, `insert`, `erase`, `pop`, `clear` and
  bounds-checked indexing. `read_ints(path)` reads comma-separated integers
  from a file into one.
- `LinkedList` offers `push_front`, `push_back`, `pop_front`, `front`,
  `find`, `insert_after`, `erase_after`, `copy` and `clear`; positions are
  `Cursor` objects from `begin()`, `end()` and `find()`.
  `read_ages(path)` reads `name,age` lines into a list of ages.
- `skyroster.person` has the `Person` dataclass (`name`, `age`) with
  `equivalent(p1, p2)` and `compare(p1, p2, comparator)`.