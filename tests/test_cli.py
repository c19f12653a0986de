import io

from skyroster.booking import Flight, Passenger
from skyroster.cli import login_menu, main


def run(text, flights, passengers):
    out = io.StringIO()
    login_menu(flights, passengers, io.StringIO(text), out)
    return out.getvalue()


def test_exit_option():
    output = run("3\n", [], [])
    assert "Exiting program..." in output


def test_invalid_options():
    output = run("x\n9\n3\n", [], [])
    assert output.count("Invalid option.") == 2
    assert "Exiting program..." in output


def test_end_of_input_returns():
    output = run("", [], [])
    assert "Exiting program..." not in output
    assert "LOGIN AS:" in output


def test_employee_adds_flight():
    flights = []
    run("2\n2 42 LAX 09:30 Monday 3\n4\n3\n", flights, [])
    assert [f.flight_id for f in flights] == [42]


def test_passenger_books_flight():
    flight = Flight("LAX", 5, "09:30", "Monday", 2)
    passenger = Passenger("Ana", 7, "Peru")
    output = run("1\n7\nb 5\nf\n3\n", [flight], [passenger])
    assert passenger.flights == [flight]
    assert "Exiting program..." in output


def test_main_reads_files(tmp_path, monkeypatch, capsys):
    passengers = tmp_path / "passengers.csv"
    passengers.write_text("Ana,7,Peru\n", encoding="utf-8")
    flights = tmp_path / "flights.csv"
    flights.write_text("LAX,5,09:30,Monday,2\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n4\n3\n"))
    code = main(["--passengers", str(passengers), "--flights", str(flights)])
    output = capsys.readouterr().out
    assert code == 0
    assert str(Flight("LAX", 5, "09:30", "Monday", 2)) in output
    assert output.count("Container cleared.") == 2


def test_main_missing_files(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    missing = tmp_path / "absent.csv"
    code = main(["--passengers", str(missing), "--flights", str(missing)])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.err.count("Error opening file:") == 2


def test_main_malformed_file(tmp_path, monkeypatch, capsys):
    passengers = tmp_path / "passengers.csv"
    passengers.write_text("Ana,seven,Peru\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    code = main(["--passengers", str(passengers), "--flights", str(tmp_path / "x.csv")])
    assert code == 1
    assert "Malformed record" in capsys.readouterr().err