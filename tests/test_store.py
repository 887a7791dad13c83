import io

import pytest

from moviestore.movies import Classic, Drama
from moviestore.store import StoreManager, main

CUSTOMERS = "1000 Mouse Mickey\n1001 Mouse Minnie\n"

MOVIES = (
    "F, 10, Woody Allen, Annie Hall, 1977\n"
    "D, 10, Steven Spielberg, Schindler's List, 1993\n"
    "C, 1, George Cukor, Holiday, Katherine Hepburn 9 1938\n"
    "D, 5, Steven Spielberg, Schindler's List, 1993\n"
    "Z, 10, Nobody, Nothing, 2000\n"
    "\n"
    "Xbad\n"
)

CLASSIC = "9 1938 Katherine Hepburn"

COMMANDS = (
    "I\n"
    f"B 1000 D C {CLASSIC}\n"
    f"B 1001 D C {CLASSIC}\n"
    f"R 1000 D C {CLASSIC}\n"
    "H 1000\n"
    "X 1000\n"
)


@pytest.fixture
def files(tmp_path):
    paths = {}
    for name, text in (
        ("customers", CUSTOMERS),
        ("movies", MOVIES),
        ("commands", COMMANDS),
    ):
        path = tmp_path / f"{name}.txt"
        path.write_text(text)
        paths[name] = path
    return paths


@pytest.fixture
def loaded(files):
    out = io.StringIO()
    store = StoreManager(out=out)
    store.load_customers(files["customers"])
    store.load_movies(files["movies"])
    out.seek(0)
    out.truncate()
    return store, out


def test_load_customers(files):
    store = StoreManager(out=io.StringIO())
    assert store.load_customers(files["customers"]) == 2
    assert store.get_customer(1000).full_name() == "Mickey Mouse"
    assert store.get_customer(1001).last_name == "Mouse"
    assert store.get_customer(42) is None


def test_load_customers_stops_at_bad_record(tmp_path):
    path = tmp_path / "customers.txt"
    path.write_text("1000 Mouse Mickey\nabc Bad Line\n1002 Duck Donald\n")
    store = StoreManager(out=io.StringIO())
    assert store.load_customers(path) == 1
    assert store.get_customer(1002) is None


def test_load_movies(files, capsys):
    out = io.StringIO()
    store = StoreManager(out=out)
    assert store.load_movies(files["movies"]) == 3
    assert len(store.inventory) == 3
    drama = store.inventory.find(Drama(0, "Steven Spielberg", "Schindler's List", 0))
    assert drama.stock == 10
    assert out.getvalue().splitlines() == ["Invalid movie line: Xbad"]
    assert "Unknown movie type: Z" in capsys.readouterr().err


def test_missing_file_raises(tmp_path):
    store = StoreManager(out=io.StringIO())
    with pytest.raises(FileNotFoundError):
        store.load_customers(tmp_path / "absent.txt")
    with pytest.raises(FileNotFoundError):
        store.process_commands(tmp_path / "absent.txt")


def test_main_runs_all_files(files, capsys):
    status = main([str(files["customers"]), str(files["movies"]), str(files["commands"])])
    assert status == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Done."
    assert "Customers loaded." in lines
    assert "Movies loaded." in lines
    assert "History for 1000 Mouse Mickey:" in lines


def test_main_reports_missing_files(tmp_path, capsys):
    missing = str(tmp_path / "absent.txt")
    assert main([missing, missing, missing]) == 1
    captured = capsys.readouterr()
    assert f"Could not open {missing}" in captured.err
    assert captured.out.splitlines() == ["Done."]