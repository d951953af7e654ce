from pathlib import Path

import pytest

from routegraph.adapters.trips import CSVTripRepository
from routegraph.adapters.trips.csv_repository import parse_direction, parse_trip
from routegraph.config import GraphConfig
from routegraph.domain.errors import TripDataError
from routegraph.domain.models import DirectionQuery, TripRecord


def write(path: Path, *lines: str) -> None:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path):
    write(
        tmp_path / "trips.csv",
        "PRG,VIE,20,kiwi,1,OK",
        "VIE,BUD,15.0,omio,,",
        "PRG,BUD,broken,kiwi,1,OK",
        "PRG,BUD,40,kiwi",
        "",
        "BUD,PRG,-3,kiwi,1,OK",
        "BUD,VIE,inf,kiwi,1,OK",
        "BUD,VIE,1e400,kiwi,1,OK",
    )
    write(
        tmp_path / "directions.csv",
        "PRG,BUD,35,12",
        "BUD,PRG,50",
        "VIE,PRG,,",
    )
    write(tmp_path / "agglomerations.csv", "ORY,PAR", "CDG,PAR", "bad")
    return tmp_path


def test_load_trips_parses_rows_in_file_order(data_dir):
    repository = CSVTripRepository(GraphConfig(data_dir=data_dir))

    trips = repository.load_trips()

    assert trips == (
        TripRecord("PRG", "VIE", 20, "kiwi", "OK", 1),
        TripRecord("VIE", "BUD", 15, "omio", None, 0),
    )


def test_load_trips_counts_skipped_rows(data_dir):
    repository = CSVTripRepository(GraphConfig(data_dir=data_dir))

    repository.load_trips()

    assert repository.trip_stats.rows_read == 7
    assert repository.trip_stats.rows_skipped == 5
    assert repository.trip_stats.rows_loaded == 2


def test_load_trips_is_cached_until_cleared(data_dir):
    repository = CSVTripRepository(GraphConfig(data_dir=data_dir))
    first = repository.load_trips()

    write(data_dir / "trips.csv", "A,B,1,P,1,C")
    assert repository.load_trips() is first

    repository.clear_cache()
    assert repository.load_trips() == (TripRecord("A", "B", 1, "P", "C", 1),)


def test_load_directions(data_dir):
    repository = CSVTripRepository(GraphConfig(data_dir=data_dir))

    directions = repository.load_directions()

    assert directions == (
        DirectionQuery("PRG", "BUD", 35, 12),
        DirectionQuery("VIE", "PRG", 0, 0),
    )
    assert repository.direction_stats.rows_skipped == 1


def test_load_agglomerations(data_dir):
    config = GraphConfig(data_dir=data_dir, agglomerations_file="agglomerations.csv")
    repository = CSVTripRepository(config)

    assert repository.load_agglomerations() == {"ORY": "PAR", "CDG": "PAR"}


def test_agglomerations_default_to_empty(data_dir):
    repository = CSVTripRepository(GraphConfig(data_dir=data_dir))

    assert repository.load_agglomerations() == {}


def test_missing_file_raises_trip_data_error(tmp_path):
    repository = CSVTripRepository(GraphConfig(data_dir=tmp_path))

    with pytest.raises(TripDataError) as excinfo:
        repository.load_trips()

    assert excinfo.value.file_path == str(tmp_path / "trips.csv")
    assert isinstance(excinfo.value.cause, OSError)


def test_custom_delimiter(tmp_path):
    write(tmp_path / "trips.csv", "PRG;VIE;20;kiwi;1;OK")
    repository = CSVTripRepository(GraphConfig(data_dir=tmp_path, delimiter=";"))

    assert repository.load_trips()[0].arrival == "VIE"


def test_parse_trip_rejects_missing_provider():
    with pytest.raises(ValueError):
        parse_trip(["PRG", "VIE", "20", "", "1", "OK"])


def test_parse_direction_requires_endpoints():
    with pytest.raises(ValueError):
        parse_direction(["", "VIE", "20", "1"])


def test_parse_trip_rejects_non_finite_weight():
    for weight in ("inf", "-inf", "nan", "1e400"):
        with pytest.raises(ValueError):
            parse_trip(["PRG", "VIE", weight, "kiwi", "1", "OK"])
