"""CSV Trip Repository adapter.

Reads the headerless delimited files the route graph is fed from:

- trips:          departure,arrival,weight,provider,segments,carrier
- directions:     departure,arrival,weight,total_count
- agglomerations: code,cluster (optional)

Rows with the wrong number of fields or unparsable numbers are skipped
and counted; the count is logged as a warning once per file.
"""

from __future__ import annotations

import csv
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, TypeVar

from ...config import GraphConfig, get_config
from ...domain.errors import TripDataError
from ...domain.models import DirectionQuery, LoadStats, TripRecord

T = TypeVar("T")

TRIP_FIELDS = 6
DIRECTION_FIELDS = 4
AGGLOMERATION_FIELDS = 2


def _parse_int(value: str, default: Optional[int] = None) -> int:
    """Parse a non-negative integer, accepting decimal notation ("12.0")."""
    if not value:
        if default is None:
            raise ValueError("missing number")
        return default
    parsed = float(value)
    if not math.isfinite(parsed):
        raise ValueError(f"non-finite number: {value}")
    number = int(parsed)
    if number < 0:
        raise ValueError(f"negative number: {value}")
    return number


def parse_trip(values: Sequence[str]) -> TripRecord:
    """Turn one trips row into a TripRecord.

    Raises:
        ValueError: If the row is malformed.
    """
    departure, arrival, weight, provider, segments, carrier = values
    if not departure or not arrival or not provider:
        raise ValueError("missing departure, arrival or provider")
    return TripRecord(
        departure=departure,
        arrival=arrival,
        weight=_parse_int(weight),
        provider=provider,
        carrier=carrier or None,
        segments=_parse_int(segments, default=0),
    )


def parse_direction(values: Sequence[str]) -> DirectionQuery:
    """Turn one directions row into a DirectionQuery.

    Raises:
        ValueError: If the row is malformed.
    """
    departure, arrival, weight, total_count = values
    if not departure or not arrival:
        raise ValueError("missing departure or arrival")
    return DirectionQuery(
        departure=departure,
        arrival=arrival,
        expected_weight=_parse_int(weight, default=0),
        expected_count=_parse_int(total_count, default=0),
    )


@dataclass
class CSVTripRepository:
    """Trip repository that loads from CSV files.

    This adapter implements TripRepositoryPort. Loaded data is cached
    on the instance until ``clear_cache`` is called.

    Attributes:
        config: Graph configuration (paths, file names, delimiter)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _trips: Optional[Tuple[TripRecord, ...]] = field(default=None, repr=False)
    _directions: Optional[Tuple[DirectionQuery, ...]] = field(default=None, repr=False)
    _agglomerations: Optional[Dict[str, str]] = field(default=None, repr=False)
    _trip_stats: LoadStats = field(default_factory=LoadStats, repr=False)
    _direction_stats: LoadStats = field(default_factory=LoadStats, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def trip_stats(self) -> LoadStats:
        return self._trip_stats

    @property
    def direction_stats(self) -> LoadStats:
        return self._direction_stats

    def load_trips(self) -> Sequence[TripRecord]:
        """Load trip records from the trips file.

        Raises:
            TripDataError: If the file cannot be read.
        """
        if self._trips is None:
            trips, self._trip_stats = self._load(
                self.config.trips_path, TRIP_FIELDS, parse_trip
            )
            self._trips = tuple(trips)
        return self._trips

    def load_directions(self) -> Sequence[DirectionQuery]:
        """Load direction queries from the directions file.

        Raises:
            TripDataError: If the file cannot be read.
        """
        if self._directions is None:
            directions, self._direction_stats = self._load(
                self.config.directions_path, DIRECTION_FIELDS, parse_direction
            )
            self._directions = tuple(directions)
        return self._directions

    def load_agglomerations(self) -> Mapping[str, str]:
        """Load the location normalization table, if one is configured.

        Raises:
            TripDataError: If a configured file cannot be read.
        """
        if self._agglomerations is not None:
            return self._agglomerations

        path = self.config.agglomerations_path
        if path is None:
            self._agglomerations = {}
            return self._agglomerations

        def parse_pair(values: Sequence[str]) -> Tuple[str, str]:
            code, cluster = values
            if not code or not cluster:
                raise ValueError("missing code or cluster")
            return code, cluster

        pairs, _ = self._load(path, AGGLOMERATION_FIELDS, parse_pair)
        self._agglomerations = dict(pairs)
        return self._agglomerations

    def _rows(self, path: Path) -> Iterator[List[str]]:
        with path.open(newline="", encoding="utf-8") as f:
            reader = csv.reader(f, delimiter=self.config.delimiter)
            for row in reader:
                values = [value.strip() for value in row]
                if any(values):
                    yield values

    def _load(
        self,
        path: Path,
        expected_fields: int,
        parse: Callable[[Sequence[str]], T],
    ) -> Tuple[List[T], LoadStats]:
        self._logger.debug("Loading rows", extra={"path": str(path)})

        records: List[T] = []
        read = skipped = 0
        try:
            for values in self._rows(path):
                read += 1
                if len(values) != expected_fields:
                    skipped += 1
                    continue
                try:
                    records.append(parse(values))
                except ValueError:
                    skipped += 1
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise TripDataError(
                f"Failed to read {path.name}",
                file_path=str(path),
                cause=e,
            )

        stats = LoadStats(rows_read=read, rows_skipped=skipped)
        if skipped:
            self._logger.warning(
                "Skipped malformed rows",
                extra={"path": str(path), "skipped": skipped, "read": read},
            )
        self._logger.info(
            "Rows loaded",
            extra={"path": str(path), "loaded": stats.rows_loaded},
        )
        return records, stats

    def clear_cache(self) -> None:
        """Clear cached trip, direction and agglomeration data."""
        self._trips = None
        self._directions = None
        self._agglomerations = None
        self._trip_stats = LoadStats()
        self._direction_stats = LoadStats()
        self._logger.debug("Trip cache cleared")
