"""Trip data adapters - Implementations of TripRepositoryPort.

Available implementations:
- CSVTripRepository: Loads trips and directions from CSV files
"""

from .csv_repository import CSVTripRepository

__all__ = ["CSVTripRepository"]
