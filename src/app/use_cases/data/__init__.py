"""
Data Fetch Use Cases
"""

from .fetch_all_data_use_case import DataSnapshot, FetchAllDataUseCase

__all__ = [
    "FetchAllDataUseCase",
    "DataSnapshot",
]
