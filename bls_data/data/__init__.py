"""Data fetching."""

from .connection import BlsConnection
from .fetcher import fetch_batch
from .planner import get_data

__all__ = ["BlsConnection", "fetch_batch", "get_data"]
