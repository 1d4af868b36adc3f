"""Shared helpers for grid-select."""

from grid_common.api import GridError, configure_logging

__all__ = ["configure_logging", "GridError"]
