# src/bartasks/core/errors.py

from __future__ import annotations


class BarTasksError(Exception):
    """Base class for errors raised by bartasks."""


class TransferError(BarTasksError):
    """A drop payload has a foreign content type or cannot be decoded."""
