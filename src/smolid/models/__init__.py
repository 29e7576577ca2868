"""Smolid data models."""

from smolid.models.layout import EPOCH, EPOCH_MS
from smolid.models.smolid import NIL, Smolid

__all__ = [
    "EPOCH",
    "EPOCH_MS",
    "NIL",
    "Smolid",
]
