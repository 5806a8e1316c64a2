"""Core interfaces for the channel analysis system."""

from .data_source import ChannelDataSource

__all__ = [
    "ChannelDataSource",
]
