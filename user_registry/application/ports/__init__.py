"""Ports shared across contexts. Repository ports sit next to their context."""

from .logger import LoggerProtocol

__all__ = ["LoggerProtocol"]
