"""Service interfaces for chksum."""

from .logger import ILogger

__all__ = ["ILogger"]
