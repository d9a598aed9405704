"""Utility helpers for chksum."""

from .files import read_file

__all__ = ["read_file"]
