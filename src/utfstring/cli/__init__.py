"""Command-line interface: the ``utfstring`` Click application."""
from __future__ import annotations
