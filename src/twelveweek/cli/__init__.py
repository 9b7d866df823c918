"""Command-line interface for twelveweek."""

from __future__ import annotations

from twelveweek.cli.app import main as main
from twelveweek.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main"]
