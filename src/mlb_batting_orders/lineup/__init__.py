"""Batting order extraction and lineup assembly."""

from .assembler import assemble_lineup
from .extractor import extract_player_record, parse_batting_order

__all__ = ["assemble_lineup", "extract_player_record", "parse_batting_order"]
