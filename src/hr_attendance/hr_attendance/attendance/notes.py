"""Automatic record annotations merged into free-text notes."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from ..core.constants import (
    NOTE_LEFT_EARLY,
    NOTE_MISSED_CHECKIN,
    NOTE_MISSED_CHECKOUT,
    NOTES_JOINER,
    NOTES_SPLIT_PATTERN,
)

AUTOMATIC_NOTES = frozenset({NOTE_MISSED_CHECKOUT, NOTE_MISSED_CHECKIN, NOTE_LEFT_EARLY})


def split_notes(notes: Optional[str]) -> list[str]:
    """Split on Arabic/Latin commas, trimmed, empties and repeats dropped, order kept."""
    out: list[str] = []
    for token in re.split(NOTES_SPLIT_PATTERN, notes or ""):
        token = token.strip()
        if token and token not in out:
            out.append(token)
    return out


def append_notes(existing: Optional[str], additions: Iterable[str]) -> Optional[str]:
    tokens = split_notes(existing)
    for note in additions:
        if note not in tokens:
            tokens.append(note)
    return NOTES_JOINER.join(tokens) or None


def strip_automatic_notes(notes: Optional[str]) -> Optional[str]:
    """Keep only the human-written part of a previously annotated note."""
    kept = [t for t in split_notes(notes) if t not in AUTOMATIC_NOTES]
    return NOTES_JOINER.join(kept) or None


def compute_automatic_notes(
    *,
    existing_notes: Optional[str],
    check_in_exists: bool,
    check_out_exists: bool,
    missing_stamp_excused: bool,
    early_leave_excused: bool,
    check_out_before_early_leave: bool,
) -> Optional[str]:
    notes: list[str] = []
    if check_in_exists and not check_out_exists and not missing_stamp_excused:
        notes.append(NOTE_MISSED_CHECKOUT)
    if not check_in_exists and check_out_exists and not missing_stamp_excused:
        notes.append(NOTE_MISSED_CHECKIN)
    if check_out_exists and check_out_before_early_leave and not early_leave_excused:
        notes.append(NOTE_LEFT_EARLY)
    return append_notes(existing_notes, notes)
