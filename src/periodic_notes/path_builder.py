"""Helpers for turning calendar identifiers into vault segments."""
from __future__ import annotations

from typing import List

from periodic_notes.models import CalendarIdentifiers, Granularity, Segment


def join_vault_path(*parts: str) -> str:
    """Join path fragments with ``/`` and drop empty components.

    The root folder setting is not validated, so ``"/"``, ``""`` and
    ``"Notes/"`` all collapse to the expected vault-relative form.
    """

    pieces: List[str] = []
    for part in parts:
        pieces.extend(piece for piece in part.split("/") if piece)
    return "/".join(pieces)


def build_segments(root_folder: str, granularity: Granularity, ids: CalendarIdentifiers) -> List[Segment]:
    """Return the folder/note pairs for ``granularity``, outermost first."""

    if granularity == "year":
        year_folder = join_vault_path(root_folder, ids.year)
        return [Segment(year_folder, ids.year)]

    if granularity == "month":
        year_folder = join_vault_path(root_folder, ids.year)
        month_folder = join_vault_path(year_folder, ids.year_month)
        return [
            Segment(year_folder, ids.year),
            Segment(month_folder, ids.year_month),
        ]

    if granularity == "week":
        year_folder = join_vault_path(root_folder, ids.week_start_year)
        month_folder = join_vault_path(year_folder, ids.week_start_month)
        return [
            Segment(year_folder, ids.week_start_year),
            Segment(month_folder, ids.week_start_month),
            Segment(month_folder, ids.iso_year_week),
        ]

    if granularity == "day":
        year_folder = join_vault_path(root_folder, ids.year)
        month_folder = join_vault_path(year_folder, ids.year_month)
        return [
            Segment(year_folder, ids.year),
            Segment(month_folder, ids.year_month),
            Segment(month_folder, ids.year_month_day),
        ]

    raise ValueError(f"Unsupported granularity: {granularity!r}")


__all__ = ["join_vault_path", "build_segments"]
