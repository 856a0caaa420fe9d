"""
Report Rendering for the Speech Analysis Engine

This module renders an analysis result for the terminal and converts it into
plain data for JSON export.

Functions:
    - color_txt: Colorizes a string.
    - display_elapsed_time: Formats a duration in seconds.
    - result_to_dict: Converts an analysis result into JSON-ready data.
    - print_report: Prints subscores, pacing and fillers as a colored table.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import asdict, fields
from typing import Any

from colored import attr, bg, fg

from speakup.domain import AnalysisResult
from speakup.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


def color_txt(string: str, fg_color: str, bg_color: str, padding: int = 0) -> str:
    """
    Colorizes a string.

    Arguments:
        string (str): String to be colorized.
        fg_color (str): Foreground color.
        bg_color (str): Background color.
        padding (int): Minimum width, padded with spaces.

    Returns:
        str: Colorized string.
    """
    if padding:
        string = string.ljust(padding)
    return f"{fg(fg_color)}{bg(bg_color)}{string}{attr('reset')}"


def display_elapsed_time(elapsed_time: float, _format: str = "long") -> str:
    """
    Returns the elapsed time in seconds in long or short format.

    Arguments:
        elapsed_time (float): Elapsed time in seconds.
        _format (str, optional): 'long' or 'short', by default 'long'.

    Returns:
        str: Formatted elapsed time.
    """
    minutes, seconds = divmod(int(elapsed_time), 60)
    if _format == "long":
        return f"{minutes} min {seconds} seconds" if minutes else f"{elapsed_time:.1f} seconds"
    return f"{minutes}m{seconds}s" if minutes else f"{elapsed_time:.2f}s"


def _score_color(score: int | None) -> str:
    if score is None:
        return "white"
    if score >= 75:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def result_to_dict(result: AnalysisResult) -> dict[str, Any]:
    """Converts a result into JSON-serializable data with derived totals."""
    payload = asdict(result)
    payload["filler_count"] = result.filler_count
    payload["filler_ratio"] = round(result.filler_ratio, 4)
    return payload


def print_report(
    result: AnalysisResult,
    *,
    trend: str | None = None,
    pace_windows: Sequence[tuple[float, float, float]] = (),
) -> None:
    """
    Prints the analysis result as a colored table.

    Arguments:
        result (AnalysisResult): The analysis to render.
        trend (str, optional): Score trend against earlier recordings.
        pace_windows (Sequence[tuple]): (start, end, wpm) rows for the pace chart.
    """
    logger.info(msg=f"Printing report for {result.total_words} words.")
    label_width = max(len(item.name) for item in fields(result.subscores)) + 2

    overall = f" Overall {result.overall_score}/100 "
    print(color_txt(overall, "black", _score_color(result.overall_score)), end="")
    print(f"  {trend}" if trend else "")

    print(color_txt("Subscore", "black", "blue", label_width), end="")
    print(color_txt("Value", "black", "blue", 8))
    for item in fields(result.subscores):
        value = getattr(result.subscores, item.name)
        shown = "-" if value is None else str(value)
        label = item.name.replace("_", " ").capitalize().ljust(label_width)
        print(f"{label}{color_txt(shown, _score_color(value), 'black', 8)}")

    print()
    print(f"Duration:      {display_elapsed_time(result.duration_seconds)}")
    print(f"Words:         {result.total_words}")
    print(f"Pace:          {result.words_per_minute:.0f} wpm")
    print(
        f"Pauses:        {result.pause_count}"
        f" (avg {result.average_pause_length:.2f}s)"
    )
    print(f"Fillers:       {result.filler_count} ({result.filler_ratio:.1%})")
    for filler in result.filler_words:
        stamps = ", ".join(
            display_elapsed_time(stamp, _format="short") for stamp in filler.timestamps
        )
        print(f"  {filler.word.ljust(10)} x{filler.count}  [{stamps}]")
    if result.dropped_word_count:
        print(color_txt(f"Dropped words: {result.dropped_word_count}", "black", "red"))

    if pace_windows:
        print()
        print(color_txt("Window", "black", "green", 16), end="")
        print(color_txt("WPM", "black", "green", 8))
        for start, end, wpm in pace_windows:
            span = (
                f"{display_elapsed_time(start, _format='short')}"
                f"-{display_elapsed_time(end, _format='short')}"
            )
            print(f"{span.ljust(16)}{wpm:.0f}")
