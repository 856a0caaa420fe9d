"""
SpeakUp Speech Analysis Engine

This module is the command-line entry point of the speech analysis engine.
It scores a recognizer transcript stored as JSON and prints a coaching report.

Usage:
    python -m speakup --transcript words.json [--duration 62.5]
        [--target-wpm 150] [--prompt "..."] [--vocab word ...]
        [--volume levels.json] [--history 61 70 ...] [--json]

The transcript file holds a list of ``[word, start, end, confidence]`` rows or
objects with ``word``/``start``/``end``/``confidence`` keys. The volume file
holds a list of microphone levels in dBFS.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from dataclasses import replace
from pathlib import Path
from typing import Any

from halo import Halo

from speakup.analysis.pace import pace_timeline
from speakup.analyzer import analyze_transcript
from speakup.config import get_settings
from speakup.domain import RawWord
from speakup.scoring.trend import score_trend
from speakup.transcript.timeline import build_timeline
from speakup.utils.logger import configure_logging, get_logger
from speakup.utils.report_utils import print_report, result_to_dict

logger: logging.Logger = get_logger("speakup")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Speech practice analysis and scoring")
    parser.add_argument(
        "--transcript",
        type=str,
        required=True,
        help="Path to a JSON transcript of timed words",
    )
    parser.add_argument(
        "--duration",
        type=float,
        help="Actual recording length in seconds (defaults to the last word end)",
    )
    parser.add_argument(
        "--target-wpm",
        type=float,
        default=settings.analysis.target_wpm,
        help="Target speaking rate in words per minute",
    )
    parser.add_argument("--prompt", type=str, help="Prompt the speaker answered")
    parser.add_argument(
        "--vocab",
        nargs="*",
        default=list(settings.analysis.target_vocabulary),
        help="Target vocabulary words being practiced",
    )
    parser.add_argument(
        "--volume",
        type=str,
        help="Path to a JSON list of microphone levels in dBFS",
    )
    parser.add_argument(
        "--history",
        nargs="*",
        type=int,
        default=[],
        help="Earlier overall scores, oldest first, for the trend indicator",
    )
    parser.add_argument(
        "--no-track-pauses",
        action="store_true",
        help="Leave pause statistics out of the report and score",
    )
    parser.add_argument(
        "--no-track-fillers",
        action="store_true",
        help="Leave filler words out of the report and score",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the analysis as JSON instead of a table",
    )
    parser.add_argument("--log-level", type=str, help="Logging level override")
    return parser.parse_args(argv)


def _read_json(path: str) -> Any:
    with open(Path(path), encoding="utf-8") as file:
        return json.load(file)


def load_transcript(path: str) -> list[RawWord]:
    """Reads a JSON transcript into recognizer word tuples."""
    rows = _read_json(path)
    if not isinstance(rows, list):
        raise ValueError("Transcript JSON must be a list of words.")
    words: list[RawWord] = []
    for row in rows:
        if isinstance(row, dict):
            words.append(
                RawWord(
                    word=row.get("word"),
                    start=row.get("start"),
                    end=row.get("end"),
                    confidence=row.get("confidence"),
                )
            )
        else:
            words.append(RawWord(*row))
    return words


def main(argv: list[str] | None = None) -> None:
    """
    Main function to handle the command line interface logic.
    """
    args = _parse_args(argv)
    if args.log_level:
        configure_logging(args.log_level)

    try:
        raw_words = load_transcript(args.transcript)
        volume = _read_json(args.volume) if args.volume else None
        config = replace(
            get_settings().analysis,
            target_wpm=args.target_wpm,
            track_pauses=not args.no_track_pauses,
            track_fillers=not args.no_track_fillers,
            target_vocabulary=tuple(args.vocab),
            prompt_text=args.prompt,
        )
    except (OSError, ValueError, TypeError) as err:
        logger.error(msg=f"Failed to read analysis input: {err}")
        sys.exit(1)

    start_time = time.time()
    with Halo(text="Analyzing speech...", spinner="dots", text_color="green"):
        result = analyze_transcript(
            raw_words,
            duration_seconds=args.duration,
            config=config,
            volume_samples=volume,
        )
    logger.info(msg=f"Analysis completed in {time.time() - start_time:.2f} seconds")

    if args.json:
        print(json.dumps(result_to_dict(result), indent=2))
        return

    trend = score_trend(result.overall_score, args.history) if args.history else None
    windows = [
        (window.start_seconds, window.end_seconds, window.words_per_minute)
        for window in pace_timeline(build_timeline(raw_words).words)
    ]
    print_report(result, trend=trend, pace_windows=windows)


if __name__ == "__main__":
    main()
