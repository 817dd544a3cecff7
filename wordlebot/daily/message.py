"""
Chat message rendering for a solve trace.

Each guess becomes one line: the feedback glyph row, then the guessed word
and the pool it was drawn from inside a Discord spoiler (||...||), e.g.

    ⬛⬛🟩⬛🟩 ||`slate` (1 in 14855)||
"""

from __future__ import annotations

import random
from typing import Iterable, Sequence

from wordlebot.engine import GuessRecord


def format_trace_line(record: GuessRecord) -> str:
    return f"{record.feedback.glyphs} ||`{record.word}` (1 in {record.pool})||"


def format_message(robot_line: str, days_since_launch: int,
                   trace: Iterable[GuessRecord]) -> str:
    content = f"{robot_line}\n\n**Wordle {days_since_launch}**\n"
    for record in trace:
        content += format_trace_line(record) + "\n"
    return content


def choose_robot_line(lines: Sequence[str], rng: random.Random) -> str:
    """Pick a greeting; an empty list yields an empty greeting."""
    if not lines:
        return ""
    return rng.choice(list(lines))
