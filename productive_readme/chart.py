#!/usr/bin/env python3
"""
Text bar chart of commit activity by time of day.
"""

import math
from typing import List

from .models import ActivityCounts, Bucket, ChartLine

DEFAULT_WIDTH = 21
FILLED = "█"
EMPTY = "░"

LABELS = {
    Bucket.MORNING: "🌞 Morning",
    Bucket.DAYTIME: "🌆 Daytime",
    Bucket.EVENING: "🌃 Evening",
    Bucket.NIGHT: "🌙 Night",
}

DAY_TITLE = "I'm more active by day 🐤"
NIGHT_TITLE = "I'm more active at night 🦉"


def percentage(count: int, total: int) -> float:
    return count / total * 100


def generate_bar(percent: float, width: int = DEFAULT_WIDTH) -> str:
    """Proportional bar of `width` cells, rounded half up."""
    filled = int(math.floor(percent / 100 * width + 0.5))
    filled = max(0, min(width, filled))
    return FILLED * filled + EMPTY * (width - filled)


def format_line(label: str, count: int, total: int, width: int = DEFAULT_WIDTH) -> ChartLine:
    percent = percentage(count, total)
    return ChartLine(label, count, generate_bar(percent, width), percent)


def choose_title(counts: ActivityCounts) -> str:
    # ties go to the day title
    if counts.night_total > counts.day_total:
        return NIGHT_TITLE
    return DAY_TITLE


def chart_lines(counts: ActivityCounts, width: int = DEFAULT_WIDTH) -> List[ChartLine]:
    total = counts.total
    return [format_line(LABELS[bucket], count, total, width) for bucket, count in counts.items()]


def render_chart(counts: ActivityCounts, width: int = DEFAULT_WIDTH) -> str:
    """
    Render the title and one row per bucket as a fenced text block.

    The caller guarantees `counts.total > 0`.
    """
    rows = "\n".join(line.render() for line in chart_lines(counts, width))
    return f"```text\n{choose_title(counts)}\n\n{rows}\n```"
