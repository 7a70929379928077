#!/usr/bin/env python3
"""
Reduce commit history responses into time-of-day counts.
"""

from datetime import datetime, timezone, tzinfo
from typing import Any, Dict, Iterable, List, Optional

from .models import ActivityCounts, Bucket


def local_hour(committed_date: str, tz: tzinfo) -> int:
    """Return the hour of an ISO-8601 timestamp once converted to `tz`."""
    # fromisoformat only accepts a trailing "Z" from Python 3.11
    if committed_date.endswith("Z"):
        committed_date = committed_date[:-1] + "+00:00"
    dt = datetime.fromisoformat(committed_date)
    # offset-less timestamps are UTC, never the host zone
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(tz).hour


def bucket_for_hour(hour: int) -> Bucket:
    """Classify an hour in [0, 24) into exactly one bucket."""
    if not 0 <= hour < 24:
        raise ValueError(f"hour out of range: {hour}")
    for bucket in Bucket:
        if bucket.contains(hour):
            return bucket
    raise AssertionError(f"no bucket for hour {hour}")


def history_edges(response: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Commit edges of a history response; empty when any part of the path is missing."""
    node = response
    for key in ("data", "repository", "defaultBranchRef", "target", "history", "edges"):
        if not isinstance(node, dict):
            return []
        node = node.get(key)
    return node or []


def aggregate(responses: Iterable[Optional[Dict[str, Any]]], tz: tzinfo) -> ActivityCounts:
    """Count every commit edge of every response into its time-of-day bucket."""
    counts = ActivityCounts()
    for response in responses:
        for edge in history_edges(response):
            committed_date = ((edge or {}).get("node") or {}).get("committedDate")
            if not committed_date:
                continue
            counts.increment(bucket_for_hour(local_hour(committed_date, tz)))
    return counts
