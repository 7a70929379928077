#!/usr/bin/env python3
"""
Data models for commit activity statistics.

Contains the core data classes used throughout the application.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Tuple


@dataclass(frozen=True)
class Identity:
    """The authenticated GitHub user: login name and opaque node id."""
    login: str
    id: str

    @classmethod
    def from_github_viewer(cls, viewer: Dict[str, Any]) -> 'Identity':
        """Create an Identity from the `viewer` object of a GraphQL response."""
        return cls(viewer["login"], viewer["id"])


@dataclass(frozen=True)
class RepositoryRef:
    """A repository the user contributed to."""
    name: str
    owner: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def from_github_node(cls, node: Dict[str, Any]) -> 'RepositoryRef':
        """Create a RepositoryRef from a `repositoriesContributedTo` node."""
        return cls(node["name"], node["owner"]["login"])


class Bucket(Enum):
    """Time-of-day categories as half-open hour ranges."""
    MORNING = (6, 11)
    DAYTIME = (11, 18)
    EVENING = (18, 23)
    NIGHT = (23, 6)

    @property
    def start(self) -> int:
        return self.value[0]

    @property
    def end(self) -> int:
        return self.value[1]

    def contains(self, hour: int) -> bool:
        # NIGHT wraps midnight: [23, 24) and [0, 6)
        if self.start > self.end:
            return hour >= self.start or hour < self.end
        return self.start <= hour < self.end


@dataclass
class ActivityCounts:
    """Commit counts per time-of-day bucket."""
    morning: int = 0
    daytime: int = 0
    evening: int = 0
    night: int = 0

    def get(self, bucket: Bucket) -> int:
        return getattr(self, bucket.name.lower())

    def increment(self, bucket: Bucket) -> None:
        attr = bucket.name.lower()
        setattr(self, attr, getattr(self, attr) + 1)

    def items(self) -> Iterator[Tuple[Bucket, int]]:
        for bucket in Bucket:
            yield bucket, self.get(bucket)

    @property
    def day_total(self) -> int:
        return self.morning + self.daytime

    @property
    def night_total(self) -> int:
        return self.evening + self.night

    @property
    def total(self) -> int:
        return self.day_total + self.night_total


@dataclass
class ChartLine:
    """A single rendered row of the activity chart."""
    label: str
    count: int
    bar: str
    percent: float

    def render(self) -> str:
        return " ".join([
            self.label.ljust(10),
            f"{str(self.count).rjust(5)} commits".ljust(14),
            self.bar,
            f"{self.percent:.1f}".rjust(5) + "%",
        ])


@dataclass
class DocumentRevision:
    """README text together with the blob sha required to update it."""
    content: str
    sha: str
