"""
Notifier Types

Data structures for build outcomes, message colors and the build log.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Mapping

logger = logging.getLogger(__name__)


class BuildResult(Enum):
    """Terminal status of a completed build, ordered best to worst."""
    SUCCESS = (0, "blue")
    UNSTABLE = (1, "yellow")
    FAILURE = (2, "red")
    NOT_BUILT = (3, "notbuilt")
    ABORTED = (4, "aborted")

    def __init__(self, ordinal: int, ball_color: str):
        self.ordinal = ordinal
        self.ball_color = ball_color

    def __str__(self) -> str:
        return self.name

    def is_better_or_equal_to(self, other: "BuildResult") -> bool:
        """Lower ordinal means a better result."""
        return self.ordinal <= other.ordinal

    def is_worse_than(self, other: "BuildResult") -> bool:
        return self.ordinal > other.ordinal

    @classmethod
    def parse(cls, label: str) -> "BuildResult":
        """
        Parse a host-supplied result label such as "SUCCESS" or "not_built".

        Raises:
            ValueError: If the label is not a known result
        """
        key = (label or "").strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown build result: {label!r}") from None


class BackgroundColor(Enum):
    """Message background colors understood by the chat service."""
    YELLOW = "yellow"
    RED = "red"
    GREEN = "green"
    PURPLE = "purple"
    GRAY = "gray"
    RANDOM = "random"

    @classmethod
    def from_ball_color(cls, ball_color: str) -> "BackgroundColor":
        """Map a build ball color to a message color (unknown -> gray)."""
        return _BALL_COLORS.get(ball_color, cls.GRAY)


_BALL_COLORS: Dict[str, BackgroundColor] = {
    "blue": BackgroundColor.GREEN,
    "yellow": BackgroundColor.YELLOW,
    "red": BackgroundColor.RED,
}


@dataclass(frozen=True)
class BuildContext:
    """Read-only snapshot of the completed build supplied by the host."""

    job_name: str
    build_number: int
    result: BuildResult
    url: str
    workspace: Path
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class NotifyMessage:
    """A single composed notification, consumed immediately by the client."""

    color: BackgroundColor
    body: str
    notify: bool
    message_format: str = "text"

    def to_payload(self) -> Dict[str, object]:
        """Convert to the JSON body of a room notification."""
        return {
            "color": self.color.value,
            "message": self.body,
            "notify": self.notify,
            "message_format": self.message_format,
        }


class BuildLog:
    """
    Host-facing build log.

    Lines are kept for the host to display and mirrored to the standard
    logger so they also show up in process logs.
    """

    def __init__(self):
        self._lines: List[str] = []

    def println(self, line: str) -> None:
        """Append a line to the build log."""
        self._lines.append(line)
        logger.debug(line)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)
