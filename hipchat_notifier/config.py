"""
Notifier Configuration

Per-job notifier settings and process-wide chat service defaults.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union

DEFAULT_SERVER = "api.hipchat.com"
DEFAULT_MESSAGE_FORMAT = "${JOB_NAME} #${BUILD_NUMBER} (${BUILD_RESULT}) ${BUILD_URL}"


def _optional(value: Optional[str]) -> Optional[str]:
    """Normalize empty strings to None so "unset" has a single spelling."""
    return value or None


@dataclass(frozen=True)
class Template:
    """Compose the message by expanding the success/failure template."""


@dataclass(frozen=True)
class FromFile:
    """Compose the message from a file relative to the build workspace."""

    relative_path: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "relative_path", _optional(self.relative_path))


MessageSource = Union[Template, FromFile]
MESSAGE_FORMATS = ("text", "html")


@dataclass(frozen=True)
class NotifierConfig:
    """Notifier settings owned by a single job definition."""

    room: Optional[str] = None
    token: Optional[str] = None
    success_template: str = DEFAULT_MESSAGE_FORMAT
    failure_template: str = DEFAULT_MESSAGE_FORMAT
    post_on_success: bool = True
    notify_on_success: bool = True
    post_on_failure: bool = True
    notify_on_failure: bool = True
    message_source: MessageSource = field(default_factory=Template)
    message_format: str = "text"

    def __post_init__(self):
        object.__setattr__(self, "room", _optional(self.room))
        object.__setattr__(self, "token", _optional(self.token))
        if self.message_format not in MESSAGE_FORMATS:
            raise ValueError(f"Unsupported message format: {self.message_format!r}")


@dataclass(frozen=True)
class GlobalConfig:
    """Process-wide chat service defaults. Read-only inside the notifier."""

    server: Optional[str] = DEFAULT_SERVER
    token: Optional[str] = None
    room: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "server", _optional(self.server))
        object.__setattr__(self, "token", _optional(self.token))
        object.__setattr__(self, "room", _optional(self.room))

    @classmethod
    def from_env(cls) -> "GlobalConfig":
        """Create config from environment variables."""
        return cls(
            server=os.getenv("HIPCHAT_SERVER", DEFAULT_SERVER),
            token=os.getenv("HIPCHAT_TOKEN"),
            room=os.getenv("HIPCHAT_ROOM"),
        )

    @classmethod
    def configure(cls, form: Mapping[str, Optional[str]]) -> "GlobalConfig":
        """
        Build a new config from an administrative settings form.

        Saving the returned record is up to the host.

        Args:
            form: Mapping with "server", "token" and "room" keys

        Returns:
            A fresh GlobalConfig; the current one is left untouched
        """
        return cls(
            server=form.get("server"),
            token=form.get("token"),
            room=form.get("room"),
        )

    @property
    def masked_token(self) -> str:
        """Token safe for display: first four characters only."""
        if not self.token:
            return ""
        return f"{self.token[:4]}***" if len(self.token) > 4 else "***"


@dataclass(frozen=True)
class EffectiveTarget:
    """Where a single notification goes. Recomputed for every build."""

    server: Optional[str]
    token: Optional[str]
    room: Optional[str]
