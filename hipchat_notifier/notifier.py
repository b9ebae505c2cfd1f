"""
HipChat Notifier

Post-build step: resolves where to send, decides whether to post and
notify, composes the message and delivers it. Notification problems are
written to the build log and never change the build result.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .classifier import classify
from .composer import compose
from .config import GlobalConfig, NotifierConfig
from .hipchat import HipChatClient
from .policy import should_notify, should_post
from .resolver import dispatch_allowed, resolve
from .types import BuildContext, BuildLog, NotifyMessage

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, Optional[str]], HipChatClient]


class DispatchState(Enum):
    """Terminal state of a single notification attempt."""
    SKIPPED = "skipped"  # Token or room missing
    SUPPRESSED = "suppressed"  # Policy says do not post this result
    SENT = "sent"
    FAILED = "failed"


@dataclass
class NotificationOutcome:
    """Result of running the notifier for one build."""
    state: DispatchState
    post: bool
    notify: bool
    message: Optional[NotifyMessage] = None

    @property
    def completed(self) -> bool:
        """The step always completes; delivery failures are only logged."""
        return True

    @property
    def is_sent(self) -> bool:
        return self.state == DispatchState.SENT


class HipChatNotifier:
    """
    Sends one room notification per completed build.

    Usage:
        notifier = HipChatNotifier(NotifierConfig(room="builds"))
        outcome = notifier.perform(ctx, GlobalConfig.from_env(), BuildLog())
    """

    def __init__(
        self,
        config: NotifierConfig,
        client_factory: ClientFactory = HipChatClient,
    ):
        """
        Initialize notifier.

        Args:
            config: Job-level notifier settings
            client_factory: Callable taking (token, server) and returning a client
        """
        self.config = config
        self._client_factory = client_factory

    def perform(
        self,
        ctx: BuildContext,
        global_config: GlobalConfig,
        build_log: Optional[BuildLog] = None,
    ) -> NotificationOutcome:
        """
        Run the notifier for a completed build.

        Args:
            ctx: Completed build
            global_config: Process-wide chat service defaults
            build_log: Log the host displays for the build

        Returns:
            NotificationOutcome describing what happened
        """
        build_log = build_log if build_log is not None else BuildLog()
        target = resolve(self.config, global_config)

        post = should_post(ctx.result, self.config)
        notify = should_notify(ctx.result, self.config)
        build_log.println(f"HipChat Post   : {str(post).lower()}")
        build_log.println(f"HipChat Notify : {str(notify).lower()}")

        if not dispatch_allowed(target):
            build_log.println("HipChatNotifier InvalidSettings.")
            return NotificationOutcome(DispatchState.SKIPPED, post, notify)

        if not post:
            build_log.println(f"HipChat Post skipped for result {ctx.result}")
            return NotificationOutcome(DispatchState.SUPPRESSED, post, notify)

        message = NotifyMessage(
            color=classify(ctx.result).color,
            body=compose(self.config, ctx, build_log),
            notify=notify,
            message_format=self.config.message_format,
        )

        client = self._client_factory(target.token, target.server)
        if client.notify(target.room, message):
            build_log.println("HipChat Notification OK")
            return NotificationOutcome(DispatchState.SENT, post, notify, message)

        build_log.println("HipChat Notification Failed")
        return NotificationOutcome(DispatchState.FAILED, post, notify, message)
