"""
Notification Policy

Decides whether a build result is posted to the room, whether the post
alerts room members, and which template is used for the message.
"""

from .classifier import is_success_class
from .config import NotifierConfig
from .types import BuildResult


def should_post(result: BuildResult, config: NotifierConfig) -> bool:
    """Check if a message should be posted for this result."""
    if is_success_class(result):
        return config.post_on_success
    return config.post_on_failure


def should_notify(result: BuildResult, config: NotifierConfig) -> bool:
    """Check if the posted message should alert room members."""
    if is_success_class(result):
        return config.notify_on_success
    return config.notify_on_failure


def select_template(result: BuildResult, config: NotifierConfig) -> str:
    """Pick the success or failure message template for this result."""
    if is_success_class(result):
        return config.success_template
    return config.failure_template
