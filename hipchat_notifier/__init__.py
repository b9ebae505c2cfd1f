"""HipChat build notifier.

Decides whether a completed build is announced in a HipChat room, composes
the message and delivers it.

Modules:
    types - Build results, colors, messages and the build log
    config - Job and global settings
    resolver - Job/global settings merge
    classifier - Result severity and color
    policy - Post/notify decisions and template choice
    macro - ${NAME} template expansion
    composer - Message body composition
    hipchat - Chat service client
    notifier - Post-build step tying it all together
"""

from .config import (
    DEFAULT_MESSAGE_FORMAT,
    EffectiveTarget,
    FromFile,
    GlobalConfig,
    NotifierConfig,
    Template,
)
from .hipchat import HipChatClient
from .notifier import DispatchState, HipChatNotifier, NotificationOutcome
from .types import BackgroundColor, BuildContext, BuildLog, BuildResult, NotifyMessage

__all__ = [
    # Config
    'DEFAULT_MESSAGE_FORMAT',
    'EffectiveTarget',
    'FromFile',
    'GlobalConfig',
    'NotifierConfig',
    'Template',
    # Types
    'BackgroundColor',
    'BuildContext',
    'BuildLog',
    'BuildResult',
    'NotifyMessage',
    # Delivery
    'HipChatClient',
    'HipChatNotifier',
    'DispatchState',
    'NotificationOutcome',
]

__version__ = '1.0.0'
