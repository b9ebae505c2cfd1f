"""
HipChat Module

REST client for delivering room notifications.
"""

from .client import HipChatClient

__all__ = [
    'HipChatClient',
]
