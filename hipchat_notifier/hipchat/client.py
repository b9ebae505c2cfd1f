"""
HipChat Notification Client

Sends room notifications through the HipChat v2 REST API.
"""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from ..config import DEFAULT_SERVER
from ..types import NotifyMessage

logger = logging.getLogger(__name__)


class HipChatClient:
    """
    Sends a notification to a HipChat room.

    Usage:
        client = HipChatClient(token, server="api.hipchat.com")
        ok = client.notify("builds", NotifyMessage(BackgroundColor.GREEN, "done", False))
    """

    def __init__(self, token: str, server: Optional[str] = None, timeout: float = 10):
        """
        Initialize HipChat client.

        Args:
            token: Room or account API token
            server: Host name (or base URL) of the HipChat server
            timeout: Seconds to wait for the single request
        """
        self.token = token
        self.server = server or DEFAULT_SERVER
        self.timeout = timeout

    @property
    def base_url(self) -> str:
        if self.server.startswith(("http://", "https://")):
            return self.server.rstrip("/")
        return f"https://{self.server}"

    def notification_url(self, room: str) -> str:
        """URL of the room notification endpoint."""
        return f"{self.base_url}/v2/room/{quote(room, safe='')}/notification"

    def notify(self, room: str, message: NotifyMessage) -> bool:
        """
        Send a notification to a room.

        Args:
            room: Room name or id
            message: Composed message

        Returns:
            True if the service acknowledged the notification
        """
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }

        try:
            response = requests.post(
                self.notification_url(room),
                json=message.to_payload(),
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Failed to send HipChat notification: %s", e)
            return False

        if response.status_code not in (200, 204):
            logger.error(
                "HipChat notification failed: status=%s body=%s",
                response.status_code,
                response.text[:500],
            )
            return False

        if response.status_code == 200 and response.content:
            try:
                response.json()
            except ValueError as e:
                logger.error("HipChat returned a malformed response: %s", e)
                return False

        logger.debug("HipChat notification sent to room %s", room)
        return True
