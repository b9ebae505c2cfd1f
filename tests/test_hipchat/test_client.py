"""Tests for the HipChat REST client (hipchat/client.py)."""

import requests
from unittest.mock import patch

from hipchat_notifier.hipchat.client import HipChatClient
from hipchat_notifier.types import BackgroundColor, NotifyMessage

MESSAGE = NotifyMessage(color=BackgroundColor.RED, body="demo #43 (FAILURE)", notify=True)


class TestUrls:
    def test_default_server(self):
        client = HipChatClient("T")
        assert client.notification_url("builds") == "https://api.hipchat.com/v2/room/builds/notification"

    def test_custom_host(self):
        client = HipChatClient("T", server="chat.example.com")
        assert client.base_url == "https://chat.example.com"

    def test_server_with_scheme(self):
        client = HipChatClient("T", server="http://chat.local:8080/")
        assert client.base_url == "http://chat.local:8080"

    def test_room_name_is_quoted(self):
        client = HipChatClient("T", server="h")
        assert client.notification_url("Dev Team/CI") == "https://h/v2/room/Dev%20Team%2FCI/notification"


class TestNotify:
    @patch("hipchat_notifier.hipchat.client.requests.post")
    def test_request_shape(self, mock_post, make_response):
        mock_post.return_value = make_response(204)
        client = HipChatClient("secret", server="chat.example.com", timeout=5)

        assert client.notify("builds", MESSAGE) is True

        args, kwargs = mock_post.call_args
        assert args[0] == "https://chat.example.com/v2/room/builds/notification"
        assert kwargs["headers"]["Authorization"] == "Bearer secret"
        assert kwargs["json"] == {
            "color": "red",
            "message": "demo #43 (FAILURE)",
            "notify": True,
            "message_format": "text",
        }
        assert kwargs["timeout"] == 5
        assert mock_post.call_count == 1

    @patch("hipchat_notifier.hipchat.client.requests.post")
    def test_ok_with_json_body(self, mock_post, make_response):
        mock_post.return_value = make_response(200, content=b'{"id": 1}', json_data={"id": 1})
        assert HipChatClient("T").notify("builds", MESSAGE) is True

    @patch("hipchat_notifier.hipchat.client.requests.post")
    def test_ok_with_malformed_body(self, mock_post, make_response):
        mock_post.return_value = make_response(200, content=b"<html>")
        assert HipChatClient("T").notify("builds", MESSAGE) is False

    @patch("hipchat_notifier.hipchat.client.requests.post")
    def test_error_status(self, mock_post, make_response):
        mock_post.return_value = make_response(401, content=b'{"error": "unauthorized"}')
        assert HipChatClient("T").notify("builds", MESSAGE) is False

    @patch("hipchat_notifier.hipchat.client.requests.post")
    def test_server_error_not_retried(self, mock_post, make_response):
        mock_post.return_value = make_response(503)
        assert HipChatClient("T").notify("builds", MESSAGE) is False
        assert mock_post.call_count == 1

    @patch("hipchat_notifier.hipchat.client.requests.post")
    def test_transport_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("connection refused")
        assert HipChatClient("T").notify("builds", MESSAGE) is False
        assert mock_post.call_count == 1

    @patch("hipchat_notifier.hipchat.client.requests.post")
    def test_timeout(self, mock_post):
        mock_post.side_effect = requests.Timeout("timed out")
        assert HipChatClient("T").notify("builds", MESSAGE) is False
