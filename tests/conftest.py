"""Shared pytest fixtures for HipChat notifier tests."""

import pytest
from unittest.mock import MagicMock

from hipchat_notifier.config import GlobalConfig, NotifierConfig
from hipchat_notifier.types import BuildContext, BuildLog, BuildResult

SAMPLE_TEMPLATE = "${JOB_NAME} #${BUILD_NUMBER} (${BUILD_RESULT}) ${BUILD_URL}"


@pytest.fixture
def build_context(tmp_path):
    """A successful build whose workspace is an empty temp directory."""
    return BuildContext(
        job_name="demo",
        build_number=42,
        result=BuildResult.SUCCESS,
        url="http://x/42",
        workspace=tmp_path,
    )


@pytest.fixture
def failed_build_context(tmp_path):
    """A failed build whose workspace is an empty temp directory."""
    return BuildContext(
        job_name="demo",
        build_number=43,
        result=BuildResult.FAILURE,
        url="http://x/43",
        workspace=tmp_path,
    )


@pytest.fixture
def notifier_config():
    """Job config with distinct success and failure templates."""
    return NotifierConfig(
        success_template=SAMPLE_TEMPLATE,
        failure_template="FAILED: ${JOB_NAME} #${BUILD_NUMBER}",
        post_on_success=True,
        notify_on_success=False,
        post_on_failure=True,
        notify_on_failure=True,
    )


@pytest.fixture
def global_config():
    """Global settings with a server, token and room."""
    return GlobalConfig(server="chat.example.com", token="T", room="R")


@pytest.fixture
def build_log():
    return BuildLog()


@pytest.fixture
def mock_client():
    """A client whose notify call succeeds."""
    client = MagicMock()
    client.notify.return_value = True
    return client


@pytest.fixture
def client_factory(mock_client):
    """Client factory returning mock_client."""
    return MagicMock(return_value=mock_client)


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects."""
    def _make(status_code=204, content=b"", json_data=None):
        response = MagicMock()
        response.status_code = status_code
        response.content = content
        response.text = content.decode("utf-8", errors="replace")
        if json_data is not None:
            response.json.return_value = json_data
        else:
            response.json.side_effect = ValueError("No JSON object could be decoded")
        return response
    return _make
