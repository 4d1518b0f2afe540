from unittest.mock import MagicMock

import pytest
import requests

from pass_client.config import Settings
from pass_client.location import PermissionStatus, Position
from pass_client.passes import PassFetcher

ISS_PASSES = [
    {
        "startTime": "2024-12-04T00:15:56Z",
        "endTime": "2024-12-04T00:22:56Z",
        "maxElevation": 77,
        "azimuthStart": 230,
        "azimuthEnd": 50,
        "duration": 420,
    },
    {
        "startTime": "2024-12-04T01:52:10Z",
        "endTime": "2024-12-04T01:57:40Z",
        "maxElevation": 23,
        "azimuthStart": 250,
        "azimuthEnd": 110,
        "duration": 330,
    },
]


def make_response(payload=None, status_error=None, json_error=None):
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def settings():
    return Settings(service_url="http://passes.test/api/passes")


@pytest.fixture
def http():
    session = MagicMock(spec=requests.Session)
    session.post.return_value = make_response(ISS_PASSES)
    return session


@pytest.fixture
def fetcher(settings, http):
    return PassFetcher(settings, session=http)


class FakeLocationProvider:
    def __init__(self, permission=PermissionStatus.GRANTED, position=None, error=None,
                 permission_error=None):
        self.permission = permission
        self.position = position or Position(latitude=37.7749, longitude=-122.4194)
        self.error = error
        self.permission_error = permission_error
        self.position_calls = 0

    async def request_foreground_permission(self):
        if self.permission_error is not None:
            raise self.permission_error
        return self.permission

    async def get_current_position(self):
        self.position_calls += 1
        if self.error is not None:
            raise self.error
        return self.position
