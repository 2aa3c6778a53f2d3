"""Test doubles shared by the unit tests."""

import json


class MockResponse:
    """Mock HTTP response object."""

    def __init__(self, status_code: int, json_data=None, text: str | None = None):
        self.status_code = status_code
        self._json_data = json_data
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        self.text = text

    def json(self):
        if self._json_data is not None:
            return self._json_data
        return json.loads(self.text)


def list_response(*ids: str) -> MockResponse:
    """A 200 list response holding one resource per ID."""
    return MockResponse(
        200,
        {
            "totalResults": len(ids),
            "schemas": ["urn:ietf:params:scim:api:messages:2.0:ListResponse"],
            "Resources": [{"id": resource_id} for resource_id in ids],
        },
    )


USER_IDS = {
    "alice": "u-alice",
    "bob": "u-bob",
    "carol": "u-carol",
}
