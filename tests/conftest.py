import json

import pytest

from place.placement import Grid


@pytest.fixture
def grid(db):
    return Grid()


@pytest.fixture
def post_entry(client):
    """Posts a placement to the grid API and returns the decoded JSON reply."""

    def post(body, raw=False):
        data = body if raw else json.dumps(body)
        resp = client.post("/grid-entry", data=data, content_type="application/json")
        assert resp.status_code == 200
        return resp.json()

    return post
