"""Shared fixtures for the CLI tests."""

from __future__ import annotations

import copy

import pytest

from srnotify.cli.models import NotificationResponse

SAMPLE_PAYLOAD: dict[str, object] = {
    "unreadCount": 2,
    "notifications": [
        {
            "id": "n1",
            "title": "Your run of Celeste was verified",
            "path": "/celeste/runs/abc123",
            "read": False,
            "date": 1700000000,
        },
        {
            "id": "n2",
            "title": "New comment on your run",
            "path": "/celeste/runs/abc123#comments",
            "read": True,
            "date": 1699990000,
        },
        {
            "id": "n3",
            "title": "A thread you follow has a new post",
            "path": "/forums/celeste/thread/xyz",
            "read": False,
            "date": 1699980000,
        },
    ],
    "pagination": {"count": 3, "page": 1, "pages": 1, "per": 50},
}


@pytest.fixture
def sample_payload() -> dict[str, object]:
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def sample_response() -> NotificationResponse:
    return NotificationResponse.model_validate(SAMPLE_PAYLOAD)
