"""
Pytest Configuration and Shared Fixtures

Sample Jenkins payloads and helpers for building signed webhook requests.
"""

import copy
import hashlib
import json
import time

import pytest
from fastapi.testclient import TestClient


SAMPLE_PAYLOAD = {
    "api_json": {
        "_class": "org.jenkinsci.plugins.workflow.job.WorkflowRun",
        "actions": [
            {"_class": "hudson.model.CauseAction", "causes": [{"shortDescription": "Started by user admin"}]},
            {
                "_class": "jenkins.metrics.impl.TimeInQueueAction",
                "blockedDurationMillis": 0,
                "buildableDurationMillis": 12,
                "waitingDurationMillis": 5001,
            },
        ],
        "artifacts": [],
        "building": False,
        "description": None,
        "displayName": "#123",
        "duration": 45210,
        "estimatedDuration": 43000,
        "executor": None,
        "fullDisplayName": "my-job #123",
        "id": "123",
        "keepLog": False,
        "number": 123,
        "queueId": 987,
        "result": "SUCCESS",
        "timestamp": 1718000000000,
        "url": "http://jenkins.example.com/job/my-job/123/",
        "changeSets": [],
        "culprits": [],
        "inProgress": False,
        "nextBuild": {"number": 124, "url": "http://jenkins.example.com/job/my-job/124/"},
        "previousBuild": {"number": 122, "url": "http://jenkins.example.com/job/my-job/122/"},
    },
    "wfapi_describe": {
        "_links": {"self": {"href": "/job/my-job/123/wfapi/describe"}},
        "id": "123",
        "name": "#123",
        "status": "SUCCESS",
        "startTimeMillis": 1718000000000,
        "endTimeMillis": 1718000045210,
        "durationMillis": 45210,
        "queueDurationMillis": 5013,
        "pauseDurationMillis": 0,
        "stages": [
            {
                "_links": {"self": {"href": "/job/my-job/123/execution/node/6/wfapi/describe"}},
                "id": "6",
                "name": "Build",
                "execNode": "",
                "status": "SUCCESS",
                "startTimeMillis": 1718000001000,
                "durationMillis": 30000,
                "pauseDurationMillis": 0,
            },
            {
                "_links": {"self": {"href": "/job/my-job/123/execution/node/14/wfapi/describe"}},
                "id": "14",
                "name": "Test",
                "execNode": "agent-1",
                "status": "SUCCESS",
                "startTimeMillis": 1718000031000,
                "durationMillis": 14000,
                "pauseDurationMillis": 0,
            },
        ],
    },
}


def now_ms() -> int:
    return int(time.time() * 1000)


def reversed_timestamp(timestamp_ms: int) -> str:
    return str(timestamp_ms)[::-1]


def checksum(body: str) -> str:
    return hashlib.sha256(body.encode("utf-8")).hexdigest()


def signed_headers(body: str, timestamp_ms: int | None = None) -> dict[str, str]:
    """Headers a well-behaved Jenkins job sends with ``body``."""
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    return {
        "X-Encrypted-Timestamp": reversed_timestamp(timestamp_ms),
        "X-Payload-Checksum": checksum(body),
        "Content-Type": "application/json",
    }


@pytest.fixture
def payload():
    """A fully well-formed webhook payload (fresh copy per test)."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def body(payload):
    return json.dumps(payload)


@pytest.fixture
def client():
    from app.main import app
    with TestClient(app) as test_client:
        yield test_client
