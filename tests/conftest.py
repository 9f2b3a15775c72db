import os
import uuid

# Must be set before careercode.config is imported so a local .env is ignored.
os.environ["DISABLE_DOTENV"] = "1"

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from careercode.config import Settings
from careercode.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture()
def settings() -> Settings:
    # Unique database per test so documents never leak between tests.
    return Settings(
        mongo_uri="mongodb://unused",
        database_name=f"jobportal_{uuid.uuid4().hex}",
        jwt_secret=TEST_SECRET,
    )


@pytest.fixture()
def mongo_client() -> AsyncMongoMockClient:
    return AsyncMongoMockClient()


@pytest.fixture()
def db(mongo_client, settings):
    return mongo_client[settings.database_name]


@pytest.fixture()
def app(settings: Settings, mongo_client) -> FastAPI:
    return create_app(settings=settings, client=mongo_client)


@pytest.fixture()
def client(app: FastAPI):
    with TestClient(app) as test_client:
        yield test_client


def login(client: TestClient, email: str, **extra):
    return client.post("/jwt", json={"email": email, **extra})


def post_job(client: TestClient, **fields) -> str:
    body = {
        "hr_email": "hr@x.com",
        "company": "Acme",
        "jobType": "Full-time",
        "category": "Engineering",
        "location": "Remote",
        **fields,
    }
    r = client.post("/jobs", json=body)
    assert r.status_code == 200, r.text
    return r.json()["insertedId"]


def post_application(client: TestClient, job_id: str, email: str, **fields) -> str:
    r = client.post(
        "/jobApplications",
        json={"job_id": job_id, "application_email": email, "status": "pending", **fields},
    )
    assert r.status_code == 200, r.text
    return r.json()["insertedId"]
