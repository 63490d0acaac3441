"""End-to-end tests through Mangum with API Gateway proxy events."""

import json

import pytest
from mangum import Mangum

from users_api.db.repositories.users import UserRepository
from users_api.main import create_app
from tests.fakes.record_store_fake import FakeRecordStore

pytestmark = pytest.mark.integration


def api_gateway_event(method: str, query: dict | None = None, body: str | None = None) -> dict:
    """Build a minimal API Gateway REST (v1) proxy event."""
    return {
        "resource": "/",
        "path": "/",
        "httpMethod": method,
        "headers": {"Host": "example.execute-api.us-east-1.amazonaws.com", "Content-Type": "application/json"},
        "multiValueHeaders": {},
        "queryStringParameters": query,
        "multiValueQueryStringParameters": {k: [v] for k, v in query.items()} if query else None,
        "pathParameters": None,
        "stageVariables": None,
        "requestContext": {
            "resourcePath": "/",
            "httpMethod": method,
            "path": "/",
            "stage": "prod",
            "identity": {"sourceIp": "127.0.0.1"},
        },
        "body": body,
        "isBase64Encoded": False,
    }


@pytest.fixture
def store():
    return FakeRecordStore()


@pytest.fixture
def handler(store):
    return Mangum(create_app(UserRepository(store)), lifespan="off")


def test_create_and_fetch_through_lambda(handler, store):
    user = {"email": "a@b.com", "firstName": "A", "lastName": "B"}

    created = handler(api_gateway_event("POST", body=json.dumps(user)), {})

    assert created["statusCode"] == 201
    assert json.loads(created["body"]) == user
    assert store.count() == 1

    fetched = handler(api_gateway_event("GET", query={"email": "a@b.com"}), {})

    assert fetched["statusCode"] == 200
    assert json.loads(fetched["body"]) == user


def test_list_empty_through_lambda(handler):
    response = handler(api_gateway_event("GET"), {})

    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == []


def test_unsupported_method_through_lambda(handler):
    response = handler(api_gateway_event("PATCH"), {})

    assert response["statusCode"] == 405
    assert json.loads(response["body"]) == "Method not allowed"


def test_module_handler_wraps_the_app():
    from users_api.handler import handler as lambda_handler
    from users_api.main import app

    assert isinstance(lambda_handler, Mangum)
    assert lambda_handler.app is app
