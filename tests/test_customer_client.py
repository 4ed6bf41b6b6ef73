"""
Tests for the requests‑based Customer API client and the CLI.

The client talks to the FastAPI app through ``BridgeSession``, a
minimal stand‑in for ``requests.Session`` that forwards calls to
Starlette's TestClient and converts the answers to
``requests.Response`` objects.
"""

import json
import uuid

import pytest
import requests
from requests.structures import CaseInsensitiveDict

import customer_cli
from customer_client import CustomerAPI

USERNAME = "user1"
PASSWORD = "password1"


class BridgeSession:
    """Forward ``requests``‑style calls to a Starlette TestClient."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.auth = None

    def request(self, method, url, json=None, timeout=None):
        answer = self.test_client.request(method, url, json=json, auth=self.auth)
        response = requests.Response()
        response.status_code = answer.status_code
        response._content = answer.content
        response.headers = CaseInsensitiveDict(answer.headers)
        response.url = url
        return response


class FailingSession:
    auth = None

    def request(self, method, url, json=None, timeout=None):
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def api(anonymous_client):
    return CustomerAPI(
        base_url="http://testserver/",
        username=USERNAME,
        password=PASSWORD,
        session=BridgeSession(anonymous_client),
    )


class TestCustomerAPI:
    """Test the client against the running application."""

    def test_list_customers(self, api):
        customers, error = api.list_customers()

        assert error is None
        assert len(customers) == 3

    def test_create_and_get(self, api):
        new_id, error = api.create_customer({"customerName": "Ada", "version": "1"})

        assert error is None
        customer, error = api.get_customer(new_id)
        assert error is None
        assert customer["customerName"] == "Ada"
        assert customer["version"] == "1"

    def test_get_missing_customer(self, api):
        customer, error = api.get_customer(uuid.uuid4())

        assert customer is None
        assert error == {"status_code": 404, "message": "Customer not found"}

    def test_update_and_patch(self, api):
        new_id, _ = api.create_customer({"customerName": "Ada", "version": "1"})

        assert api.update_customer(new_id, {"customerName": "Ada L.", "version": "2"}) == (True, None)
        assert api.patch_customer(new_id, {"version": "3"}) == (True, None)

        customer, _ = api.get_customer(new_id)
        assert customer["customerName"] == "Ada L."
        assert customer["version"] == "3"

    def test_patch_missing_customer(self, api):
        ok, error = api.patch_customer(uuid.uuid4(), {"version": "3"})

        assert ok is False
        assert error["status_code"] == 404

    def test_delete_customer(self, api):
        new_id, _ = api.create_customer({"customerName": "Temp"})

        assert api.delete_customer(new_id) == (True, None)
        assert api.delete_customer(new_id) == (True, None)
        assert api.get_customer(new_id)[1]["status_code"] == 404

    def test_wrong_credentials(self, anonymous_client):
        api = CustomerAPI(
            base_url="http://testserver",
            username=USERNAME,
            password="wrong",
            session=BridgeSession(anonymous_client),
        )

        customers, error = api.list_customers()

        assert customers == []
        assert error["status_code"] == 401

    def test_transport_error(self):
        api = CustomerAPI(base_url="http://nowhere", username="u", password="p", session=FailingSession())

        customers, error = api.list_customers()

        assert customers == []
        assert error["status_code"] is None
        assert "connection refused" in error["message"]


class TestCustomerCLI:
    """Test command dispatch in customer_cli."""

    def _run(self, api, *argv):
        args = customer_cli.build_parser().parse_args(["--password", PASSWORD, *argv])
        return customer_cli.run(args, api)

    def test_list(self, api, capsys):
        assert self._run(api, "list") == 0

        assert len(json.loads(capsys.readouterr().out)) == 3

    def test_create_then_patch(self, api, capsys):
        assert self._run(api, "create", "--name", "Ada", "--version", "1") == 0
        new_id = json.loads(capsys.readouterr().out)["id"]

        assert self._run(api, "patch", new_id, "--version", "5") == 0
        capsys.readouterr()

        assert self._run(api, "get", new_id) == 0
        customer = json.loads(capsys.readouterr().out)
        assert customer["customerName"] == "Ada"
        assert customer["version"] == "5"

    def test_get_missing_reports_error(self, api, capsys):
        assert self._run(api, "get", str(uuid.uuid4())) == 1

        assert "404" in capsys.readouterr().err

    def test_delete(self, api, capsys):
        customers, _ = api.list_customers()

        assert self._run(api, "delete", customers[0]["id"]) == 0
        assert json.loads(capsys.readouterr().out) == {"deleted": True}
