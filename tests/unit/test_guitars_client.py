# ABOUTME: Unit tests for the requests-based Guitars API client
# ABOUTME: Tests URL building, Location handling and error reporting with a mocked session

from unittest.mock import MagicMock

import pytest
import requests

from guitars_client import GuitarsAPI


def make_response(status_code: int, json_data=None, headers=None, text: str = "") -> MagicMock:
    """Build a mock requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.headers = headers or {}
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("no JSON")
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session() -> MagicMock:
    """Create a mock requests session."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session: MagicMock) -> GuitarsAPI:
    """Create a client bound to the mock session."""
    return GuitarsAPI(base_url="http://guitars.local/", session=session)


@pytest.mark.unit
class TestGuitarsAPI:
    """Tests for GuitarsAPI."""

    def test_list_guitars(self, api: GuitarsAPI, session: MagicMock):
        """Test listing returns the server payload."""
        payload = [{"name": "SG", "link": "/guitars/SG"}]
        session.request.return_value = make_response(200, payload)

        guitars, error = api.list_guitars()

        assert error is None
        assert guitars == payload
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://guitars.local/guitars"

    def test_list_unexpected_payload(self, api: GuitarsAPI, session: MagicMock):
        """Test that a non-list listing is reported as an error."""
        session.request.return_value = make_response(200, {"items": []})

        guitars, error = api.list_guitars()

        assert guitars == []
        assert error["message"] == "Unexpected listing payload"

    def test_create_uses_location(self, api: GuitarsAPI, session: MagicMock):
        """Test that the created link comes from the Location header."""
        session.request.return_value = make_response(
            201, {"name": "Les Paul"}, headers={"Location": "/guitars/Les%20Paul"}
        )

        guitar, error = api.create_guitar("Les Paul")

        assert error is None
        assert guitar == {"name": "Les Paul", "link": "/guitars/Les%20Paul"}
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == {"name": "Les Paul"}

    def test_create_without_location(self, api: GuitarsAPI, session: MagicMock):
        """Test that a create response missing Location is an error."""
        session.request.return_value = make_response(201, {"name": "SG"})

        guitar, error = api.create_guitar("SG")

        assert guitar is None
        assert error["status_code"] == 201

    def test_create_rejected(self, api: GuitarsAPI, session: MagicMock):
        """Test that a 400 is returned as an error with the server message."""
        session.request.return_value = make_response(
            400,
            {"error": "Guitar name is required", "detail": "Guitar name is required", "status_code": 400, "name": ""},
        )

        guitar, error = api.create_guitar(" ")

        assert guitar is None
        assert error == {"status_code": 400, "message": "Guitar name is required"}

    def test_delete_follows_link(self, api: GuitarsAPI, session: MagicMock):
        """Test that delete targets the server-supplied link."""
        session.request.return_value = make_response(204)

        success, error = api.delete_guitar("/guitars/Les%20Paul")

        assert success is True
        assert error is None
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "DELETE"
        assert kwargs["url"] == "http://guitars.local/guitars/Les%20Paul"

    def test_api_prefix(self, session: MagicMock):
        """Test that the prefix applies to the collection but not to links."""
        api = GuitarsAPI(base_url="http://guitars.local", api_prefix="/api/", session=session)
        session.request.return_value = make_response(200, [])

        api.list_guitars()
        assert session.request.call_args.kwargs["url"] == "http://guitars.local/api/guitars"

        session.request.return_value = make_response(204)
        api.delete_guitar("/api/guitars/SG")
        assert session.request.call_args.kwargs["url"] == "http://guitars.local/api/guitars/SG"

    def test_connection_error(self, api: GuitarsAPI, session: MagicMock):
        """Test that transport failures are reported, not raised."""
        session.request.side_effect = requests.ConnectionError("refused")

        success, error = api.delete_guitar("/guitars/SG")

        assert success is False
        assert error == {"status_code": None, "message": "refused"}

    def test_http_error_without_json(self, api: GuitarsAPI, session: MagicMock):
        """Test that a non-JSON error body falls back to its text."""
        session.request.return_value = make_response(503, text="Service Unavailable")

        guitars, error = api.list_guitars()

        assert guitars == []
        assert error == {"status_code": 503, "message": "Service Unavailable"}
