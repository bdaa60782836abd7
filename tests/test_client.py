import base64
import json
import logging
from unittest.mock import MagicMock

import pytest
import requests

from infra_bunny.lib.client import (
    APIError,
    AuthenticationError,
    Client,
    HTTPError,
    PullZoneAddOptions,
    StorageZoneUpdateOptions,
    models,
)
from infra_bunny.lib.client.models import from_wire, to_wire

API_KEY = "secret-access-key"


def make_response(status_code=200, body=None, text=None, url="https://api.bunny.net/pullzone/1"):
    response = MagicMock()
    response.status_code = status_code
    response.url = url

    if body is not None:
        text = json.dumps(body)
        response.json.return_value = body
    else:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")

    response.text = text or ""
    response.content = (text or "").encode()

    return response


@pytest.fixture
def session():
    session = MagicMock(spec=requests.Session)
    session.request.return_value = make_response(body={"Id": 1, "Name": "zone"})
    return session


@pytest.fixture
def bunny(session) -> Client:
    return Client(API_KEY, session=session)


def sent(session) -> dict:
    """The keyword arguments of the last request"""
    return session.request.call_args.kwargs


class TestRequest:
    """Tests for the HTTP handling shared by all services."""

    def test_headers_without_body(self, bunny, session):
        """Every request authenticates with the access key, only requests with a body declare a content type."""
        bunny.pull_zone.get(1)

        headers = sent(session)["headers"]
        assert headers["AccessKey"] == API_KEY
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"] == "infra-bunny"
        assert "Content-Type" not in headers
        assert sent(session)["data"] is None

    def test_body_omits_absent_fields(self, bunny, session):
        """Request bodies use the API's field names and leave out fields that are None."""
        bunny.pull_zone.add(PullZoneAddOptions(name="zone", origin_url="https://example.com"))

        assert session.request.call_args.args == ("POST", "https://api.bunny.net/pullzone")
        assert sent(session)["headers"]["Content-Type"] == "application/json"
        assert json.loads(sent(session)["data"]) == {"Name": "zone", "OriginUrl": "https://example.com"}

    def test_custom_base_url_and_user_agent(self, session):
        """The base URL and the user agent can be configured."""
        bunny = Client(API_KEY, base_url="https://bunny.example.com/", user_agent="infra-bunny oh-dev", session=session)

        bunny.storage_zone.get(7)

        assert session.request.call_args.args == ("GET", "https://bunny.example.com/storagezone/7")
        assert sent(session)["headers"]["User-Agent"] == "infra-bunny oh-dev"

    def test_unauthorized(self, bunny, session):
        """HTTP 401 is an AuthenticationError."""
        session.request.return_value = make_response(401, text="Unauthorized")

        with pytest.raises(AuthenticationError, match="Unauthorized"):
            bunny.pull_zone.get(1)

    def test_api_error(self, bunny, session):
        """Error replies with a bunny.net error object are APIErrors carrying its fields."""
        session.request.return_value = make_response(
            400,
            body={"ErrorKey": "pullzone.validation", "Field": "Name", "Message": "The name is already taken."},
        )

        with pytest.raises(APIError) as exc_info:
            bunny.pull_zone.add(PullZoneAddOptions(name="zone"))

        err = exc_info.value
        assert err.status_code == 400
        assert err.error_key == "pullzone.validation"
        assert err.field == "Name"
        assert err.message == "The name is already taken."
        assert "Name: The name is already taken." in str(err)

    def test_unparseable_error(self, bunny, session):
        """Error replies without an error object are HTTPErrors."""
        session.request.return_value = make_response(502, text="<html>Bad Gateway</html>")

        with pytest.raises(HTTPError) as exc_info:
            bunny.pull_zone.get(1)

        assert not isinstance(exc_info.value, APIError)
        assert exc_info.value.status_code == 502
        assert exc_info.value.body == b"<html>Bad Gateway</html>"
        assert exc_info.value.errors

    def test_invalid_json_result(self, bunny, session):
        """A successful reply whose body is not JSON is an HTTPError."""
        session.request.return_value = make_response(200, text="not json")

        with pytest.raises(HTTPError, match="decoding response body into json failed"):
            bunny.pull_zone.get(1)

    def test_transport_errors_propagate(self, bunny, session):
        """Transport errors are raised unmodified."""
        session.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(requests.ConnectionError, match="connection refused"):
            bunny.pull_zone.get(1)

    def test_one_call_per_operation(self, bunny, session):
        """Failed requests are not retried."""
        session.request.return_value = make_response(500, body={"Message": "internal error"})

        with pytest.raises(APIError):
            bunny.pull_zone.get(1)

        assert session.request.call_count == 1

    def test_debug_log_hides_access_key(self, bunny, caplog):
        """The access key never shows up in the request log."""
        with caplog.at_level(logging.DEBUG, logger="infra_bunny.lib.client.client"):
            bunny.pull_zone.get(1)

        assert "***hidden***" in caplog.text
        assert API_KEY not in caplog.text


class TestServices:
    """Tests for the endpoints of the pull zone, storage zone and video library services."""

    def test_get_pull_zone(self, bunny, session):
        """Replies are decoded into the API models, nested objects included."""
        session.request.return_value = make_response(
            body={
                "Id": 1,
                "Name": "zone",
                "Hostnames": [{"Id": 2, "Value": "zone.b-cdn.net", "IsSystemHostname": True}],
                "EdgeRules": [{"Guid": "abc", "Triggers": [{"Type": 0, "PatternMatches": ["*"]}]}],
                "SomethingNew": "ignored",
            }
        )

        pz = bunny.pull_zone.get(1)

        assert pz.id == 1
        assert pz.hostnames[0].value == "zone.b-cdn.net"
        assert pz.hostnames[0].is_system_hostname is True
        assert pz.edge_rules[0].triggers[0].pattern_matches == ["*"]
        assert pz.origin_url is None

    def test_storage_zone_update_returns_nothing(self, bunny, session):
        """The storage zone update reply has no body."""
        session.request.return_value = make_response(204, text="")

        assert bunny.storage_zone.update(3, StorageZoneUpdateOptions(replication_regions=["NY"])) is None
        assert json.loads(sent(session)["data"]) == {"ReplicationZones": ["NY"]}

    def test_delete_ignores_body(self, bunny, session):
        """Deletions succeed on an empty reply."""
        session.request.return_value = make_response(204, text="")

        bunny.pull_zone.delete(1)

        assert session.request.call_args.args == ("DELETE", "https://api.bunny.net/pullzone/1")

    def test_video_library_access_key(self, bunny, session):
        """The access key of a video library is only requested when asked for."""
        session.request.return_value = make_response(body={"Id": 4, "ApiAccessKey": "key"})

        bunny.video_library.get(4)
        assert sent(session)["params"] is None

        assert bunny.video_library.get(4, include_access_key=True).api_access_key == "key"
        assert sent(session)["params"] == {"includeAccessKey": "true"}

    def test_load_free_certificate(self, bunny, session):
        """The hostname is passed as query parameter."""
        session.request.return_value = make_response(200, text="")

        bunny.pull_zone.load_free_certificate("cdn.example.com")

        assert session.request.call_args.args == ("GET", "https://api.bunny.net/pullzone/loadFreeCertificate")
        assert sent(session)["params"] == {"hostname": "cdn.example.com"}

    def test_add_custom_certificate_is_base64_encoded(self, bunny, session):
        """Certificate and key are sent base64 encoded."""
        session.request.return_value = make_response(200, text="")

        bunny.pull_zone.add_custom_certificate(1, "cdn.example.com", b"CERT", b"KEY")

        body = json.loads(sent(session)["data"])
        assert body["Hostname"] == "cdn.example.com"
        assert base64.b64decode(body["Certificate"]) == b"CERT"
        assert base64.b64decode(body["CertificateKey"]) == b"KEY"

    def test_list_pull_zones(self, bunny, session):
        """List replies are decoded into a page."""
        session.request.return_value = make_response(
            body={"Items": [{"Id": 1}, {"Id": 2}], "CurrentPage": 1, "TotalItems": 2, "HasMoreItems": False}
        )

        page = bunny.pull_zone.list(page=0, per_page=-5)

        assert [pz.id for pz in page.items] == [1, 2]
        assert page.has_more_items is False
        assert sent(session)["params"] == {"page": 1, "per_page": 1000}


class TestModels:
    """Tests for the conversion between API models and JSON."""

    def test_to_wire_nested(self):
        """Nested models and lists are converted, absent fields dropped."""
        opts = models.AddOrUpdateEdgeRuleOptions(
            action_type=4,
            triggers=[models.EdgeRuleTrigger(type=0, pattern_matches=["*.php"], pattern_matching_type=0)],
        )

        assert to_wire(opts) == {
            "ActionType": 4,
            "Triggers": [{"Type": 0, "PatternMatches": ["*.php"], "PatternMatchingType": 0}],
        }

    def test_from_wire_casts_integral_floats(self):
        """Integers sent for float fields are accepted."""
        pz = from_wire(models.PullZone, {"OptimizerWatermarkOffset": 3})

        assert pz.optimizer_watermark_offset == 3.0
        assert isinstance(pz.optimizer_watermark_offset, float)

    def test_empty_update_sends_empty_object(self):
        """An update without any set field sends an empty JSON object."""
        assert to_wire(models.PullZoneUpdateOptions()) == {}
