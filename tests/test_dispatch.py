"""Tests for response status classification and body decoding."""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx
import pytest
from helpers import DISK_JSON, ERROR_JSON, RESOURCE_JSON, RecordingHandler

from yandex_disk_client import (
    ApiError,
    DecodeError,
    Disk,
    ErrorResponse,
    FilesResourceList,
    SuccessResponse,
    UnknownApiError,
    YandexDiskClient,
    YandexDiskError,
)
from yandex_disk_client._internal.dispatch import encode_params

ClientFactory = Callable[..., YandexDiskClient]


class TestSuccessfulResponses:
    """Tests for status codes below 400."""

    def test_disk_info_decoded(self, make_client: ClientFactory) -> None:
        """Test that a 200 body is decoded into the result type."""
        client = make_client(RecordingHandler(json=DISK_JSON))

        disk = client.get_disk_info()

        assert disk == Disk.from_dict(DISK_JSON)
        assert disk.total_space == 10737418240

    def test_files_list_decoded(self, make_client: ClientFactory) -> None:
        """Test that a resource list body is decoded."""
        body = {"items": [RESOURCE_JSON], "limit": 1, "offset": 0}
        client = make_client(RecordingHandler(json=body))

        files = client.get_files(1)

        assert files == FilesResourceList.from_dict(body)
        assert files.items[0].name == "report.pdf"

    def test_accepted_operation_returns_link(self, make_client: ClientFactory) -> None:
        """Test that a 202 answer carries the operation link."""
        href = "https://cloud-api.yandex.net/v1/disk/operations/d80c269ce4eb16c0"
        client = make_client(
            RecordingHandler(
                status_code=202, json={"href": href, "method": "GET", "templated": False}
            )
        )

        result = client.move("disk:/a", "disk:/b")

        assert result.href == href
        assert result.operation_id == "d80c269ce4eb16c0"

    def test_no_content_returns_empty_success(self, make_client: ClientFactory) -> None:
        """Test that 204 with an empty body is an empty success, not an error."""
        client = make_client(RecordingHandler(status_code=204, content=b""))

        result = client.delete("disk:/a", permanently=True)

        assert result == SuccessResponse()
        assert result.operation_id is None

    def test_redirect_status_without_following_is_success(
        self, make_client: ClientFactory
    ) -> None:
        """Test that a 3xx answer is decoded as a success when not followed."""
        handler = RecordingHandler(status_code=302, json={"href": "https://example.com/next"})
        client = make_client(handler, follow_redirects=False)

        result = client.download("disk:/a")

        assert result.href == "https://example.com/next"

    def test_malformed_success_body_raises_decode_error(
        self, make_client: ClientFactory
    ) -> None:
        """Test that an unreadable 200 body is reported, not turned into an empty result."""
        client = make_client(RecordingHandler(content=b"<html>oops</html>"))

        with pytest.raises(DecodeError, match="status code: 200") as exc_info:
            client.get_disk_info()

        assert exc_info.value.status_code == 200
        assert "oops" in exc_info.value.body

    def test_wrong_shape_success_body_raises_decode_error(
        self, make_client: ClientFactory
    ) -> None:
        """Test that JSON of the wrong shape raises DecodeError."""
        client = make_client(RecordingHandler(json=[1, 2, 3]))

        with pytest.raises(DecodeError, match="unexpected response body"):
            client.get_disk_info()

    @pytest.mark.parametrize(
        "body",
        [
            {"total_space": "lots"},
            {"is_paid": "no"},
            {"revision": True},
            {"user": {"uid": [1]}},
        ],
    )
    def test_mistyped_scalar_raises_decode_error(
        self, make_client: ClientFactory, body: dict[str, object]
    ) -> None:
        """Test that a field of the wrong JSON type raises DecodeError."""
        client = make_client(RecordingHandler(json=body))

        with pytest.raises(DecodeError, match="unexpected response body") as exc_info:
            client.get_disk_info()

        assert exc_info.value.status_code == 200

    def test_mistyped_resource_field_raises_decode_error(
        self, make_client: ClientFactory
    ) -> None:
        """Test that a list item with a wrongly typed field raises DecodeError."""
        body = {"items": [{**RESOURCE_JSON, "size": "52411"}], "limit": 1}
        client = make_client(RecordingHandler(json=body))

        with pytest.raises(DecodeError, match="size"):
            client.get_files(1)

    def test_wrong_items_shape_raises_decode_error(self, make_client: ClientFactory) -> None:
        """Test that a non-list items field raises DecodeError."""
        client = make_client(RecordingHandler(json={"items": "nope"}))

        with pytest.raises(DecodeError):
            client.get_public_files(10)


class TestErrorResponses:
    """Tests for status codes outside the successful range."""

    def test_structured_error_raises_api_error(self, make_client: ClientFactory) -> None:
        """Test that a 404 with an error body raises ApiError with message and status."""
        client = make_client(RecordingHandler(status_code=404, json=ERROR_JSON))

        with pytest.raises(ApiError) as exc_info:
            client.download("disk:/missing.txt")

        error = exc_info.value
        assert "Resource not found." in str(error)
        assert "404" in str(error)
        assert error.status_code == 404
        assert error.response == ErrorResponse.from_dict(ERROR_JSON)
        assert error.response.error == "DiskNotFoundError"

    def test_unparseable_error_raises_unknown_api_error(
        self, make_client: ClientFactory
    ) -> None:
        """Test that a 500 with an unreadable body raises a generic error."""
        client = make_client(RecordingHandler(status_code=500, content=b"Internal failure"))

        with pytest.raises(UnknownApiError) as exc_info:
            client.get_disk_info()

        assert "500" in str(exc_info.value)
        assert "Internal failure" not in str(exc_info.value)
        assert exc_info.value.status_code == 500

    def test_empty_error_body_raises_unknown_api_error(
        self, make_client: ClientFactory
    ) -> None:
        """Test that an error status without a body raises UnknownApiError."""
        client = make_client(RecordingHandler(status_code=503, content=b""))

        with pytest.raises(UnknownApiError, match="503"):
            client.get_files(1)

    def test_non_object_error_body_raises_unknown_api_error(
        self, make_client: ClientFactory
    ) -> None:
        """Test that a JSON error body of the wrong shape is treated as unknown."""
        client = make_client(RecordingHandler(status_code=400, json=["bad"]))

        with pytest.raises(UnknownApiError, match="400"):
            client.mkdir("disk:/a")

    @pytest.mark.parametrize(
        "body",
        [
            {"message": 123},
            {"error": ["DiskNotFoundError"], "message": "Resource not found."},
            {"error": "DiskNotFoundError", "description": {"text": "gone"}},
        ],
    )
    def test_mistyped_error_fields_raise_unknown_api_error(
        self, make_client: ClientFactory, body: dict[str, object]
    ) -> None:
        """Test that an error body with non-string fields is treated as unknown."""
        client = make_client(RecordingHandler(status_code=404, json=body))

        with pytest.raises(UnknownApiError, match="404") as exc_info:
            client.get_disk_info()

        assert exc_info.value.status_code == 404

    def test_informational_status_is_an_error(self, make_client: ClientFactory) -> None:
        """Test that a status below 200 is not treated as success."""
        client = make_client(RecordingHandler(status_code=199, json=ERROR_JSON))

        with pytest.raises(ApiError, match="199"):
            client.get_disk_info()

    def test_all_errors_share_base_class(self, make_client: ClientFactory) -> None:
        """Test that API errors can be caught as YandexDiskError."""
        client = make_client(RecordingHandler(status_code=401, json=ERROR_JSON))

        with pytest.raises(YandexDiskError):
            client.get_disk_info()


class TestEncodeParams:
    """Tests for query value serialization."""

    def test_booleans_and_integers(self) -> None:
        """Test that booleans become true/false and integers decimal strings."""
        assert encode_params({"permanently": True, "force": False, "limit": 100}) == {
            "permanently": "true",
            "force": "false",
            "limit": "100",
        }

    def test_strings_unchanged(self) -> None:
        """Test that strings are passed through as they are."""
        assert encode_params({"path": "disk:/a b"}) == {"path": "disk:/a b"}


def test_response_closed_after_call(make_client: ClientFactory) -> None:
    """Test that each response is closed before the call returns."""
    responses: list[httpx.Response] = []

    def handler(request: httpx.Request) -> httpx.Response:
        response = httpx.Response(404, json=ERROR_JSON)
        responses.append(response)
        return response

    client = make_client(handler)

    with pytest.raises(ApiError):
        client.get_disk_info()

    assert responses and responses[0].is_closed


def test_one_debug_record_per_call(
    make_client: ClientFactory, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that a call logs a single debug line with verb, path and status."""
    client = make_client(RecordingHandler(json={}))

    with caplog.at_level(logging.DEBUG, logger="yandex_disk_client"):
        client.mkdir("disk:/a")

    records = [r for r in caplog.records if r.name.startswith("yandex_disk_client")]
    assert [r.getMessage() for r in records] == ["PUT /resources -> 200"]
    assert "test_token" not in caplog.text
