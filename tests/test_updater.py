"""Tests for the update dispatcher."""

from __future__ import annotations

import logging

import httpx
import pytest

from duckdns_updater.models import UpdateRequest
from duckdns_updater.providers.base import BaseDNSProvider, ProviderResult
from duckdns_updater.providers.duckdns import DuckDNSProvider
from duckdns_updater.updater import MissingConfigError, UpdateError, make_update

logger = logging.getLogger("tests.updater")


class RecordingProvider(BaseDNSProvider):
    """Provider that fails for a fixed set of names."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    @property
    def name(self) -> str:
        return "recording"

    def update_record(self, name: str, token: str) -> ProviderResult:
        self.calls.append((name, token))
        if name in self.failing:
            return ProviderResult(success=False, name=name, message=f"failed {name}")
        return ProviderResult(success=True, name=name, message=f"updated {name}")

    def close(self) -> None:
        self.closed = True


def duckdns_provider(bodies: dict[str, str]) -> DuckDNSProvider:
    """Create a DuckDNS provider that answers with a fixed body per name."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=bodies[request.url.params["domains"]])

    client = httpx.Client(transport=httpx.MockTransport(handler))
    return DuckDNSProvider(client=client, logger=logger)


class TestUpdateError:
    """Tests for UpdateError exception."""

    def test_message_joins_failures(self):
        error = UpdateError(["first", "second"])
        assert str(error) == "first\nsecond"
        assert error.failures == ["first", "second"]


class TestMakeUpdate:
    """Tests for make_update function."""

    def test_invalid_request_raises(self):
        provider = RecordingProvider()
        with pytest.raises(MissingConfigError):
            make_update(UpdateRequest(token="abc"), provider, logger)
        assert provider.calls == []

    def test_updates_every_name_in_order(self):
        provider = RecordingProvider()
        request = UpdateRequest(token="abc", names=["a", "b", "a"])
        make_update(request, provider, logger)
        assert provider.calls == [("a", "abc"), ("b", "abc"), ("a", "abc")]

    def test_injected_provider_not_closed(self):
        provider = RecordingProvider()
        make_update(UpdateRequest(token="abc", names=["a"]), provider, logger)
        assert provider.closed is False

    def test_failures_do_not_stop_remaining_names(self):
        provider = RecordingProvider(failing={"a"})
        request = UpdateRequest(token="abc", names=["a", "b"])
        with pytest.raises(UpdateError) as exc_info:
            make_update(request, provider, logger)
        assert [name for name, _ in provider.calls] == ["a", "b"]
        assert exc_info.value.failures == ["failed a"]

    def test_ok_response_succeeds(self):
        request = UpdateRequest(token="abc", names=["x"])
        make_update(request, duckdns_provider({"x": "OK"}), logger)

    def test_ko_response_mentions_name(self):
        request = UpdateRequest(token="abc", names=["x"])
        with pytest.raises(UpdateError) as exc_info:
            make_update(request, duckdns_provider({"x": "KO"}), logger)
        assert "x" in str(exc_info.value)

    def test_two_of_three_failures(self):
        provider = duckdns_provider({"a": "KO", "b": "OK", "c": "KO"})
        request = UpdateRequest(token="abc", names=["a", "b", "c"])
        with pytest.raises(UpdateError) as exc_info:
            make_update(request, provider, logger)
        lines = str(exc_info.value).split("\n")
        assert len(lines) == 2
        assert "a" in lines[0]
        assert "c" in lines[1]

    def test_one_line_per_failed_name(self):
        provider = duckdns_provider({"b": "KO"})
        request = UpdateRequest(token="abc", names=["a\nb", "b"])
        with pytest.raises(UpdateError) as exc_info:
            make_update(request, provider, logger)
        assert len(str(exc_info.value).split("\n")) == 2
        assert exc_info.value.failures[0].startswith("Error contacting DuckDNS for 'a\\nb'")
