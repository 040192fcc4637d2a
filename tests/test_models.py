"""Tests for data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from duckdns_updater.models import FileConfig, UpdateRequest


class TestUpdateRequest:
    """Tests for UpdateRequest model."""

    def test_default_values(self):
        request = UpdateRequest()
        assert request.token == ""
        assert request.names == []
        assert request.valid is False

    def test_valid_with_token_and_names(self):
        request = UpdateRequest(token="abc", names=["home"])
        assert request.valid is True

    @pytest.mark.parametrize(
        ("token", "names"),
        [
            ("", ["home"]),
            ("abc", []),
            ("", []),
        ],
    )
    def test_invalid(self, token, names):
        assert UpdateRequest(token=token, names=names).valid is False

    def test_names_keep_order_and_duplicates(self):
        request = UpdateRequest(token="abc", names=["b", "a", "b"])
        assert request.names == ["b", "a", "b"]

    def test_default_names_not_shared(self):
        first = UpdateRequest()
        second = UpdateRequest()
        first.names.append("home")
        assert second.names == []


class TestFileConfig:
    """Tests for FileConfig model."""

    def test_from_dict(self):
        config = FileConfig.model_validate({"token": "abc", "domains": ["foo", "bar"]})
        assert config.token == "abc"
        assert config.domains == ["foo", "bar"]

    def test_extra_keys_ignored(self):
        config = FileConfig.model_validate({"token": "abc", "interval": 300})
        assert config.token == "abc"
        assert config.domains == []

    def test_invalid_domains_type(self):
        with pytest.raises(ValidationError):
            FileConfig.model_validate({"domains": "foo"})
