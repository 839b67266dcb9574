"""Tests for identity and header extraction."""

import json

import pytest

from modules.auth.claims import extract_identity, get_header, parse_device_info
from modules.auth.exceptions import UnauthorizedError


class TestExtractIdentity:

    def test_subject_and_email(self):
        user = extract_identity({"sub": "user-1", "email": "Pat@Example.com"})
        assert user.id == "user-1"
        assert user.email == "pat@example.com"

    def test_email_is_optional(self):
        assert extract_identity({"sub": "user-1"}).email == ""

    def test_username_claim_is_accepted(self):
        assert extract_identity({"cognito:username": "user-1"}).id == "user-1"

    @pytest.mark.parametrize("claims", [None, {}, {"sub": ""}, {"sub": "   "}, {"email": "a@b.c"}])
    def test_missing_subject(self, claims):
        with pytest.raises(UnauthorizedError) as exc_info:
            extract_identity(claims)
        assert exc_info.value.code == "UNAUTHORIZED"


class TestGetHeader:

    def test_case_insensitive(self):
        assert get_header({"X-Device-Id": "dev-a"}, "x-device-id") == "dev-a"

    def test_value_is_trimmed(self):
        assert get_header({"x-device-id": "  dev-a "}, "x-device-id") == "dev-a"

    def test_blank_is_absent(self):
        assert get_header({"x-device-id": "  "}, "x-device-id") is None

    def test_missing(self):
        assert get_header({}, "x-device-id") is None
        assert get_header(None, "x-device-id") is None


class TestParseDeviceInfo:

    def test_valid_json(self):
        info = parse_device_info(json.dumps({"osName": "Android", "city": "Lima"}))
        assert info.os_name == "Android"
        assert info.city == "Lima"

    @pytest.mark.parametrize("raw", [None, "", "{broken", "[1, 2]", '"text"'])
    def test_unusable_values_are_dropped(self, raw):
        assert parse_device_info(raw) is None
