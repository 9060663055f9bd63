import pytest
from werkzeug.datastructures import Headers

from utils.credentials import get_api_key, get_bearer_token
from utils.exceptions import MalformedCredentialError, MissingCredentialError


class TestGetBearerToken:
    def test_returns_token(self):
        assert get_bearer_token({"Authorization": "Bearer abc123"}) == "abc123"

    def test_extra_whitespace(self):
        assert get_bearer_token({"Authorization": "  Bearer   abc123 "}) == "abc123"

    def test_werkzeug_headers_are_case_insensitive(self):
        headers = Headers({"authorization": "Bearer abc123"})

        assert get_bearer_token(headers) == "abc123"

    def test_missing_header(self):
        with pytest.raises(MissingCredentialError):
            get_bearer_token({})

    def test_empty_header(self):
        with pytest.raises(MissingCredentialError):
            get_bearer_token({"Authorization": ""})

    @pytest.mark.parametrize("value", ["Bearer", "abc123", "   "])
    def test_single_field_is_malformed(self, value):
        with pytest.raises(MalformedCredentialError):
            get_bearer_token({"Authorization": value})


class TestGetAPIKey:
    def test_returns_key(self):
        assert get_api_key({"Authorization": "ApiKey xyz"}) == "xyz"

    def test_bare_key(self):
        assert get_api_key({"Authorization": "xyz"}) == "xyz"

    def test_last_field_wins(self):
        assert get_api_key({"Authorization": "Bearer ApiKey xyz"}) == "xyz"

    def test_empty_header(self):
        with pytest.raises(MissingCredentialError):
            get_api_key({"Authorization": ""})

    def test_missing_header(self):
        with pytest.raises(MissingCredentialError):
            get_api_key({})

    def test_whitespace_only(self):
        with pytest.raises(MalformedCredentialError):
            get_api_key({"Authorization": "   "})
