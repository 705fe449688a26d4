"""Tests for mapping failed responses to API errors."""

from opensea_sdk.api.errors import ErrorKind, error_from_response


class TestErrorFromResponse:
    def test_400_with_errors_list(self):
        err = error_from_response(400, {"errors": ["bad salt", "bad side"]})
        assert str(err) == "API Error: bad salt, bad side"
        assert err.kind == ErrorKind.INVALID_REQUEST

    def test_400_without_errors(self):
        err = error_from_response(400, {"detail": "nope"})
        assert str(err) == 'API Error: Invalid request: {"detail": "nope"}'

    def test_401_and_403(self):
        for status in (401, 403):
            err = error_from_response(status, {"detail": "x"})
            assert err.kind == ErrorKind.UNAUTHORIZED
            assert "Unauthorized. Full message was '{\"detail\": \"x\"}'" in str(err)

    def test_404(self):
        err = error_from_response(404, {})
        assert str(err) == "API Error: Not found. Full message was '{}'"

    def test_500_has_support_contact(self):
        err = error_from_response(500, {"detail": "boom"})
        assert err.kind == ErrorKind.INTERNAL_ERROR
        assert "Internal server error" in str(err)
        assert "https://discord.gg/ga8EJbv" in str(err)
        assert '{"detail": "boom"}' in str(err)

    def test_other_status(self):
        err = error_from_response(429, None)
        assert str(err) == "API Error: status code 429. Message: null"
        assert err.kind == ErrorKind.UNKNOWN
        assert err.status_code == 429
