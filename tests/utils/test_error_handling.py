"""Tests for error handling utilities."""

import logging

import httpx
import pytest

from nexus_staging.exceptions import (
    StagingContractError,
    StagingProfileNotFoundError,
    StagingRequestError,
    StagingTransportError,
)
from nexus_staging.utils.error_handling import (
    handle_generic_error,
    handle_staging_error,
    log_and_exit,
    with_error_handling,
)


class TestHandleStagingError:
    """Tests for handle_staging_error()."""

    @pytest.mark.parametrize(
        "status_code,expected",
        [
            (401, "Invalid credentials"),
            (403, "don't have permission"),
            (404, "is the server URL correct?"),
            (502, "Server error during upload"),
        ],
    )
    def test_request_error_hints(self, caplog, status_code, expected):
        """Test that common status codes get a hint."""
        error = StagingRequestError("load staging profiles", status_code)

        with caplog.at_level(logging.ERROR):
            handle_staging_error(error, "upload", log_traceback=False)

        assert expected in caplog.text
        assert f"server responded with status code {status_code}" in caplog.text

    def test_other_status_code(self, caplog):
        """Test that unusual status codes log only the error."""
        with caplog.at_level(logging.ERROR):
            handle_staging_error(StagingRequestError("load staging profiles", 409, "conflict"), "upload")

        assert "body: conflict" in caplog.text

    def test_transport_error(self, caplog):
        """Test that transport failures name the cause."""
        error = StagingTransportError("load staging profiles", httpx.ConnectError("connection refused"))

        with caplog.at_level(logging.ERROR):
            handle_staging_error(error, "upload", log_traceback=False)

        assert "Could not reach the server during upload: connection refused" in caplog.text

    def test_profile_not_found(self, caplog):
        """Test that a missing profile is reported as a configuration error."""
        with caplog.at_level(logging.ERROR):
            handle_staging_error(StagingProfileNotFoundError("com.unknown"), "upload", log_traceback=False)

        assert "Configuration error during upload" in caplog.text
        assert "com.unknown" in caplog.text

    def test_contract_error(self, caplog):
        """Test the fallback message for other staging errors."""
        with caplog.at_level(logging.ERROR):
            handle_staging_error(StagingContractError("Unexpected response"), "upload", log_traceback=False)

        assert "Staging error during upload: Unexpected response" in caplog.text


class TestHandleGenericError:
    """Tests for handle_generic_error()."""

    def test_logs_error_and_traceback(self, caplog):
        """Test that unexpected errors are logged with their traceback."""
        with caplog.at_level(logging.ERROR):
            handle_generic_error(KeyError("missing"), "upload")

        assert "Unexpected error during upload" in caplog.text
        assert "Traceback" in caplog.text


class TestWithErrorHandling:
    """Tests for the with_error_handling decorator."""

    def test_returns_value(self):
        """Test that successful calls pass through."""

        @with_error_handling("test operation")
        def succeed():
            return "ok"

        assert succeed() == "ok"

    def test_reraises_staging_error(self, caplog):
        """Test that errors are logged and re-raised by default."""

        @with_error_handling("test operation")
        def fail():
            raise StagingRequestError("load staging profiles", 500)

        with pytest.raises(StagingRequestError):
            fail()

        assert "Server error during test operation" in caplog.text

    def test_swallow_when_not_reraising(self):
        """Test that reraise=False returns None."""

        @with_error_handling("test operation", reraise=False)
        def fail():
            raise ValueError("bad")

        assert fail() is None

    @pytest.mark.parametrize("error", [StagingProfileNotFoundError("com.unknown"), RuntimeError("boom")])
    def test_exit_on_error(self, error):
        """Test that exit_on_error exits with the given code."""

        @with_error_handling("test operation", exit_on_error=True, exit_code=3)
        def fail():
            raise error

        with pytest.raises(SystemExit) as exc_info:
            fail()

        assert exc_info.value.code == 3


def test_log_and_exit(caplog):
    """Test that log_and_exit logs the message and exits."""
    with pytest.raises(SystemExit) as exc_info:
        log_and_exit("fatal problem", exit_code=2)

    assert exc_info.value.code == 2
    assert "fatal problem" in caplog.text
