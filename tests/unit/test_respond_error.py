"""Unit tests for respond_error and the error options."""

import json

from restencoder import respond_error, with_code, with_message, with_status


class TestRespondError:
    """Tests for standalone error responses."""

    def test_code_only(self, recorder):
        """Test that only the code is written and no 500 is forced."""
        respond_error(recorder, with_code("X"))

        assert recorder.code == 200
        assert json.loads(recorder.text) == {"code": "X"}
        assert recorder.headers["Content-Type"] == "application/json; charset=utf-8"

    def test_full_error(self, recorder):
        """Test status, code and message together."""
        respond_error(
            recorder,
            with_status(404),
            with_code("PROJECT_NOT_FOUND"),
            with_message("Project with ID 'abc' not found"),
        )

        assert recorder.code == 404
        assert json.loads(recorder.text) == {
            "code": "PROJECT_NOT_FOUND",
            "error": "Project with ID 'abc' not found",
        }

    def test_message_from_exception(self, recorder):
        """Test that with_message accepts an exception."""
        respond_error(recorder, with_status(400), with_message(ValueError("bad input")))

        assert recorder.code == 400
        assert json.loads(recorder.text) == {"error": "bad input"}

    def test_success_status_is_not_rewritten(self, recorder):
        """Test that an explicit 2xx status is written unchanged."""
        respond_error(recorder, with_status(202), with_message("queued with warnings"))

        assert recorder.code == 202

    def test_no_options_writes_empty_error(self, recorder):
        """Test that no options writes an empty error object."""
        respond_error(recorder)

        assert recorder.code == 200
        assert json.loads(recorder.text) == {}

    def test_last_option_wins(self, recorder):
        """Test that repeated options keep the last value."""
        respond_error(
            recorder,
            with_status(400),
            with_code("A"),
            with_status(409),
            with_code("B"),
        )

        assert recorder.code == 409
        assert json.loads(recorder.text) == {"code": "B"}
