from __future__ import annotations

import pytest

from command_runner import DecodeError, ExecutionResult


class TestSucceeded:
    @pytest.mark.parametrize(
        ("result", "expected"),
        [
            (ExecutionResult(exit_code=0), True),
            (ExecutionResult(exit_code=1), False),
            (ExecutionResult(exit_code=255), False),
            (ExecutionResult(exit_code=None, signal=9), False),
            (ExecutionResult(exit_code=None), False),
        ],
    )
    def test_succeeded_iff_zero_exit_code(self, result, expected):
        assert result.succeeded is expected

    def test_negative_returncode_is_a_signal(self):
        result = ExecutionResult.from_returncode(-15, b"", b"")
        assert result.exit_code is None
        assert result.signal == 15
        assert not result.succeeded
        assert result.status == "signal 15"

    def test_positive_returncode(self):
        result = ExecutionResult.from_returncode(3, b"out", b"err")
        assert result.exit_code == 3
        assert result.signal is None
        assert result.status == "exit code 3"


class TestDecoding:
    def test_valid_utf8(self):
        result = ExecutionResult(
            exit_code=0, raw_stdout="héllo\n".encode(), raw_stderr=b"warn\n"
        )
        assert result.stdout() == "héllo\n"
        assert result.stderr() == "warn\n"

    def test_invalid_stdout_raises_decode_error(self):
        result = ExecutionResult(exit_code=0, raw_stdout=b"ok\xff\xfe", raw_stderr=b"fine")

        with pytest.raises(DecodeError) as exc_info:
            result.stdout()

        err = exc_info.value
        assert err.stream == "stdout"
        assert err.position == 2
        assert isinstance(err.__cause__, UnicodeDecodeError)

        # other accessors are unaffected
        assert result.stderr() == "fine"

    def test_invalid_stderr_raises_decode_error(self):
        result = ExecutionResult(exit_code=1, raw_stderr=b"\xc3")
        with pytest.raises(DecodeError, match="stderr"):
            result.stderr()

    def test_lossy_decoding_substitutes(self):
        result = ExecutionResult(exit_code=0, raw_stdout=b"a\xffb")
        assert result.stdout_lossy() == "a�b"
