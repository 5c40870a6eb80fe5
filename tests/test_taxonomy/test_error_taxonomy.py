"""Tests for the error taxonomy — codes, retry classification, reserved spam modes."""

from __future__ import annotations

import pytest

from external_game_data.taxonomy.error_taxonomy import (
    PERMANENT_ERROR_CODES,
    ErrorCode,
    SpamMode,
    worth_retrying,
)


class TestErrorCodeEnum:
    def test_stable_integer_values(self):
        assert ErrorCode.UNKNOWN == 0
        assert ErrorCode.PRIVACY == 1
        assert ErrorCode.PLAYER_NONEXISTENT == 2
        assert ErrorCode.WRONG_DATA_RECEIVED == 3
        assert ErrorCode.EXPLICITLY_NOT_SCANNABLE == 4

    def test_no_duplicate_values(self):
        values = [m.value for m in ErrorCode]
        assert len(values) == len(set(values))

    def test_exactly_five_kinds(self):
        assert len(ErrorCode) == 5


class TestWorthRetrying:
    @pytest.mark.parametrize("code", [ErrorCode.PRIVACY, ErrorCode.EXPLICITLY_NOT_SCANNABLE])
    def test_permanent_codes_not_worth_retrying(self, code):
        assert worth_retrying(code) is False

    @pytest.mark.parametrize(
        "code",
        [ErrorCode.UNKNOWN, ErrorCode.PLAYER_NONEXISTENT, ErrorCode.WRONG_DATA_RECEIVED],
    )
    def test_transient_codes_worth_retrying(self, code):
        assert worth_retrying(code) is True

    def test_accepts_plain_int(self):
        assert worth_retrying(1) is False
        assert worth_retrying(0) is True

    def test_unknown_int_raises(self):
        with pytest.raises(ValueError):
            worth_retrying(99)

    def test_permanent_set_matches_function(self):
        for code in ErrorCode:
            assert worth_retrying(code) is (code not in PERMANENT_ERROR_CODES)


class TestSpamMode:
    def test_reserved_values(self):
        assert SpamMode.UNKNOWN == 0
        assert SpamMode.SPAM == 1
        assert SpamMode.EXPLICITLY_NOT_SPAM == 2
