"""Tests for AchievementDataHolder — defaults, validation, fallback."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from external_game_data.models.achievement import AchievementDataHolder


class TestAchievementDefaults:
    def test_empty_construction(self):
        a = AchievementDataHolder()
        assert a.external_id is None
        assert a.unlocked is False
        assert a.earned_offline is False
        assert a.date_earned is None
        assert a.locked_icon is None
        assert a.unlocked_icon is None

    def test_rarity_out_of_range_raises(self):
        a = AchievementDataHolder()
        with pytest.raises(ValidationError):
            a.external_rarity_percentage = 101.0

    def test_rarity_bounds_valid(self):
        a = AchievementDataHolder(external_rarity_percentage=0.0)
        a.external_rarity_percentage = 100.0
        assert a.external_rarity_percentage == 100.0

    def test_assignment_is_type_checked(self):
        a = AchievementDataHolder()
        with pytest.raises(ValidationError):
            a.external_value = "lots"


class TestFinalizeFallback:
    def test_unlocked_without_date_gets_now_and_offline(self):
        a = AchievementDataHolder(title="A", unlocked=True)
        before = datetime.now(timezone.utc)
        a.finalize_fallback()
        assert a.date_earned is not None
        assert a.date_earned >= before
        assert a.date_earned.tzinfo is not None
        assert a.earned_offline is True

    def test_idempotent(self):
        a = AchievementDataHolder(title="A", unlocked=True)
        a.finalize_fallback()
        first_date = a.date_earned
        a.finalize_fallback()
        assert a.date_earned == first_date
        assert a.earned_offline is True
        assert a.external_id == "A"

    def test_known_date_is_kept(self):
        earned = datetime(2024, 1, 2, tzinfo=timezone.utc)
        a = AchievementDataHolder(title="A", unlocked=True, date_earned=earned)
        a.finalize_fallback()
        assert a.date_earned == earned
        assert a.earned_offline is False

    def test_locked_achievement_gets_no_date(self):
        a = AchievementDataHolder(title="A", unlocked=False)
        a.finalize_fallback()
        assert a.date_earned is None
        assert a.earned_offline is False

    def test_missing_id_falls_back_to_title(self):
        a = AchievementDataHolder(title="Foo")
        a.finalize_fallback()
        assert a.external_id == "Foo"

    def test_existing_id_is_kept(self):
        a = AchievementDataHolder(title="Foo", external_id="foo_1")
        a.finalize_fallback()
        assert a.external_id == "foo_1"

    def test_no_id_and_no_title_stays_none(self):
        a = AchievementDataHolder()
        a.finalize_fallback()
        assert a.external_id is None


class TestAchievementRender:
    def test_unlocked_marker(self):
        a = AchievementDataHolder(title="A", external_id="a1", unlocked=True)
        assert a.render().startswith("*U* 'A', Ext_ID: a1")

    def test_locked_marker_and_description_line(self):
        a = AchievementDataHolder(title="B", description="do things")
        lines = a.render().split("\n")
        assert lines[0].startswith("*-* 'B'")
        assert lines[1] == "desc: do things"
