"""Tests for award unlocking."""
from __future__ import annotations

import logging

from playa_craft import Inventory
from playa_progress import (
    AWARD_RULES,
    Award,
    PlayerProgress,
    check_and_unlock_awards,
    default_awards,
)


def _ids(awards: list[Award]) -> list[str]:
    return [a.id for a in awards]


class TestDefaultAwards:
    def test_all_locked(self) -> None:
        awards = default_awards()
        assert len(awards) == 10
        assert not any(a.unlocked for a in awards)
        assert all(a.unlocked_at is None for a in awards)

    def test_fresh_copies(self) -> None:
        first = default_awards()
        first[0].unlocked = True
        assert default_awards()[0].unlocked is False

    def test_every_award_has_a_rule(self) -> None:
        assert set(_ids(default_awards())) == set(AWARD_RULES)


class TestCheckAndUnlockAwards:
    def test_nothing_for_fresh_player(self) -> None:
        awards = default_awards()
        assert check_and_unlock_awards(awards, PlayerProgress(), now=0.0) == []

    def test_moop_awards(self) -> None:
        awards = default_awards()
        unlocked = check_and_unlock_awards(awards, PlayerProgress(moop_collected=1), now=10.0)
        assert _ids(unlocked) == ["first-moop"]
        unlocked = check_and_unlock_awards(awards, PlayerProgress(moop_collected=50), now=20.0)
        assert _ids(unlocked) == ["moop-collector"]

    def test_stamps_unlock_time_once(self) -> None:
        awards = default_awards()
        check_and_unlock_awards(awards, PlayerProgress(game_hours=4), now=100.0)
        check_and_unlock_awards(awards, PlayerProgress(game_hours=9), now=200.0)
        wanderer = next(a for a in awards if a.id == "desert-wanderer")
        assert wanderer.unlocked is True
        assert wanderer.unlocked_at == 100.0

    def test_unlocked_awards_stay_unlocked(self) -> None:
        awards = default_awards()
        check_and_unlock_awards(awards, PlayerProgress(moop_collected=3), now=1.0)
        check_and_unlock_awards(awards, PlayerProgress(moop_collected=0), now=2.0)
        assert next(a for a in awards if a.id == "first-moop").unlocked

    def test_inventory_awards(self) -> None:
        awards = default_awards()
        progress = PlayerProgress(inventory=Inventory({"Cape": 1, "Vodka": 1}))
        unlocked = check_and_unlock_awards(awards, progress, now=0.0)
        assert _ids(unlocked) == ["craft-artisan", "party-survivor"]

    def test_karma_and_master(self) -> None:
        awards = default_awards()
        progress = PlayerProgress(
            stats={"karma": 210},
            achievements=frozenset({"art-car-rider", "not-a-darkwad", "moop-collector"}),
            game_hours=8,
        )
        unlocked = check_and_unlock_awards(awards, progress, now=0.0)
        assert _ids(unlocked) == [
            "art-car-rider",
            "not-a-darkwad",
            "desert-wanderer",
            "spiritual-journey",
            "burning-man-master",
        ]

    def test_award_without_rule_stays_locked(self) -> None:
        awards = [Award(id="mystery", name="?", description="?", emoji="?")]
        assert check_and_unlock_awards(awards, PlayerProgress(moop_collected=99), now=0.0) == []
        assert awards[0].unlocked is False

    def test_custom_rules(self) -> None:
        awards = [Award(id="hydrated", name="Hydrated", description="Held water", emoji="💧")]
        rules = {"hydrated": lambda p: p.inventory.quantity_of("Water") >= 3}
        progress = PlayerProgress(inventory=Inventory({"Water": 3}))
        assert _ids(check_and_unlock_awards(awards, progress, now=5.0, rules=rules)) == ["hydrated"]

    def test_logs_unlock(self, caplog) -> None:
        awards = default_awards()
        with caplog.at_level(logging.INFO, logger="playa_progress.awards"):
            check_and_unlock_awards(awards, PlayerProgress(total_drugs_taken=5), now=0.0)
        assert "award unlocked: Psychedelic Pioneer" in caplog.text
