"""Tests for the stat decay system."""
from __future__ import annotations

import logging

import pytest
from playa import Engine
from playa_stats import (
    DEFAULT_DECAY_CONFIG,
    DecayConfig,
    Motion,
    PlayerStats,
    make_stat_decay_system,
)


def _player(engine: Engine, stats: PlayerStats, distance: float = 0.0) -> int:
    eid = engine.world.spawn()
    engine.world.attach(eid, stats)
    engine.world.attach(eid, Motion(distance=distance))
    return eid


class TestStatDecaySystem:
    def test_applies_one_second_of_decay(self) -> None:
        engine = Engine()
        engine.add_system(make_stat_decay_system(DEFAULT_DECAY_CONFIG))
        eid = _player(engine, PlayerStats())

        engine.step(1.0)

        stats = engine.world.get(eid, PlayerStats)
        assert stats.thirst == pytest.approx(0.75)
        assert stats.hunger == pytest.approx(0.5)
        assert stats.bathroom == pytest.approx(0.3)
        assert stats.mood == pytest.approx(99.9)
        assert stats.energy == pytest.approx(100)
        assert stats.karma == 0

    def test_charges_and_resets_motion(self) -> None:
        engine = Engine()
        engine.add_system(make_stat_decay_system(DEFAULT_DECAY_CONFIG))
        eid = _player(engine, PlayerStats(energy=80), distance=200.0)

        engine.step(0.0)
        assert engine.world.get(eid, PlayerStats).energy == pytest.approx(78.0)
        assert engine.world.get(eid, Motion).distance == 0.0

        engine.step(0.0)
        assert engine.world.get(eid, PlayerStats).energy == pytest.approx(78.0)

    def test_entities_without_motion_are_skipped(self) -> None:
        engine = Engine()
        engine.add_system(make_stat_decay_system(DEFAULT_DECAY_CONFIG))
        eid = engine.world.spawn()
        engine.world.attach(eid, PlayerStats())
        engine.step(1.0)
        assert engine.world.get(eid, PlayerStats).thirst == 0

    def test_clamps_at_bounds(self) -> None:
        engine = Engine()
        engine.add_system(make_stat_decay_system(DEFAULT_DECAY_CONFIG))
        eid = _player(engine, PlayerStats(thirst=99.9), distance=100_000)
        engine.step(1.0)
        stats = engine.world.get(eid, PlayerStats)
        assert stats.thirst == 100
        assert stats.energy == 0

    def test_karma_settles_on_neutral(self) -> None:
        engine = Engine()
        engine.add_system(make_stat_decay_system(DEFAULT_DECAY_CONFIG))
        eid = _player(engine, PlayerStats(karma=0.05))
        engine.run(3, dt=10.0)
        assert engine.world.get(eid, PlayerStats).karma == 0

    def test_low_energy_penalty_is_opt_in(self) -> None:
        tired = PlayerStats(energy=10, mood=50, thirst=50, hunger=50)
        plain = Engine()
        plain.add_system(make_stat_decay_system(DEFAULT_DECAY_CONFIG))
        a = _player(plain, PlayerStats(**vars(tired)))

        penalised = Engine()
        penalised.add_system(
            make_stat_decay_system(DEFAULT_DECAY_CONFIG, low_energy_penalty=True)
        )
        b = _player(penalised, PlayerStats(**vars(tired)))

        plain.step(0.1)
        penalised.step(0.1)
        mood_a = plain.world.get(a, PlayerStats).mood
        mood_b = penalised.world.get(b, PlayerStats).mood
        assert mood_b == pytest.approx(mood_a - 0.02)

    def test_uses_supplied_config(self) -> None:
        engine = Engine()
        engine.add_system(make_stat_decay_system(DecayConfig(thirst_decay_per_second=10.0)))
        eid = _player(engine, PlayerStats())
        engine.step(0.5)
        assert engine.world.get(eid, PlayerStats).thirst == pytest.approx(5.0)


class TestOnCritical:
    def test_fires_once_on_transition(self) -> None:
        engine = Engine()
        events = []
        engine.add_system(make_stat_decay_system(
            DEFAULT_DECAY_CONFIG,
            on_critical=lambda w, c, eid, name: events.append((c.frame, eid, name)),
        ))
        eid = _player(engine, PlayerStats(thirst=99.0, hunger=0.0))

        engine.step(1.0)  # thirst 99.75
        engine.step(1.0)  # thirst 100 (clamped)
        engine.step(1.0)  # still 100, no new event

        assert events == [(2, eid, "thirst")]

    def test_energy_exhaustion(self) -> None:
        engine = Engine()
        events = []
        engine.add_system(make_stat_decay_system(
            DEFAULT_DECAY_CONFIG,
            on_critical=lambda w, c, eid, name: events.append(name),
        ))
        _player(engine, PlayerStats(energy=1.0), distance=150.0)
        engine.step(0.0)
        assert events == ["energy"]

    def test_logs_transition(self, caplog) -> None:
        engine = Engine()
        engine.add_system(make_stat_decay_system(DEFAULT_DECAY_CONFIG))
        _player(engine, PlayerStats(bathroom=99.9))
        with caplog.at_level(logging.DEBUG, logger="playa_stats.systems"):
            engine.step(1.0)
        assert "bathroom critical" in caplog.text
