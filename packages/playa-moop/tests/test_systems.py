"""Tests for the moop collection system."""
from __future__ import annotations

from playa import Engine
from playa_craft import DEFAULT_CATALOG, CraftingResolver, Inventory, make_auto_craft_system
from playa_notify import NotificationLog, Position
from playa_progress import PlayerProgress, check_and_unlock_awards, default_awards
from playa_stats import PlayerStats
from playa_moop import Collector, MoopItem, make_moop, make_moop_collection_system


def _spawn_collector(engine: Engine, x: float = 0.0, y: float = 0.0,
                     inventory: Inventory | None = None) -> int:
    eid = engine.world.spawn()
    engine.world.attach(eid, Collector())
    engine.world.attach(eid, PlayerStats())
    engine.world.attach(eid, inventory if inventory is not None else Inventory())
    engine.world.attach(eid, Position(x, y))
    return eid


def _spawn_moop(engine: Engine, moop_type: str, x: float, y: float) -> int:
    mid = engine.world.spawn()
    engine.world.attach(mid, make_moop(moop_type, Position(x, y)))
    return mid


class TestMoopCollectionSystem:
    def test_pickup_grants_karma_and_item(self) -> None:
        engine = Engine()
        log = NotificationLog()
        engine.add_system(make_moop_collection_system(log))
        eid = _spawn_collector(engine)
        mid = _spawn_moop(engine, "ziptie", 10, 0)

        engine.step()

        assert engine.world.get(eid, PlayerStats).karma == 2
        assert engine.world.get(eid, Inventory).items() == {"Zip Tie": 1}
        assert engine.world.get(eid, Collector).collected == 1
        assert not engine.world.alive(mid)
        note = log.last()
        assert note.message == "+1 Zip Tie (+2 karma)"
        assert note.category == "item"
        assert note.position == Position(10, 0)

    def test_out_of_reach_is_left_alone(self) -> None:
        engine = Engine()
        engine.add_system(make_moop_collection_system(NotificationLog()))
        eid = _spawn_collector(engine)
        mid = _spawn_moop(engine, "ziptie", 100, 0)

        engine.step()

        assert engine.world.alive(mid)
        assert engine.world.get(eid, PlayerStats).karma == 0
        assert engine.world.get(eid, Collector).collected == 0

    def test_karma_only_moop_is_not_counted(self) -> None:
        engine = Engine()
        engine.add_system(make_moop_collection_system(NotificationLog()))
        eid = _spawn_collector(engine)
        _spawn_moop(engine, "cape", 0, 5)

        engine.step()

        assert engine.world.get(eid, PlayerStats).karma == 8
        assert len(engine.world.get(eid, Inventory)) == 0
        assert engine.world.get(eid, Collector).collected == 0

    def test_each_piece_goes_to_one_collector(self) -> None:
        engine = Engine()
        engine.add_system(make_moop_collection_system(NotificationLog()))
        a = _spawn_collector(engine, 0, 0)
        b = _spawn_collector(engine, 4, 0)
        _spawn_moop(engine, "rope", 2, 0)

        engine.step()

        assert engine.world.get(a, Collector).collected == 1
        assert engine.world.get(b, Collector).collected == 0
        assert list(engine.world.query(MoopItem)) == []

    def test_restricted_inventory_still_gets_karma(self) -> None:
        engine = Engine()
        engine.add_system(make_moop_collection_system(NotificationLog()))
        inv = Inventory(item_types=frozenset({"Water"}))
        eid = _spawn_collector(engine, inventory=inv)
        _spawn_moop(engine, "bucket", 0, 0)

        engine.step()

        assert engine.world.get(eid, PlayerStats).karma == 4
        assert len(inv) == 0

    def test_on_collected_receives_collected_copy(self) -> None:
        engine = Engine()
        seen = []
        engine.add_system(make_moop_collection_system(
            NotificationLog(),
            on_collected=lambda w, c, eid, moop: seen.append((eid, moop.type, moop.collected)),
        ))
        eid = _spawn_collector(engine)
        _spawn_moop(engine, "glitter", 0, 0)

        engine.step()

        assert seen == [(eid, "glitter", True)]

    def test_pickup_feeds_crafting_and_awards(self) -> None:
        engine = Engine()
        log = NotificationLog()
        engine.add_system(make_moop_collection_system(log))
        engine.add_system(make_auto_craft_system(CraftingResolver(DEFAULT_CATALOG, log)))
        eid = _spawn_collector(engine, inventory=Inventory({"Light Bulb": 2, "Glitter": 1}))
        _spawn_moop(engine, "rope", 3, 3)

        engine.step()

        inv = engine.world.get(eid, Inventory)
        assert inv.items() == {"Totem": 1}
        assert [n.category for n in log.query()] == ["item", "craft"]

        progress = PlayerProgress(
            inventory=inv,
            moop_collected=engine.world.get(eid, Collector).collected,
        )
        unlocked = check_and_unlock_awards(default_awards(), progress, now=0.0)
        assert [a.id for a in unlocked] == ["first-moop", "craft-artisan"]
