"""A headless afternoon on the playa.

One player wanders at random. Moop appears around them and is picked up on
contact, other loot turns up now and then, and plastic bags get tossed back
on the ground. The engine runs the moop, stat decay, auto-craft and signal
systems every frame. Notifications arrive through the signal bus; at the
end the player's archetype and awards are printed.

Demonstrates:
- Wiring PlayerStats/Motion/Inventory/Position/Collector onto one entity
- Moop pickup feeding karma, inventory and the moop award counter
- make_stat_decay_system with an on_critical callback
- CraftingResolver publishing onto a SignalBus via SignalNotificationSink
- Archetype and award evaluation from the final state

Run: python packages/playa-craft/examples/day_on_the_playa.py --minutes 5
"""
from __future__ import annotations

import argparse
import logging
import math
import random

from playa import Engine, FrameContext, System, World
from playa_craft import DEFAULT_CATALOG, ITEM_TYPES, CraftingResolver, Inventory, make_auto_craft_system
from playa_moop import Collector, drop_litter, make_moop, make_moop_collection_system, pick_moop_type
from playa_notify import NotificationSink, Position, SignalNotificationSink
from playa_progress import PlayerProgress, calculate_player_archetype, check_and_unlock_awards, default_awards
from playa_signal import SignalBus, make_signal_system
from playa_stats import DEFAULT_DECAY_CONFIG, Motion, PlayerStats, make_stat_decay_system

LOOT = ("Light Bulb", "Battery", "Water", "Clothing", "Beer")
SPAWN_RANGE = 60.0  # px around the player
WALK_SPEED = 90.0  # px per second


def make_wander_system(rng: random.Random) -> System:
    heading = [rng.uniform(0, 2 * math.pi)]

    def wander_system(world: World, ctx: FrameContext) -> None:
        for _, (pos, motion) in world.query(Position, Motion):
            if rng.random() < 0.02:
                heading[0] += rng.uniform(-1.0, 1.0)
            step = WALK_SPEED * ctx.dt
            pos.x += math.cos(heading[0]) * step
            pos.y += math.sin(heading[0]) * step
            motion.distance += step

    return wander_system


def make_pickup_system(rng: random.Random, chance: float) -> System:
    def pickup_system(world: World, ctx: FrameContext) -> None:
        for _, (inv,) in world.query(Inventory):
            if rng.random() < chance:
                inv.add(rng.choice(LOOT))

    return pickup_system


def make_moop_spawn_system(rng: random.Random, chance: float) -> System:
    def moop_spawn_system(world: World, ctx: FrameContext) -> None:
        for _, (pos, _collector) in world.query(Position, Collector):
            if rng.random() < chance:
                spot = Position(
                    pos.x + rng.uniform(-SPAWN_RANGE, SPAWN_RANGE),
                    pos.y + rng.uniform(-SPAWN_RANGE, SPAWN_RANGE),
                )
                world.attach(world.spawn(), make_moop(pick_moop_type(rng), spot))

    return moop_spawn_system


def make_litter_system(sink: NotificationSink) -> System:
    # Plastic bags feed no recipe, so this player tosses them.
    def litter_system(world: World, ctx: FrameContext) -> None:
        for eid, (stats, inv, pos) in list(world.query(PlayerStats, Inventory, Position)):
            updated = drop_litter(inv, "Plastic Bag", stats, sink, pos)
            if updated is not None:
                world.attach(eid, updated)

    return litter_system


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--minutes", type=float, default=3.0)
    parser.add_argument("--fps", type=int, default=30)
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("--pickup-chance", type=float, default=0.01)
    parser.add_argument("--moop-chance", type=float, default=0.02)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    engine = Engine(fps=args.fps)
    bus = SignalBus()

    def show(signal_name: str, data: dict) -> None:
        t = engine.clock.elapsed
        print(f"  [{t:6.1f}s] {data['message']}  @({data['x']:.0f}, {data['y']:.0f})")

    bus.subscribe("notification", show)

    def on_critical(world: World, ctx: FrameContext, eid: int, stat: str) -> None:
        print(f"  [{ctx.elapsed:6.1f}s] {stat} is critical!")

    sink = SignalNotificationSink(bus)
    resolver = CraftingResolver(DEFAULT_CATALOG, sink)
    engine.add_system(make_wander_system(rng))
    engine.add_system(make_moop_spawn_system(rng, args.moop_chance))
    engine.add_system(make_moop_collection_system(sink))
    engine.add_system(make_pickup_system(rng, args.pickup_chance))
    engine.add_system(make_stat_decay_system(DEFAULT_DECAY_CONFIG, on_critical=on_critical))
    engine.add_system(make_auto_craft_system(resolver))
    engine.add_system(make_litter_system(sink))
    engine.add_system(make_signal_system(bus))

    player = engine.world.spawn()
    engine.world.attach(player, PlayerStats(karma=15.0))
    engine.world.attach(player, Motion())
    engine.world.attach(player, Inventory(item_types=ITEM_TYPES))
    engine.world.attach(player, Position(0.0, 0.0))
    engine.world.attach(player, Collector())

    print("=== A day on the playa ===\n")
    engine.run(int(args.minutes * 60 * args.fps))

    stats = engine.world.get(player, PlayerStats)
    inv = engine.world.get(player, Inventory)
    print("\nFinal stats:")
    for name, value in vars(stats).items():
        print(f"  {name:>9}: {value:7.2f}")
    print(f"Inventory: {inv.items()}")
    print(f"Moop collected: {engine.world.get(player, Collector).collected}")

    progress = PlayerProgress(
        stats=vars(stats),
        inventory=inv,
        game_hours=engine.clock.elapsed / 3600,
        moop_collected=engine.world.get(player, Collector).collected,
    )
    awards = default_awards()
    for award in check_and_unlock_awards(awards, progress, now=engine.clock.elapsed):
        print(f"Award: {award.emoji} {award.name}")
    archetype = calculate_player_archetype(progress)
    print(f"Archetype: {archetype.name if archetype else 'none yet'}")


if __name__ == "__main__":
    main()
