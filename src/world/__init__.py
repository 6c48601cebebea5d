"""World package: re-export the simulation types for simpler imports.

Callers can import public types from `world` directly, e.g.:

    from world import World, Intent, Position

Only the display-free simulation is re-exported here. The session-facing
pieces (`world.worldscene.WorldScene`, `world.world_hud.WorldHUD`) pull in
GL and are imported from their modules.
"""

from .position import Position, Coverage
from .entity import Entity, EntityKind, Intent, make_player, make_obstacle
from .world_collision import is_collided, collides_with_any
from .world_spawner import spawn_obstacles, spawn_batch
from .world import World

__all__ = [
    "Position",
    "Coverage",
    "Entity",
    "EntityKind",
    "Intent",
    "make_player",
    "make_obstacle",
    "is_collided",
    "collides_with_any",
    "spawn_obstacles",
    "spawn_batch",
    "World",
]
