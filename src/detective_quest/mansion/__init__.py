"""The mansion map: a fixed binary tree of rooms."""

from .rooms import Room, RoomTree, build_room_tree
from .render import render_map

__all__ = [
    "Room",
    "RoomTree",
    "build_room_tree",
    "render_map",
]
