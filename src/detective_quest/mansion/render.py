"""Text drawing of the mansion map."""

from __future__ import annotations

from detective_quest.mansion.rooms import Room, RoomTree


def _room_label(room: Room, show_clues: bool) -> str:
    label = room.name
    if show_clues and room.clue:
        label = f"{label}  [{room.clue}]"
    if room.is_leaf:
        label = f"{label} (fim)"
    return label


def render_map(tree: RoomTree, show_clues: bool = False) -> str:
    if tree.root is None:
        return "(mapa vazio)"
    lines = [_room_label(tree.root, show_clues)]
    stack: list[tuple[Room, str, str]] = []
    for side, child in (("d", tree.root.right), ("e", tree.root.left)):
        if child is not None:
            stack.append((child, "", side))
    while stack:
        room, indent, side = stack.pop()
        lines.append(f"{indent}  [{side}] {_room_label(room, show_clues)}")
        for child_side, child in (("d", room.right), ("e", room.left)):
            if child is not None:
                stack.append((child, indent + "    ", child_side))
    return "\n".join(lines)
