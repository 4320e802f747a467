import pytest

from detective_quest.content import parse_content
from detective_quest.domain.enums import Direction
from detective_quest.domain.errors import MapBuildError, NoSuchPath
from detective_quest.mansion import build_room_tree, render_map
from detective_quest.mansion import rooms as room_module


def _content(rooms, root="A"):
    return parse_content({"root": root, "rooms": rooms})


def test_default_map_shape(content):
    tree = build_room_tree(content)
    assert tree.root.name == "Hall de entrada"
    assert tree.root.left.name == "Biblioteca"
    assert tree.root.right.name == "Sala de Estar"
    assert tree.root.right.right is None
    assert len(tree) == 7
    assert tree.depth() == 4
    leaves = sorted(room.name for room in tree if room.is_leaf)
    assert leaves == ["Banheiro", "Cozinha", "Jardim de Inverno"]


def test_walk_is_preorder(content):
    tree = build_room_tree(content)
    assert [room.name for room in tree.walk()] == [
        "Hall de entrada",
        "Biblioteca",
        "Cozinha",
        "Jardim de Inverno",
        "Sala de Estar",
        "Quarto Principal",
        "Banheiro",
    ]


def test_children_only_offers_present_rooms(content):
    tree = build_room_tree(content)
    assert tree.children(tree.root) == (Direction.LEFT, Direction.RIGHT)
    sala = tree.find("Sala de Estar")
    assert tree.children(sala) == (Direction.LEFT,)
    assert tree.children(tree.find("Banheiro")) == ()


def test_move_follows_children(content):
    tree = build_room_tree(content)
    biblioteca = tree.move(tree.root, Direction.LEFT)
    assert biblioteca.name == "Biblioteca"
    assert tree.move(biblioteca, Direction.RIGHT).name == "Jardim de Inverno"
    assert tree.peek(tree.root, Direction.RIGHT) == "Sala de Estar"


def test_move_to_absent_child_raises_no_such_path(content):
    tree = build_room_tree(content)
    sala = tree.find("Sala de Estar")
    with pytest.raises(NoSuchPath) as excinfo:
        tree.move(sala, Direction.RIGHT)
    assert excinfo.value.room == "Sala de Estar"
    assert tree.peek(sala, Direction.RIGHT) is None


def test_collect_clue_is_one_time(content):
    tree = build_room_tree(content)
    biblioteca = tree.find("Biblioteca")
    assert tree.collect_clue(biblioteca) == "O livro de venenos sumiu da estante."
    assert tree.collect_clue(biblioteca) is None
    assert tree.collect_clue(tree.root) is None


def test_trees_built_from_same_content_are_independent(content):
    first = build_room_tree(content)
    second = build_room_tree(content)
    first.collect_clue(first.find("Cozinha"))
    assert second.find("Cozinha").clue == "Faca faltando no faqueiro."


def test_teardown_detaches_every_room(content):
    tree = build_room_tree(content)
    rooms = list(tree)
    tree.teardown()
    assert tree.root is None
    assert len(tree) == 0
    assert all(room.left is None and room.right is None for room in rooms)


def test_unknown_child_is_rejected():
    with pytest.raises(MapBuildError, match="unknown room"):
        build_room_tree(_content([{"name": "A", "left": "Z"}]))


def test_unknown_root_is_rejected():
    with pytest.raises(MapBuildError, match="not defined"):
        build_room_tree(_content([{"name": "B"}]))


def test_duplicate_room_name_is_rejected():
    with pytest.raises(MapBuildError, match="Duplicate"):
        build_room_tree(_content([{"name": "A"}, {"name": "A"}]))


def test_room_with_two_parents_is_rejected():
    rooms = [
        {"name": "A", "left": "B", "right": "C"},
        {"name": "B", "left": "D"},
        {"name": "C", "left": "D"},
        {"name": "D"},
    ]
    with pytest.raises(MapBuildError, match="more than one room"):
        build_room_tree(_content(rooms))


def test_same_child_on_both_sides_is_rejected():
    with pytest.raises(MapBuildError, match="both sides"):
        build_room_tree(_content([{"name": "A", "left": "B", "right": "B"}, {"name": "B"}]))


def test_cycle_back_to_root_is_rejected():
    rooms = [{"name": "A", "left": "B"}, {"name": "B", "left": "A"}]
    with pytest.raises(MapBuildError):
        build_room_tree(_content(rooms))


def test_unreachable_room_is_rejected():
    rooms = [{"name": "A"}, {"name": "B", "left": "C"}, {"name": "C", "left": "B"}]
    with pytest.raises(MapBuildError):
        build_room_tree(_content(rooms))


def test_render_map_lists_every_room(content):
    text = render_map(build_room_tree(content), show_clues=True)
    lines = text.splitlines()
    assert lines[0] == "Hall de entrada"
    assert len(lines) == 7
    assert "  [e] Biblioteca  [O livro de venenos sumiu da estante.]" in lines
    assert any("Banheiro" in line and "(fim)" in line for line in lines)


def test_allocation_failure_while_building_is_fatal(content, monkeypatch):
    def _no_memory(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(room_module, "Room", _no_memory)
    with pytest.raises(MapBuildError, match="Out of memory"):
        build_room_tree(content)
