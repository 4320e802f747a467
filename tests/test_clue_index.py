import itertools
import logging

import pytest

from detective_quest.domain.enums import InsertStatus
from detective_quest.evidence import clue_index
from detective_quest.evidence.clue_index import ClueIndex


CLUES = [
    "Corda cortada perto da janela.",
    "O livro de venenos sumiu da estante.",
    "Casaco com lama pendurado atras da porta.",
    "Um mapa de fuga escondido sob o colchao.",
    "Faca faltando no faqueiro.",
]


def _index(texts):
    index = ClueIndex()
    for text in texts:
        index.insert(text)
    return index


def test_empty_index_enumerates_nothing():
    index = ClueIndex()
    assert list(index.in_order()) == []
    assert len(index) == 0
    assert not index
    assert index.height() == 0


def test_first_insert_creates_root():
    index = ClueIndex()
    root = index.insert("pista")
    assert root is index.root
    assert root.text == "pista"
    assert index.last_insert_added is True


@pytest.mark.parametrize("order", list(itertools.permutations(CLUES[:4])))
def test_in_order_is_sorted_for_any_insertion_order(order):
    index = _index(order)
    assert list(index.in_order()) == sorted(CLUES[:4])


def test_duplicate_insert_leaves_index_unchanged():
    once = _index(CLUES)
    twice = _index(CLUES + CLUES[:2])
    assert list(twice.in_order()) == list(once.in_order())
    assert len(twice) == len(CLUES)


def test_duplicate_insert_reports_not_added_and_keeps_root():
    index = _index(["m", "a", "z"])
    root = index.root
    assert index.insert("a") is root
    assert index.last_insert_added is False


def test_bst_ordering_holds_at_every_node():
    index = _index(["m", "c", "x", "a", "e", "y"])

    def check(node, low, high):
        if node is None:
            return
        assert (low is None or low < node.text) and (high is None or node.text < high)
        check(node.left, low, node.text)
        check(node.right, node.text, high)

    check(index.root, None, None)


def test_comparison_is_case_sensitive():
    index = _index(["banana", "Banana", "apple"])
    assert list(index.in_order()) == ["Banana", "apple", "banana"]
    assert "banana" in index
    assert "BANANA" not in index


def test_in_order_is_restartable():
    index = _index(CLUES)
    first = list(index.in_order())
    assert list(index) == first
    assert list(index.in_order()) == first


def test_sorted_insertions_degrade_to_a_chain():
    index = _index(["a", "b", "c", "d"])
    assert index.height() == 4


def test_blank_clue_is_rejected():
    with pytest.raises(ValueError):
        ClueIndex().insert("   ")


def test_clear_tears_down_every_node():
    index = _index(CLUES)
    root = index.root
    index.clear()
    assert index.root is None
    assert root.left is None and root.right is None
    assert len(index) == 0
    assert list(index) == []


def _no_memory(*args, **kwargs):
    raise MemoryError


def test_insert_status_tells_added_from_duplicate():
    index = ClueIndex()
    index.insert("pista")
    assert index.last_insert == InsertStatus.ADDED
    index.insert("pista")
    assert index.last_insert == InsertStatus.DUPLICATE


def test_node_allocation_failure_drops_the_clue(monkeypatch, caplog):
    index = _index(["m"])
    monkeypatch.setattr(clue_index, "ClueNode", _no_memory)
    with caplog.at_level(logging.WARNING, logger="detective_quest.evidence.clue_index"):
        root = index.insert("z")
    assert root is index.root
    assert index.last_insert == InsertStatus.DROPPED
    assert index.last_insert_added is False
    assert list(index) == ["m"]
    assert len(index) == 1
    assert "clue dropped" in caplog.text


def test_allocation_failure_on_empty_index_leaves_it_empty(monkeypatch):
    index = ClueIndex()
    monkeypatch.setattr(clue_index, "ClueNode", _no_memory)
    assert index.insert("pista") is None
    assert index.last_insert == InsertStatus.DROPPED
    assert not index
