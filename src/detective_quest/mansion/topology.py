"""Topology checks for the mansion map before any room is built."""

from __future__ import annotations

import networkx as nx

from detective_quest.domain.errors import MapBuildError
from detective_quest.domain.models import MansionContent


def room_graph(content: MansionContent) -> nx.DiGraph:
    """Directed graph of room names with one edge per parent->child door."""
    graph = nx.DiGraph()
    seen: set[str] = set()
    for spec in content.rooms:
        if spec.name in seen:
            raise MapBuildError(f"Duplicate room name: {spec.name}")
        seen.add(spec.name)
        graph.add_node(spec.name, clue=spec.clue)
    for spec in content.rooms:
        if spec.left is not None and spec.left == spec.right:
            raise MapBuildError(f"{spec.name} leads to {spec.left} on both sides")
        for side, child in (("left", spec.left), ("right", spec.right)):
            if child is None:
                continue
            if child not in seen:
                raise MapBuildError(f"{spec.name} {side} points to unknown room {child}")
            graph.add_edge(spec.name, child, side=side)
    return graph


def validate_topology(content: MansionContent) -> nx.DiGraph:
    """Reject maps that are not a single tree hanging from the root room."""
    graph = room_graph(content)
    if content.root not in graph:
        raise MapBuildError(f"Root room {content.root} is not defined")
    if graph.in_degree(content.root) != 0:
        raise MapBuildError(f"Root room {content.root} has a parent")
    for name in graph.nodes:
        if graph.in_degree(name) > 1:
            parents = ", ".join(sorted(graph.predecessors(name)))
            raise MapBuildError(f"{name} is reachable from more than one room: {parents}")
    if not nx.is_directed_acyclic_graph(graph):
        cycle = nx.find_cycle(graph)
        raise MapBuildError(f"Map contains a cycle: {cycle}")
    unreachable = set(graph.nodes) - nx.descendants(graph, content.root) - {content.root}
    if unreachable:
        raise MapBuildError(f"Rooms unreachable from {content.root}: {', '.join(sorted(unreachable))}")
    if not nx.is_arborescence(graph):
        raise MapBuildError("Map is not a tree")
    return graph
