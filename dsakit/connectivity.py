"""Connectivity problems solved with a disjoint-set forest."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from math import inf

from dsakit.disjoint_set import DisjointSet

Edge = Sequence[int]


def make_connected(n: int, connections: Iterable[Edge]) -> int:
    """Return the cable moves needed to connect ``n`` computers, or -1 if impossible."""
    network = DisjointSet(range(n))
    spare = 0
    for u, v in connections:
        if not network.union(u, v):
            spare += 1
    needed = network.component_count() - 1
    return needed if needed <= spare else -1


def _spanning_weight(
    n: int,
    ordered: Sequence[tuple[int, int, int, int]],
    skip: int | None = None,
    force: int | None = None,
) -> float:
    forest = DisjointSet(range(n))
    total = 0
    if force is not None:
        u, v, weight, _ = ordered[force]
        forest.union(u, v)
        total += weight
    for position, (u, v, weight, _) in enumerate(ordered):
        if position == skip:
            continue
        if forest.union(u, v):
            total += weight
    return total if forest.component_count() <= 1 else inf


def find_critical_and_pseudo_critical_edges(
    n: int, edges: Sequence[Sequence[int]]
) -> tuple[list[int], list[int]]:
    """Return the indices of critical and of pseudo-critical minimum spanning tree edges."""
    ordered = sorted(
        ((u, v, weight, index) for index, (u, v, weight) in enumerate(edges)),
        key=lambda edge: edge[2],
    )
    best = _spanning_weight(n, ordered)
    critical: list[int] = []
    pseudo_critical: list[int] = []
    for position, (_, _, _, index) in enumerate(ordered):
        if _spanning_weight(n, ordered, skip=position) > best:
            critical.append(index)
        elif _spanning_weight(n, ordered, force=position) == best:
            pseudo_critical.append(index)
    return critical, pseudo_critical


def distance_limited_paths_exist(
    n: int, edge_list: Sequence[Sequence[int]], queries: Sequence[Sequence[int]]
) -> list[bool]:
    """Answer whether each query's endpoints join by edges lighter than its limit."""
    forest = DisjointSet(range(n))
    edges = sorted(edge_list, key=lambda edge: edge[2])
    answers = [False] * len(queries)
    next_edge = 0
    for index in sorted(range(len(queries)), key=lambda i: queries[i][2]):
        p, q, limit = queries[index]
        while next_edge < len(edges) and edges[next_edge][2] < limit:
            u, v, _ = edges[next_edge]
            forest.union(u, v)
            next_edge += 1
        answers[index] = forest.connected(p, q)
    return answers


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Count the provinces described by an adjacency matrix."""
    provinces = DisjointSet(range(len(is_connected)))
    for i, line in enumerate(is_connected):
        for j, linked in enumerate(line):
            if linked == 1:
                provinces.union(i, j)
    return provinces.component_count()


def find_redundant_connection(edges: Iterable[Edge]) -> list[int]:
    """Return the last edge that closes a cycle in the graph."""
    forest = DisjointSet()
    redundant: list[int] | None = None
    for edge in edges:
        u, v = edge
        forest.add(u)
        forest.add(v)
        if not forest.union(u, v):
            redundant = [u, v]
    if redundant is None:
        raise ValueError("the graph has no cycle")
    return redundant


def accounts_merge(accounts: Iterable[Sequence[str]]) -> list[list[str]]:
    """Merge accounts sharing an e-mail address; each result is name then sorted e-mails."""
    records = sorted(list(account) for account in accounts)
    owners = DisjointSet(range(len(records)))
    first_owner: dict[str, int] = {}
    for index, (_, *emails) in enumerate(records):
        for email in emails:
            if email in first_owner:
                owners.union(index, first_owner[email])
            else:
                first_owner[email] = index
    grouped: defaultdict[int, list[str]] = defaultdict(list)
    for email, index in first_owner.items():
        grouped[owners.find(index)].append(email)
    return sorted([records[root][0], *sorted(emails)] for root, emails in grouped.items())


def min_swaps_couples(row: Sequence[int]) -> int:
    """Return the fewest swaps that seat every couple (2k, 2k+1) side by side."""
    if len(row) % 2:
        raise ValueError("row must hold an even number of people")
    couples = DisjointSet(range(len(row) // 2))
    left_seats, right_seats = row[0::2], row[1::2]
    return sum(couples.union(a // 2, b // 2) for a, b in zip(left_seats, right_seats))


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    runs = DisjointSet(nums)
    values = list(runs._parent)
    for value in values:
        if value + 1 in runs:
            runs.union(value, value + 1)
    return max((runs.component_size(value) for value in values), default=0)