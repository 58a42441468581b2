"""Graph traversal problems: trees, reachability, ratios and stones."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

from dsakit.disjoint_set import DisjointSet


def validate_binary_tree_nodes(
    n: int, left_child: Sequence[int], right_child: Sequence[int]
) -> bool:
    """Return whether the child arrays describe exactly one binary tree over ``n`` nodes."""
    if len(left_child) != n or len(right_child) != n:
        raise ValueError("child arrays must have one entry per node")
    parent: dict[int, int] = {}
    for node, children in enumerate(zip(left_child, right_child)):
        for child in children:
            if child == -1:
                continue
            if child in parent:
                return False
            parent[child] = node
    roots = [node for node in range(n) if node not in parent]
    if len(roots) != 1:
        return False
    visited: set[int] = set()
    stack = [roots[0]]
    while stack:
        node = stack.pop()
        if node in visited:
            return False
        visited.add(node)
        stack.extend(child for child in (left_child[node], right_child[node]) if child != -1)
    return len(visited) == n


def reachable_nodes(n: int, edges: Iterable[Sequence[int]], restricted: Iterable[int]) -> int:
    """Count nodes reachable from node 0 without passing through a restricted node."""
    graph: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        graph[u].append(v)
        graph[v].append(u)
    blocked = set(restricted)
    seen = {0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for neighbour in graph[node]:
            if neighbour not in seen and neighbour not in blocked:
                seen.add(neighbour)
                queue.append(neighbour)
    return len(seen)


def calc_equation(
    equations: Sequence[Sequence[str]],
    values: Sequence[float],
    queries: Iterable[Sequence[str]],
) -> list[float]:
    """Evaluate each query ratio from known ratios ``a / b = value``; -1.0 if unknown."""
    if len(equations) != len(values):
        raise ValueError("each equation needs exactly one value")
    graph: defaultdict[str, list[tuple[str, float]]] = defaultdict(list)
    for (u, v), value in zip(equations, values):
        if value == 0:
            raise ValueError("ratios must be non-zero")
        graph[u].append((v, value))
        graph[v].append((u, 1 / value))

    def evaluate(source: str, target: str) -> float:
        if source not in graph:
            return -1.0
        visited: set[str] = set()
        stack = [(source, 1.0)]
        while stack:
            node, product = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            if node == target:
                return product
            stack.extend((nxt, product * ratio) for nxt, ratio in reversed(graph[node]))
        return -1.0

    return [evaluate(source, target) for source, target in queries]


def remove_stones(stones: Sequence[Sequence[int]]) -> int:
    """Return how many stones can be removed, each sharing a row or column with another."""
    groups = DisjointSet(range(len(stones)))
    first_in_row: dict[int, int] = {}
    first_in_column: dict[int, int] = {}
    for index, (row, column) in enumerate(stones):
        for first, key in ((first_in_row, row), (first_in_column, column)):
            if key in first:
                groups.union(index, first[key])
            else:
                first[key] = index
    return len(stones) - groups.component_count()