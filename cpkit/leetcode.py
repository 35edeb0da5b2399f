"""Solutions to a handful of array, graph and string problems."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Sequence

INF = 10**9
"""Cost reported by :class:`CostTrie` when a target cannot be built."""


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return two indices whose values add up to ``target``, or ``[-1, -1]``."""
    positions: dict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(nums):
        positions[value].append(index)

    for index, value in enumerate(nums):
        required = target - value
        found = positions.get(required)
        if not found:
            continue
        if required == value:
            if len(found) > 1:
                return [found[0], found[1]]
        else:
            return [index, found[0]]
    return [-1, -1]


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals into a sorted list."""
    ordered = sorted(list(interval) for interval in intervals)
    if not ordered:
        return []

    merged = [ordered[0]]
    for start, end in ordered[1:]:
        last = merged[-1]
        if last[0] <= start <= last[1]:
            last[1] = max(last[1], end)
        else:
            merged.append([start, end])
    return merged


def _components(n: int, adjacency: list[list[int]]) -> list[int]:
    component = [-1] * n
    label = 0
    for start in range(n):
        if component[start] != -1:
            continue
        component[start] = label
        stack = [start]
        while stack:
            node = stack.pop()
            for child in adjacency[node]:
                if component[child] == -1:
                    component[child] = label
                    stack.append(child)
        label += 1
    return component


def minimum_cost(
    n: int, edges: Iterable[Sequence[int]], query: Iterable[Sequence[int]]
) -> list[int]:
    """Answer walk-cost queries on an undirected weighted graph.

    A query between nodes of different components answers -1.  Otherwise the
    answer is the bitwise AND of the weights on the edges touching the node
    whose index equals the component's number, or -1 if that node has none.
    """
    adjacency: list[list[int]] = [[] for _ in range(n)]
    weights: list[list[int]] = [[] for _ in range(n)]
    for a, b, w in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
        weights[a].append(w)
        weights[b].append(w)

    component = _components(n, adjacency)
    count = max(component, default=-1) + 1

    ands = [-1] * count
    for label in range(count):
        for weight in weights[label]:
            ands[label] = weight if ands[label] == -1 else ands[label] & weight

    return [
        ands[component[a]] if component[a] == component[b] else -1
        for a, b in query
    ]


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    end: bool = False
    val: int = 0


class CostTrie:
    """Trie of words, each carrying the cheapest cost it was inserted with."""

    def __init__(self) -> None:
        self.root = _TrieNode()

    def insert(self, word: str, val: int) -> None:
        """Add ``word`` with cost ``val``, keeping the lower cost on repeats."""
        node = self.root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        if node.end:
            node.val = min(node.val, val)
        else:
            node.end = True
            node.val = val

    def min_cost(self, target: str) -> int:
        """Cost of building ``target`` by cutting at every complete word.

        Walking the trie, the first complete word met is always taken and the
        walk restarts at the root.  Returns :data:`INF` when this fails.
        """
        node = self.root
        taken: list[int] = []
        for char in target:
            node = node.children.get(char)
            if node is None:
                return INF
            if node.end:
                taken.append(node.val)
                node = self.root
        if node is not self.root:
            return INF

        total = 0
        for cost in reversed(taken):
            total = min(INF, cost + total)
        return total


def minimum_concat_cost(
    target: str, words: Sequence[str], costs: Sequence[int]
) -> int:
    """Build a :class:`CostTrie` from ``words`` and price ``target`` with it."""
    trie = CostTrie()
    for word, cost in zip(words, costs):
        trie.insert(word, cost)
    return trie.min_cost(target)


def heaviest_value(nums: Iterable[int]) -> int:
    """Value (other than -1) whose positions have the largest index sum.

    Ties go to the value seen first; an input with no such value gives 0.
    """
    totals: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value != -1:
            totals[value] = totals.get(value, 0) + index

    best_value = 0
    best_total: int | None = None
    for value, total in totals.items():
        if best_total is None or total > best_total:
            best_total = total
            best_value = value
    return best_value