"""Graph algorithms: components, cycles, reachability and grouping."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterable, Sequence

_WEIGHT_LIMIT = 1_000_001


class UnionFind:
    """Disjoint-set forest with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        root = i
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def unite(self, i: int, j: int) -> None:
        """Merge the sets holding ``i`` and ``j``."""
        root_i, root_j = self.find(i), self.find(j)
        if root_i == root_j:
            return
        if self.rank[root_i] > self.rank[root_j]:
            self.parent[root_j] = root_i
        elif self.rank[root_i] < self.rank[root_j]:
            self.parent[root_i] = root_j
        else:
            self.parent[root_j] = root_i
            self.rank[root_i] += 1


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Count connected groups in an adjacency matrix."""
    n = len(is_connected)
    visited = [False] * n
    provinces = 0
    for start in range(n):
        if visited[start]:
            continue
        provinces += 1
        visited[start] = True
        stack = [start]
        while stack:
            u = stack.pop()
            for v, linked in enumerate(is_connected[u]):
                if linked == 1 and not visited[v]:
                    visited[v] = True
                    stack.append(v)
    return provinces


def find_redundant_connection(edges: Iterable[Sequence[int]]) -> list[int]:
    """Return the first edge that closes a cycle, or an empty list if none does."""
    edges = [list(edge) for edge in edges]
    forest = UnionFind(len(edges) + 1)
    for edge in edges:
        a, b = edge[0], edge[1]
        if forest.find(a) == forest.find(b):
            return edge
        forest.unite(a, b)
    return []


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Return, in ascending order, the nodes from which every path ends at a terminal node."""
    # 0 = unvisited, 1 = on a path / unsafe, 2 = safe
    state = [0] * len(graph)

    def is_safe(start: int) -> bool:
        if state[start]:
            return state[start] == 2
        state[start] = 1
        stack = [(start, iter(graph[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if state[neighbour] == 1:
                    return False
                if state[neighbour] == 0:
                    state[neighbour] = 1
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
            else:
                state[node] = 2
                stack.pop()
        return True

    return sorted(node for node in range(len(graph)) if is_safe(node))


def check_if_prerequisite(
    n: int,
    prerequisites: Iterable[Sequence[int]],
    queries: Iterable[Sequence[int]],
) -> list[bool]:
    """For each query ``(u, v)``, tell whether course ``u`` is a prerequisite of ``v``."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for before, after in prerequisites:
        adjacency[before].append(after)

    reachable: list[set[int]] = []
    for start in range(n):
        seen = {start}
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
        reachable.append(seen)

    return [v in reachable[u] for u, v in queries]


def maximum_invitations(favorite: Sequence[int]) -> int:
    """Largest number of employees seated so everyone sits beside their favourite."""
    n = len(favorite)
    reverse: list[list[int]] = [[] for _ in range(n)]
    indegree = [0] * n
    for person, fav in enumerate(favorite):
        reverse[fav].append(person)
        indegree[fav] += 1
    visited = [False] * n

    def peel(start: int) -> int:
        queue = deque([start])
        last = start
        while queue:
            node = queue.popleft()
            last = node
            visited[node] = True
            nxt = favorite[node]
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
        return favorite[last]

    def longest_arm(root: int, excluded: int) -> int:
        depth = 0
        level = [root]
        while level:
            depth += 1
            following = []
            for node in level:
                visited[node] = True
                following.extend(child for child in reverse[node] if child != excluded)
            level = following
        return depth

    arms = 0
    for person in range(n):
        if indegree[person] == 0 and not visited[person]:
            pivot = peel(person)
            partner = favorite[pivot]
            if favorite[partner] == pivot:
                arms += longest_arm(pivot, partner) - 1
                visited[pivot] = False

    pairs = 0
    longest_cycle = 0
    for person in range(n):
        if visited[person]:
            continue
        size = 0
        node = person
        while not visited[node]:
            visited[node] = True
            size += 1
            node = favorite[node]
        if size == 2:
            pairs += 1
        else:
            longest_cycle = max(longest_cycle, size)

    return max(longest_cycle, arms + 2 * pairs)


def magnificent_sets(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Maximum number of groups nodes 1..n can be split into, or -1 if impossible."""
    forest = UnionFind(n + 1)
    adjacency: dict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
        forest.unite(u, v)

    color = [-1] * (n + 1)
    for start in range(1, n + 1):
        if color[start] != -1:
            continue
        color[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if color[neighbour] == -1:
                    color[neighbour] = 1 - color[node]
                    queue.append(neighbour)
                elif color[neighbour] == color[node]:
                    return -1

    def levels_from(start: int) -> int:
        dist = {start: 1}
        deepest = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if neighbour not in dist:
                    dist[neighbour] = dist[node] + 1
                    deepest = max(deepest, dist[neighbour])
                    queue.append(neighbour)
        return deepest

    components: dict[int, list[int]] = defaultdict(list)
    for node in range(1, n + 1):
        components[forest.find(node)].append(node)

    return sum(max(levels_from(node) for node in nodes) for nodes in components.values())


def find_champion(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Return the only team no one beats, or -1 if there is not exactly one."""
    defeated = {loser for _, loser in edges}
    unbeaten = [team for team in range(n) if team not in defeated]
    return unbeaten[0] if len(unbeaten) == 1 else -1


def min_max_weight(n: int, edges: Iterable[Sequence[int]], threshold: int) -> int:
    """Smallest weight limit under which node 0 is reachable from every node, or -1.

    ``threshold`` is accepted for interface compatibility and does not affect the result.
    """
    incoming: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for source, target, weight in edges:
        incoming[target].append((source, weight))

    def reaches_all(limit: int) -> bool:
        seen = [False] * n
        seen[0] = True
        count = 1
        stack = [0]
        while stack:
            node = stack.pop()
            for neighbour, weight in incoming[node]:
                if weight <= limit and not seen[neighbour]:
                    seen[neighbour] = True
                    count += 1
                    stack.append(neighbour)
        return count == n

    low, high = 1, _WEIGHT_LIMIT
    while low < high:
        mid = (low + high) // 2
        if reaches_all(mid):
            high = mid
        else:
            low = mid + 1
    return -1 if low == _WEIGHT_LIMIT else low