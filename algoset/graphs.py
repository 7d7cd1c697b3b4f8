"""Shortest-path, ordering and colouring algorithms on small graphs."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Deque, List, Sequence, Tuple

MOD = 10**9 + 7
_UNREACHED = 10**9

Edge = Sequence[int]


def find_the_city(n: int, edges: Sequence[Edge], distance_threshold: int) -> int:
    """Return the city reaching the fewest others within the threshold.

    Ties go to the city with the largest number.
    """
    dist: List[List[float]] = [[math.inf] * n for _ in range(n)]
    for u, v, weight in edges:
        dist[u][v] = weight
        dist[v][u] = weight
    for i in range(n):
        dist[i][i] = 0
    for k in range(n):
        via = dist[k]
        for row in dist:
            through = row[k]
            if through == math.inf:
                continue
            for j, onward in enumerate(via):
                if through + onward < row[j]:
                    row[j] = through + onward
    result_city = -1
    fewest = math.inf
    for city, row in enumerate(dist):
        reachable = sum(1 for d in row if d <= distance_threshold)
        if reachable <= fewest:
            fewest = reachable
            result_city = city
    return result_city


def count_paths(n: int, roads: Sequence[Edge]) -> int:
    """Count shortest routes from node 0 to node n - 1, modulo 10**9 + 7."""
    adjacency: List[List[Tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, time in roads:
        adjacency[u].append((v, time))
        adjacency[v].append((u, time))
    dist: List[float] = [math.inf] * n
    ways = [0] * n
    dist[0] = 0
    ways[0] = 1
    heap: List[Tuple[int, int]] = [(0, 0)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for neighbour, time in adjacency[node]:
            candidate = d + time
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                ways[neighbour] = ways[node]
                heapq.heappush(heap, (candidate, neighbour))
            elif candidate == dist[neighbour]:
                ways[neighbour] = (ways[neighbour] + ways[node]) % MOD
    return ways[n - 1]


def find_order(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> List[int]:
    """Return an order in which all courses can be taken, or [] if none exists.

    Each prerequisite pair [a, b] means b must come before a.
    """
    adjacency: List[List[int]] = [[] for _ in range(num_courses)]
    indegree = [0] * num_courses
    for course, required in prerequisites:
        adjacency[required].append(course)
        indegree[course] += 1
    queue: Deque[int] = deque(i for i, degree in enumerate(indegree) if degree == 0)
    order: List[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order if len(order) == num_courses else []


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Count the connected components of a graph given as an adjacency matrix."""
    n = len(is_connected)
    visited = [False] * n
    components = 0
    for start in range(n):
        if visited[start]:
            continue
        components += 1
        visited[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for other, linked in enumerate(is_connected[node]):
                if linked and not visited[other]:
                    visited[other] = True
                    stack.append(other)
    return components


def network_delay_time(times: Sequence[Edge], n: int, k: int) -> int:
    """Return the time for a signal from node k to reach all nodes 1..n, or -1."""
    adjacency: List[List[Tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, weight in times:
        adjacency[u].append((v, weight))
    dist: List[float] = [math.inf] * (n + 1)
    dist[k] = 0
    heap: List[Tuple[int, int]] = [(0, k)]
    while heap:
        time, node = heapq.heappop(heap)
        if time > dist[node]:
            continue
        for neighbour, travel in adjacency[node]:
            if dist[node] + travel < dist[neighbour]:
                dist[neighbour] = dist[node] + travel
                heapq.heappush(heap, (dist[neighbour], neighbour))
    reached = dist[1:]
    if any(d == math.inf for d in reached):
        return -1
    return int(max(reached, default=0))


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Tell whether the nodes of an adjacency-list graph split into two sides."""
    color = [-1] * len(graph)
    for start in range(len(graph)):
        if color[start] != -1:
            continue
        color[start] = 0
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in graph[node]:
                if color[neighbour] == -1:
                    color[neighbour] = 1 - color[node]
                    stack.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True


def find_cheapest_price(
    n: int, flights: Sequence[Edge], src: int, dst: int, k: int
) -> int:
    """Return the cheapest fare from src to dst with at most k stops, or -1."""
    adjacency: List[List[Tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, price in flights:
        adjacency[u].append((v, price))
    dist = [_UNREACHED] * n
    dist[src] = 0
    queue: Deque[Tuple[int, int, int]] = deque([(0, src, 0)])
    while queue:
        stops, node, cost = queue.popleft()
        if stops > k:
            continue
        for neighbour, price in adjacency[node]:
            if cost + price < dist[neighbour]:
                dist[neighbour] = cost + price
                queue.append((stops + 1, neighbour, cost + price))
    return -1 if dist[dst] == _UNREACHED else dist[dst]


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> List[int]:
    """Return, sorted, the nodes from which every path ends at a terminal node."""
    size = len(graph)
    reverse: List[List[int]] = [[] for _ in range(size)]
    outdegree = [0] * size
    for node, neighbours in enumerate(graph):
        for neighbour in neighbours:
            reverse[neighbour].append(node)
            outdegree[node] += 1
    queue: Deque[int] = deque(i for i, degree in enumerate(outdegree) if degree == 0)
    safe: List[int] = []
    while queue:
        node = queue.popleft()
        safe.append(node)
        for predecessor in reverse[node]:
            outdegree[predecessor] -= 1
            if outdegree[predecessor] == 0:
                queue.append(predecessor)
    return sorted(safe)