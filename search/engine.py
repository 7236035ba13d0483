from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set
import logging
import time

from sokoban_core.goal_check import is_goal
from sokoban_core.level import Level, check_puzzle
from sokoban_core.moves import NOOP, successors
from sokoban_core.state import State
from heuristics.classic import h_manhattan
from .node import Node
from .priority_queue import PriorityQueue
from .strategy import Strategy

logger = logging.getLogger(__name__)

HeuristicFn = Callable[[Level, State], float]

PROGRESS_EVERY = 10_000


@dataclass
class SearchResult:
    """Outcome of one search call.

    success is False when the frontier ran dry within the depth bound; path is
    then empty. Otherwise path runs root -> goal and starts with the no-op root.
    """

    success: bool
    strategy: Strategy
    max_depth: int
    path: List[Node] = field(default_factory=list)
    expanded: int = 0
    generated: int = 0
    runtime: float = 0.0

    @property
    def goal(self) -> Optional[Node]:
        return self.path[-1] if self.path else None

    @property
    def solution_len(self) -> int:
        return len(self.path) - 1 if self.path else -1

    @property
    def actions(self) -> List[str]:
        return [n.action for n in self.path[1:]]

    @property
    def states(self) -> List[State]:
        return [n.state for n in self.path]


def reconstruct(arena: List[Node], goal: Node) -> List[Node]:
    path = [goal]
    cur = goal
    while cur.parent is not None:
        cur = arena[cur.parent]
        path.append(cur)
    path.reverse()
    return path


def search(
    level: Level,
    start: State,
    strategy: Strategy,
    max_depth: int,
    h_fn: HeuristicFn = h_manhattan,
) -> SearchResult:
    """Frontier-driven graph search shared by all five strategies.

    Nodes leave the frontier in (value, id) order. A popped node that
    satisfies the goal test ends the search. Otherwise it is expanded only if
    its depth is below `max_depth` and its state id has not been expanded
    before; anything else is dropped silently. Every created node stays in
    the arena until the call returns.
    """
    if max_depth < 1:
        raise ValueError(f"depth bound must be a positive integer, got {max_depth}")
    check_puzzle(level, start)

    t0 = time.time()
    logger.info("search start: strategy=%s max_depth=%d", strategy.value, max_depth)

    arena: List[Node] = []
    frontier = PriorityQueue()
    visited: Set[str] = set()

    def make_node(state: State, parent: Optional[Node], action: str, step_cost: float) -> Node:
        depth = 0 if parent is None else parent.depth + 1
        cost = 0.0 if parent is None else parent.cost + step_cost
        h = float(h_fn(level, state))
        node = Node(
            id=len(arena),
            state=state,
            parent=None if parent is None else parent.id,
            action=action,
            depth=depth,
            cost=cost,
            heuristic=h,
            value=strategy.value_of(depth, cost, h),
        )
        arena.append(node)
        frontier.push(node.value, node.id, node)
        return node

    make_node(start, None, NOOP, 0)

    expanded = 0
    found: Optional[Node] = None

    while len(frontier) > 0:
        node: Node = frontier.pop()
        if is_goal(level, node.state):
            found = node
            break
        if node.depth >= max_depth or node.state.id in visited:
            continue
        visited.add(node.state.id)
        expanded += 1
        if expanded % PROGRESS_EVERY == 0:
            logger.debug("expanded=%d generated=%d frontier=%d depth=%d",
                         expanded, len(arena), len(frontier), node.depth)
        for succ in successors(level, node.state):
            make_node(succ.state, node, succ.action, succ.cost)

    runtime = time.time() - t0
    if found is None:
        logger.info("no solution within depth %d (expanded=%d generated=%d, %.3fs)",
                    max_depth, expanded, len(arena), runtime)
        return SearchResult(success=False, strategy=strategy, max_depth=max_depth,
                            expanded=expanded, generated=len(arena), runtime=runtime)

    path = reconstruct(arena, found)
    logger.info("solved: length=%d cost=%.1f (expanded=%d generated=%d, %.3fs)",
                len(path) - 1, found.cost, expanded, len(arena), runtime)
    return SearchResult(success=True, strategy=strategy, max_depth=max_depth, path=path,
                        expanded=expanded, generated=len(arena), runtime=runtime)
