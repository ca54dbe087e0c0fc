"""Fan-out strategies used to render sibling blocks."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")

Mapper = Callable[[Sequence[T], Callable[[T], R]], Iterable[R]]


def sequential_map(items: Sequence[T], fn: Callable[[T], R]) -> List[R]:
    return [fn(item) for item in items]


def parallel_map(
    items: Sequence[T], fn: Callable[[T], R], *, max_workers: Optional[int] = None
) -> List[R]:
    """Run ``fn`` over ``items`` on a thread pool owned by this call.

    Nested renders open their own pool, so a worker never waits on a slot in
    the pool it is running in. The cost is that live threads multiply with
    nesting depth: up to ``max_workers`` per level of nested block lists.
    """
    if len(items) < 2:
        return sequential_map(items, fn)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(fn, item) for item in items]
        return [future.result() for future in futures]


def strategy_for(name: str, max_workers: Optional[int] = None) -> Mapper:
    if name == "sequential":
        return sequential_map
    if name == "parallel":
        return lambda items, fn: parallel_map(items, fn, max_workers=max_workers)
    raise ValueError(f"unknown dispatch strategy: {name}")


__all__ = ["Mapper", "parallel_map", "sequential_map", "strategy_for"]
