from typing import Callable, List, Optional, TypeVar

T = TypeVar("T")


def rank_descending(items: List[T], key: Callable[[T], float]) -> List[T]:
    """Sort ascending (stable) then reverse.

    Items with equal keys come out in reverse encounter order. This differs
    from ``sorted(..., reverse=True)``, which keeps encounter order for ties.
    """
    ranked = sorted(items, key=key)
    ranked.reverse()
    return ranked


def top_n(items: List[T], count: Optional[int]) -> List[T]:
    # a count past the end yields the whole list
    return items[:count]
