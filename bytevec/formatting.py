from collections.abc import Sequence

from .traits import Element
from .typed import TypedVector


def render(fmt: bytes | str, args: tuple) -> bytes | str:
    """Apply the printf-style `%` mini-language of `bytes` or `str`"""
    return fmt % args


def snprintf[T: Element](target: TypedVector[T], units: Sequence[int]) -> int:
    """Write `units` into the first elements of `target`, truncated to leave
    room for one terminator, and terminate them.

    Returns the untruncated unit count, like C's snprintf. `target` must hold
    at least one element.
    """
    size = target.size
    assert size > 0
    element = target.element_type()
    written = min(len(units), size - 1)
    for i in range(written):
        target[i] = element(units[i])
    target[written] = element(0)
    return len(units)
