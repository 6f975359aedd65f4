"""Planar helpers for zoomed views: position transforms, quantisation, clamping and grids."""

from __future__ import annotations

from typing import Iterator, Tuple, Union

Number = Union[int, float]
Pair = Tuple[Number, Number]
Rect = Tuple[Pair, Pair]
Segment = Tuple[Pair, Pair]

_U32_MAX = (1 << 32) - 1


def trans_pos(pos: Pair, mul: Number, off: Pair) -> Pair:
    """Scale ``pos`` by ``mul``, then shift it by ``off``."""
    x, y = pos
    ox, oy = off
    return (x * mul + ox, y * mul + oy)


def mul_pos(pos: Pair, mul: Number) -> Pair:
    """Scale ``pos`` by ``mul``."""
    x, y = pos
    return (x * mul, y * mul)


def trans_rect(rect: Rect, mul: Number, off: Pair) -> Rect:
    """Apply :func:`trans_pos` to both corners of ``rect``."""
    low, high = rect
    return (trans_pos(low, mul, off), trans_pos(high, mul, off))


def mul_rect(rect: Rect, mul: Number) -> Rect:
    """Apply :func:`mul_pos` to both corners of ``rect``."""
    low, high = rect
    return (mul_pos(low, mul), mul_pos(high, mul))


def _div_trunc(a: Number, b: Number) -> Number:
    if isinstance(a, int) and isinstance(b, int):
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


def quant(value: Pair, step: Pair) -> Pair:
    """Round each component toward zero to a multiple of the matching ``step`` component.

    Integers use truncating division; floats divide exactly, so the result
    is the value itself up to rounding.
    """
    return tuple(_div_trunc(v, s) * s for v, s in zip(value, step))  # type: ignore[return-value]


def _check_bounds(low: Number, high: Number) -> None:
    if low > high:
        raise ValueError(f"lower bound {low} exceeds upper bound {high}")


def clamp_pair(pair: Pair, low: int, high: int) -> Tuple[int, int]:
    """Truncate both components to integers and clamp them into ``low..=high``."""
    _check_bounds(low, high)
    return tuple(min(max(int(v), low), high) for v in pair)  # type: ignore[return-value]


def sat_add(value: Number, step: Number, low: Number, high: Number) -> Number:
    """Add ``step`` and clamp the result into ``low..=high``."""
    _check_bounds(low, high)
    return min(max(value + step, low), high)


def sat_sub(value: Number, step: Number, low: Number, high: Number) -> Number:
    """Subtract ``step`` and clamp the result into ``low..=high``."""
    _check_bounds(low, high)
    return min(max(value - step, low), high)


def _as_u32(v: float) -> int:
    if v != v:  # NaN
        return 0
    if v == float("inf"):
        return _U32_MAX
    if v == float("-inf"):
        return 0
    return min(max(int(v), 0), _U32_MAX)


def _axis_steps(period: int, start: float, end: float) -> Iterator[int]:
    if period <= 0:
        raise ValueError(f"grid period must be positive, got {period}")
    lo = _as_u32(start)
    hi = _as_u32(end)
    step = lo // period * period
    while step < lo:
        step += period
    while step <= hi:
        yield step
        step += period


def grid_lines(
    period: Tuple[int, int],
    clip0: Pair,
    clip1: Pair,
    offset: float = 0.0,
) -> Iterator[Segment]:
    """Yield the grid line segments inside the clip box ``clip0``..``clip1``.

    Vertical lines come first, at every multiple of ``period[0]`` in the
    x range, then horizontal lines at every multiple of ``period[1]`` in the
    y range. Every endpoint is shifted by ``offset`` on both axes.
    """
    px, py = period
    if px <= 0 or py <= 0:
        raise ValueError(f"grid period must be positive, got {period}")
    x0, y0 = clip0
    x1, y1 = clip1
    for step in _axis_steps(px, x0, x1):
        yield (
            (step + offset, y0 + offset),
            (step + offset, y1 + offset),
        )
    for step in _axis_steps(py, y0, y1):
        yield (
            (x0 + offset, step + offset),
            (x1 + offset, step + offset),
        )