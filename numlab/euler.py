"""Explicit Euler integration for ordinary differential equations."""

from __future__ import annotations

import argparse
import json
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import numpy as np

History = list[tuple[float, np.ndarray]]
HigherOrderRhs = Callable[[float, np.ndarray], float]

SPRING_CONSTANT = 0.1
MASS = 1.0


def _initial_state(ys: Sequence[float], h: float) -> np.ndarray:
    if h <= 0:
        raise ValueError("step size must be positive")
    y = np.array(ys, dtype=float).reshape(-1)
    if y.size == 0:
        raise ValueError("initial state must hold at least one value")
    return y


def _steps(
    t0: float, t_end: float, h: float, y: np.ndarray, f: HigherOrderRhs
) -> Iterator[tuple[float, np.ndarray]]:
    """Advance ``y`` in place and yield a copy of each new state."""
    t = float(t0)
    while t + h <= t_end:
        y_orig = y.copy()
        y[:-1] += h * y_orig[1:]
        y[-1] += h * f(t, y_orig)
        t += h
        yield t, y.copy()


def euler_history(
    t0: float, t_end: float, h: float, ys: Sequence[float], f: HigherOrderRhs
) -> History:
    """Integrate an N-th order ODE and return every (t, state) pair.

    ``ys`` holds y, y', ..., y^(N-1); ``f(t, state)`` gives the highest
    derivative. Steps are taken while ``t + h <= t_end``.
    """
    y = _initial_state(ys, h)
    history: History = [(float(t0), y.copy())]
    history.extend(_steps(t0, t_end, h, y, f))
    return history


def euler(
    t0: float, t_end: float, h: float, ys: Sequence[float], f: HigherOrderRhs
) -> np.ndarray:
    """Integrate an N-th order ODE and return only the final state."""
    y = _initial_state(ys, h)
    final = y.copy()
    for _, final in _steps(t0, t_end, h, y, f):
        pass
    return final


def euler_first_order(
    t0: float, t_end: float, h: float, y0: float, f: Callable[[float, float], float]
) -> float:
    """Solve y'(t) = f(t, y) with y_(n+1) = y_n + h * f(t_n, y_n) while t_n < t_end."""
    if h <= 0:
        raise ValueError("step size must be positive")
    t_n = float(t0)
    y_n = float(y0)
    while t_n < t_end:
        y_n += h * f(t_n, y_n)
        t_n += h
    return y_n


def format_history(history: History, last_n: int | None = None) -> str:
    """Render the history as text lines ``t ( y0 y1 ... ) ``.

    With ``last_n`` set, only the last that many entries are shown.
    """
    entries = history if last_n is None else history[max(len(history) - last_n, 0):]
    return "".join(
        f"{t:g} ( {' '.join(f'{v:g}' for v in y)} ) \n" for t, y in entries
    )


def history_to_json(history: History) -> list[dict[str, object]]:
    """Convert the history to a JSON-ready list of ``{"t": ..., "y": [...]}``."""
    return [{"t": float(t), "y": np.asarray(y, dtype=float).tolist()} for t, y in history]


def write_history(history: History, path: str | Path) -> None:
    """Write the history to ``path`` as compact JSON."""
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(history_to_json(history), handle, separators=(",", ":"))


def main(argv: Sequence[str] | None = None) -> int:
    """Integrate an undamped spring, y'' = -k y / m, and save the trajectory."""
    parser = argparse.ArgumentParser(
        description="Integrate an undamped spring with Euler's method."
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=Path("history.json"),
        help="where to write the JSON history",
    )
    parser.add_argument(
        "--show", type=int, default=None, metavar="N",
        help="also print the last N states",
    )
    args = parser.parse_args(argv)

    k, m = SPRING_CONSTANT, MASS
    history = euler_history(0.0, 100.0, 0.1, [0.5, 0.5], lambda t, y: -k * y[0] / m)
    if args.show is not None:
        print(format_history(history, args.show), end="")
    write_history(history, args.output)
    return 0