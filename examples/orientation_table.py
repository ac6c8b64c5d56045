# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "wgccrejax"]
#
# [tool.uv.sources]
# wgccrejax = { path = ".." }
# ///
"""Print body orientations over a date range.

Evaluates the WGCCRE orientation of one or all supported bodies at evenly
spaced epochs, using a single JIT-compiled, vmap'd call per body, and
prints either the raw pole/meridian angles or the VSOP87-frame angles.

Requires wgccrejax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/orientation_table.py [OPTIONS]

Examples:
    # Every body at J2000.0
    uv run examples/orientation_table.py --steps 1

    # Mars over one day in 2024, VSOP87 frame
    uv run examples/orientation_table.py --body Mars --start 2024-06-15 --days 1 --steps 25 --vsop87
"""

import datetime as dt
import enum
import time
from typing import Annotated

import jax
import jax.numpy as jnp
import typer

from wgccrejax import (
    Body,
    get_orientation,
    get_orientation_vsop87,
    julian_centuries_from_caldate,
    set_dtype,
)

# ── JAX setup ────────────────────────────────────────────────────────────────

set_dtype(jnp.float64)  # Must be before any JIT compilation


class BodyChoice(enum.StrEnum):
    """Body selection, including every body at once."""

    all = "all"
    Sol = "Sol"
    Mercury = "Mercury"
    Venus = "Venus"
    Earth = "Earth"
    Moon = "Moon"
    Mars = "Mars"
    Jupiter = "Jupiter"
    Saturn = "Saturn"
    Uranus = "Uranus"
    Neptune = "Neptune"


def main(
    body: Annotated[BodyChoice, typer.Option(help="Body to evaluate")] = BodyChoice.all,
    start: Annotated[str, typer.Option(help="Start date (YYYY-MM-DD), 12:00 TT")] = "2000-01-01",
    days: Annotated[float, typer.Option(help="Span of the table in days")] = 0.0,
    steps: Annotated[int, typer.Option(help="Number of epochs")] = 1,
    vsop87: Annotated[bool, typer.Option(help="Print VSOP87-frame angles instead of raw")] = False,
):
    date = dt.date.fromisoformat(start)
    t0 = julian_centuries_from_caldate(date.year, date.month, date.day, 12, 0, 0.0)
    offsets = jnp.linspace(0.0, days, max(steps, 1)) / 36525.0
    t = t0 + offsets

    bodies = list(Body) if body is BodyChoice.all else [Body(body.value)]
    fn = get_orientation_vsop87 if vsop87 else get_orientation
    columns = ("lat", "lon", "roll") if vsop87 else ("ra", "dec", "w")

    print(f"{'body':<8} {'day':>10} {columns[0]:>14} {columns[1]:>14} {columns[2]:>18}")
    t_start = time.perf_counter()
    for b in bodies:
        # Body resolves in Python, so it is closed over rather than traced
        batched = jax.jit(jax.vmap(lambda x, b=b: fn(b, x)))
        a, c, e = batched(t)
        for i in range(t.shape[0]):
            day = float(offsets[i]) * 36525.0
            print(f"{b.as_str():<8} {day:>10.4f} {float(a[i]):>14.6f} {float(c[i]):>14.6f} {float(e[i]):>18.6f}")

    print(f"\nEvaluated {len(bodies)} bodies x {t.shape[0]} epochs in {time.perf_counter() - t_start:.2f}s")


if __name__ == "__main__":
    typer.run(main)
