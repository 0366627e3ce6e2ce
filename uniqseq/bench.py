from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .baselines import CHOOSERS, Chooser, check_unique
from .constants import BENCH_SCENARIOS, BENCH_UNIVERSES, HUGE_UNIVERSE, SCENARIO_FULL


Emit = Callable[[str], None]


@dataclass(frozen=True)
class BenchResult:
    label: str
    universe: int
    start: int
    end: int
    inc: int
    runs: int
    elapsed_us: int

    def describe(self) -> str:
        return (
            f"Time for '{self.label}' (universeSize: {self.universe}, "
            f"count range {self.start}:{self.end}:{self.inc}): {self.elapsed_us}us"
        )


def count_steps(universe: int, start_frac: float, end_frac: float, inc_frac: float) -> Tuple[int, int, int]:
    """Turn scenario fractions into integer ``(start, end, inc)`` counts (truncated)."""
    start = int(universe * start_frac)
    end = int(universe * end_frac)
    inc = max(1, int(universe * inc_frac))
    return start, end, inc


def time_choose(
    choose: Chooser,
    universe: int,
    start: int,
    end: int,
    inc: int,
    *,
    label: str,
    check: bool = False,
) -> BenchResult:
    """Time ``choose(count, universe)`` for every ``count`` in ``range(start, end, inc)``.

    Args:
        choose: Strategy returning ``count`` distinct values from ``[0, universe]``.
        universe: Inclusive upper bound of the values.
        start, end, inc: Count sweep, end exclusive.
        label: Name used in the report line.
        check: When True, each produced sequence goes through ``check_unique``.

    Raises:
        DuplicateValueError: If ``check`` is set and a sequence repeats a value.
    """
    runs = 0
    t0 = time.perf_counter()
    for count in range(start, end, inc):
        seq = choose(count, universe)
        if check:
            check_unique(seq)
        runs += 1
    elapsed = time.perf_counter() - t0
    return BenchResult(label, universe, start, end, inc, runs, int(elapsed * 1_000_000))


def _run_helper(universe: int, fracs: Tuple[float, float, float], names: Sequence[str], check: bool, emit: Emit) -> List[BenchResult]:
    start, end, inc = count_steps(universe, *fracs)
    out: List[BenchResult] = []
    for name in names:
        res = time_choose(CHOOSERS[name], universe, start, end, inc, label=name, check=check)
        emit(res.describe())
        out.append(res)
    return out


def run_suite(
    check: bool = False,
    *,
    universes: Sequence[int] = BENCH_UNIVERSES,
    huge_universe: Optional[int] = HUGE_UNIVERSE,
    emit: Emit = print,
) -> List[BenchResult]:
    """Run every scenario for smart, bitfield and naive, then a huge universe.

    The naive chooser is left out of the huge-universe run. Pass
    ``huge_universe=None`` to skip that run entirely.
    """
    results: List[BenchResult] = []
    for universe in universes:
        emit(f"\n\nRun for universeSize {universe}")
        for name, *fracs in BENCH_SCENARIOS:
            emit(f"\n - with {name}\n")
            results.extend(_run_helper(universe, tuple(fracs), ("smart", "bitfield", "naive"), check, emit))

    if huge_universe is not None:
        emit(
            f"\n\nRun for a huge universeSize {huge_universe} "
            "(naive version is non-practicable here)"
        )
        name, *fracs = SCENARIO_FULL
        emit(f"\n - with {name}\n")
        results.extend(_run_helper(huge_universe, tuple(fracs), ("smart", "bitfield"), check, emit))
    return results
