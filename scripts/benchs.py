"""Benchmarks of seqchain operators against plain Python baselines.

Run with `python scripts/benchs.py --help`.
"""

import heapq
import math
import timeit
from collections import Counter
from collections.abc import Callable
from functools import partial
from typing import Annotated, Final, NamedTuple

import polars as pl
import typer
from rich.console import Console
from rich.progress import Progress
from rich.table import Table
from rich.text import Text

import seqchain as sc

SIZES: Final = (256, 512, 1024, 2048)
CALLS_BY_RUN: Final = 10
SHIFTS: Final = 7

app = typer.Typer(help="Benchmarks of seqchain operators against plain Python.")

CONSOLE: Final = Console()


class Case(NamedTuple):
    """One operator at one input size, next to its baseline."""

    category: str
    name: str
    size: int
    baseline: Callable[[], object]
    candidate: Callable[[], object]


CASES = sc.Vec[Case].new()


def compare[P, R](
    category: str,
    *,
    baseline: Callable[[P], R],
    candidate: Callable[[P], R],
    data_gen: Callable[[sc.Iter[int]], P],
) -> Callable[[Callable[[], None]], Callable[[], None]]:
    """Register a seqchain operator against a plain Python baseline, at every size of `SIZES`.

    Both must agree on the generated data, which is checked once per size.
    """

    def decorator(func: Callable[[], None]) -> Callable[[], None]:
        for size in SIZES:
            data = sc.Iter(range(size)).into(data_gen)
            assert baseline(data) == candidate(data), (
                f"{func.__name__}: seqchain and baseline disagree at size {size}"
            )
            CASES.append(
                Case(
                    category,
                    func.__name__,
                    size,
                    partial(baseline, data),
                    partial(candidate, data),
                )
            )
        return func

    return decorator


def _shifted_in_place(data: list[int]) -> list[int]:
    arr = list(data)
    sc.shift_in_place(arr, SHIFTS)
    return arr


def _shifted_by_slicing(data: list[int]) -> list[int]:
    pivot = len(data) - SHIFTS % len(data)
    return data[pivot:] + data[:pivot]


@compare(
    "rearrange",
    baseline=_shifted_by_slicing,
    candidate=_shifted_in_place,
    data_gen=lambda it: it.collect(list).inner(),
)
def shift_in_place() -> None: ...


@compare(
    "rearrange",
    baseline=lambda data: tuple(_shifted_by_slicing(list(data))),
    candidate=lambda data: sc.Seq(data).shift(SHIFTS).collect().inner(),
    data_gen=lambda it: it.collect().inner(),
)
def shift() -> None: ...


def _square(it: sc.Iter[int]) -> list[list[int]]:
    values = it.collect().inner()
    side = math.isqrt(len(values))
    return [list(values[r * side : (r + 1) * side]) for r in range(side)]


def _rotated(rows: list[list[int]]) -> list[list[int]]:
    grid = sc.Matrix.from_(rows)
    grid.rotate()
    return grid.to_rows()


@compare(
    "matrix",
    baseline=lambda rows: [list(row) for row in zip(*rows[::-1], strict=True)],
    candidate=_rotated,
    data_gen=_square,
)
def rotate() -> None: ...


@compare(
    "merge",
    baseline=lambda pair: tuple(heapq.merge(*pair)),
    candidate=lambda pair: sc.Seq(pair[0]).merge_sorted(pair[1]).collect().inner(),
    data_gen=lambda it: it.collect().into(
        lambda seq: (seq.inner()[::2], seq.inner()[1::2])
    ),
)
def merge_sorted() -> None: ...


@compare(
    "counting",
    baseline=lambda data: Counter(data).most_common(1)[0][0],
    candidate=lambda data: sc.Seq(data).majority_element().unwrap(),
    data_gen=lambda it: it.map(lambda x: x % 3 if x % 2 else 0).collect().inner(),
)
def majority_element() -> None: ...


def _pairs_by_counter(data: tuple[int, ...]) -> int:
    target = len(data)
    counts = Counter(data)
    return sum(
        counts[value] * counts[target - value]
        if value < target - value
        else counts[value] * (counts[value] - 1) // 2
        for value in counts
        if value <= target - value
    )


@compare(
    "combinatorics",
    baseline=_pairs_by_counter,
    candidate=lambda data: sc.Seq(data).target_pairs(len(data), sc.INT64_ADDITION).length(),
    data_gen=lambda it: it.map(lambda x: x % 97 * 11).collect().inner(),
)
def target_pairs() -> None: ...


def _is_rotation_by_slicing(pair: tuple[tuple[int, ...], tuple[int, ...]]) -> bool:
    left, right = pair
    return len(left) == len(right) and any(
        left[shift:] + left[:shift] == right for shift in range(len(left))
    )


@compare(
    "counting",
    baseline=_is_rotation_by_slicing,
    candidate=lambda pair: sc.Seq(pair[0]).is_rotation_of(pair[1]),
    data_gen=lambda it: it.collect().into(
        lambda seq: (seq.inner(), seq.shift(len(seq) // 3).collect().inner())
    ),
)
def is_rotation_of() -> None: ...


def _time_cases(cases: sc.Vec[Case], runs: int) -> pl.DataFrame:
    records: list[dict[str, object]] = []
    with Progress(console=CONSOLE, transient=True) as progress:
        task = progress.add_task("[cyan]Timing...", total=len(cases))
        for case in cases:
            progress.update(
                task, description=f"[cyan]{case.category}: {case.name} @ {case.size}"
            )
            for impl, fn in (("seqchain", case.candidate), ("baseline", case.baseline)):
                records.extend(
                    {
                        "category": case.category,
                        "name": case.name,
                        "size": case.size,
                        "impl": impl,
                        "time": elapsed,
                    }
                    for elapsed in timeit.repeat(fn, number=CALLS_BY_RUN, repeat=runs)
                )
            progress.advance(task)
    return pl.DataFrame(records)


def _summarize(timings: pl.DataFrame) -> pl.DataFrame:
    """Median time per call in μs for each implementation, and the relative change."""
    return (
        timings.group_by("category", "name", "size", "impl")
        .agg(pl.col("time").median().truediv(CALLS_BY_RUN).mul(1_000_000))
        .pivot(on="impl", index=["category", "name", "size"], values="time")
        .with_columns(
            pl.col("baseline")
            .truediv("seqchain")
            .sub(1)
            .mul(100)
            .alias("pct_change")
        )
        .sort("category", "name", "size")
    )


def _render(stats: pl.DataFrame) -> Table:
    table = Table(title="seqchain vs plain Python")
    table.add_column("Category", style="cyan")
    table.add_column("Operation")
    table.add_column("Size", justify="right", style="magenta")
    table.add_column("seqchain (μs)", justify="right", style="green")
    table.add_column("Baseline (μs)", justify="right", style="yellow")
    table.add_column("Change", justify="right")
    for row in stats.iter_rows(named=True):
        change = row["pct_change"]
        table.add_row(
            row["category"],
            row["name"],
            str(row["size"]),
            f"{row['seqchain']:.2f}",
            f"{row['baseline']:.2f}",
            Text(f"{change:+.1f}%", style="green bold" if change > 0 else "red bold"),
        )
    return table


@app.command()
def main(
    runs: Annotated[int, typer.Option(min=1, help="Timed repetitions per case.")] = 30,
    category: Annotated[
        str | None, typer.Option(help="Only run the benchmarks of this category.")
    ] = None,
) -> None:
    """Time every registered operator against its baseline."""
    cases = (
        CASES
        if category is None
        else CASES.iter().filter(lambda case: case.category == category).collect(list)
    )
    if not cases:
        CONSOLE.print(f"[red]No benchmark registered for category {category!r}")
        raise typer.Exit(code=1)
    CONSOLE.print(f"[dim]{len(cases)} cases, {runs} runs each[/dim]")
    stats = _summarize(_time_cases(cases, runs))
    CONSOLE.print(_render(stats))

    median = stats.get_column("pct_change").median()
    wins = stats.filter(pl.col("pct_change").gt(0)).height
    CONSOLE.print(
        Text("Median change: ", style="bold").append(
            f"{median:+.1f}%", style="green bold" if median >= 0 else "red bold"
        )
    )
    CONSOLE.print(
        Text("seqchain faster: ", style="bold").append(
            f"{wins}/{stats.height}", style="cyan"
        )
    )


if __name__ == "__main__":
    app()
