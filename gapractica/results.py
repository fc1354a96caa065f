"""Saving evaluation results to text files and plotting them with gnuplot."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from .population import FitnessFunction, Objective

__all__ = ["extreme", "save_result", "gnuplot_script", "graph"]

RESULTS_FILE = "resultados.txt"
EXTREMES_FILE = "extremos.txt"
GNUPLOT_COMMAND = ["gnuplot", "-persist"]

_TITLES = {
    FitnessFunction.SQUARE: "F(x) = x^2",
    FitnessFunction.ABS_RATIO: "F(x) = ABS( (x - 5) / (2 + sen(x)) )",
    FitnessFunction.SINE_RATIO: "F(x) = sen(x) / x+1",
}

Runner = Callable[[list[str], str, Path], None]


def extreme(values: Sequence[float], objective: Objective | int) -> tuple[int, float]:
    """Return the index and value of the first maximum or minimum of ``values``."""
    if not values:
        raise ValueError("no values to search")
    maximize = Objective(objective) is Objective.MAXIMIZE
    best_index, best = 0, values[0]
    for i, value in enumerate(values):
        if (value > best) if maximize else (value < best):
            best_index, best = i, value
    return best_index, best


def save_result(
    values: Sequence[float],
    objective: Objective | int,
    directory: str | Path = ".",
) -> tuple[Path, Path]:
    """Write every evaluation and the chosen extreme as ``index value`` lines.

    Returns the paths of the results file and of the extremes file.
    """
    index, best = extreme(values, objective)
    folder = Path(directory)
    results_path = folder / RESULTS_FILE
    extremes_path = folder / EXTREMES_FILE
    with results_path.open("w", encoding="utf-8") as results:
        for i, value in enumerate(values):
            results.write(f"{i} {value:.2f}\n")
    with extremes_path.open("w", encoding="utf-8") as extremes:
        extremes.write(f"{index} {best:.2f}\n")
    return results_path, extremes_path


def gnuplot_script(fun: FitnessFunction | int) -> str:
    """Return the gnuplot commands that plot the saved results for ``fun``."""
    title = _TITLES[FitnessFunction(fun)]
    return (
        "set term x11\n"
        f"set title '{title}'\n"
        "set xlabel 'Cromosoma'\n"
        "set ylabel 'f(x)'\n"
        f"plot '{RESULTS_FILE}' with linespoints title 'f(x)', "
        f"'{EXTREMES_FILE}' with points pointtype 7 pointsize 2 lc rgb 'red' "
        "title 'Maximo/Minimo'\n"
    )


def _run_gnuplot(command: list[str], script: str, cwd: Path) -> None:
    subprocess.run(command, input=script, text=True, cwd=cwd, check=False)


def graph(
    fun: FitnessFunction | int,
    directory: str | Path = ".",
    runner: Runner | None = None,
) -> None:
    """Plot the result files found in ``directory`` with gnuplot."""
    script = gnuplot_script(fun)
    execute = _run_gnuplot if runner is None else runner
    try:
        execute(list(GNUPLOT_COMMAND), script, Path(directory))
    except OSError as exc:
        raise RuntimeError("could not start gnuplot") from exc