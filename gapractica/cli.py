"""Command-line run of one generation: generate, decode, evaluate, save and plot."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .population import (
    FitnessFunction,
    Objective,
    Representation,
    evaluate,
    find_max_min,
    gen_binary_matrix,
    gen_decimal_matrix,
    gen_matrix,
)
from .results import graph, save_result

__all__ = ["run", "main"]

MAX_LENGTH = 7
_INVALID_OPTION = "Ingresa una opción válida"
_INVALID_NUMBER = "Número inválido"


def run(
    objective: Objective | int,
    fun: FitnessFunction | int,
    rep: Representation | int,
    length: int,
    tests: int,
    out: TextIO | None = None,
    directory: str | Path = ".",
    rng: random.Random | None = None,
    plot: bool = True,
) -> tuple[list[int], list[float], float]:
    """Run one generation and report it.

    Returns the decoded values, their evaluations and the extreme found.
    """
    objective = Objective(objective)
    fun = FitnessFunction(fun)
    rep = Representation(rep)
    stream = sys.stdout if out is None else out

    matrix = gen_matrix(tests, length, rng)
    bits = gen_binary_matrix(matrix, rep)
    dec_values = gen_decimal_matrix(bits, rep)
    values = evaluate(dec_values, fun)

    print(file=stream)
    kind = "binario" if rep is Representation.BINARY else "gray"
    print(f"Convirtiendo {kind} a decimal:", file=stream)
    for number, x in enumerate(dec_values, start=1):
        print(f"Cromosoma {number}: x = {x}", file=stream)

    print(file=stream)
    print("Resultado de la evaluación:", file=stream)
    for number, (x, value) in enumerate(zip(dec_values, values), start=1):
        print(f"Cromosoma {number}: f({x}) = {value:.2f}", file=stream)

    print(file=stream)
    best = find_max_min(values, objective)
    label = "Máximo" if objective is Objective.MAXIMIZE else "Mínimo"
    print(f"{label} de la función: {best:.2f}", file=stream)

    save_result(values, objective, directory)
    if plot:
        graph(fun, directory)
    return dec_values, values, best


def _ask(lines: Sequence[str], prompt: str) -> int | None:
    for line in lines:
        print(line)
    try:
        answer = input(prompt)
    except EOFError:
        return None
    try:
        return int(answer.strip())
    except ValueError:
        return None


def _choose(value: int | None, lines: Sequence[str], prompt: str) -> int | None:
    if value is not None:
        return value
    result = _ask(lines, prompt)
    print()
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for the parameters (or take them from options) and run one generation."""
    parser = argparse.ArgumentParser(
        prog="gapractica", description="Run one generation of a simple genetic algorithm."
    )
    parser.add_argument("--fun", type=int, help="1: x^2, 2: |(x-5)/(2+sin x)|, 3: sin(x)/(x+1)")
    parser.add_argument("--rep", type=int, help="1: binary, 2: Gray")
    parser.add_argument("--objective", type=int, help="1: maximise, 2: minimise")
    parser.add_argument("--range", dest="length", type=int, help="chromosome length (1 to 7)")
    parser.add_argument("--tests", type=int, help="number of individuals")
    parser.add_argument("--directory", type=Path, default=Path("."), help="where results are saved")
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    parser.add_argument("--no-plot", action="store_true", help="do not start gnuplot")
    args = parser.parse_args(argv)

    fun = _choose(
        args.fun,
        ["Selecciona la función fitness:", "1. x^2", "2. ABS | x-5 /2 +sen(x) | ", "3. sen(x) / x+1 "],
        "Seleccione una opción: ",
    )
    if fun is None or not 1 <= fun <= 3:
        print(_INVALID_OPTION)
        return 1

    rep = _choose(
        args.rep,
        ["Tipo de representación:", "1. Binaria", "2. Gray"],
        "Seleccione una opción: ",
    )
    if rep is None or not 1 <= rep <= 2:
        print(_INVALID_OPTION)
        return 1

    objective = _choose(
        args.objective,
        ["Evaluación de la función:", "1 - Maximizar", "2 - Minimizar"],
        "Seleccione una opción: ",
    )
    if objective is None or not 1 <= objective <= 2:
        print(_INVALID_OPTION)
        return 1

    length = _choose(args.length, [], f"Rango de la población inicial (1 a {MAX_LENGTH}): ")
    if length is None or not 1 <= length <= MAX_LENGTH:
        print(_INVALID_NUMBER)
        return 1

    tests = args.tests
    if tests is None:
        tests = _ask([], "Número de individuos: ")
    if tests is None or tests < 1:
        print(_INVALID_NUMBER)
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    run(
        objective,
        fun,
        rep,
        length,
        tests,
        directory=args.directory,
        rng=rng,
        plot=not args.no_plot,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())