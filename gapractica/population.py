"""Population generation, evaluation, selection and fitness for the genetic algorithm."""

from __future__ import annotations

import enum
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

from .encoding import bin_to_dec, bin_to_gray, gray_to_bin

__all__ = [
    "Representation",
    "Objective",
    "FitnessFunction",
    "Selection",
    "SelectionError",
    "FitnessError",
    "random_number",
    "gen_matrix",
    "gen_binary_matrix",
    "gen_decimal_matrix",
    "evaluate",
    "find_max_min",
    "correct_data",
    "select_chromosomes",
    "apply_fitness",
    "cross_available",
]

_SENTINEL = 99999.0


class Representation(enum.IntEnum):
    """How a chromosome's bits encode its value."""

    BINARY = 1
    GRAY = 2


class Objective(enum.IntEnum):
    """Whether the function is maximised or minimised."""

    MAXIMIZE = 1
    MINIMIZE = 2


class FitnessFunction(enum.IntEnum):
    """The functions a chromosome's decimal value can be evaluated with."""

    SQUARE = 1
    ABS_RATIO = 2
    SINE_RATIO = 3

    @property
    def label(self) -> str:
        return {
            FitnessFunction.SQUARE: "x^2",
            FitnessFunction.ABS_RATIO: "ABS | x-5 /2 +sen(x) |",
            FitnessFunction.SINE_RATIO: "sen(x) / x+1",
        }[self]

    def evaluate(self, x: float) -> float:
        """Evaluate the function at ``x``."""
        x = float(x)
        if self is FitnessFunction.SQUARE:
            return x**2
        if self is FitnessFunction.ABS_RATIO:
            return abs((x - 5) / (2 + math.sin(x)))
        return math.sin(x) / (x + 1)


class SelectionError(ValueError):
    """Raised when fewer than two chromosomes can be selected."""


class FitnessError(ValueError):
    """Raised when the fitness proportions cannot be computed."""


@dataclass(frozen=True)
class Selection:
    """The two chromosomes chosen for crossover and their population indices."""

    indices: tuple[int, int]
    chromosomes: tuple[list[int], list[int]]


def _rng(rng: random.Random | None):
    return random if rng is None else rng


def random_number(rng: random.Random | None = None) -> float:
    """Return a uniform random number in [0, 1)."""
    return _rng(rng).random()


def gen_matrix(num_tests: int, length: int, rng: random.Random | None = None) -> list[list[float]]:
    """Generate ``num_tests`` rows of ``length`` uniform random numbers."""
    source = _rng(rng)
    return [[source.random() for _ in range(length)] for _ in range(num_tests)]


def _binarize(row: Sequence[float], rep: Representation | int) -> list[int]:
    bits = [1 if value > 0.5 else 0 for value in row]
    if Representation(rep) is Representation.GRAY:
        bits = bin_to_gray(bits)
    return bits


def _decode(bits: Sequence[int], rep: Representation | int) -> int:
    if Representation(rep) is Representation.GRAY:
        return bin_to_dec(gray_to_bin(bits))
    return bin_to_dec(bits)


def gen_binary_matrix(matrix: Sequence[Sequence[float]], rep: Representation | int) -> list[list[int]]:
    """Turn random numbers into bits (above 0.5 is 1), Gray-coded if asked."""
    return [_binarize(row, rep) for row in matrix]


def gen_decimal_matrix(bin_matrix: Sequence[Sequence[int]], rep: Representation | int) -> list[int]:
    """Decode each chromosome to its integer value."""
    return [_decode(bits, rep) for bits in bin_matrix]


def evaluate(dec_values: Sequence[int], fun: FitnessFunction | int) -> list[float]:
    """Evaluate the chosen function at every decimal value."""
    function = FitnessFunction(fun)
    return [function.evaluate(x) for x in dec_values]


def find_max_min(values: Sequence[float], objective: Objective | int) -> float:
    """Return the maximum or minimum of ``values`` depending on the objective."""
    if not values:
        raise ValueError("no values to search")
    if Objective(objective) is Objective.MAXIMIZE:
        return max(values)
    return min(values)


def correct_data(
    matrix: Sequence[Sequence[float]],
    bin_matrix: Sequence[Sequence[int]],
    dec_values: Sequence[int],
    bit_range: int,
    limit: int,
    rep: Representation | int,
    rng: random.Random | None = None,
) -> tuple[list[list[float]], list[list[int]], list[int]]:
    """Regenerate every chromosome whose value exceeds ``limit``.

    Returns new copies of the random matrix, the bit matrix and the decimal values.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    source = _rng(rng)
    new_matrix = [list(row) for row in matrix]
    new_bits = [list(row) for row in bin_matrix]
    new_values = list(dec_values)
    for i, value in enumerate(new_values):
        while value > limit:
            row = [source.random() for _ in range(bit_range)]
            bits = _binarize(row, rep)
            value = _decode(bits, rep)
            new_matrix[i] = row
            new_bits[i] = bits
        new_values[i] = value
    return new_matrix, new_bits, new_values


def select_chromosomes(
    values: Sequence[float],
    bin_matrix: Sequence[Sequence[int]],
    objective: Objective | int,
) -> Selection:
    """Pick the best and second-best chromosomes for the objective."""
    maximize = Objective(objective) is Objective.MAXIMIZE
    best = second = -_SENTINEL if maximize else _SENTINEL
    first_id = second_id = -1

    def better(a: float, b: float) -> bool:
        return a > b if maximize else a < b

    for i, value in enumerate(values):
        if better(value, best):
            second, second_id = best, first_id
            best, first_id = value, i
        elif better(value, second) and i != first_id:
            second, second_id = value, i

    if first_id == -1 or second_id == -1:
        raise SelectionError("not enough valid chromosomes")
    return Selection(
        indices=(first_id, second_id),
        chromosomes=(list(bin_matrix[first_id]), list(bin_matrix[second_id])),
    )


def apply_fitness(
    selection: Selection, cross_chance: float, random_value: float
) -> tuple[float, float] | None:
    """Return the proportional fitness of both parents, or None when no crossover happens."""
    if random_value > cross_chance:
        return None
    dec1, dec2 = (bin_to_dec(bits) for bits in selection.chromosomes)
    total = dec1 + dec2
    if total == 0:
        raise FitnessError("division by zero in the fitness function")
    return dec1 / total, dec2 / total


def cross_available(
    fitness_values: tuple[float, float] | None, rng: random.Random | None = None
) -> bool:
    """Decide whether both parents may cross.

    The roulette draws are taken but every draw is accepted, so any computed
    fitness pair allows crossover.
    """
    if fitness_values is None:
        return False
    first = random_number(rng)
    second = random_number(rng)
    return first >= 0.0 and second >= 0.0