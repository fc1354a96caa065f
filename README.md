# gapractica

A small workbench for the first steps of a genetic algorithm on a single
integer variable. It generates a random population of bit strings, reads
them as plain binary or as reflected Gray code, evaluates one of three
functions, reports the maximum or minimum, picks the two best chromosomes
and works out their proportional fitness for crossover.

The three functions on offer (`FitnessFunction`) are:

1. `SQUARE`: `x^2`
2. `ABS_RATIO`: `|(x - 5) / (2 + sin(x))|`
3. `SINE_RATIO`: `sin(x) / (x + 1)`

The prompts and messages shown by both commands are in Spanish.

## Installation

```
pip install .
```

Plotting needs `gnuplot` on the `PATH`. Everything else uses only the
Python standard library; the interactive screen needs a terminal with
`curses` support.

## Command line: `gapractica`

Runs one generation. Any setting not given as an option is asked for on
the terminal:

| Option | Meaning |
| --- | --- |
| `--fun N` | function: 1, 2 or 3 as listed above |
| `--rep N` | representation: 1 binary, 2 Gray |
| `--objective N` | 1 maximise, 2 minimise |
| `--range N` | chromosome length in bits, 1 to 7 |
| `--tests N` | number of individuals, at least 1 |
| `--directory PATH` | where the result files are written (default: current directory) |
| `--seed N` | seed for the random generator |
| `--no-plot` | do not start gnuplot |

It prints each chromosome's decoded value and its evaluation, then the
maximum or minimum. It writes `resultados.txt` (one `index value` line per
chromosome) and `extremos.txt` (the index and value of the extreme) and
pipes a plotting script to `gnuplot -persist`. An invalid answer prints a
message and the command exits with status 1.

```
gapractica --fun 1 --rep 2 --objective 1 --range 5 --tests 10 --no-plot
```

## Interactive screen: `gapractica-tui`

A full-screen curses interface. Arrow keys move through menus and lists,
Enter confirms. It asks for the function, representation and objective,
then for the largest value a chromosome may take, the number of
individuals, and the crossover and mutation probabilities. The chromosome
length is the number of bits needed for the largest value, and any
chromosome whose value exceeds it is regenerated until it fits.

It then steps through the generated random matrix, the binary or Gray
chromosomes, their decimal values and the evaluation with its extreme,
saves and plots the results as the command line does, shows the two
chromosomes selected for crossover and, when crossover happens, their
decimal values and fitness shares.

It accepts `--directory`, `--seed` and `--no-plot` with the same meaning
as above.

```
gapractica-tui --seed 42 --no-plot
```

## Library use

```python
import random

from gapractica.encoding import bin_to_dec, bin_to_gray, gray_to_bin, bit_counter
from gapractica.population import (
    FitnessFunction,
    Objective,
    Representation,
    apply_fitness,
    evaluate,
    find_max_min,
    gen_binary_matrix,
    gen_decimal_matrix,
    gen_matrix,
    select_chromosomes,
)

bits = [1, 0, 1, 1]
assert gray_to_bin(bin_to_gray(bits)) == bits
assert bin_to_dec(bits) == 11
assert bit_counter(11) == 4

rng = random.Random(1)
matrix = gen_matrix(8, 4, rng)
chromosomes = gen_binary_matrix(matrix, Representation.GRAY)
xs = gen_decimal_matrix(chromosomes, Representation.GRAY)
values = evaluate(xs, FitnessFunction.SQUARE)
best = find_max_min(values, Objective.MAXIMIZE)
selection = select_chromosomes(values, chromosomes, Objective.MAXIMIZE)
shares = apply_fitness(selection, cross_chance=0.8, random_value=rng.random())
```

- `gapractica.encoding`: `bin_to_dec`, `bin_to_gray`, `gray_to_bin`,
  `bit_counter`.
- `gapractica.population`: population generation and decoding,
  `evaluate`, `find_max_min`, `correct_data` (regenerates chromosomes above
  a limit), `select_chromosomes` (returns a `Selection` of the best two,
  or raises `SelectionError`), `apply_fitness` (returns the two fitness
  shares, `None` when the random value exceeds the crossover chance, or
  raises `FitnessError` when both parents decode to zero) and
  `cross_available`.
- `gapractica.results`: `extreme`, `save_result`, `gnuplot_script` and
  `graph`; `graph` raises `RuntimeError` if gnuplot cannot be started.
- `gapractica.cli.run`: runs a whole generation without prompting and
  returns the decoded values, their evaluations and the extreme.

## What it does not do

The package stops after working out whether the two selected parents may
cross. It does not choose cut points, cross chromosomes, mutate bits or
run further generations. The mutation probability asked for by
`gapractica-tui` is read but not used, and `cross_available` accepts every
draw, so any computed pair of fitness shares allows crossover.

## Tests

```
pip install .[test]
pytest
```