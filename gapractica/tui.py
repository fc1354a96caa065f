"""Full-screen terminal front end that walks through one generation step by step."""

from __future__ import annotations

import argparse
import curses
import random
from collections.abc import Sequence
from pathlib import Path

from .encoding import bit_counter
from .population import (
    FitnessError,
    FitnessFunction,
    Objective,
    Representation,
    Selection,
    SelectionError,
    apply_fitness,
    correct_data,
    cross_available,
    evaluate,
    find_max_min,
    gen_binary_matrix,
    gen_decimal_matrix,
    gen_matrix,
    random_number,
    select_chromosomes,
)
from .results import graph, save_result

__all__ = [
    "edit_buffer",
    "matrix_lines",
    "bits_lines",
    "decimal_lines",
    "evaluation_lines",
    "extreme_line",
    "selection_lines",
    "fitness_lines",
    "show_lines",
    "select_menu",
    "read_number",
    "main",
]

_TITLE_ART = (
    "   ___                _   _           _ ",
    "  / _ \\_ __ __ _  ___| |_(_) ___ __ _/ |",
    " / /_)/ '__/ _` |/ __| __| |/ __/ _` | |",
    "/ ___/| | | (_| | (__| |_| | (_| (_| | |",
    "\\/    |_|  \\__,_|\\___|\\__|_|\\___\\__,_|_|",
)
_TITLE_ROW, _TITLE_COL = 5, 40
_PROMPT_ROW = 11
_OPTIONS_ROW, _OPTIONS_COL = 13, 55
_INPUT_ROW, _INPUT_COL = 16, 60
_ENTER_KEYS = frozenset({10, 13, curses.KEY_ENTER})
_BACKSPACE_KEYS = frozenset({curses.KEY_BACKSPACE, 127})
_SCROLL_HINT = "Usa las flechas para desplazarte, Enter para seguir."
_INT_DIGITS = 3
_FLOAT_DIGITS = 9

_FUN_OPTIONS = [f.label for f in FitnessFunction]
_REP_OPTIONS = ["Binaria", "Gray"]
_OBJECTIVE_OPTIONS = ["Maximizar", "Minimizar"]


def _key_char(key: int | str) -> str | None:
    if isinstance(key, str):
        return key if len(key) == 1 else None
    if 0 <= key < 256:
        return chr(key)
    return None


def edit_buffer(
    text: str, key: int | str, allow_dot: bool = False, max_len: int | None = _INT_DIGITS
) -> str:
    """Apply one key press to a numeric input field and return the new text.

    Backspace removes the last character; digits are appended while the field
    has room; a single dot is accepted after the first character when
    ``allow_dot`` is set. Every other key leaves the text unchanged.
    """
    if key in _BACKSPACE_KEYS:
        return text[:-1]
    char = _key_char(key)
    if char is None:
        return text
    has_room = max_len is None or len(text) < max_len
    if char.isdigit() and char.isascii() and has_room:
        return text + char
    if char == "." and allow_dot and has_room and text and "." not in text:
        return text + char
    return text


def _parse(text: str, allow_dot: bool) -> int | float:
    if allow_dot:
        return float(text) if text else 0.0
    return int(text) if text else 0


def matrix_lines(matrix: Sequence[Sequence[float]]) -> list[str]:
    """Describe each row of random numbers with two decimals."""
    return [
        f"Cromosoma {i}: " + " ".join(f"{value:.2f}" for value in row)
        for i, row in enumerate(matrix)
    ]


def bits_lines(bin_matrix: Sequence[Sequence[int]]) -> list[str]:
    """Describe each chromosome by its bits."""
    return [
        f"Cromosoma {i}: " + " ".join(str(bit) for bit in bits)
        for i, bits in enumerate(bin_matrix)
    ]


def decimal_lines(dec_values: Sequence[int]) -> list[str]:
    """Describe each chromosome by its decoded value."""
    return [f"Cromosoma {i}: x = {x}" for i, x in enumerate(dec_values)]


def evaluation_lines(dec_values: Sequence[int], values: Sequence[float]) -> list[str]:
    """Describe the evaluation of every chromosome."""
    if len(dec_values) != len(values):
        raise ValueError("decimal values and evaluations differ in length")
    return [
        f"Cromosoma {i}: f({x}) = {value:.2f}"
        for i, (x, value) in enumerate(zip(dec_values, values))
    ]


def extreme_line(best: float, objective: Objective | int) -> str:
    """Describe the maximum or minimum found."""
    label = "Máximo" if Objective(objective) is Objective.MAXIMIZE else "Mínimo"
    return f"{label} de la función: {best:.2f}"


def selection_lines(selection: Selection) -> list[str]:
    """Describe the two chromosomes chosen for crossover."""
    return [
        f"Cromosoma {index}: " + " ".join(str(bit) for bit in bits)
        for index, bits in zip(selection.indices, selection.chromosomes)
    ]


def fitness_lines(
    selection: Selection, dec_values: Sequence[int], fitness: Sequence[float]
) -> list[str]:
    """Describe the chosen chromosomes with their decimal value and fitness."""
    return [
        f"{line} | Valor decimal: {dec_values[index]} | Aptitud: {value:.2f}"
        for line, index, value in zip(selection_lines(selection), selection.indices, fitness)
    ]


def _attr(pair: int) -> int:
    try:
        return curses.color_pair(pair)
    except curses.error:
        return 0


def _put(stdscr, y: int, x: int, text: str, attr: int = 0) -> None:
    try:
        stdscr.addstr(y, x, text, attr)
    except curses.error:
        pass


def _draw_header(stdscr, prompt: str) -> None:
    stdscr.clear()
    title = _attr(1)
    try:
        stdscr.box()
    except curses.error:
        pass
    for offset, line in enumerate(_TITLE_ART):
        _put(stdscr, _TITLE_ROW + offset, _TITLE_COL, line, title)
    _put(stdscr, _PROMPT_ROW, max(0, _TITLE_COL + 20 - len(prompt) // 2), prompt, title)


def show_lines(
    stdscr, title: str, lines: Sequence[str], footer: Sequence[str] = ()
) -> None:
    """Show ``lines`` in a scrollable view until Enter is pressed.

    The footer appears once the view is scrolled to the last line.
    """
    max_y, _ = stdscr.getmaxyx()
    visible = max(1, max_y - 5)
    scroll = 0
    while True:
        stdscr.clear()
        _put(stdscr, 0, 0, title)
        row = 2
        for line in lines[scroll : scroll + visible]:
            _put(stdscr, row, 0, line)
            row += 1
        if footer and scroll + visible >= len(lines):
            row += 1
            for line in footer:
                _put(stdscr, row, 0, line)
                row += 1
        _put(stdscr, row + 1, 0, _SCROLL_HINT)
        stdscr.refresh()
        key = stdscr.getch()
        if key in _ENTER_KEYS:
            return
        if key == curses.KEY_UP and scroll > 0:
            scroll -= 1
        elif key == curses.KEY_DOWN and scroll < len(lines) - visible:
            scroll += 1


def select_menu(stdscr, options: Sequence[str], prompt: str) -> int:
    """Let the user pick one of ``options`` with the arrow keys; return its 1-based number."""
    if not options:
        raise ValueError("a menu needs at least one option")
    highlight = 0
    while True:
        _draw_header(stdscr, prompt)
        base = _attr(1)
        for i, option in enumerate(options):
            attr = base | curses.A_REVERSE if i == highlight else base
            _put(stdscr, _OPTIONS_ROW + 2 * i, _OPTIONS_COL, option, attr)
        stdscr.refresh()
        key = stdscr.getch()
        if key == curses.KEY_UP and highlight > 0:
            highlight -= 1
        elif key == curses.KEY_DOWN and highlight < len(options) - 1:
            highlight += 1
        elif key in _ENTER_KEYS:
            return highlight + 1


def read_number(stdscr, prompt: str, allow_dot: bool = False) -> int | float:
    """Read a number typed into a small box; an empty field reads as zero."""
    max_len = _FLOAT_DIGITS if allow_dot else _INT_DIGITS
    _draw_header(stdscr, prompt)
    frame = _attr(1)
    _put(stdscr, _INPUT_ROW - 1, _INPUT_COL - 6, "+-----------+", frame)
    _put(stdscr, _INPUT_ROW, _INPUT_COL - 6, "|           |", frame)
    _put(stdscr, _INPUT_ROW + 1, _INPUT_COL - 6, "+-----------+", frame)
    stdscr.refresh()
    text = ""
    while True:
        key = stdscr.getch()
        if key in _ENTER_KEYS:
            return _parse(text, allow_dot)
        text = edit_buffer(text, key, allow_dot, max_len)
        _put(stdscr, _INPUT_ROW, _INPUT_COL, text.ljust(max_len))
        stdscr.refresh()


def _init_screen() -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    if curses.has_colors():
        curses.start_color()
        curses.init_pair(1, curses.COLOR_GREEN, curses.COLOR_BLACK)
        curses.init_pair(2, curses.COLOR_RED, curses.COLOR_BLACK)


def _finish(stdscr, messages: Sequence[str]) -> None:
    stdscr.clear()
    row = 1
    for message in messages:
        _put(stdscr, row, 0, message)
        row += 1
    _put(stdscr, row + 1, 0, "Presiona cualquier tecla para salir...")
    stdscr.refresh()
    stdscr.getch()


def _run_generation(stdscr, args: argparse.Namespace, params: dict) -> list[str]:
    rng = random.Random(args.seed) if args.seed is not None else None
    fun = FitnessFunction(params["fun"])
    rep = Representation(params["rep"])
    objective = Objective(params["objective"])
    limit = params["limit"]
    tests = params["tests"]
    if tests < 1:
        return ["Número de individuos inválido."]
    length = bit_counter(limit)

    matrix = gen_matrix(tests, length, rng)
    bits = gen_binary_matrix(matrix, rep)
    dec_values = gen_decimal_matrix(bits, rep)
    matrix, bits, dec_values = correct_data(matrix, bits, dec_values, length, limit, rep, rng)
    values = evaluate(dec_values, fun)
    best = find_max_min(values, objective)

    show_lines(stdscr, "Matriz Generada", matrix_lines(matrix))
    show_lines(
        stdscr, "Interpretando Posibilidades | Conversión a Binario o Gray", bits_lines(bits)
    )
    show_lines(stdscr, "Convirtiendo a Decimal", decimal_lines(dec_values))
    show_lines(
        stdscr,
        "Resultado de la Evaluación",
        evaluation_lines(dec_values, values),
        [extreme_line(best, objective)],
    )

    messages: list[str] = []
    save_result(values, objective, args.directory)
    if not args.no_plot:
        try:
            graph(fun, args.directory)
        except RuntimeError:
            messages.append("Error al abrir gnuplot.")

    try:
        selection = select_chromosomes(values, bits, objective)
    except SelectionError:
        messages.append("No hay suficientes cromosomas válidos.")
        return messages

    try:
        fitness = apply_fitness(selection, params["cross"], random_number(rng))
    except FitnessError:
        messages.append("Error: División por 0 en función fitness.")
        fitness = None

    show_lines(stdscr, "Cromosomas seleccionados para el cruce", selection_lines(selection))
    if fitness is None or not cross_available(fitness, rng):
        messages.append("No ocurre cruza en esta generación.")
        return messages
    show_lines(
        stdscr, "Evaluación en función fitness", fitness_lines(selection, dec_values, fitness)
    )
    messages.append("Ambos cromosomas son aptos para cruzar")
    return messages


def _session(stdscr, args: argparse.Namespace) -> None:
    _init_screen()
    params = {
        "fun": select_menu(stdscr, _FUN_OPTIONS, "Selecciona la función fitness"),
        "rep": select_menu(stdscr, _REP_OPTIONS, "Tipo de representación"),
        "objective": select_menu(stdscr, _OBJECTIVE_OPTIONS, "Evaluación de la función"),
        "limit": read_number(stdscr, "Rango de la población inicial"),
        "tests": read_number(stdscr, "Número de individuos"),
        "cross": read_number(stdscr, "Probabilidad de cruce", allow_dot=True),
        "mutate": read_number(stdscr, "Probabilidad de mutación", allow_dot=True),
    }
    _finish(stdscr, _run_generation(stdscr, args, params))


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive full-screen session."""
    parser = argparse.ArgumentParser(
        prog="gapractica-tui", description="Step through one generation of a genetic algorithm."
    )
    parser.add_argument("--directory", type=Path, default=Path("."), help="where results are saved")
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    parser.add_argument("--no-plot", action="store_true", help="do not start gnuplot")
    args = parser.parse_args(argv)
    curses.wrapper(_session, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())