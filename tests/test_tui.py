import curses

import pytest

from gapractica.population import Objective, Selection
from gapractica.tui import (
    bits_lines,
    decimal_lines,
    edit_buffer,
    evaluation_lines,
    extreme_line,
    fitness_lines,
    matrix_lines,
    read_number,
    select_menu,
    selection_lines,
    show_lines,
)


class FakeScreen:
    def __init__(self, keys, size=(24, 80)):
        self.keys = list(keys)
        self.size = size
        self.frames = []

    def clear(self):
        self.frames.append([])

    def addstr(self, y, x, text, attr=0):
        if not self.frames:
            self.frames.append([])
        self.frames[-1].append((y, x, text, attr))

    def box(self):
        pass

    def move(self, y, x):
        pass

    def refresh(self):
        pass

    def getmaxyx(self):
        return self.size

    def getch(self):
        if not self.keys:
            raise AssertionError("ran out of keys")
        key = self.keys.pop(0)
        return ord(key) if isinstance(key, str) else key

    def texts(self, frame):
        return [text for _, _, text, _ in frame]


ENTER = 10


def test_edit_buffer_appends_digits():
    assert edit_buffer("1", ord("2")) == "12"


def test_edit_buffer_respects_max_len():
    assert edit_buffer("123", ord("4"), max_len=3) == "123"


def test_edit_buffer_backspace():
    assert edit_buffer("12", 127) == "1"
    assert edit_buffer("12", curses.KEY_BACKSPACE) == "1"
    assert edit_buffer("", 127) == ""


def test_edit_buffer_rejects_letters():
    assert edit_buffer("1", ord("a")) == "1"


def test_edit_buffer_dot_rules():
    assert edit_buffer("", ".", allow_dot=True, max_len=None) == ""
    assert edit_buffer("0", ".", allow_dot=True, max_len=None) == "0."
    assert edit_buffer("0.5", ".", allow_dot=True, max_len=None) == "0.5"
    assert edit_buffer("0", ".", allow_dot=False) == "0"


def test_matrix_lines_format():
    assert matrix_lines([[0.25, 0.5]]) == ["Cromosoma 0: 0.25 0.50"]


def test_bits_lines_format():
    lines = bits_lines([[1, 0, 1], [0, 0, 1]])
    assert lines == ["Cromosoma 0: 1 0 1", "Cromosoma 1: 0 0 1"]


def test_decimal_and_evaluation_lines():
    assert decimal_lines([5, 3]) == ["Cromosoma 0: x = 5", "Cromosoma 1: x = 3"]
    assert evaluation_lines([2], [4.0]) == ["Cromosoma 0: f(2) = 4.00"]


def test_evaluation_lines_length_mismatch():
    with pytest.raises(ValueError):
        evaluation_lines([1, 2], [1.0])


def test_extreme_line_labels():
    assert extreme_line(4.0, Objective.MAXIMIZE) == "Máximo de la función: 4.00"
    assert extreme_line(1.0, 2).startswith("Mínimo de la función")


def test_selection_and_fitness_lines():
    selection = Selection(indices=(2, 0), chromosomes=([1, 0, 1], [0, 1, 1]))
    assert selection_lines(selection) == ["Cromosoma 2: 1 0 1", "Cromosoma 0: 0 1 1"]
    lines = fitness_lines(selection, [3, 9, 5], (0.25, 0.75))
    assert lines[0] == "Cromosoma 2: 1 0 1 | Valor decimal: 5 | Aptitud: 0.25"
    assert lines[1].endswith("| Valor decimal: 3 | Aptitud: 0.75")


def test_select_menu_moves_and_clamps():
    screen = FakeScreen([curses.KEY_DOWN, curses.KEY_DOWN, curses.KEY_DOWN, ENTER])
    assert select_menu(screen, ["a", "b", "c"], "Elige") == 3


def test_select_menu_up_at_top_stays():
    screen = FakeScreen([curses.KEY_UP, ENTER])
    assert select_menu(screen, ["a", "b"], "Elige") == 1


def test_select_menu_needs_options():
    with pytest.raises(ValueError):
        select_menu(FakeScreen([ENTER]), [], "Elige")


def test_read_number_integer_limited_to_three_digits():
    screen = FakeScreen(["1", "2", "3", "4", ENTER])
    assert read_number(screen, "Número") == 123


def test_read_number_float_with_single_dot():
    screen = FakeScreen([".", "0", ".", "5", ".", ENTER])
    assert read_number(screen, "Probabilidad", allow_dot=True) == 0.5


def test_read_number_empty_is_zero():
    assert read_number(FakeScreen([ENTER]), "Número") == 0
    assert read_number(FakeScreen(["7", 127, ENTER]), "Número", allow_dot=True) == 0.0


def test_show_lines_footer_only_at_end():
    lines = [f"line {i}" for i in range(8)]
    screen = FakeScreen([ENTER], size=(10, 80))
    show_lines(screen, "Titulo", lines, ["pie"])
    first = screen.texts(screen.frames[0])
    assert "line 0" in first and "line 4" in first
    assert "line 5" not in first
    assert "pie" not in first


def test_show_lines_scrolls_to_footer():
    lines = [f"line {i}" for i in range(8)]
    keys = [curses.KEY_UP] + [curses.KEY_DOWN] * 5 + [ENTER]
    screen = FakeScreen(keys, size=(10, 80))
    show_lines(screen, "Titulo", lines, ["pie"])
    last = screen.texts(screen.frames[-1])
    assert "line 7" in last
    assert "line 2" not in last
    assert "pie" in last
    assert last[0] == "Titulo"