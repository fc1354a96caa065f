import io
import random

import pytest

from gapractica.cli import main, run
from gapractica.population import FitnessFunction, Objective, Representation


def _run(tmp_path, **overrides):
    params = dict(
        objective=Objective.MAXIMIZE,
        fun=FitnessFunction.SQUARE,
        rep=Representation.BINARY,
        length=4,
        tests=6,
    )
    params.update(overrides)
    out = io.StringIO()
    result = run(
        params["objective"],
        params["fun"],
        params["rep"],
        params["length"],
        params["tests"],
        out=out,
        directory=tmp_path,
        rng=random.Random(7),
        plot=False,
    )
    return result, out.getvalue()


def test_run_reports_each_chromosome(tmp_path):
    (dec_values, values, best), text = _run(tmp_path)
    lines = text.splitlines()
    assert len(dec_values) == 6
    assert "Convirtiendo binario a decimal:" in lines
    for number, x in enumerate(dec_values, start=1):
        assert f"Cromosoma {number}: x = {x}" in lines
    assert best == max(values)
    assert f"Máximo de la función: {best:.2f}" in lines


def test_run_values_fit_in_length(tmp_path):
    (dec_values, values, _), _ = _run(tmp_path, rep=Representation.GRAY, length=3, tests=20)
    assert all(0 <= x < 2**3 for x in dec_values)
    assert values == [float(x) ** 2 for x in dec_values]


def test_run_minimize_and_gray_header(tmp_path):
    (_, values, best), text = _run(tmp_path, objective=Objective.MINIMIZE, rep=Representation.GRAY)
    assert "Convirtiendo gray a decimal:" in text
    assert best == min(values)
    assert f"Mínimo de la función: {best:.2f}" in text


def test_run_is_reproducible_with_seed(tmp_path):
    first, _ = _run(tmp_path)
    second, _ = _run(tmp_path)
    assert first == second


def test_run_saves_results(tmp_path):
    (_, values, _), _ = _run(tmp_path, tests=5)
    lines = (tmp_path / "resultados.txt").read_text(encoding="utf-8").splitlines()
    assert len(lines) == len(values)
    assert (tmp_path / "extremos.txt").exists()


def test_main_with_options(tmp_path, capsys):
    code = main(
        [
            "--fun", "3", "--rep", "1", "--objective", "2", "--range", "5",
            "--tests", "4", "--directory", str(tmp_path), "--seed", "1", "--no-plot",
        ]
    )
    assert code == 0
    text = capsys.readouterr().out
    assert text.count("Cromosoma 4: f(") == 1
    assert "Mínimo de la función:" in text


@pytest.mark.parametrize(
    "argv, message",
    [
        (["--fun", "4"], "Ingresa una opción válida"),
        (["--fun", "1", "--rep", "3"], "Ingresa una opción válida"),
        (["--fun", "1", "--rep", "1", "--objective", "0"], "Ingresa una opción válida"),
        (["--fun", "1", "--rep", "1", "--objective", "1", "--range", "8"], "Número inválido"),
        (["--fun", "1", "--rep", "1", "--objective", "1", "--range", "0"], "Número inválido"),
    ],
)
def test_main_rejects_invalid_options(argv, message, capsys, tmp_path):
    code = main([*argv, "--directory", str(tmp_path), "--no-plot"])
    assert code == 1
    assert message in capsys.readouterr().out
    assert not (tmp_path / "resultados.txt").exists()


def test_main_prompts_for_missing_values(tmp_path, capsys, monkeypatch):
    answers = iter(["2", "2", "1", "3", "5"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    code = main(["--directory", str(tmp_path), "--seed", "3", "--no-plot"])
    assert code == 0
    text = capsys.readouterr().out
    assert "Selecciona la función fitness:" in text
    assert "Cromosoma 5: x = " in text
    lines = (tmp_path / "resultados.txt").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 5


def test_main_non_numeric_answer_is_invalid(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "abc")
    code = main(["--directory", str(tmp_path), "--no-plot"])
    assert code == 1
    assert "Ingresa una opción válida" in capsys.readouterr().out