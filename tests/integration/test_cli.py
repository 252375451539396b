"""CLI end-to-end tests."""

import json

from pet_travel.cli import EXIT_INVALID_INPUT, main

_EU_ARGS = [
    "--pet-name", "Rex",
    "--species", "Cão",
    "--destination", "Malta",
    "--birth", "2024-01-10",
    "--vaccine", "01/06/2024",
    "--blood", "15/07/2024",
    "--travel", "01/11/2024",
]


def test_text_checklist(capsys):
    code = main(_EU_ARGS)
    out = capsys.readouterr().out

    assert code == 0
    assert out.startswith("📅 CRONOGRAMA DE VIAGEM PARA REX")
    assert "TRATAMENTO ANTIPARASITÁRIO" in out
    assert "Status: OBRIGATÓRIO para cães com destino a Malta." in out


def test_json_output(capsys):
    code = main([*_EU_ARGS, "--json"])
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["branch"] == "eu"
    assert data["request"]["destination"] == "Malta"
    assert data["plan"]["travel_windows"][0]["text"] == "Primeira data possível para a viagem: 13/10/2024"


def test_markdown_output(capsys):
    code = main([*_EU_ARGS, "--markdown"])

    assert code == 0
    assert "## PRAZOS DA VIAGEM" in capsys.readouterr().out


def test_autofilled_blood_date_is_announced(capsys):
    args = [arg for arg in _EU_ARGS if arg not in ("--blood", "15/07/2024")]

    code = main(args)
    captured = capsys.readouterr()

    assert code == 0
    assert "01/07/2024" in captured.err
    assert "VALIDAÇÕES INICIAIS" in captured.out


def test_invalid_input_exit_code(capsys):
    code = main([*_EU_ARGS[:-1], "32/13/2024"])
    captured = capsys.readouterr()

    assert code == EXIT_INVALID_INPUT
    assert "travel_date" in captured.err
    assert captured.out == ""
