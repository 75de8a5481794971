import io
import json

import pytest

from minipromptgpt.cli import MiniPromptGPT, main
from minipromptgpt.manager import PromptManager


def _feeder(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.fixture
def manager(tmp_path):
    return PromptManager(tmp_path / "prompts.json")


def _run(manager, lines):
    out = io.StringIO()
    app = MiniPromptGPT(manager, _feeder(lines), out)
    app.run()
    return app, out.getvalue()


def test_answer_known(manager):
    manager.add("bonjour", "salut")
    out = io.StringIO()
    MiniPromptGPT(manager, _feeder([]), out).answer("bonjour")
    assert " Réponse : salut" in out.getvalue()


def test_answer_unknown_then_teach(manager):
    out = io.StringIO()
    MiniPromptGPT(manager, _feeder(["oui", "réponse apprise"]), out).answer("nouvelle question")
    assert "Prompt inconnu" in out.getvalue()
    assert manager.search("nouvelle question") == "réponse apprise"


def test_answer_unknown_declined(manager):
    out = io.StringIO()
    MiniPromptGPT(manager, _feeder(["n"]), out).answer("autre chose")
    assert len(manager) == 0


def test_answer_unknown_empty_response_cancels(manager):
    out = io.StringIO()
    MiniPromptGPT(manager, _feeder(["y", ""]), out).answer("autre chose")
    assert " Réponse vide, annulation." in out.getvalue()
    assert len(manager) == 0


def test_run_exit_stops(manager):
    app, text = _run(manager, ["0", "1"])
    assert app.running is False
    assert "Merci d'avoir utilisé MiniPromptGPT" in text
    assert "Entrez votre question" not in text


def test_run_end_of_input_stops(manager):
    app, text = _run(manager, ["", "menu"])
    assert app.running is False
    assert text.count("Commandes disponibles") == 2


def test_run_add_command(manager):
    _run(manager, ["2", "Salut", "coucou", "0"])
    assert manager.search("salut") == "coucou"


def test_run_add_existing_keeps_unless_confirmed(manager):
    manager.add("salut", "old")
    _run(manager, ["ADD", "salut", "n", "q"])
    assert manager.search("salut") == "old"
    _run(manager, ["add", "salut", "y", "new", "q"])
    assert manager.search("salut") == "new"


def test_run_delete_command(manager):
    manager.add("salut", "coucou")
    _, text = _run(manager, ["3", "salut", "3", "salut", "0"])
    assert "Prompt supprimé avec succès !" in text
    assert " Prompt non trouvé." in text
    assert len(manager) == 0


def test_run_list_command(manager):
    manager.add("beta", "b")
    manager.add("alpha", "a")
    _, text = _run(manager, ["4", "0"])
    assert "Liste de tous les prompts (2)" in text
    assert text.index("1. alpha") < text.index("2. beta")


def test_run_list_empty(manager):
    _, text = _run(manager, ["lister", "0"])
    assert "Aucun prompt enregistré." in text


def test_run_similar_command(manager):
    manager.add("quel temps fait il", "beau")
    _, text = _run(manager, ["5", "temps", "5", "pizza", "0"])
    assert "  • quel temps fait il (similarité:" in text
    assert "Aucun prompt similaire trouvé." in text


def test_run_direct_question_is_lowercased(manager):
    manager.add("bonjour", "salut")
    _, text = _run(manager, ["BONJOUR", "0"])
    assert " Réponse : salut" in text


def test_main_runs_and_exits(tmp_path, monkeypatch, capsys):
    db = tmp_path / "db.json"
    db.write_text(json.dumps({"bonjour": "salut"}), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("bonjour\n0\n"))
    assert main(["--db", str(db)]) == 0
    out = capsys.readouterr().out
    assert " Base de données chargée : 1 prompts" in out
    assert " Réponse : salut" in out


def test_main_corrupt_database(tmp_path, capsys):
    db = tmp_path / "db.json"
    db.write_text("{broken", encoding="utf-8")
    assert main(["--db", str(db)]) == 1
    assert "Erreur lors du chargement" in capsys.readouterr().err