"""Interactive console front end for the prompt database."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from .manager import DEFAULT_DB_FILE, PromptManager

_YES = frozenset({"y", "yes", "oui", "o"})

_MENU = (
    "\n Commandes disponibles :\n"
    "1. Poser une question\n"
    "2. Ajouter un nouveau prompt\n"
    "3. Supprimer un prompt\n"
    "4. Lister tous les prompts\n"
    "5. Recherche similaire\n"
    "6. Statistiques\n"
    "0. Quitter\n"
    "=============================\n"
)


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if "A" <= c <= "Z" else c for c in text)


class MiniPromptGPT:
    """A read-eval loop over a :class:`PromptManager`."""

    def __init__(
        self,
        manager: PromptManager,
        input_func: Callable[[], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.manager = manager
        self._input = input_func
        self._out = output if output is not None else sys.stdout
        self.running = False
        self._commands: dict[str, Callable[[], None]] = {}
        for aliases, handler in (
            (("menu", "m"), self._show_menu),
            (("0", "quit", "exit", "q"), self._exit),
            (("1", "question", "ask"), self._question),
            (("2", "add", "ajouter"), self._add_prompt),
            (("3", "delete", "supprimer"), self._delete_prompt),
            (("4", "list", "lister"), self._list_prompts),
            (("5", "similar", "similaire"), self._similar_search),
            (("6", "stats", "statistiques"), self._show_stats),
        ):
            self._commands.update(dict.fromkeys(aliases, handler))

    def _say(self, text: str) -> None:
        self._out.write(text)

    def _ask(self, prompt: str) -> str:
        self._say(prompt)
        self._out.flush()
        return self._input()

    def run(self) -> None:
        """Show the welcome screen and process commands until exit or end of input."""
        self.running = True
        self._say("\n Bienvenue dans MiniPromptGPT !\n")
        self._say("=====================================\n")
        self._say("Une IA locale simple\n\n")
        self._show_stats()
        self._show_menu()
        while self.running:
            try:
                line = self._ask(
                    "\n> Que voulez-vous faire ? (tapez 'menu' pour les options) : "
                )
                if not line:
                    continue
                command = _ascii_lower(line)
                handler = self._commands.get(command)
                if handler is None:
                    self.answer(command)
                else:
                    handler()
            except EOFError:
                self.running = False

    def answer(self, question: str) -> None:
        """Reply to ``question``, offering to teach a response when none is known."""
        response = self.manager.search(question)
        if response is not None:
            self._say(f"\n Réponse : {response}\n")
            return
        self._say("\n Prompt inconnu...\n")
        similar = self.manager.find_similar(question, 0.3)
        if similar:
            self._say(" Prompts similaires trouvés :\n")
            for name, score in similar[:3]:
                self._say(f"  - {name} (similarité: {int(score * 100)}%)\n")
        choice = self._ask(
            "\n Souhaitez-vous ajouter une réponse pour ce prompt ? (y/n) : "
        )
        if choice in _YES:
            self._add_response(question)

    def _add_response(self, prompt: str) -> None:
        response = self._ask(" Entrez la réponse : ")
        if not response:
            self._say(" Réponse vide, annulation.\n")
            return
        try:
            self.manager.add(prompt, response)
        except (ValueError, OSError):
            self._say(" Erreur lors de l'ajout du prompt.\n")
        else:
            self._say(" Prompt ajouté avec succès !\n")

    def _show_menu(self) -> None:
        self._say(_MENU)

    def _show_stats(self) -> None:
        self._say(self.manager.stats_text())

    def _question(self) -> None:
        question = self._ask("\n Entrez votre question : ")
        if not question:
            self._say(" Question vide !\n")
            return
        self.answer(question)

    def _add_prompt(self) -> None:
        self._say("\n Ajouter un nouveau prompt\n")
        prompt = self._ask("Entrez le prompt : ")
        if not prompt:
            self._say(" Prompt vide !\n")
            return
        existing = self.manager.search(prompt)
        if existing is not None:
            self._say(f"⚠  Ce prompt existe déjà avec la réponse : {existing}\n")
            if self._ask("Voulez-vous le remplacer ? (y/n) : ") not in _YES:
                return
        self._add_response(prompt)

    def _delete_prompt(self) -> None:
        self._say("\n  Supprimer un prompt\n")
        prompt = self._ask("Entrez le prompt à supprimer : ")
        if not prompt:
            self._say(" Prompt vide !\n")
            return
        try:
            self.manager.delete(prompt)
        except KeyError:
            self._say(" Prompt non trouvé.\n")
        else:
            self._say("Prompt supprimé avec succès !\n")

    def _list_prompts(self) -> None:
        prompts = self.manager.list_prompts()
        if not prompts:
            self._say("\n Aucun prompt enregistré.\n")
            return
        self._say(f"\n Liste de tous les prompts ({len(prompts)}) :\n")
        self._say("=====================================\n")
        for number, prompt in enumerate(prompts, start=1):
            self._say(f"{number}. {prompt}\n")

    def _similar_search(self) -> None:
        self._say("\n Recherche par similarité\n")
        search = self._ask("Entrez votre recherche : ")
        if not search:
            self._say(" Recherche vide !\n")
            return
        similar = self.manager.find_similar(search, 0.2)
        if not similar:
            self._say(" Aucun prompt similaire trouvé.\n")
            return
        self._say("\n Prompts similaires :\n")
        for name, score in similar:
            self._say(f"  • {name} (similarité: {int(score * 100)}%)\n")

    def _exit(self) -> None:
        self._say("\n Merci d'avoir utilisé MiniPromptGPT !\n")
        self._say("Sauvegarde en cours...\n")
        self.manager.save()
        self.running = False


def main(argv: list[str] | None = None) -> int:
    """Start the interactive session; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="minipromptgpt", description="A small local prompt/response assistant."
    )
    parser.add_argument(
        "--db", default=DEFAULT_DB_FILE, help="JSON database file (default: %(default)s)"
    )
    args = parser.parse_args(argv)

    db_file = Path(args.db)
    existed = db_file.exists()
    try:
        manager = PromptManager(db_file)
    except (ValueError, OSError) as exc:
        print(f" Erreur lors du chargement : {exc}", file=sys.stderr)
        return 1
    if existed:
        print(f" Base de données chargée : {len(manager)} prompts")

    try:
        MiniPromptGPT(manager).run()
    except OSError as exc:
        print(f" Erreur critique : {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())