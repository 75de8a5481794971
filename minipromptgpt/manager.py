"""Storage and lookup of prompt/response pairs kept in a JSON file."""

from __future__ import annotations

import json
import math
import re
import string
from pathlib import Path

DEFAULT_DB_FILE = "prompts.json"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WORD = re.compile(r"[^ \t\n\v\f\r]+")


def _lower(text: str) -> str:
    """Lower-case ASCII letters only, leaving every other character as is."""
    return text.translate(_ASCII_LOWER)


def similarity(first: str, second: str) -> float:
    """Share of words in common between two strings, ignoring ASCII case.

    Each word of ``first`` found among the words of ``second`` counts once;
    the count is divided by the word count of the longer string.  Two strings
    without any words give NaN.
    """
    words1 = [_lower(word) for word in _WORD.findall(first)]
    words2 = [_lower(word) for word in _WORD.findall(second)]
    longest = max(len(words1), len(words2))
    if longest == 0:
        return math.nan
    known = set(words2)
    common = sum(1 for word in words1 if word in known)
    return common / longest


class PromptManager:
    """A prompt database persisted as a JSON object of prompt -> response."""

    def __init__(self, db_file: str | Path = DEFAULT_DB_FILE) -> None:
        self.db_file = Path(db_file)
        self._prompts: dict[str, str] = {}
        self.load()

    def __len__(self) -> int:
        return len(self._prompts)

    def search(self, prompt: str) -> str | None:
        """Return the response for ``prompt``, or None if nothing matches.

        An exact (case-insensitive) match wins; otherwise the first stored
        prompt, in sorted order, that contains the query or is contained in it.
        """
        query = _lower(prompt)
        if query in self._prompts:
            return self._prompts[query]
        return next(
            (
                self._prompts[key]
                for key in sorted(self._prompts)
                if query in key or key in query
            ),
            None,
        )

    def add(self, prompt: str, response: str) -> None:
        """Store ``response`` for ``prompt`` and save the database."""
        if not prompt or not response:
            raise ValueError("prompt and response must not be empty")
        self._prompts[_lower(prompt)] = response
        self.save()

    def delete(self, prompt: str) -> None:
        """Remove ``prompt`` and save the database; KeyError if it is absent."""
        key = _lower(prompt)
        if key not in self._prompts:
            raise KeyError(prompt)
        del self._prompts[key]
        self.save()

    def list_prompts(self) -> list[str]:
        """All stored prompts in sorted order."""
        return sorted(self._prompts)

    def load(self) -> None:
        """Read the database file, creating an empty one if it does not exist.

        Raises ValueError when the file is not a JSON object of strings.
        """
        try:
            with self.db_file.open(encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError:
            self.db_file.write_text(json.dumps({}, indent=4), encoding="utf-8")
            return
        if not isinstance(data, dict):
            raise ValueError(f"{self.db_file}: expected a JSON object")
        bad = [key for key, value in data.items() if not isinstance(value, str)]
        if bad:
            raise ValueError(f"{self.db_file}: response for {bad[0]!r} is not a string")
        self._prompts = dict(data)

    def save(self) -> None:
        """Write the database to its file."""
        text = json.dumps(self._prompts, indent=4, sort_keys=True, ensure_ascii=False)
        self.db_file.write_text(text, encoding="utf-8")

    def find_similar(self, prompt: str, threshold: float = 0.6) -> list[tuple[str, float]]:
        """Stored prompts whose similarity to ``prompt`` reaches ``threshold``.

        Results are ordered by decreasing similarity.
        """
        scored = (
            (key, similarity(prompt, key)) for key in sorted(self._prompts)
        )
        matches = [(key, score) for key, score in scored if score >= threshold]
        matches.sort(key=lambda item: item[1], reverse=True)
        return matches

    def stats_text(self) -> str:
        """A short report on the size of the database."""
        lines = [
            "",
            " Statistiques de la base de données :",
            f"Total de prompts : {len(self._prompts)}",
        ]
        if self._prompts:
            total = sum(
                len(key.encode("utf-8")) + len(value.encode("utf-8"))
                for key, value in self._prompts.items()
            )
            lines.append(f"Taille moyenne : {total // len(self._prompts)} caractères")
        return "\n".join(lines) + "\n"