# minipromptgpt

A small, fully local question-and-answer assistant. It keeps its knowledge in a
JSON file that maps prompts to responses. You ask a question. If the prompt is
known, you get its stored response. If it is not, you see the closest known
prompts and can teach it a response for the new one. The console messages are
in French.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Interactive use

```
minipromptgpt
minipromptgpt --db my_prompts.json
```

`--db` names the JSON database file. The default is `prompts.json` in the
current directory. If the file does not exist, it is created holding an empty
object. If the file holds anything other than a JSON object of strings, the
command prints an error and exits with status 1.

At the `>` prompt you can type a command or ask a question directly. Commands
are matched after ASCII letters are lower-cased:

| Command | Aliases | Action |
|---|---|---|
| `1` | `question`, `ask` | ask a question |
| `2` | `add`, `ajouter` | add a prompt, or replace one after confirmation |
| `3` | `delete`, `supprimer` | delete a prompt |
| `4` | `list`, `lister` | list all prompts |
| `5` | `similar`, `similaire` | list prompts with similarity of at least 20% |
| `6` | `stats`, `statistiques` | show the number of prompts and their average size |
| `menu` | `m` | show the menu |
| `0` | `quit`, `exit`, `q` | save the database and quit |

Any other input is treated as a question. When the answer is unknown, up to
three prompts with similarity of at least 30% are suggested. You are then asked
whether to add a response. `y`, `yes`, `oui` and `o` accept. The session also
ends at end of input.

## How matching works

Prompts are stored with their ASCII letters lower-cased. A question first gets
an exact, case-insensitive lookup. If that fails, the response used is that of
the first stored prompt, in sorted order, that contains the question or is
contained in it.

Similarity is the share of words the two texts have in common. Words are split
on whitespace and compared ignoring ASCII case. Each word of the first text that
also appears in the second counts once. The count is divided by the word count
of the longer text. Two texts with no words at all give NaN.

## Library use

```python
from minipromptgpt.manager import PromptManager, similarity

manager = PromptManager("prompts.json")      # loads, or creates an empty file
manager.add("Hello", "Hi there!")            # saved to the file at once
print(manager.search("HELLO"))               # "Hi there!"
print(manager.find_similar("hello world", 0.3))  # [("hello", 0.5)]
print(manager.list_prompts())                # ["hello"]
print(len(manager))                          # 1
print(manager.stats_text())
manager.delete("hello")
print(similarity("hello world", "hello"))    # 0.5
```

- `search(prompt)` returns the response, or `None` when nothing matches.
- `add(prompt, response)` raises `ValueError` if either string is empty.
- `delete(prompt)` raises `KeyError` if the prompt is not stored.
- `find_similar(prompt, threshold=0.6)` returns `(prompt, score)` pairs whose
  score reaches the threshold, highest score first.
- `load()` rereads the file and raises `ValueError` if it is not a JSON object
  of strings. `save()` writes it back with sorted keys.

The console session itself is `minipromptgpt.cli.MiniPromptGPT`. It takes a
`PromptManager`, an input function and an output stream, so it can be driven
from code. `MiniPromptGPT.answer(question)` handles a single question.

## What it does not do

It does not generate text. Every answer is a response that was stored
beforehand, and a question that matches no stored prompt gets no answer until
you add one.