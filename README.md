# puzzlesolve

This package has two small backtracking solvers:

- **Wordle helper** (`puzzlesolve.wordle`) finds every dictionary word that
  matches a pattern of fixed letters and blanks (`-`). Each of the given
  "floating" letters must also be used to fill one of the blanks.
- **Shift scheduler** (`puzzlesolve.schedwork`) assigns workers to days from an
  availability matrix. Each day needs a fixed number of different workers, and
  no worker may work more than a set number of shifts.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

### Wordle

```
puzzlesolve-wordle s---ng
puzzlesolve-wordle s---ng ri
```

The first argument is the pattern. A `-` in it marks a blank. The optional
second argument lists the floating letters. Each one must fill a blank.

Words are read from `dict-eng.txt` in the current directory. The package does
not include that file. You must supply it yourself. The reader splits the file
on whitespace. It keeps only the tokens that do not start with an upper-case
letter and that contain ASCII letters only. After loading, it writes
`Read N words into dictionary.` to standard error.

Matching words are printed one per line, in sorted order. If no pattern is
given, the command prints a usage message and exits with status 1.

### Schedule

```
puzzlesolve-schedwork
```

This command solves one built-in sample: four days and four workers. It needs
two workers per day and allows at most two shifts per worker. For each day it
prints one line, `Day N: ` followed by the worker ids for that day. If no
schedule exists, it prints `No solution found!`. The command takes no input.
To use your own availability matrix, call `schedule` from Python.

## Library use

```python
from puzzlesolve.dictionary import parse_dict_words, read_dict_words
from puzzlesolve.wordle import wordle
from puzzlesolve.schedwork import schedule, format_schedule

words = parse_dict_words(["sting swing", "Sling sing3"])
print(wordle("s-ing", "t", words))   # {'sting'}

avail = [
    [1, 1, 1, 1],
    [1, 0, 1, 0],
    [1, 1, 0, 1],
    [1, 0, 0, 1],
]
sched = schedule(avail, 2, 2)
if sched is not None:
    print(format_schedule(sched))
```

- `parse_dict_words(lines)` returns a set of the words it accepts from an
  iterable of text lines. It uses the same filtering as the dictionary file
  reader.
- `read_dict_words(filename)` reads a word file and returns a frozenset of its
  words. Each file is read only once, and later calls for the same path return
  the cached words. If the file cannot be opened, it raises `OSError`.
- `wordle(pattern, floating, dictionary)` returns a set of the matching words.
  `dictionary` can be any container that supports `in`.
- `schedule(avail, daily_need, max_shifts)` returns one valid schedule, or
  `None` if there is none. The schedule is a list with one entry per day, and
  each entry is a list of worker ids. `avail[day][worker]` is truthy when the
  worker can work that day. The search tries worker ids in ascending order.
- `format_schedule(sched)` renders a schedule as `Day N: ...` lines.