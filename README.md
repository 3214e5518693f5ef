# ferrolings

A library for working with a set of small Rust exercises. It reads the
exercise list from `info.toml` and tells you whether an exercise still has
its `// I AM NOT DONE` marker. It can also compile an exercise with `rustc`,
or check it with `cargo clippy`, and run the result. It also writes a
`rust-project.json` so that rust-analyzer understands the exercise files.
The `ferrolings.lessons` package has Python versions of the topics that the
exercises teach.

## Installation

```
pip install ferrolings
```

To compile and run exercises you need a Rust toolchain on your `PATH`. That
means `rustc`, plus `cargo` with Clippy for the Clippy exercises.

## The `info.toml` file

Every exercise is a `[[exercises]]` entry with these keys:

```toml
[[exercises]]
name = "intro1"
path = "exercises/00_intro/intro1.rs"
mode = "compile"   # or "test" or "clippy"
hint = "No hints this time ;)"
```

`ferrolings.exercise.load_exercises(path)` reads this file.
`parse_exercises(text)` parses its contents. Both return a list of
`Exercise` objects. If an entry lacks a key, they raise `ValueError`.

## Exercises

```python
from ferrolings.exercise import load_exercises, CompileError, RunError

exercises = load_exercises("info.toml")
exercise = exercises[0]

pending = exercise.state()      # [] when done, else the lines around the marker
if not exercise.looks_done():
    for line in pending:
        print(line.number, line.line, "<--" if line.important else "")

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except CompileError as exc:
    print(exc.output.stderr)
except RunError as exc:
    print(exc.output.stdout, exc.output.stderr)
```

- `Mode` is `COMPILE`, `TEST` or `CLIPPY`. It controls how `compile()` works:
  - `COMPILE` builds a plain binary.
  - `TEST` builds a test harness, which `run()` calls with `--show-output`.
  - `CLIPPY` writes `./exercises/22_clippy/Cargo.toml` and builds the binary.
    It then runs `cargo clean` followed by
    `cargo clippy -- -D warnings -D clippy::float_cmp`.
- The binary goes to the path that `temp_file()` returns. That name is unique
  to the process and the thread. `CompiledExercise.close()`, or leaving its
  `with` block, deletes the binary. `clean()` deletes it too.
- `ExerciseOutput` holds the captured `stdout` and `stderr`.

## rust-analyzer

```python
from ferrolings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()           # uses RUST_SRC_PATH, else `rustc --print sysroot`
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

Every `.rs` file found adds one `Crate`, with edition 2021 and `cfg = ["test"]`.
`to_json()` returns the compact JSON text.

## Terminal messages

`ferrolings.ui.warn(message)` prints a message in red, and `success(message)`
prints one in green. `format_warn` and `format_success` return the same lines
without colour. If the `NO_EMOJI` environment variable is set, the markers are
plain `!` and `✓` rather than emoji. `emoji_enabled()` reports which applies.

## Lessons

The modules in `ferrolings.lessons` are:

- `quiz`: apple prices, a string transformer and report cards.
- `control`: conditionals.
- `structs`: records, parcels and rectangles.
- `text`: string handling.
- `errors`: error handling.
- `baskets`: dictionaries and lists.
- `iterators`: iteration, checked division and counting.
- `traits`: shared behaviour.
- `containers`: wrappers, cons lists and copy-on-write.
- `messages`: a state machine driven by messages.

## What this package does not do

The package has no command-line program. There is no watch mode that
re-checks exercises when files change. There is no step that verifies every
exercise in order while showing progress. There are no commands to list,
hint, reset or run exercises by name. You get the building blocks above, and
you call them from your own Python code.

## Development

```
pip install -e ".[test]"
pytest
```