"""Exercise descriptions, pending-state detection and compilation."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from . import ui

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
RUSTC_NO_DEBUG_ARGS = ("-C", "strip=debuginfo")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/22_clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    thread_id = "".join(c for c in str(threading.get_ident()) if c.isalnum())
    return f"./temp_{os.getpid()}_{thread_id}"


def _remove(path: str) -> None:
    try:
        os.remove(path)
    except OSError:
        pass


def clean() -> None:
    """Remove this thread's temporary binary, if any."""
    _remove(temp_file())


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or a compiled binary."""

    stdout: str
    stderr: str


class CompileError(Exception):
    """Compilation of an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__("compilation failed")
        self.output = output


class RunError(Exception):
    """The compiled exercise exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__("run failed")
        self.output = output


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _lines(source: str) -> list[str]:
    parts = source.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def _rustc_args(self, *, test: bool) -> list[str]:
        args = ["rustc"]
        if test:
            args.append("--test")
        args += [str(self.path), "-o", temp_file()]
        args += [*RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS, *RUSTC_NO_DEBUG_ARGS]
        return args

    def _write_clippy_manifest(self) -> None:
        manifest = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(manifest, encoding="utf-8")
        except OSError as exc:
            message = (
                "Failed to write 📎 Clippy 📎 Cargo.toml file."
                if ui.emoji_enabled()
                else "Failed to write Clippy Cargo.toml file."
            )
            raise OSError(message) from exc

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise CompileError on failure."""
        match self.mode:
            case Mode.COMPILE:
                result = subprocess.run(self._rustc_args(test=False), capture_output=True)
            case Mode.TEST:
                result = subprocess.run(self._rustc_args(test=True), capture_output=True)
            case Mode.CLIPPY:
                self._write_clippy_manifest()
                # Build a binary too, so clippy exercises can be run; a failure
                # here shows up again in the clippy run below.
                subprocess.run(self._rustc_args(test=False), capture_output=True)
                subprocess.run(
                    ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                     *RUSTC_COLOR_ARGS],
                    capture_output=True,
                )
                result = subprocess.run(
                    ["cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                     *RUSTC_COLOR_ARGS,
                     "--", "-D", "warnings", "-D", "clippy::float_cmp"],
                    capture_output=True,
                )
        if result.returncode == 0:
            return CompiledExercise(self, temp_file())
        clean()
        raise CompileError(ExerciseOutput(_decode(result.stdout), _decode(result.stderr)))

    def run(self) -> ExerciseOutput:
        """Run the compiled binary; raise RunError if it fails."""
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        result = subprocess.run(args, capture_output=True)
        output = ExerciseOutput(_decode(result.stdout), _decode(result.stderr))
        if result.returncode != 0:
            raise RunError(output)
        return output

    def state(self) -> list[ContextLine]:
        """Return the lines around the pending marker, or [] when done."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return []
        lines = _lines(source)
        index = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if index is None:
            raise RuntimeError("This should not happen at all")
        low = max(index - CONTEXT, 0)
        high = index + CONTEXT
        return [
            ContextLine(line=line, number=i + 1, important=i == index)
            for i, line in enumerate(lines)
            if low <= i <= high
        ]

    def looks_done(self) -> bool:
        """True when the pending marker has been removed."""
        return not self.state()


class CompiledExercise:
    """A successfully compiled exercise; removes its binary on close."""

    def __init__(self, exercise: Exercise, binary: str) -> None:
        self.exercise = exercise
        self._binary = binary
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the compiled exercise."""
        return self.exercise.run()

    def close(self) -> None:
        """Delete the compiled binary."""
        if not self._closed:
            _remove(self._binary)
            self._closed = True

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def parse_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml contents."""
    data = tomllib.loads(text)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except KeyError as exc:
        raise ValueError(f"missing field {exc.args[0]!r} in exercise list") from exc


def load_exercises(path: str | os.PathLike[str]) -> list[Exercise]:
    """Read and parse an info.toml file."""
    return parse_exercises(Path(path).read_text(encoding="utf-8"))