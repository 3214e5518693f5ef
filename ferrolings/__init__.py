"""Reading, checking, compiling and running small Rust exercises."""

__version__ = "0.1.0"