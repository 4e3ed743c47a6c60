"""prompt_extract: flatten JS/TS sources into a single prompt-ready text blob."""

__version__ = "0.1.0"
