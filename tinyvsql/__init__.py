"""SQL tokenizing, statement parsing and column-oriented query helpers."""

__version__ = "0.1.0"