"""
tildec Command-Line Interface
=============================

This package provides the command-line tools for tildec:

- **tildelex**: tokenize a source file and print its token table

Each tool is implemented as a Click-based CLI application with
help text and uniform error reporting.
"""

__all__ = ["tildelex"]
