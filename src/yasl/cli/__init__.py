"""
YASL Command-Line Interface
===========================

- **yasl-lex**: print the token stream of a YASL source file

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["yasllex"]
