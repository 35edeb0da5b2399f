"""Solutions to classic competitive-programming problems as plain functions and classes."""

__version__ = "0.1.0"