"""
B-Minor Command-Line Interface
==============================

This package provides the command-line tools of the B-Minor toolchain:

- **bmlex**: tokenize a source file and print the token trace

Each tool is a Click-based application with built-in help.
"""

__all__ = ["bmlex"]
