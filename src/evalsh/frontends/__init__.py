"""Frontends - User interfaces for evalsh.

Submodules:
    cli/    Command-line interface and interactive REPL
"""
