"""CLI frontend for evalsh.

Commands:
    evalsh repl     Interactive read-eval-print loop
    evalsh run      Run a script file

Example:
    $ evalsh repl --url http://127.0.0.1:5984
    >>> resp = await http.get("/")
    >>> resp.status
    200
"""

from evalsh.frontends.cli.main import main

__all__ = ["main"]
