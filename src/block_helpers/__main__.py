"""Module entry point so ``python -m block_helpers`` runs the CLI.

Purpose
-------
Mirror the ``block-helpers`` console script for environments where only the
interpreter is on ``PATH``.

Contents
--------
* Delegation to :func:`block_helpers.cli.main`.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
