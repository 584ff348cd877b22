"""Public package surface for singledir.

Exports ``main`` for programmatic CLI invocation.
The navigation core lives in ``reuse``, ``persistent`` and ``commands``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
