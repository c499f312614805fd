"""Animation example catalog and static gallery generator.

This package holds the typed catalog of SwiftUI animation examples (grouped
into a closed set of categories) and exposes the CLI used to browse it and
render the gallery site.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from animator_catalog import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
