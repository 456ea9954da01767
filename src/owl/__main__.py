"""Entry point for ``python -m owl``."""

from owl.cli import main

raise SystemExit(main())
