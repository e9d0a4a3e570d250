"""Allow ``python -m openskills``."""

from __future__ import annotations

from openskills.cli.main import main

raise SystemExit(main())
