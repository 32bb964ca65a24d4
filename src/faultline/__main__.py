"""Allow ``python -m faultline``."""

from __future__ import annotations

from faultline.cli.main import main

raise SystemExit(main())
