"""Allow ``python -m criteria``."""

from criteria.cli.main import main

raise SystemExit(main())
