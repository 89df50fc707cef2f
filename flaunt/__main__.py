from __future__ import annotations

from flaunt.main import main

raise SystemExit(main())
