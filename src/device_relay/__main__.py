from __future__ import annotations

from device_relay.main import main

raise SystemExit(main())
