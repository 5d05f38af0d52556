"""FastAPI server adapter for device-relay.

Design intent:
- Keep record semantics in `device_relay.store.*`
- Keep server-specific concerns (routing, CORS, error mapping) here
"""

from __future__ import annotations

__all__ = ["create_app"]

from device_relay.server.app import create_app
