"""Relay REST API.

All routes are mounted under `/api`. Handlers are thin wrappers over the
stores held by :class:`device_relay.store.RelayState`; domain errors propagate
to the app-level exception handler.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from device_relay.server.models import DeviceRequest, MessageRequest, TriggerRequest
from device_relay.store import MissingField, NotFound, RelayState

router = APIRouter()


def _relay(request: Request) -> RelayState:
    relay = getattr(request.app.state, "relay", None)
    if not isinstance(relay, RelayState):
        # This should never happen for the real app, but keeps the API fail-fast.
        raise HTTPException(status_code=500, detail="Relay state not configured")
    return relay


def _parse_id(raw: str, *, not_found: str) -> int:
    # Only plain decimal digits can match a stored id.
    if not (raw.isascii() and raw.isdigit()):
        raise NotFound(not_found)
    return int(raw)


# Messages


@router.post("/messages", response_model=None)
def submit_message(
    request: Request, payload: MessageRequest | None = None
) -> JSONResponse | dict[str, object]:
    body = payload or MessageRequest()
    try:
        record = _relay(request).messages.append(
            body.message,
            timestamp=body.timestamp,
            event_type=body.event_type,
            device_hostname=body.device_hostname,
            device_public_ip=body.device_public_ip,
        )
    except MissingField as e:
        return JSONResponse(status_code=400, content={"error": e.message})
    return {
        "success": True,
        "message": "Message received successfully",
        "data": record.to_public(),
    }


@router.get("/messages")
def list_messages(request: Request) -> dict[str, object]:
    messages = _relay(request).messages.list()
    return {
        "success": True,
        "count": len(messages),
        "messages": [m.to_public() for m in messages],
    }


@router.delete("/messages")
def clear_messages(request: Request) -> dict[str, object]:
    removed = _relay(request).messages.clear_all()
    return {"success": True, "message": "All messages cleared", "count": removed}


# Triggers


@router.post("/triggers")
def enqueue_trigger(request: Request, payload: TriggerRequest | None = None) -> dict[str, object]:
    body = payload or TriggerRequest()
    trigger = _relay(request).triggers.enqueue(
        body.type,
        new_password=body.new_password,
        vault_username=body.vault_username,
    )
    return {"success": True, "data": trigger.to_public()}


@router.get("/triggers")
def list_triggers(request: Request) -> dict[str, object]:
    triggers = _relay(request).triggers.list_pending()
    return {
        "success": True,
        "count": len(triggers),
        "triggers": [t.to_public() for t in triggers],
    }


@router.delete("/triggers/{trigger_id}")
def acknowledge_trigger(request: Request, trigger_id: str) -> dict[str, object]:
    removed = _relay(request).triggers.acknowledge(
        _parse_id(trigger_id, not_found="Trigger not found")
    )
    return {"success": True, "message": "Trigger acknowledged", "data": removed.to_public()}


@router.delete("/triggers")
def clear_triggers(request: Request) -> dict[str, object]:
    removed = _relay(request).triggers.clear_all()
    return {"success": True, "message": "All triggers cleared", "count": removed}


# Devices


@router.post("/devices")
def upsert_device(request: Request, payload: DeviceRequest | None = None) -> dict[str, object]:
    body = payload or DeviceRequest()
    device, created = _relay(request).devices.upsert(
        body.device_hostname,
        device_public_ip=body.device_public_ip,
        accounts=body.accounts,
        active_account=body.active_account,
    )
    return {
        "success": True,
        "message": "Device registered" if created else "Device updated",
        "device": device.to_public(),
    }


@router.get("/devices")
def list_devices(request: Request) -> dict[str, object]:
    devices = _relay(request).devices.list()
    return {
        "success": True,
        "count": len(devices),
        "devices": [d.to_public() for d in devices],
    }


@router.delete("/devices/{device_id}")
def remove_device(request: Request, device_id: str) -> dict[str, object]:
    removed = _relay(request).devices.remove_by_id(
        _parse_id(device_id, not_found="Device not found")
    )
    return {"success": True, "message": "Device removed", "data": removed.to_public()}


@router.delete("/devices")
def clear_devices(request: Request) -> dict[str, object]:
    removed = _relay(request).devices.clear_all()
    return {"success": True, "message": "All devices cleared", "count": removed}
