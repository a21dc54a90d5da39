import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .errors import InputError


@dataclass(frozen=True)
class Event:
    """Evento do Sensu já reduzido aos campos usados no card."""

    entity_name: str
    namespace: str
    check_name: str
    status: int = 0
    output: str = ""
    last_ok: int = 0
    issued: int = 0
    history: Tuple[int, ...] = ()
    annotations: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    # Usados apenas para overrides de configuração por evento
    entity_annotations: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    check_annotations: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


def _as_dict(value) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _annotations(meta) -> Mapping[str, str]:
    raw = _as_dict(meta.get("annotations"))
    return MappingProxyType({str(k): str(v) for k, v in raw.items()})


def _as_int(value, name: str) -> int:
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InputError(f"event field '{name}' is not an integer: {value!r}")


def parse_event(data) -> Event:
    if not isinstance(data, dict):
        raise InputError("event must be a JSON object")

    entity = data.get("entity")
    check = data.get("check")
    if not isinstance(entity, dict):
        raise InputError("event does not contain an entity")
    if not isinstance(check, dict):
        raise InputError("event does not contain a check")

    entity_meta = _as_dict(entity.get("metadata"))
    check_meta = _as_dict(check.get("metadata"))
    event_meta = _as_dict(data.get("metadata"))

    entity_name = entity_meta.get("name")
    check_name = check_meta.get("name")
    if not entity_name:
        raise InputError("event entity has no name")
    if not check_name:
        raise InputError("event check has no name")

    namespace = entity_meta.get("namespace") or event_meta.get("namespace") or "default"

    raw_history = check.get("history")
    if raw_history is None:
        raw_history = []
    if not isinstance(raw_history, list):
        raise InputError("event field 'check.history' is not a list")
    history = []
    for index, item in enumerate(raw_history):
        if not isinstance(item, dict):
            raise InputError(f"event field 'check.history[{index}]' is not an object")
        history.append(_as_int(item.get("status"), f"check.history[{index}].status"))

    return Event(
        entity_name=str(entity_name),
        namespace=str(namespace),
        check_name=str(check_name),
        status=_as_int(check.get("status"), "check.status"),
        output=str(check.get("output") or ""),
        last_ok=_as_int(check.get("last_ok"), "check.last_ok"),
        issued=_as_int(check.get("issued"), "check.issued"),
        history=tuple(history),
        annotations=_annotations(event_meta),
        entity_annotations=_annotations(entity_meta),
        check_annotations=_annotations(check_meta),
    )


def load_event(raw) -> Event:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    if not raw or not raw.strip():
        raise InputError("no event data received")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InputError(f"failed to unmarshal event data: {exc}") from exc
    return parse_event(data)
