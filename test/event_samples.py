"""Eventos do Sensu usados nos testes."""
import copy

BASE_EVENT = {
    "entity": {
        "metadata": {"name": "web1", "namespace": "default", "annotations": {}},
    },
    "check": {
        "metadata": {"name": "http-check", "annotations": {}},
        "status": 1,
        "output": "HTTP WARNING: 500 Internal Server Error",
        "last_ok": 1700000000,
        "issued": 1700000600,
        "history": [{"status": 0, "executed": 1699999000}, {"status": 1, "executed": 1700000600}],
    },
    "metadata": {"namespace": "default", "annotations": {"runbook": "https://wiki/runbooks/http"}},
}


def sample_event_data(status=None, entity=None, check=None, history=None, output=None, annotations=None):
    data = copy.deepcopy(BASE_EVENT)
    if status is not None:
        data["check"]["status"] = status
    if entity is not None:
        data["entity"]["metadata"]["name"] = entity
    if check is not None:
        data["check"]["metadata"]["name"] = check
    if history is not None:
        data["check"]["history"] = [{"status": s, "executed": 0} for s in history]
    if output is not None:
        data["check"]["output"] = output
    if annotations is not None:
        data["metadata"]["annotations"] = annotations
    return data
