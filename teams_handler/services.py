import json
import logging
from urllib.parse import urlparse

import requests

from .constants import DEFAULT_TIMEOUT_SECONDS
from .errors import DeliveryError, SerializationError

logger = logging.getLogger(__name__)


def serialize_message(message):
    try:
        return json.dumps(message, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"could not generate Teams message because of error {exc} \n card: {message!r}"
        ) from exc


def pretty_print(message):
    try:
        return json.dumps(message, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(message)


def _delivery_error(cause, message):
    message_str = pretty_print(message)
    return DeliveryError(
        f"could not send Teams message because of error {cause} \n"
        f" message (len {len(message_str)}): {message_str}",
        cause=cause,
        payload=message_str,
    )


def send_teams_payload(webhook_url, message, timeout=DEFAULT_TIMEOUT_SECONDS):
    """
    Envia a mensagem ao webhook do Teams em uma única tentativa.

    Qualquer falha (rede, timeout ou status fora de 2xx) vira
    ``DeliveryError`` com o payload formatado para diagnóstico.
    """
    body = serialize_message(message)
    logger.debug("Posting %d bytes to %s (timeout=%ss)", len(body), urlparse(webhook_url).netloc, timeout)

    try:
        resp = requests.post(
            webhook_url,
            data=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise _delivery_error(exc, message) from exc

    logger.debug("Teams response: %s", resp.status_code)
    if not 200 <= resp.status_code < 300:
        cause = f"webhook returned HTTP {resp.status_code}: {resp.text.strip()}"
        raise _delivery_error(cause, message)
    return resp
