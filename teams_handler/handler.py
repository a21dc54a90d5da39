import logging

from .config import apply_annotation_overrides, validate_config
from .errors import HandlerError, RenderError
from .formatters import get_renderer
from .services import send_teams_payload

logger = logging.getLogger(__name__)


def render_event(event, config):
    renderer = get_renderer(config.card_style)
    try:
        return renderer.render(event, config)
    except HandlerError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise RenderError(f"could not generate {renderer.style} card because of error {exc}") from exc


def handle_event(event, config):
    """Valida, renderiza e entrega um único evento. Sem retry."""
    config = apply_annotation_overrides(config, event)
    validate_config(config)
    message = render_event(event, config)
    send_teams_payload(config.webhook_url, message, timeout=config.timeout)
    logger.info(
        "Sent %s notification for %s/%s/%s",
        config.card_style, event.namespace, event.entity_name, event.check_name,
    )
    return message
