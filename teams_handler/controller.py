import logging

from flask import Flask, request

from .config import load_config, validate_config
from .constants import PLUGIN_NAME
from .errors import ConfigurationError, DeliveryError, HandlerError, InputError
from .events import parse_event
from .handler import handle_event

logger = logging.getLogger(__name__)


def create_app(config=None):
    """
    App HTTP alternativo ao modo pipe: recebe o evento do Sensu via POST.

    A configuração é carregada e validada uma vez, antes de aceitar
    requests, e nunca alterada entre eles.
    """
    app = Flask(__name__)
    handler_config = config if config is not None else load_config()
    validate_config(handler_config)

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': PLUGIN_NAME}, 200

    @app.route('/event', methods=['POST'])
    def event():
        data = request.get_json(silent=True)
        try:
            sensu_event = parse_event(data)
        except InputError as exc:
            return {'status': 'error', 'error': str(exc)}, 400

        try:
            handle_event(sensu_event, handler_config)
        except DeliveryError as exc:
            logger.error("Delivery failed for %s/%s: %s", sensu_event.entity_name, sensu_event.check_name, exc.cause)
            return {'status': 'error', 'error': str(exc)}, 502
        except ConfigurationError as exc:
            return {'status': 'error', 'error': f'error validating input: {exc}'}, 500
        except HandlerError as exc:
            return {'status': 'error', 'error': f'error executing handler: {exc}'}, 500
        return {'status': 'sent'}, 200

    return app
