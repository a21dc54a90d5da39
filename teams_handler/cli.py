import argparse
import logging
import sys

from .config import load_config, validate_config
from .constants import CARD_STYLES, DEBUG_MODE, PLUGIN_NAME, PLUGIN_SHORT
from .errors import ConfigurationError, HandlerError, InputError
from .events import load_event
from .handler import handle_event

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog=PLUGIN_NAME, description=PLUGIN_SHORT)
    parser.add_argument("-w", "--teams-webhook", dest="webhook_url",
                        help="URL of the teams webhook (env TEAMS_WEBHOOK_URL)")
    parser.add_argument("-d", "--sensu-url", dest="sensu_url",
                        help="URL for the link to Sensu (env SENSU_URL, default http://localhost:3000)")
    parser.add_argument("-m", "--mentions", dest="mentions",
                        help="A space separated list of ms teams email addresses that should be "
                             "mentioned in the notifications (env TEAMS_MENTIONS)")
    parser.add_argument("-s", "--card-style", dest="card_style", choices=CARD_STYLES,
                        help="Card layout to send (env TEAMS_CARD_STYLE, default adaptive)")
    parser.add_argument("-t", "--timeout", dest="timeout", type=float,
                        help="Seconds to wait for the webhook (env TEAMS_TIMEOUT_SECONDS, default 10)")
    parser.add_argument("--dashboard-link", dest="dashboard_link", action="store_true", default=None,
                        help="Add an 'Open Sensu' link to message cards (env TEAMS_DASHBOARD_LINK)")
    parser.add_argument("--no-mention-entities", dest="mention_entities", action="store_false", default=None,
                        help="Do not attach mention entities to adaptive cards (env TEAMS_MENTION_ENTITIES)")
    parser.add_argument("--event-file", dest="event_file",
                        help="Read the event JSON from this file instead of stdin")
    parser.add_argument("--debug", action="store_true", default=DEBUG_MODE,
                        help="Enable debug logging (env DEBUG_MODE)")
    return parser


def _read_event_data(event_file, stdin):
    if event_file:
        try:
            with open(event_file, "r", encoding="utf-8") as fp:
                return fp.read()
        except OSError as exc:
            raise InputError(f"could not read event file {event_file}: {exc}") from exc
    return stdin.read()


def main(argv=None, stdin=None, stderr=None, environ=None):
    stdin = stdin or sys.stdin
    stderr = stderr or sys.stderr
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=stderr,
    )

    try:
        config = load_config(
            webhook_url=args.webhook_url,
            sensu_url=args.sensu_url,
            mentions=args.mentions,
            card_style=args.card_style,
            timeout=args.timeout,
            dashboard_link=args.dashboard_link,
            mention_entities=args.mention_entities,
            environ=environ,
        )
        validate_config(config)
    except ConfigurationError as exc:
        print(f"error validating input: {exc}", file=stderr)
        return 1
    logger.debug("Using %s cards, Sensu at %s", config.card_style, config.sensu_url)

    try:
        event = load_event(_read_event_data(args.event_file, stdin))
    except InputError as exc:
        print(f"error reading event: {exc}", file=stderr)
        return 1

    try:
        handle_event(event, config)
    except ConfigurationError as exc:
        print(f"error validating input: {exc}", file=stderr)
        return 1
    except HandlerError as exc:
        print(f"error executing handler: {exc}", file=stderr)
        return 1
    return 0


def run():
    sys.exit(main())
