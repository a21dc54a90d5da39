import logging
import math
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple
from urllib.parse import urlparse

from .constants import (
    CARD_STYLES,
    CONFIG_KEYSPACE,
    DEFAULT_CARD_STYLE,
    DEFAULT_SENSU_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_CARD_STYLE,
    ENV_DASHBOARD_LINK,
    ENV_MENTION_ENTITIES,
    ENV_MENTIONS,
    ENV_SENSU_URL,
    ENV_TIMEOUT_SECONDS,
    ENV_WEBHOOK_URL,
)
from .errors import ConfigurationError
from .utils import parse_bool, split_mentions

logger = logging.getLogger(__name__)

# Opções que podem ser sobrescritas por annotation (path -> atributo).
# Webhook e mentions são secretos e nunca vêm de annotations.
OVERRIDABLE_OPTIONS = {
    "sensu-url": "sensu_url",
    "card-style": "card_style",
    "timeout": "timeout",
    "dashboard-link": "dashboard_link",
    "mention-entities": "mention_entities",
}


@dataclass(frozen=True)
class HandlerConfig:
    webhook_url: str = ""
    sensu_url: str = DEFAULT_SENSU_URL
    mentions: str = ""
    card_style: str = DEFAULT_CARD_STYLE
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    dashboard_link: bool = False
    mention_entities: bool = True

    @property
    def mention_tokens(self) -> Tuple[str, ...]:
        return tuple(split_mentions(self.mentions))


def _pick(flag_value, environ: Mapping[str, str], env_name: str, default):
    if flag_value is not None:
        return flag_value
    env_value = environ.get(env_name)
    if env_value is not None and env_value != "":
        return env_value
    return default


def _as_timeout(value) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"timeout must be a number of seconds, got {value!r}")
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(f"timeout must be a finite number greater than zero, got {value!r}")
    return timeout


def load_config(
    webhook_url: Optional[str] = None,
    sensu_url: Optional[str] = None,
    mentions: Optional[str] = None,
    card_style: Optional[str] = None,
    timeout=None,
    dashboard_link: Optional[bool] = None,
    mention_entities: Optional[bool] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> HandlerConfig:
    """
    Monta a configuração a partir de flags e variáveis de ambiente.

    Precedência: flag > variável de ambiente > default. Não valida o
    webhook; isso fica para ``validate_config`` antes do processamento.
    """
    environ = os.environ if environ is None else environ
    return HandlerConfig(
        webhook_url=str(_pick(webhook_url, environ, ENV_WEBHOOK_URL, "")).strip(),
        sensu_url=str(_pick(sensu_url, environ, ENV_SENSU_URL, DEFAULT_SENSU_URL)).strip(),
        mentions=str(_pick(mentions, environ, ENV_MENTIONS, "")),
        card_style=str(_pick(card_style, environ, ENV_CARD_STYLE, DEFAULT_CARD_STYLE)).strip().lower(),
        timeout=_as_timeout(_pick(timeout, environ, ENV_TIMEOUT_SECONDS, DEFAULT_TIMEOUT_SECONDS)),
        dashboard_link=parse_bool(_pick(dashboard_link, environ, ENV_DASHBOARD_LINK, False)),
        mention_entities=parse_bool(_pick(mention_entities, environ, ENV_MENTION_ENTITIES, True), default=True),
    )


def validate_config(config: HandlerConfig) -> None:
    if not config.webhook_url:
        raise ConfigurationError("webhook url is not defined in flags nor environment")
    parsed = urlparse(config.webhook_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"webhook url is not a valid http(s) url: {config.webhook_url!r}")
    if config.card_style not in CARD_STYLES:
        raise ConfigurationError(
            f"unknown card style {config.card_style!r}, expected one of: {', '.join(CARD_STYLES)}"
        )


def apply_annotation_overrides(config: HandlerConfig, event) -> HandlerConfig:
    """
    Aplica overrides vindos das annotations do evento.

    Entity primeiro, depois check (o check prevalece), usando chaves
    ``sensu.io/plugins/sensu-teams-handler/config/<opção>``.
    """
    overrides = {}
    for annotations in (event.entity_annotations, event.check_annotations):
        for path, attr in OVERRIDABLE_OPTIONS.items():
            key = f"{CONFIG_KEYSPACE}/{path}"
            if key in annotations:
                overrides[attr] = annotations[key]

    if not overrides:
        return config

    logger.debug("Applying annotation overrides: %s", sorted(overrides))
    if "sensu_url" in overrides:
        overrides["sensu_url"] = overrides["sensu_url"].strip()
    if "card_style" in overrides:
        overrides["card_style"] = overrides["card_style"].strip().lower()
    if "timeout" in overrides:
        overrides["timeout"] = _as_timeout(overrides["timeout"])
    if "dashboard_link" in overrides:
        overrides["dashboard_link"] = parse_bool(overrides["dashboard_link"])
    if "mention_entities" in overrides:
        overrides["mention_entities"] = parse_bool(overrides["mention_entities"], default=True)
    return replace(config, **overrides)
