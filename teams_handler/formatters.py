import logging

from .constants import (
    ADAPTIVE_CARD_CONTENT_TYPE,
    ADAPTIVE_CARD_SCHEMA,
    ADAPTIVE_CARD_VERSION,
    CARD_STYLE_ADAPTIVE,
    CARD_STYLE_MESSAGE,
    MESSAGE_CARD_CONTEXT,
)
from .errors import RenderError
from .status import (
    status_history,
    status_icon,
    status_label,
    status_marker,
    status_theme_color,
)
from .utils import annotations_text, format_local_time, truncate_text

logger = logging.getLogger(__name__)

HISTORY_FACT_TITLE = "History (past → now)"


def sensu_event_url(event, config):
    base_url = config.sensu_url.rstrip("/")
    return f"{base_url}/c/~/n/{event.namespace}/events/{event.entity_name}/{event.check_name}"


def build_mentions(config):
    return [
        {
            "type": "mention",
            "text": f"<at>{user}</at>",
            "mentioned": {"id": user, "name": user},
        }
        for user in config.mention_tokens
    ]


def mention_string(config):
    return " ".join(mention["text"] for mention in build_mentions(config))


def event_output_truncated(event, double_newlines=False):
    output = event.output.strip()
    if double_newlines:
        # Markdown do Teams ignora quebra simples
        output = output.replace("\n", "\n\n")
    return truncate_text(output)


def event_annotations_truncated(event):
    return truncate_text(annotations_text(event.annotations))


def build_facts(event, config, history):
    """Lista ordenada de (nome, valor) comum aos dois estilos."""
    facts = [
        (HISTORY_FACT_TITLE, history),
        ("Namespace", event.namespace),
        ("Entity", event.entity_name),
        ("Check", event.check_name),
        ("Status", status_label(event.status)),
        ("Last Ok", format_local_time(event.last_ok)),
        ("Event created", format_local_time(event.issued)),
    ]
    mentions = mention_string(config)
    if mentions:
        facts.append(("Mentioned", mentions))
    return facts


class EventRenderer:
    """Transforma um Event em payload de webhook do Teams."""

    style = None

    def title(self, event):
        raise NotImplementedError

    def build_card(self, event, config):
        raise NotImplementedError

    def to_message(self, card):
        raise NotImplementedError

    def render(self, event, config):
        card = self.build_card(event, config)
        logger.debug("Rendered %s card for %s/%s", self.style, event.entity_name, event.check_name)
        return self.to_message(card)


def _attach(collection, element, what, required):
    for key in required:
        if not element.get(key):
            raise RenderError(f"could not attach {what}: missing {key}")
    collection.append(element)


class AdaptiveCardRenderer(EventRenderer):
    """Card rico: título com ícone, FactSet e ações com cards aninhados."""

    style = CARD_STYLE_ADAPTIVE

    @staticmethod
    def new_card():
        return {
            "type": "AdaptiveCard",
            "$schema": ADAPTIVE_CARD_SCHEMA,
            "version": ADAPTIVE_CARD_VERSION,
            "body": [],
            "actions": [],
            "msteams": {"width": "Full"},
        }

    def title(self, event):
        return (
            f"{status_icon(event.status)} {status_label(event.status)}: "
            f"{event.entity_name} - {event.check_name}"
        )

    def text_card(self, text):
        card = self.new_card()
        del card["msteams"]
        _attach(card["body"], {"type": "TextBlock", "text": text, "wrap": True}, "text block", ["type"])
        return card

    def build_card(self, event, config):
        card = self.new_card()

        title_block = {
            "type": "TextBlock",
            "text": self.title(event),
            "size": "extraLarge",
            "weight": "bolder",
            "wrap": True,
        }
        _attach(card["body"], title_block, "title", ["text"])

        facts = []
        history = status_history(event.history, glyph=status_icon)
        for name, value in build_facts(event, config, history):
            facts.append({"title": name, "value": value})
        _attach(card["body"], {"type": "FactSet", "facts": facts, "isSubtle": True}, "fact set", ["facts"])

        actions = [
            {
                "type": "Action.ShowCard",
                "title": "Show check output",
                "card": self.text_card(event_output_truncated(event, double_newlines=True)),
            },
            {
                "type": "Action.ShowCard",
                "title": "Show event annotations",
                "card": self.text_card(event_annotations_truncated(event)),
            },
            {
                "type": "Action.OpenUrl",
                "title": "Open in Sensu",
                "url": sensu_event_url(event, config),
            },
        ]
        for action in actions:
            required = ["title", "card"] if action["type"] == "Action.ShowCard" else ["title", "url"]
            _attach(card["actions"], action, f"action '{action['title']}'", required)

        # A menção via entities é instável no Teams; desligável por config
        if config.mention_entities:
            mentions = build_mentions(config)
            if mentions:
                entities = card["msteams"].setdefault("entities", [])
                for mention in mentions:
                    if not mention["mentioned"].get("id"):
                        raise RenderError(f"could not attach mention '{mention['text']}': missing id")
                    _attach(entities, mention, f"mention '{mention['text']}'", ["text"])

        return card

    def to_message(self, card):
        return {
            "type": "message",
            "attachments": [
                {
                    "contentType": ADAPTIVE_CARD_CONTENT_TYPE,
                    "contentUrl": None,
                    "content": card,
                }
            ],
        }


class MessageCardRenderer(EventRenderer):
    """Card simples (connector card) com themeColor e uma seção de facts."""

    style = CARD_STYLE_MESSAGE

    def title(self, event):
        return f"{status_label(event.status)}: {event.entity_name} - {event.check_name}"

    def build_card(self, event, config):
        title = self.title(event)
        card = {
            "@type": "MessageCard",
            "@context": MESSAGE_CARD_CONTEXT,
            "summary": title,
            "title": title,
            "themeColor": status_theme_color(event.status),
            "sections": [],
            "potentialAction": [],
        }

        history = status_history(event.history, glyph=status_marker)
        facts = [{"name": name, "value": value} for name, value in build_facts(event, config, history)]
        _attach(card["sections"], {"facts": facts, "markdown": True}, "facts section", ["facts"])

        actions = [
            {
                "@type": "ActionCard",
                "name": "Show check output",
                "inputs": [
                    {
                        "@type": "TextInput",
                        "id": "output",
                        "title": "Check output",
                        "isMultiline": True,
                        "value": event_output_truncated(event),
                    }
                ],
            },
            {
                "@type": "OpenUri",
                "name": "Open in Sensu",
                "targets": [{"os": "default", "uri": sensu_event_url(event, config)}],
            },
        ]
        if config.dashboard_link:
            actions.append({
                "@type": "OpenUri",
                "name": "Open Sensu",
                "targets": [{"os": "default", "uri": config.sensu_url.rstrip("/")}],
            })

        for action in actions:
            required = ["name", "inputs"] if action["@type"] == "ActionCard" else ["name", "targets"]
            _attach(card["potentialAction"], action, f"action '{action['name']}'", required)
            for target in action.get("targets", []):
                if not target.get("uri"):
                    raise RenderError(f"could not attach action '{action['name']}': missing uri")

        return card

    def to_message(self, card):
        # MessageCard já é o formato de envio
        return card


RENDERERS = {
    CARD_STYLE_ADAPTIVE: AdaptiveCardRenderer,
    CARD_STYLE_MESSAGE: MessageCardRenderer,
}


def get_renderer(style):
    try:
        return RENDERERS[style]()
    except KeyError:
        raise RenderError(f"unknown card style {style!r}")
