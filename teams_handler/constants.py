import os

PLUGIN_NAME = "sensu-teams-handler"
PLUGIN_SHORT = "MS Teams handler for Sensu"
CONFIG_KEYSPACE = "sensu.io/plugins/sensu-teams-handler/config"

# Variáveis de ambiente reconhecidas
ENV_WEBHOOK_URL = "TEAMS_WEBHOOK_URL"
ENV_SENSU_URL = "SENSU_URL"
ENV_MENTIONS = "TEAMS_MENTIONS"
ENV_CARD_STYLE = "TEAMS_CARD_STYLE"
ENV_TIMEOUT_SECONDS = "TEAMS_TIMEOUT_SECONDS"
ENV_DASHBOARD_LINK = "TEAMS_DASHBOARD_LINK"
ENV_MENTION_ENTITIES = "TEAMS_MENTION_ENTITIES"

DEFAULT_SENSU_URL = "http://localhost:3000"
DEFAULT_CARD_STYLE = "adaptive"
DEFAULT_TIMEOUT_SECONDS = 10.0

CARD_STYLE_ADAPTIVE = "adaptive"
CARD_STYLE_MESSAGE = "message"
CARD_STYLES = (CARD_STYLE_ADAPTIVE, CARD_STYLE_MESSAGE)

APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Truncamento de textos livres (output do check e annotations)
MAX_OUTPUT_LENGTH = 500
MAX_OUTPUT_LENGTH_MESSAGE = "Output truncated because it was too long, check Event log in sensu: \n"
TRUNCATION_SUFFIX = "\n[...]"

# Mapeamento de status do check
STATUS_LEVELS = {
    0: {"label": "Resolved", "color": "green", "icon": "✅"},
    1: {"label": "Warning", "color": "yellow", "icon": "⚠"},
    2: {"label": "Critical", "color": "red", "icon": "❌"},
}
STATUS_UNDEFINED = {"label": "Undefined", "color": "yellow", "icon": "⚠"}

COLOR_CODES = {
    "green": {"hex": "00FF00", "marker": "\U0001f7e2"},
    "yellow": {"hex": "FFFF00", "marker": "\U0001f7e1"},
    "red": {"hex": "FF0000", "marker": "\U0001f534"},
}

# Esquemas dos cards do Teams
ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
ADAPTIVE_CARD_VERSION = "1.5"
ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
MESSAGE_CARD_CONTEXT = "https://schema.org/extensions"
