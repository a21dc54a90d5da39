from .constants import STATUS_LEVELS, STATUS_UNDEFINED, COLOR_CODES


def _level(status):
    try:
        code = int(status)
    except (TypeError, ValueError):
        return STATUS_UNDEFINED
    return STATUS_LEVELS.get(code, STATUS_UNDEFINED)


def status_label(status):
    return _level(status)["label"]


def status_color(status):
    return _level(status)["color"]


def status_icon(status):
    return _level(status)["icon"]


def status_marker(status):
    """Bolinha colorida usada no histórico do MessageCard."""
    return COLOR_CODES[status_color(status)]["marker"]


def status_theme_color(status):
    return COLOR_CODES[status_color(status)]["hex"]


def status_history(history, glyph=status_icon):
    # Um glyph + espaço por entrada, do mais antigo para o mais recente
    return "".join(f"{glyph(item)} " for item in history)
