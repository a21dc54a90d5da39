from datetime import datetime, timezone

from .constants import MAX_OUTPUT_LENGTH, MAX_OUTPUT_LENGTH_MESSAGE, TRUNCATION_SUFFIX


def truncate_text(text, max_length=MAX_OUTPUT_LENGTH, banner=MAX_OUTPUT_LENGTH_MESSAGE):
    """
    Limita um texto livre a ``max_length`` caracteres.

    Textos maiores recebem o banner no início e ``\\n[...]`` no fim; o
    conteúdo visível fica com ``max_length - len(banner)`` caracteres
    (nunca negativo, mesmo se o banner for maior que o limite).
    """
    text = (text or "").strip()
    if len(text) <= max_length:
        return text
    keep = max(0, max_length - len(banner))
    return f"{banner}{text[:keep]}{TRUNCATION_SUFFIX}"


def annotations_text(annotations):
    # Ordem de iteração do mapping; não há ordenação garantida
    return "".join(f"{key}\n{value}\n\n" for key, value in (annotations or {}).items())


def format_local_time(timestamp):
    try:
        ts = int(timestamp or 0)
    except (TypeError, ValueError):
        ts = 0
    try:
        local = datetime.fromtimestamp(ts, tz=timezone.utc).astimezone()
    except (OverflowError, OSError, ValueError):
        # Fora do intervalo do datetime: mostra o epoch cru
        return f"{ts} (unix)"
    return local.strftime("%Y-%m-%d %H:%M:%S %z %Z")


def split_mentions(mentions):
    return (mentions or "").split()


def parse_bool(value, default=False):
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off", ""}:
        return False
    return default
