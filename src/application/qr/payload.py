from __future__ import annotations

_JSON_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def escape_json(value: str) -> str:
    for raw, escaped in _JSON_ESCAPES:
        value = value.replace(raw, escaped)
    return value


def build_qr_content(title: str, description: str = "") -> str:
    """JSON payload encoded into a todo's QR code."""
    return f'{{"title":"{escape_json(title)}","desc":"{escape_json(description)}"}}'
