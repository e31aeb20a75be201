# personal_api/utils/sanitize.py
import re
import unicodedata

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _drop_controls(raw: str) -> str:
    return "".join(ch for ch in raw if unicodedata.category(ch) != "Cc")


def sanitize_input(raw: str) -> str:
    """
    Drop control characters (Unicode category Cc, NUL included) and trim.
    Never fails; sanitize_input(sanitize_input(s)) == sanitize_input(s).
    """
    return _drop_controls(raw).strip()


def sanitize_multiline(raw: str) -> str:
    """
    Like sanitize_input, but CR/LF line breaks survive as "\\n". Every other
    control character is dropped; only the ends of the whole text are trimmed.
    """
    lines = [_drop_controls(line) for line in _LINE_BREAK.split(raw)]
    return "\n".join(lines).strip()
