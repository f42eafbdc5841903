"""Pure formatting and validation helpers used by the contact form."""

import re

# Brazilian numbers: two-digit area code plus eight or nine digits
MAX_PHONE_DIGITS = 11

_NON_DIGIT_RE = re.compile(r"\D")
_AREA_CODE_RE = re.compile(r"^(\d{2})\B")
_LOCAL_NUMBER_RE = re.compile(r"(\d)?(\d{4})(\d{4})")
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def format_phone(raw: str) -> str:
    """Format raw input as "(11) 99999-8888".

    Non-digits are dropped and extra digits are cut, so any input yields a
    display string (partial input is formatted as far as it goes).
    """
    digits = _NON_DIGIT_RE.sub("", raw or "")[:MAX_PHONE_DIGITS]
    formatted = _AREA_CODE_RE.sub(r"(\1) ", digits, count=1)
    return _LOCAL_NUMBER_RE.sub(
        lambda m: f"{m.group(1) or ''}{m.group(2)}-{m.group(3)}", formatted, count=1
    )


def is_email_valid(text: str) -> bool:
    return bool(_EMAIL_RE.match(text or ""))


def contact_count_label(count: int) -> str:
    """Header label for the contact list ("1 contato", "3 contatos")."""
    return f"{count} contato" if count == 1 else f"{count} contatos"
