from __future__ import annotations

from dataclasses import dataclass, field

from email_validator import EmailSyntaxError, validate_email

from .logstore import LogStore
from .models import ValidationError
from .terminal import Terminal
from .text import Input
from .theme import Theme

ADDRESS_MAX = 254
LOCAL_PART_MAX = 64
DOMAIN_MAX = 253
SUBDOMAIN_MAX = 63

INVALID_CHARACTER = "An invalid character is present"
INVALID_IP = "Invalid IP address"
DOMAIN_TOO_LONG = "The domain is too long"
SUBDOMAIN_TOO_LONG = "The subdomain is too long"
TOO_FEW_SUBDOMAINS = "Not enough sub domains are present"
MISPLACED_DOT = "Invalid placement of a '.'"
UNBALANCED_QUOTES = "Unbalanced quotes"

# email_validator reports problems as sentences; the first matching fragment
# picks the message shown to the user.
SYNTAX_MESSAGES: list[tuple[tuple[str, ...], str]] = [
    (("bracket", "IPv4", "IPv6"), INVALID_IP),
    (("so many characters",), SUBDOMAIN_TOO_LONG),
    (("should have a period",), TOO_FEW_SUBDOMAINS),
    (("too long",), DOMAIN_TOO_LONG),
    (("invalid character", "hyphen"), INVALID_CHARACTER),
    (("period",), MISPLACED_DOT),
    (("quot",), UNBALANCED_QUOTES),
]


def _check_limits(raw: str) -> None:
    """Structural limits, each reported with its own message."""
    if "(" in raw or ")" in raw:
        raise ValidationError("An invalid comment is present")
    local, sep, domain = raw.rpartition("@")
    if not sep:
        raise ValidationError("Missing @ separator")
    if not local:
        raise ValidationError("The local part is empty")
    if len(local) > LOCAL_PART_MAX:
        raise ValidationError("The local part is too long")
    if local.startswith('"') != local.endswith('"') or local == '"':
        raise ValidationError(UNBALANCED_QUOTES)
    if not domain:
        raise ValidationError("The domain is empty")
    if len(domain) > DOMAIN_MAX or len(raw) > ADDRESS_MAX:
        raise ValidationError(DOMAIN_TOO_LONG)
    if domain.startswith("["):
        return
    if any(len(label) > SUBDOMAIN_MAX for label in domain.split(".")):
        raise ValidationError(SUBDOMAIN_TOO_LONG)
    if "." not in domain:
        raise ValidationError(TOO_FEW_SUBDOMAINS)


def syntax_message(exc: EmailSyntaxError) -> str:
    text = str(exc)
    for fragments, message in SYNTAX_MESSAGES:
        if any(fragment in text for fragment in fragments):
            return message
    return text


def parse_email(raw: str) -> str:
    """Validate an address and return its normalized form (domain lower-cased)."""
    _check_limits(raw)
    try:
        result = validate_email(
            raw,
            check_deliverability=False,
            allow_quoted_local=True,
            allow_domain_literal=True,
        )
    except EmailSyntaxError as exc:
        raise ValidationError(syntax_message(exc)) from exc
    return result.normalized


@dataclass
class Email:
    title: str
    default: str = ""
    theme: Theme = field(default_factory=Theme.plain)
    log: LogStore | None = None

    def ask(self, term: Terminal) -> str:
        return Input(
            title=self.title,
            default=self.default,
            validator=parse_email,
            theme=self.theme,
            log=self.log,
        ).ask(term)
