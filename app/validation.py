"""Normalization and validation rules for owners.

Saving an owner runs two steps before anything reaches the database:

1. the normalizers in :data:`NORMALIZERS` rewrite the stored phone and
   last name, unconditionally and in order;
2. every :class:`Rule` of the rule list is evaluated and each failure is
   collected into a ``{field: [messages]}`` mapping.

Rules marked ``raw`` look at the value as the caller supplied it rather
than the normalized one. The phone format rule is such a rule, so
``(412) 268-3259`` is judged on its separators before they are stripped.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from .core import get_settings


BLANK_MESSAGE = "can't be blank"
ZIP_MESSAGE = "should be five digits long"
PHONE_MESSAGE = (
    "should be 10 digits (area code needed) and delimited with dashes only"
)
EMAIL_MESSAGE = "is not a valid format"
STATE_MESSAGE = "is not an option"

ZIP_PATTERN = re.compile(r"\A\d{5}\Z", re.ASCII)
PHONE_PATTERN = re.compile(
    r"\A(\d{10}|\(?\d{3}\)?[-. ]\d{3}[-.]\d{4})\Z", re.ASCII
)


@dataclass(frozen=True)
class Rule:
    """A single field check and the message reported when it fails."""

    field: str
    check: Callable[[Any], bool]
    message: str
    raw: bool = False


def is_blank(value: Any) -> bool:
    """Return True for ``None`` and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def presence_of(field: str) -> Rule:
    return Rule(field, lambda value: not is_blank(value), BLANK_MESSAGE)


def format_of(
    field: str,
    pattern: "re.Pattern[str]",
    message: str,
    allow_blank: bool = False,
    raw: bool = False,
) -> Rule:
    def check(value: Any) -> bool:
        if allow_blank and is_blank(value):
            return True
        return value is not None and pattern.match(str(value)) is not None

    return Rule(field, check, message, raw=raw)


def inclusion_of(
    field: str,
    choices: Iterable[str],
    message: str,
    allow_blank: bool = False,
) -> Rule:
    allowed = frozenset(choices)

    def check(value: Any) -> bool:
        if allow_blank and is_blank(value):
            return True
        return value in allowed

    return Rule(field, check, message)


def email_pattern(tlds: Iterable[str]) -> "re.Pattern[str]":
    """Build the email pattern accepting only the given top-level domains."""
    alternatives = "|".join(re.escape(tld) for tld in tlds)
    return re.compile(
        r"\A\w[^@\s,;]+@([\w-]+\.)+(" + alternatives + r")\Z",
        re.IGNORECASE | re.ASCII,
    )


def build_owner_rules(
    states: Optional[Iterable[str]] = None,
    email_tlds: Optional[Iterable[str]] = None,
) -> List[Rule]:
    """
    Build the ordered rule list for owners.

    Args:
        states (Iterable[str] | None): Accepted state codes. Defaults to
            ``Settings.OWNER_STATES``.
        email_tlds (Iterable[str] | None): Accepted email top-level domains.
            Defaults to ``Settings.OWNER_EMAIL_TLDS``.

    Raises:
        ValueError: If ``email_tlds`` is empty.

    Returns:
        list[Rule]: Rules in evaluation order.
    """
    settings = get_settings()
    if states is None:
        states = settings.OWNER_STATES
    if email_tlds is None:
        email_tlds = settings.OWNER_EMAIL_TLDS
    email_tlds = list(email_tlds)
    if not email_tlds:
        raise ValueError("At least one email top-level domain is required")

    return [
        presence_of("first_name"),
        presence_of("last_name"),
        presence_of("email"),
        presence_of("phone"),
        format_of("zip", ZIP_PATTERN, ZIP_MESSAGE, allow_blank=True),
        format_of("phone", PHONE_PATTERN, PHONE_MESSAGE, raw=True),
        format_of("email", email_pattern(email_tlds), EMAIL_MESSAGE, allow_blank=True),
        inclusion_of("state", states, STATE_MESSAGE, allow_blank=True),
    ]


def reformat_phone(owner) -> None:
    """Strip every non-digit from the owner's phone."""
    phone = owner.phone
    if phone is None:
        return
    owner.phone = re.sub(r"[^0-9]", "", str(phone))


def capitalize_last_name(owner) -> None:
    """Capitalize the last name; a missing last name is left for presence."""
    if owner.last_name is None:
        return
    owner.last_name = owner.last_name.capitalize()


NORMALIZERS = (reformat_phone, capitalize_last_name)


def normalize(owner, rules: Sequence[Rule]) -> Dict[str, Any]:
    """
    Apply the normalizers to ``owner`` in place.

    Args:
        owner: Object carrying the owner fields as attributes.
        rules (Sequence[Rule]): Rules whose ``raw`` fields must be captured.

    Returns:
        dict: Values of the raw-checked fields as they were before
        normalization.
    """
    raw = {rule.field: getattr(owner, rule.field, None) for rule in rules if rule.raw}
    for normalizer in NORMALIZERS:
        normalizer(owner)
    return raw


def validate(
    owner,
    rules: Sequence[Rule],
    raw: Optional[Dict[str, Any]] = None,
) -> Dict[str, List[str]]:
    """
    Evaluate every rule against ``owner``.

    Args:
        owner: Object carrying the owner fields as attributes.
        rules (Sequence[Rule]): Rules to evaluate, in order.
        raw (dict | None): Pre-normalization values for ``raw`` rules. When
            omitted, raw rules see the current attribute values.

    Returns:
        dict[str, list[str]]: Messages per failing field; empty when valid.
    """
    raw = raw or {}
    errors: Dict[str, List[str]] = {}
    for rule in rules:
        if rule.raw and rule.field in raw:
            value = raw[rule.field]
        else:
            value = getattr(owner, rule.field, None)
        if not rule.check(value):
            errors.setdefault(rule.field, []).append(rule.message)
    return errors
