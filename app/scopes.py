"""Reusable query filters over owners.

Every filter takes an optional base statement and returns a refined one,
so they can be chained::

    stmt = scopes.alphabetical(scopes.search("Jo", scopes.active()))
"""

from sqlalchemy import Select, or_, select

from .models import Owner


def _base(stmt: Select | None) -> Select:
    return select(Owner) if stmt is None else stmt


def alphabetical(stmt: Select | None = None) -> Select:
    """Order owners by last name, then first name."""
    return _base(stmt).order_by(Owner.last_name, Owner.first_name)


def active(stmt: Select | None = None) -> Select:
    """Keep owners whose ``active`` flag is true."""
    return _base(stmt).where(Owner.active.is_(True))


def inactive(stmt: Select | None = None) -> Select:
    """Keep owners whose ``active`` flag is false or unset."""
    return _base(stmt).where(Owner.active.is_not(True))


def search(term: str, stmt: Select | None = None) -> Select:
    """
    Keep owners whose first or last name starts with ``term``.

    Matching is case-insensitive and wildcard characters in ``term``
    are matched literally.
    """
    return _base(stmt).where(
        or_(
            Owner.first_name.istartswith(term, autoescape=True),
            Owner.last_name.istartswith(term, autoescape=True),
        )
    )
