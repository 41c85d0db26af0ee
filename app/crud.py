"""CRUD operations for owners.

This module contains the save pipeline and the database interaction
logic for owner records.
"""

import logging
from typing import Dict, List, Sequence

from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models, schemas, scopes
from .exceptions import OwnerValidationError, PersistenceError
from .validation import Rule, build_owner_rules, normalize, validate

logger = logging.getLogger(__name__)

STATUS_FILTERS = {
    "active": scopes.active,
    "inactive": scopes.inactive,
}


def _commit(db: Session, owner: models.Owner) -> models.Owner:
    owner_id = owner.id
    try:
        db.add(owner)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to persist owner id=%s: %s", owner_id, exc)
        raise PersistenceError(str(exc)) from exc
    db.refresh(owner)
    logger.debug("Saved owner id=%s", owner.id)
    return owner


def save_owner(
    db: Session, owner: models.Owner, rules: Sequence[Rule] | None = None
) -> Dict[str, List[str]]:
    """
    Normalize, validate and persist an owner.

    Normalization always runs, so the phone and last name of ``owner`` are
    rewritten even when validation fails. An invalid owner is neither added
    to the session nor committed; an invalid owner already stored is expired,
    discarding its pending edits so no later commit writes them.

    Args:
        db (Session): Database session.
        owner (Owner): Owner to save.
        rules (Sequence[Rule] | None): Rule list; defaults to
            :func:`build_owner_rules`.

    Raises:
        PersistenceError: If the database rejects the commit.

    Returns:
        dict[str, list[str]]: Validation errors; empty when the owner was saved.
    """
    if rules is None:
        rules = build_owner_rules()

    rules = list(rules)
    raw = normalize(owner, rules)
    errors = validate(owner, rules, raw)
    if errors:
        logger.info("Rejected owner id=%s: invalid %s", owner.id, ", ".join(errors))
        if inspect(owner).persistent:
            db.expire(owner)
        return errors

    _commit(db, owner)
    return {}


def save_owner_or_raise(
    db: Session, owner: models.Owner, rules: Sequence[Rule] | None = None
) -> models.Owner:
    """
    Save an owner, raising instead of returning validation errors.

    Raises:
        OwnerValidationError: If any rule fails.
        PersistenceError: If the database rejects the commit.

    Returns:
        Owner: The saved owner.
    """
    errors = save_owner(db, owner, rules)
    if errors:
        raise OwnerValidationError(errors)
    return owner


def create_owner(db: Session, owner_in: schemas.OwnerCreate) -> models.Owner:
    """
    Create and persist a new owner.

    Args:
        db (Session): Database session.
        owner_in (OwnerCreate): Incoming owner data.

    Raises:
        OwnerValidationError: If the data breaks an owner rule.

    Returns:
        Owner: Newly created owner.
    """
    owner = models.Owner(**owner_in.model_dump())
    return save_owner_or_raise(db, owner)


def get_owner(db: Session, owner_id: int) -> models.Owner | None:
    """
    Retrieve an owner by primary key.

    Args:
        db (Session): Database session.
        owner_id (int): Owner identifier.

    Returns:
        Owner | None: Owner if found, otherwise ``None``.
    """
    return db.execute(
        select(models.Owner).where(models.Owner.id == owner_id)
    ).scalar_one_or_none()


def list_owners(
    db: Session,
    status: str | None = None,
    q: str | None = None,
    skip: int = 0,
    limit: int = 100,
) -> Sequence[models.Owner]:
    """
    Retrieve owners in alphabetical order.

    Args:
        db (Session): Database session.
        status (str | None): ``"active"``, ``"inactive"`` or ``None`` for all.
        q (str | None): Optional name prefix.
        skip (int): Number of records to skip.
        limit (int): Maximum number of records to return.

    Raises:
        ValueError: If ``status`` is not a known filter.

    Returns:
        list[Owner]: Matching owners.
    """
    stmt = scopes.alphabetical()
    if status is not None:
        try:
            stmt = STATUS_FILTERS[status](stmt)
        except KeyError:
            raise ValueError(f"Unknown owner status: {status!r}") from None
    if q:
        stmt = scopes.search(q, stmt)

    return db.scalars(stmt.offset(skip).limit(limit)).all()


def update_owner(db: Session, owner: models.Owner, changes: dict) -> models.Owner:
    """
    Update fields of an owner and save it.

    Args:
        db (Session): Database session.
        owner (Owner): Owner instance.
        changes (dict): Fields to update.

    Raises:
        OwnerValidationError: If the updated owner breaks an owner rule.

    Returns:
        Owner: Updated owner.
    """
    for key, value in changes.items():
        setattr(owner, key, value)

    return save_owner_or_raise(db, owner)


def delete_owner(db: Session, owner: models.Owner) -> None:
    """
    Delete an owner from the database.

    The owner's pets are left in place with their ``owner_id`` untouched.

    Args:
        db (Session): Database session.
        owner (Owner): Owner to delete.

    Raises:
        PersistenceError: If the database rejects the delete.
    """
    owner_id = owner.id
    try:
        db.delete(owner)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to delete owner id=%s: %s", owner_id, exc)
        raise PersistenceError(str(exc)) from exc
    logger.debug("Deleted owner id=%s", owner_id)
    return None


def make_inactive(db: Session, owner: models.Owner) -> models.Owner:
    """
    Mark an owner as inactive and save it.

    Raises:
        OwnerValidationError: If the owner breaks an owner rule.
        PersistenceError: If the database rejects the commit.
    """
    owner.active = False
    return save_owner_or_raise(db, owner)


def make_active(db: Session, owner: models.Owner) -> models.Owner:
    """
    Mark an owner as active and save it.

    Raises:
        OwnerValidationError: If the owner breaks an owner rule.
        PersistenceError: If the database rejects the commit.
    """
    owner.active = True
    return save_owner_or_raise(db, owner)
