"""Shared service helpers and factories."""

from typing import Optional

from circulation.exceptions import InvalidRoleError, UnknownItemTypeError
from circulation.models.item import DVD, Book, LibraryItem, Magazine
from circulation.models.person import (
    Person,
    make_staff,
    make_student,
    make_teaching_assistant,
)
from circulation.models.store import Store
from circulation.utils.constants import (
    ALLOWED_ROLES,
    ALLOWED_TYPES,
    DEFAULT_DISCOUNT_FACTOR,
    DEFAULT_MAX_BORROWS,
    ItemType,
    Role,
)

ITEM_CLASSES = {
    ItemType.BOOK: Book,
    ItemType.MAGAZINE: Magazine,
    ItemType.DVD: DVD,
}


def _store() -> Store:
    """Get the default store instance."""
    return Store.instance()


def norm_key(value: Optional[str]) -> str:
    """Normalize a role/type label to lowercase; return '' if None."""
    return (value or "").strip().lower()


def round2(x: float) -> float:
    return round(float(x), 2)


_TRUE = {"true", "yes", "y", "1"}
_FALSE = {"false", "no", "n", "0", ""}


def to_bool(value) -> bool:
    """
    Read a flag that may arrive as a bool, None, 0/1 or a string label.
    Raise InvalidRoleError for anything else.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        key = norm_key(value)
        if key in _TRUE:
            return True
        if key in _FALSE:
            return False
    raise InvalidRoleError(f"Error: expected a yes/no flag, got {value!r}")


# -------- dict -> rich model mappers --------
def person_from_dict(d: Optional[dict],
                     max_borrows: int = DEFAULT_MAX_BORROWS,
                     discount_factor: float = DEFAULT_DISCOUNT_FACTOR) -> Optional[Person]:
    """
    Map a user dict to a Person carrying the roles its 'role' names.
    ``max_borrows`` and ``discount_factor`` fill in missing student fields.
    """
    if not d:
        return None
    role = norm_key(d.get("role")) or Role.PERSON
    if role not in ALLOWED_ROLES:
        raise InvalidRoleError(f"Error: unknown role {d.get('role')!r}")
    base = dict(
        person_id=d.get("person_id") or d.get("id"),
        name=d.get("name"),
        email=d.get("email"),
        balance=float(d.get("balance") or 0.0),
    )
    # only absent/None falls back; an explicit 0 must reach role validation
    n = d.get("max_concurrent_borrows")
    f = d.get("discount_factor")
    student = dict(
        max_concurrent_borrows=max_borrows if n is None else n,
        discount_factor=float(discount_factor if f is None else f),
    )
    approval = to_bool(d.get("can_approve_purchases"))

    if role == Role.STUDENT:
        return make_student(**base, **student)
    if role == Role.STAFF:
        return make_staff(**base, can_approve_purchases=approval)
    if role == Role.TEACHING_ASSISTANT:
        return make_teaching_assistant(**base, **student, can_approve_purchases=approval)
    return Person(**base)


def item_from_dict(d: Optional[dict]) -> Optional[LibraryItem]:
    """Map an item dict to the catalog variant its 'type' names."""
    if not d:
        return None
    itype = norm_key(d.get("type"))
    if itype not in ALLOWED_TYPES:
        raise UnknownItemTypeError(f"Error: unknown item type {d.get('type')!r}")
    return ITEM_CLASSES[itype](
        item_id=d.get("item_id") or d.get("id"),
        title=d.get("title"),
    )
