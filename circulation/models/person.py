from dataclasses import dataclass
from typing import ClassVar, Optional

from circulation.app_logger import get_logger
from circulation.exceptions import InvalidAmountError, InvalidRoleError
from circulation.models.identity import Identifiable
from circulation.utils.constants import (
    DEFAULT_DISCOUNT_FACTOR,
    DEFAULT_MAX_BORROWS,
    Role,
    RoleLabel,
)
from circulation.utils.filters import fmt_num, yes_no

logger = get_logger("person")

# Order in which role fields are printed on a merged role line
_ROLE_ORDER = (Role.STUDENT, Role.STAFF)


@dataclass(frozen=True)
class StudentRole:
    """
    Student extension: a borrow limit and a late-fee discount factor.
    The borrow limit is informational; nothing enforces it.
    """
    kind: ClassVar[str] = Role.STUDENT
    label: ClassVar[str] = RoleLabel.STUDENT

    max_concurrent_borrows: int = DEFAULT_MAX_BORROWS
    discount_factor: float = DEFAULT_DISCOUNT_FACTOR

    def __post_init__(self):
        n = self.max_concurrent_borrows
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise InvalidRoleError(f"Error: max concurrent borrows must be a positive integer, got {n!r}")
        if not 0 < self.discount_factor <= 1:
            raise InvalidRoleError(f"Error: discount factor must be in (0, 1], got {self.discount_factor!r}")

    def fields(self) -> list[str]:
        return [
            f"MaxBorrows: {self.max_concurrent_borrows}",
            f"Discount: {fmt_num(self.discount_factor)}",
        ]


@dataclass(frozen=True)
class StaffRole:
    """Staff extension. The purchase-approval flag is informational."""
    kind: ClassVar[str] = Role.STAFF
    label: ClassVar[str] = RoleLabel.STAFF

    can_approve_purchases: bool = False

    def fields(self) -> list[str]:
        return [f"PurchaseApproval: {yes_no(self.can_approve_purchases)}"]


class Person(Identifiable):
    """
    A user of the library: identity, contact info and a balance that never
    drops below zero.

    Roles are attached to the one Person rather than subclassing it, so a
    user carrying both the Student and Staff roles still has a single
    identity and a single balance.
    """

    def __init__(self, person_id: str, name: str, email: str,
                 balance: float = 0.0, roles=()) -> None:
        if balance < 0:
            raise InvalidAmountError(f"Error: initial balance must not be negative, got {balance!r}")
        self._person_id = person_id
        self._name = name
        self._email = email
        self._balance = float(balance)
        self._roles = {}
        for role in roles:
            self.add_role(role)

    def __repr__(self) -> str:
        kinds = ",".join(self._roles) or Role.PERSON
        return f"Person({self._person_id!r}, {self._name!r}, roles={kinds}, balance={self._balance!r})"

    # ---------- Identity ----------
    def id(self) -> str:
        return self._person_id

    @property
    def person_id(self) -> str:
        return self._person_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def balance(self) -> float:
        return self._balance

    # ---------- Roles ----------
    def add_role(self, role) -> None:
        """Attach a role extension; each role kind can be attached once."""
        if role.kind in self._roles:
            raise InvalidRoleError(f"Error: {self._person_id} already has the {role.label} role")
        self._roles[role.kind] = role

    def has_role(self, kind: str) -> bool:
        return kind in self._roles

    def role(self, kind: str):
        return self._roles.get(kind)

    @property
    def roles(self) -> tuple:
        return tuple(self._roles[k] for k in _ROLE_ORDER if k in self._roles)

    @property
    def student(self) -> Optional[StudentRole]:
        return self._roles.get(Role.STUDENT)

    @property
    def staff(self) -> Optional[StaffRole]:
        return self._roles.get(Role.STAFF)

    @property
    def role_label(self) -> Optional[str]:
        """Label shown on the role line, or None for a plain Person."""
        if self.student is not None and self.staff is not None:
            return RoleLabel.TEACHING_ASSISTANT
        if self.student is not None:
            return RoleLabel.STUDENT
        if self.staff is not None:
            return RoleLabel.STAFF
        return None

    # ---------- Balance ----------
    def add_funds(self, amount: float) -> None:
        """Add to the balance. Zero or negative amounts are ignored."""
        if amount > 0:
            self._balance += amount
        else:
            logger.debug("Ignored non-positive deposit %r for %s", amount, self._person_id)

    def deduct(self, amount: float) -> None:
        """Subtract a charge from the balance, flooring the result at zero."""
        if amount < 0:
            raise InvalidAmountError(f"Error: cannot deduct a negative amount ({amount!r})")
        self._balance -= amount
        if self._balance < 0:
            logger.debug("Balance of %s clamped to zero", self._person_id)
            self._balance = 0.0

    # ---------- Display ----------
    def describe(self) -> str:
        lines = [
            f"{self._name} ({self._person_id}) | Email: {self._email}"
            f" | Balance: {fmt_num(self._balance)}"
        ]
        label = self.role_label
        if label is not None:
            parts = [label]
            for role in self.roles:
                parts.extend(role.fields())
            lines.append("  Role: " + " | ".join(parts))
        return "\n".join(lines)

    def display(self) -> None:
        print(self.describe())


# ---------- Factories ----------
def make_student(person_id: str, name: str, email: str, balance: float = 0.0,
                 max_concurrent_borrows: int = DEFAULT_MAX_BORROWS,
                 discount_factor: float = DEFAULT_DISCOUNT_FACTOR) -> Person:
    return Person(person_id, name, email, balance,
                  roles=[StudentRole(max_concurrent_borrows, discount_factor)])


def make_staff(person_id: str, name: str, email: str, balance: float = 0.0,
               can_approve_purchases: bool = False) -> Person:
    return Person(person_id, name, email, balance,
                  roles=[StaffRole(can_approve_purchases)])


def make_teaching_assistant(person_id: str, name: str, email: str, balance: float = 0.0,
                            max_concurrent_borrows: int = DEFAULT_MAX_BORROWS,
                            discount_factor: float = DEFAULT_DISCOUNT_FACTOR,
                            can_approve_purchases: bool = False) -> Person:
    """A Person carrying both the Student and Staff roles."""
    return Person(person_id, name, email, balance, roles=[
        StudentRole(max_concurrent_borrows, discount_factor),
        StaffRole(can_approve_purchases),
    ])
