from abc import abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from circulation.exceptions import InvalidDaysLateError
from circulation.models.identity import Identifiable
from circulation.utils.constants import LATE_FEE_PER_DAY, ItemType


@dataclass(frozen=True)
class LibraryItem(Identifiable):
    """
    Base catalog item. The per-day late-fee rate is fixed by the concrete
    variant at construction; all variants share the same linear fee rule.
    """
    item_id: str
    title: str
    late_fee_per_day: float = field(init=False)

    item_type: ClassVar[str]

    def __post_init__(self):
        object.__setattr__(self, "late_fee_per_day", LATE_FEE_PER_DAY[self.item_type])

    def id(self) -> str:
        return self.item_id

    @abstractmethod
    def type_name(self) -> str:
        """Display label of the variant."""

    def compute_late_fee(self, days_late: int) -> float:
        """
        Late fee *before* any borrower discount: days_late * late_fee_per_day.
        Negative or non-integer lateness is rejected.
        """
        if isinstance(days_late, bool) or not isinstance(days_late, int) or days_late < 0:
            raise InvalidDaysLateError(f"Error: days late must be a non-negative integer, got {days_late!r}")
        return days_late * self.late_fee_per_day


class Book(LibraryItem):
    item_type = ItemType.BOOK

    def type_name(self) -> str:
        return "Book"


class Magazine(LibraryItem):
    item_type = ItemType.MAGAZINE

    def type_name(self) -> str:
        return "Magazine"


class DVD(LibraryItem):
    item_type = ItemType.DVD

    def type_name(self) -> str:
        return "DVD"
