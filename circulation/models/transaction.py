from datetime import datetime, timezone
from typing import Optional

from circulation.app_logger import get_logger
from circulation.exceptions import InvalidDaysLateError
from circulation.models.item import LibraryItem
from circulation.models.person import Person

logger = get_logger("transaction")


class BorrowTransaction:
    """
    One borrower returning one item late.

    The transaction starts open; the first ``process()`` computes the fee,
    applies the student discount when the borrower has the Student role,
    deducts it and closes. Later calls return the recorded fee and touch
    nothing. The borrower and item are referenced, not owned.
    """

    def __init__(self, borrower: Person, item: LibraryItem, days_late: int = 0) -> None:
        if isinstance(days_late, bool) or not isinstance(days_late, int) or days_late < 0:
            raise InvalidDaysLateError(f"Error: days late must be a non-negative integer, got {days_late!r}")
        self._borrower = borrower
        self._item = item
        self._days_late = days_late
        self._is_open = True
        self._late_fee_cost = 0.0
        self._processed_at: Optional[str] = None

    def process(self) -> float:
        if not self._is_open:
            logger.debug("Transaction %s/%s already closed; returning recorded fee",
                         self.user_id, self.item_id)
            return self._late_fee_cost

        cost = self._item.compute_late_fee(self._days_late)

        # only the Student role carries a discount
        student = self._borrower.student
        if student is not None:
            cost *= student.discount_factor

        self._borrower.deduct(cost)

        self._late_fee_cost = cost
        self._is_open = False
        self._processed_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
        logger.debug("Charged %s %.2f for %s (%d days late)",
                     self.user_id, cost, self.item_id, self._days_late)
        return self._late_fee_cost

    # ---------- Accessors ----------
    @property
    def borrower(self) -> Person:
        return self._borrower

    @property
    def item(self) -> LibraryItem:
        return self._item

    @property
    def user_id(self) -> str:
        return self._borrower.id()

    @property
    def item_id(self) -> str:
        return self._item.id()

    @property
    def days_late(self) -> int:
        return self._days_late

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def late_fee_cost(self) -> float:
        return self._late_fee_cost

    @property
    def processed_at(self) -> Optional[str]:
        """UTC ISO timestamp of the close, or None while open."""
        return self._processed_at
