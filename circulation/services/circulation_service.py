"""Circulation service layer: registration, top-ups and late-return charges."""

from typing import Optional

from circulation.app_logger import get_logger
from circulation.exceptions import ItemNotFoundError, UserNotFoundError
from circulation.models.store import Store
from circulation.models.transaction import BorrowTransaction
from circulation.services.common import item_from_dict, person_from_dict, round2

logger = get_logger("service")


def _resolve(store: Optional[Store]) -> Store:
    """Prefer an injected store (tests, CLI runs); fall back to the default one."""
    if store is not None:
        return store
    from circulation.services import common
    return common._store()


class CirculationService:
    """
    Users, catalog and late-return charges over a Store.
    Fee rules live in the models (LibraryItem.compute_late_fee and the
    borrower's Student role); this layer only looks things up and records.
    """

    @staticmethod
    def register_user(data: dict, store: Optional[Store] = None, **defaults):
        """Build a Person from ``data`` and add it to the store."""
        st = _resolve(store)
        person = person_from_dict(data, **defaults)
        st.add_user(person)
        logger.info("Registered user %s (%s)", person.id(), person.role_label or "Person")
        return person

    @staticmethod
    def register_item(data: dict, store: Optional[Store] = None):
        st = _resolve(store)
        item = item_from_dict(data)
        st.add_item(item)
        logger.info("Registered item %s (%s)", item.id(), item.type_name())
        return item

    @staticmethod
    def _user(person_id: str, st: Store):
        person = st.get_user(person_id)
        if person is None:
            raise UserNotFoundError(f"Error: user {person_id} not found")
        return person

    @staticmethod
    def top_up(person_id: str, amount: float, store: Optional[Store] = None) -> float:
        """Add funds to a user's balance and return the new balance."""
        st = _resolve(store)
        person = CirculationService._user(person_id, st)
        person.add_funds(amount)
        return person.balance

    @staticmethod
    def charge_late_return(person_id: str, item_id: str, days_late: int,
                           store: Optional[Store] = None) -> BorrowTransaction:
        """
        Charge a late return: resolve borrower and item, process a
        BorrowTransaction once and record it.

        Raises:
            UserNotFoundError / ItemNotFoundError for unknown IDs,
            InvalidDaysLateError for negative lateness.
        """
        st = _resolve(store)
        borrower = CirculationService._user(person_id, st)
        item = st.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(f"Error: item {item_id} not found")

        tx = BorrowTransaction(borrower, item, days_late)
        fee = tx.process()
        st.add_transaction(tx)
        logger.info("Late return %s/%s: %d days, fee %.2f, balance %.2f",
                    person_id, item_id, days_late, fee, borrower.balance)
        return tx

    @staticmethod
    def transactions_for_user(person_id: str, store: Optional[Store] = None) -> list:
        st = _resolve(store)
        return [tx for tx in st.transactions if tx.user_id == person_id]

    @staticmethod
    def total_fees_collected(store: Optional[Store] = None) -> float:
        st = _resolve(store)
        return round2(sum(tx.late_fee_cost for tx in st.transactions))
