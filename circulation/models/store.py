import threading

from circulation.app_logger import get_logger
from circulation.exceptions import DuplicateIdError

logger = get_logger("store")


class Store:
    """
    In-memory registry of users, catalog items and processed transactions.
    Nothing is written to disk; the data lives as long as the process.
    """
    _inst = None
    _inst_lock = threading.Lock()

    def __init__(self):
        self.users: dict = {}
        self.items: dict = {}
        self.transactions: list = []

    # ---------- Singleton ----------
    @classmethod
    def instance(cls):
        """Return the process-wide default Store."""
        with cls._inst_lock:
            if cls._inst is None:
                cls._inst = Store()
        return cls._inst

    @classmethod
    def reset_instance(cls):
        """Drop the default Store so the next instance() starts empty."""
        with cls._inst_lock:
            cls._inst = None

    # ---------- Users ----------
    def user_exists(self, person_id: str) -> bool:
        return person_id in self.users

    def add_user(self, person) -> str:
        """Register a Person and return its ID."""
        pid = person.id()
        if self.user_exists(pid):
            raise DuplicateIdError(f"Error: user {pid} already registered")
        self.users[pid] = person
        logger.debug("Registered user %s", pid)
        return pid

    def get_user(self, person_id: str):
        return self.users.get(person_id)

    # ---------- Items ----------
    def item_exists(self, item_id: str) -> bool:
        return item_id in self.items

    def add_item(self, item) -> str:
        """Register a LibraryItem and return its ID."""
        iid = item.id()
        if self.item_exists(iid):
            raise DuplicateIdError(f"Error: item {iid} already registered")
        self.items[iid] = item
        logger.debug("Registered item %s", iid)
        return iid

    def get_item(self, item_id: str):
        return self.items.get(item_id)

    # ---------- Transactions ----------
    def add_transaction(self, tx) -> None:
        self.transactions.append(tx)
