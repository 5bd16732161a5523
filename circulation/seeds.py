"""
Sample users and catalog items used by the ``demo`` command.

Records are plain dicts, mapped to models through the service layer the
same way any other caller would register them.
"""

from circulation.services.circulation_service import CirculationService

SAMPLE_USERS = [
    {"person_id": "S100", "name": "Amina", "email": "amina@uni.edu", "balance": 50.0,
     "role": "student", "max_concurrent_borrows": 2, "discount_factor": 0.8},
    {"person_id": "ST200", "name": "Omar", "email": "omar@uni.edu", "balance": 75.0,
     "role": "staff", "can_approve_purchases": True},
    {"person_id": "TA300", "name": "Lina", "email": "lina@uni.edu", "balance": 60.0,
     "role": "teaching_assistant", "max_concurrent_borrows": 2, "discount_factor": 0.85,
     "can_approve_purchases": True},
]

# Deposits applied after the first listing, keyed by user ID
SAMPLE_TOP_UPS = {"S100": 20, "ST200": 10, "TA300": 5}

SAMPLE_ITEMS = [
    {"item_id": "B001", "title": "Effective C++", "type": "book"},
    {"item_id": "M010", "title": "Tech Monthly", "type": "magazine"},
    {"item_id": "D100", "title": "C++ Patterns", "type": "dvd"},
]

# Amina returns the book late
SAMPLE_LATE_RETURN = ("S100", "B001")


def load_sample(store, **defaults):
    """
    Register the sample users and items into ``store``.
    Returns (users, items) in listing order.
    """
    users = [CirculationService.register_user(d, store=store, **defaults) for d in SAMPLE_USERS]
    items = [CirculationService.register_item(d, store=store) for d in SAMPLE_ITEMS]
    return users, items
