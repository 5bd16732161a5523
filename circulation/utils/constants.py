# circulation/utils/constants.py

"""
Global constants for role kinds, item types, and late-fee rates.
These constants are imported by both models and services.
"""


class Role:
    PERSON = "person"
    STUDENT = "student"
    STAFF = "staff"
    TEACHING_ASSISTANT = "teaching_assistant"


class RoleLabel:
    STUDENT = "Student"
    STAFF = "Staff"
    TEACHING_ASSISTANT = "TeachingAssistant"


class ItemType:
    BOOK = "book"
    MAGAZINE = "magazine"
    DVD = "dvd"


# Late fee charged per day, by item type
LATE_FEE_PER_DAY = {
    ItemType.BOOK: 1.0,
    ItemType.MAGAZINE: 0.5,
    ItemType.DVD: 2.0,
}

# --- Student role defaults ---
DEFAULT_MAX_BORROWS = 2
DEFAULT_DISCOUNT_FACTOR = 0.8

ALLOWED_ROLES = {Role.PERSON, Role.STUDENT, Role.STAFF, Role.TEACHING_ASSISTANT}
ALLOWED_TYPES = {ItemType.BOOK, ItemType.MAGAZINE, ItemType.DVD}
