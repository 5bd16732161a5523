"""
Service-layer tests: registration through the dict mappers, lookups,
top-ups, late-return charges and the transaction history.
"""

import pytest

from circulation.exceptions import (
    DuplicateIdError,
    InvalidDaysLateError,
    InvalidRoleError,
    ItemNotFoundError,
    UnknownItemTypeError,
    UserNotFoundError,
)
from circulation.models.item import DVD, Magazine
from circulation.services.circulation_service import CirculationService
from circulation.services.common import item_from_dict, person_from_dict
from circulation.utils.constants import Role


def put_user(store, pid="S1", role="student", balance=50.0, **extra):
    data = {"person_id": pid, "name": "User " + pid, "email": f"{pid.lower()}@uni.edu",
            "balance": balance, "role": role}
    data.update(extra)
    return CirculationService.register_user(data, store=store)


def put_item(store, iid="B1", itype="book"):
    return CirculationService.register_item({"item_id": iid, "title": "Title " + iid, "type": itype},
                                            store=store)


def test_person_from_dict_roles():
    ta = person_from_dict({"id": "TA1", "name": "Lina", "email": "l@x", "balance": 60,
                           "role": "Teaching_Assistant", "discount_factor": 0.85,
                           "can_approve_purchases": True})
    assert ta.id() == "TA1"
    assert ta.has_role(Role.STUDENT) and ta.has_role(Role.STAFF)
    assert ta.student.discount_factor == 0.85
    assert ta.student.max_concurrent_borrows == 2
    assert ta.staff.can_approve_purchases is True

    plain = person_from_dict({"person_id": "P1", "name": "Ana", "email": "a@x"})
    assert plain.roles == () and plain.balance == 0.0
    assert person_from_dict(None) is None


def test_person_from_dict_uses_given_defaults():
    s = person_from_dict({"person_id": "S1", "name": "A", "email": "a@x", "role": "student"},
                         max_borrows=4, discount_factor=0.5)
    assert s.student.max_concurrent_borrows == 4
    assert s.student.discount_factor == 0.5


def test_person_from_dict_unknown_role():
    with pytest.raises(InvalidRoleError):
        person_from_dict({"person_id": "X", "name": "X", "email": "x@x", "role": "wizard"})


def test_item_from_dict_variants():
    assert isinstance(item_from_dict({"item_id": "M1", "title": "T", "type": "MAGAZINE"}), Magazine)
    assert isinstance(item_from_dict({"id": "D1", "title": "T", "type": " dvd "}), DVD)
    assert item_from_dict({}) is None
    with pytest.raises(UnknownItemTypeError):
        item_from_dict({"item_id": "V1", "title": "T", "type": "vinyl"})


def test_register_rejects_duplicate_ids(store):
    put_user(store, "S1")
    put_item(store, "B1")
    with pytest.raises(DuplicateIdError):
        put_user(store, "S1", role="staff")
    with pytest.raises(DuplicateIdError):
        put_item(store, "B1", itype="dvd")
    assert len(store.users) == 1 and len(store.items) == 1


def test_top_up(store):
    put_user(store, "S1", balance=10.0)
    assert CirculationService.top_up("S1", 5) == 15.0
    assert CirculationService.top_up("S1", -5) == 15.0
    with pytest.raises(UserNotFoundError):
        CirculationService.top_up("NOPE", 5)


def test_charge_late_return_records_transaction(store):
    put_user(store, "S1", balance=70.0, discount_factor=0.8)
    put_item(store, "B1")

    tx = CirculationService.charge_late_return("S1", "B1", 5)

    assert not tx.is_open
    assert tx.late_fee_cost == pytest.approx(4.0)
    assert store.get_user("S1").balance == pytest.approx(66.0)
    assert store.transactions == [tx]


def test_charge_staff_without_discount(store):
    put_user(store, "ST1", role="staff", balance=20.0)
    put_item(store, "D1", itype="dvd")
    tx = CirculationService.charge_late_return("ST1", "D1", 3)
    assert tx.late_fee_cost == 6.0
    assert store.get_user("ST1").balance == 14.0


def test_charge_unknown_ids(store):
    put_user(store, "S1")
    put_item(store, "B1")
    with pytest.raises(UserNotFoundError):
        CirculationService.charge_late_return("NOPE", "B1", 1)
    with pytest.raises(ItemNotFoundError):
        CirculationService.charge_late_return("S1", "NOPE", 1)
    assert store.transactions == []


def test_charge_negative_days_leaves_balance(store):
    put_user(store, "S1", balance=10.0)
    put_item(store, "B1")
    with pytest.raises(InvalidDaysLateError):
        CirculationService.charge_late_return("S1", "B1", -1)
    assert store.get_user("S1").balance == 10.0
    assert store.transactions == []


def test_history_and_totals(store):
    put_user(store, "S1", balance=100.0, discount_factor=0.5)
    put_user(store, "ST1", role="staff", balance=100.0)
    put_item(store, "B1")
    put_item(store, "M1", itype="magazine")

    CirculationService.charge_late_return("S1", "B1", 4)    # 2.0
    CirculationService.charge_late_return("ST1", "M1", 3)   # 1.5
    CirculationService.charge_late_return("S1", "M1", 2)    # 0.5

    mine = CirculationService.transactions_for_user("S1")
    assert [tx.item_id for tx in mine] == ["B1", "M1"]
    assert CirculationService.total_fees_collected() == 4.0


def test_explicit_store_wins_over_default(store):
    from circulation.models.store import Store

    other = Store()
    put_user(other, "S1")
    assert other.get_user("S1") is not None
    assert store.get_user("S1") is None


@pytest.mark.parametrize("field", ["discount_factor", "max_concurrent_borrows"])
def test_person_from_dict_explicit_zero_is_rejected(field):
    data = {"person_id": "S1", "name": "A", "email": "a@x", "role": "student", field: 0}
    with pytest.raises(InvalidRoleError):
        person_from_dict(data)


def test_person_from_dict_none_falls_back_to_default():
    s = person_from_dict({"person_id": "S1", "name": "A", "email": "a@x", "role": "student",
                          "discount_factor": None, "max_concurrent_borrows": None})
    assert s.student.discount_factor == 0.8
    assert s.student.max_concurrent_borrows == 2


@pytest.mark.parametrize("raw, expected", [
    ("false", False), ("No", False), ("", False), (0, False), (None, False),
    ("true", True), (" YES ", True), (1, True), (True, True),
])
def test_person_from_dict_approval_flag(raw, expected):
    st = person_from_dict({"person_id": "ST1", "name": "O", "email": "o@x", "role": "staff",
                           "can_approve_purchases": raw})
    assert st.staff.can_approve_purchases is expected


@pytest.mark.parametrize("raw", ["maybe", 2, 0.5])
def test_person_from_dict_bad_approval_flag(raw):
    with pytest.raises(InvalidRoleError):
        person_from_dict({"person_id": "ST1", "name": "O", "email": "o@x", "role": "staff",
                          "can_approve_purchases": raw})
