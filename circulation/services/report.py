"""Plain-text sections of the console report."""

from circulation.utils.filters import fmt_money, fmt_num, yes_no


def header(title: str) -> str:
    return f"=== {title} ==="


def users_section(title: str, people) -> list[str]:
    lines = [header(title)]
    lines.extend(p.describe() for p in people)
    return lines


def items_section(items) -> list[str]:
    lines = [header("Library Items")]
    for it in items:
        lines.append(
            f"{it.id()} | {it.title} | {it.type_name()} | fee/day: {fmt_num(it.late_fee_per_day)}"
        )
    return lines


def transaction_section(tx) -> list[str]:
    """
    Summary of a processed transaction. The fee and the remaining balance
    are both fixed-point with two decimals.
    """
    return [
        header("Transaction Summary"),
        f"User: {tx.user_id} | Item: {tx.item_id}",
        f"Days late: {tx.days_late} | Fee charged: {fmt_money(tx.late_fee_cost)}",
        f"Remaining balance: {fmt_money(tx.borrower.balance)}",
        f"Transaction open: {yes_no(tx.is_open)}",
    ]
