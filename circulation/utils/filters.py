"""Number and flag formatting helpers for the console report."""


def fmt_num(value) -> str:
    """
    Format a number the way a default-configured C++ output stream does:
    up to 6 significant digits, no trailing zeros.
      50.0 -> '50', 0.85 -> '0.85', 66.5 -> '66.5'
    """
    if value is None:
        return ""
    return f"{float(value):g}"


def fmt_money(value) -> str:
    """Fixed-point with two decimals, e.g. 4 -> '4.00'."""
    if value is None:
        return ""
    return f"{float(value):.2f}"


def yes_no(flag) -> str:
    return "Yes" if flag else "No"
