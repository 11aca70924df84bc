import logging

logger = logging.getLogger(__name__)

# Odd registration numbers: active accounts joined with their profiles
QUERY_ODD = (
    "SELECT user_id, a.name, phone_number, city FROM accounts a "
    "JOIN user_profiles up ON a.id = up.account_id "
    "WHERE a.status = 'active' ORDER BY a.name;"
)

# Even registration numbers: top 5 products by revenue
QUERY_EVEN = (
    "SELECT p.product_name, SUM(oi.quantity) as total_quantity, "
    "SUM(oi.price * oi.quantity) as total_revenue FROM products p "
    "JOIN order_items oi ON p.id = oi.product_id "
    "GROUP BY p.product_name ORDER BY total_revenue DESC LIMIT 5;"
)


def last_two_digits(reg_no: str, log: logging.Logger | None = None) -> int:
    """
    Parse the last two characters of a registration number as an integer.

    A leading sign is accepted ("-3" -> -3, "+5" -> 5). Falls back to 0 (and
    logs a warning) when the registration number is shorter than two
    characters or its tail is not an integer. Surrounding whitespace in the
    tail counts as not an integer.
    """
    log = log or logger
    tail = reg_no[-2:]
    try:
        if len(reg_no) < 2 or tail != tail.strip():
            raise ValueError(f"invalid tail {tail!r}")
        return int(tail, 10)
    except ValueError:
        log.warning(
            "Could not parse last two digits of regNo: '%s'. Defaulting to 0 (Even).",
            reg_no,
        )
        return 0


def select_query(reg_no: str, log: logging.Logger | None = None) -> str:
    """
    Pick the SQL answer for a registration number.

    Strategy:
    1. Odd last two digits  -> QUERY_ODD
    2. Even last two digits -> QUERY_EVEN (also the fallback for unparsable input)
    """
    log = log or logger
    digits = last_two_digits(reg_no, log)
    log.info("Last two digits of registration number (%s) are %d.", reg_no, digits)

    if digits % 2 != 0:
        log.info("Condition: ODD. Using Query 1.")
        return QUERY_ODD

    log.info("Condition: EVEN. Using Query 2.")
    return QUERY_EVEN
