import logging

import pytest

from challenge.selector import QUERY_EVEN, QUERY_ODD, last_two_digits, select_query


@pytest.mark.parametrize("reg_no", ["REG12323", "0101", "AB99", "X11", "REG-3", "1-3", "+5"])
def test_odd_registration_numbers_select_query_one(reg_no):
    assert select_query(reg_no) == QUERY_ODD


@pytest.mark.parametrize("reg_no", ["REG12324", "AB00", "98", "X10"])
def test_even_registration_numbers_select_query_two(reg_no):
    assert select_query(reg_no) == QUERY_EVEN


@pytest.mark.parametrize("reg_no", ["A", "XY", "", "7", "12A", "1 3", "13 ", "-", "+-"])
def test_unparsable_registration_number_falls_back_to_even(reg_no, caplog):
    with caplog.at_level(logging.WARNING, logger="challenge.selector"):
        assert select_query(reg_no) == QUERY_EVEN

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Defaulting to 0" in warnings[0].getMessage()


def test_last_two_digits_ignores_leading_characters():
    assert last_two_digits("REG-2024-07") == 7
    assert last_two_digits("42") == 42


def test_parsable_registration_number_logs_no_warning(caplog):
    with caplog.at_level(logging.WARNING):
        select_query("REG12347")
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_injected_logger_receives_the_fallback_warning(caplog):
    log = logging.getLogger("tests.injected")
    with caplog.at_level(logging.WARNING, logger="tests.injected"):
        last_two_digits("Z", log)
    assert [r.name for r in caplog.records] == ["tests.injected"]


def test_signed_tail_parses_as_an_integer():
    assert last_two_digits("REG-3") == -3
    assert last_two_digits("REG+5") == 5
    assert last_two_digits("REG-4") == -4
