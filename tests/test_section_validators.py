"""Tests for the section order invariant."""

import pytest

from utils.sections.models import Section
from utils.sections.validators import (
    DUPLICATE_ORDER_MESSAGE, next_default_order, used_orders,
    validate_section_form, validate_section_order
)


def make_sections(*orders):
    return [Section(id=f"s{o}", title=f"Section {o}", order=o) for o in orders]


def test_new_section_with_taken_order_conflicts():
    check = validate_section_order(2, make_sections(1, 2, 3), editing_id=None)

    assert check.conflict
    assert not check.ok
    assert check.message == DUPLICATE_ORDER_MESSAGE


def test_section_keeping_its_own_order_is_ok():
    assert validate_section_order(2, make_sections(1, 2, 3), editing_id="s2").ok


def test_edited_section_cannot_take_another_order():
    assert validate_section_order(3, make_sections(1, 2, 3), editing_id="s2").conflict


def test_gaps_are_allowed():
    assert validate_section_order(10, make_sections(0, 5, 7)).ok


def test_used_orders_excludes_editing_section():
    sections = make_sections(1, 2, 3)
    assert used_orders(sections) == {1, 2, 3}
    assert used_orders(sections, "s2") == {1, 3}


@pytest.mark.parametrize("orders,expected", [
    ((0, 5, 7), 8),
    ((), 1),
    ((0,), 1),
    ((3, 1), 4),
])
def test_next_default_order(orders, expected):
    assert next_default_order(make_sections(*orders)) == expected


class TestSectionForm:

    def values(self, **overrides):
        values = {"title": "New Arrivals", "order": 4, "product_ids": ["p1"], "active": True}
        values.update(overrides)
        return values

    def test_valid_form(self):
        results = validate_section_form(self.values(), make_sections(1, 2, 3))
        assert results.is_valid
        assert len(results) == 0

    def test_duplicate_order_blocks(self):
        results = validate_section_form(self.values(order=2), make_sections(1, 2, 3))
        assert results.rule_ids() == ["S4"]
        assert not results

    def test_live_and_submit_checks_agree(self):
        sections = make_sections(1, 2, 3)
        for order in range(0, 6):
            for editing_id in (None, "s1", "s2"):
                live = validate_section_order(order, sections, editing_id)
                submit = validate_section_form(self.values(order=order), sections, editing_id)
                assert live.conflict == ("S4" in submit.rule_ids())

    @pytest.mark.parametrize("overrides,rule", [
        ({"title": "   "}, "S1"),
        ({"order": None}, "S2"),
        ({"order": ""}, "S2"),
        ({"order": -1}, "S3"),
    ])
    def test_blocking_rules(self, overrides, rule):
        results = validate_section_form(self.values(**overrides), make_sections(1))
        assert rule in [r.rule_id for r in results.blocks]

    def test_inactive_empty_section_only_warns(self):
        results = validate_section_form(self.values(active=False, product_ids=[]), [])
        assert results.is_valid
        assert [w.rule_id for w in results.warnings] == ["S5"]


@pytest.mark.parametrize("order", ["abc", 2.7, "2.5", True])
def test_non_integer_order_blocks(order):
    results = validate_section_form(
        {"title": "Sale", "order": order, "product_ids": ["p1"], "active": True},
        make_sections(1, 2, 3),
    )
    assert results.rule_ids() == ["S6"]


@pytest.mark.parametrize("order,expected_ok", [("4", True), (4.0, True), (" 2 ", False)])
def test_numeric_text_order_is_checked(order, expected_ok):
    results = validate_section_form(
        {"title": "Sale", "order": order, "product_ids": ["p1"], "active": True},
        make_sections(1, 2, 3),
    )
    assert results.is_valid is expected_ok
