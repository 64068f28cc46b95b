"""Tests for the relationship resolver.

Covers: pluralization, symbol association multiplicities, the label-crossing
rule of labeled associations, unknown classes and duplicate handling.
"""
from __future__ import annotations

import pytest

from uml_entities.class_diagram.parser import parse_class_diagram
from uml_entities.class_diagram.resolver import pluralize, resolve_relationships
from uml_entities.class_diagram.types import SkippedLine

CLASSES = (
    "class Customer {\n  + name: String\n}\n"
    "class Tour {\n}\n"
    "class Agency {\n}\n"
)


def resolve(text: str):
    return resolve_relationships(parse_class_diagram(text))


def navs(registry, name: str) -> list[tuple[str, str, bool]]:
    return [(r.name, r.target, r.is_collection) for r in registry.get(name).relationships]


# ============================================================================
# Pluralization
# ============================================================================


class TestPluralize:
    @pytest.mark.parametrize(
        "singular, plural",
        [
            ("Company", "Companies"),
            ("Bus", "Buses"),
            ("Customer", "Customers"),
            ("Activity", "Activities"),
            ("Tour", "Tours"),
            ("Address", "Addresses"),
            ("Day", "Daies"),
        ],
    )
    def test_heuristic(self, singular: str, plural: str):
        assert pluralize(singular) == plural

    def test_empty_string(self):
        assert pluralize("") == ""


# ============================================================================
# Symbol associations
# ============================================================================


class TestSymbolAssociations:
    def test_plain_association_gives_collections_on_both_sides(self):
        r = resolve(CLASSES + "Customer -- Tour : makes reservation >")
        assert navs(r, "Customer") == [("Tours", "Tour", True)]
        assert navs(r, "Tour") == [("Customers", "Customer", True)]

    @pytest.mark.parametrize("op", ["o--", "*--"])
    def test_left_adornment_puts_the_collection_on_the_left(self, op: str):
        r = resolve(CLASSES + f"Agency {op} Tour")
        assert navs(r, "Agency") == [("Tours", "Tour", True)]
        assert navs(r, "Tour") == [("Agency", "Agency", False)]

    @pytest.mark.parametrize("op", ["--o", "--*"])
    def test_right_adornment_puts_the_collection_on_the_right(self, op: str):
        r = resolve(CLASSES + f"Tour {op} Agency")
        assert navs(r, "Tour") == [("Agency", "Agency", False)]
        assert navs(r, "Agency") == [("Tours", "Tour", True)]

    def test_collection_names_are_pluralized(self):
        r = resolve("class Company {\n}\nclass Bus {\n}\nCompany -- Bus")
        assert navs(r, "Company") == [("Buses", "Bus", True)]
        assert navs(r, "Bus") == [("Companies", "Company", True)]

    def test_self_association(self):
        r = resolve("class Tour {\n}\nTour o-- Tour")
        assert navs(r, "Tour") == [("Tours", "Tour", True), ("Tour", "Tour", False)]


# ============================================================================
# Labeled associations
# ============================================================================


class TestLabeledAssociations:
    def test_labels_cross_over_to_the_other_end(self):
        r = resolve(
            "class Customer {\n}\nclass CustomerTour {\n}\n"
            'CustomerTour "* CustomerTours" <--> "CustomerAtTour" Customer'
        )
        assert navs(r, "CustomerTour") == [("CustomerAtTour", "Customer", False)]
        assert navs(r, "Customer") == [("CustomerTours", "CustomerTour", True)]

    def test_each_property_is_sized_by_its_own_label(self):
        r = resolve(CLASSES + 'Customer "Buyer" <--> "*Bookings" Tour')
        assert navs(r, "Customer") == [("Bookings", "Tour", True)]
        assert navs(r, "Tour") == [("Buyer", "Customer", False)]

    def test_labels_are_not_pluralized(self):
        r = resolve(CLASSES + 'Customer "*Client" <--> "*Trip" Tour')
        assert navs(r, "Customer") == [("Trip", "Tour", True)]
        assert navs(r, "Tour") == [("Client", "Customer", True)]


# ============================================================================
# Resolution rules
# ============================================================================


class TestResolution:
    def test_unknown_class_drops_the_line(self):
        r = resolve(CLASSES + "Customer -- Ghost\nGhost o-- Tour\n" + 'Ghost "a" <--> "b" Tour')
        assert all(not cls.relationships for cls in r)

    def test_unknown_class_is_reported(self):
        found: list[SkippedLine] = []
        resolve_relationships(parse_class_diagram(CLASSES + "Customer -- Ghost"), found.append)
        assert found == [SkippedLine(line=8, text="Customer -- Ghost", reason="unknown_class")]

    def test_association_before_class_definitions(self):
        r = resolve("Customer -- Tour\n" + CLASSES)
        assert navs(r, "Customer") == [("Tours", "Tour", True)]

    def test_repeated_lines_are_not_deduplicated(self):
        r = resolve(CLASSES + "Customer -- Tour\n" * 3)
        assert len(r.get("Customer").relationships) == 3
        assert len(r.get("Tour").relationships) == 3

    def test_properties_follow_association_order(self):
        r = resolve(CLASSES + "Customer -- Tour\nAgency o-- Customer\nCustomer --* Agency")
        assert [n for n, _, _ in navs(r, "Customer")] == ["Tours", "Agency", "Agency"]

    def test_later_class_with_same_name_wins(self):
        r = resolve("class A {\n+ x: int\n}\nclass B {\n}\nclass A {\n+ y: int\n}\nA -- B")
        assert r.names() == ["A", "B"]
        assert [a.name for a in r.get("A").attributes] == ["y"]
        assert navs(r, "A") == [("Bs", "B", True)]

    def test_no_associations_leaves_relationships_empty(self):
        r = resolve(CLASSES)
        assert len(r) == 3
        assert all(cls.relationships == [] for cls in r)
