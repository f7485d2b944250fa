import pytest

from archmodel import ModelValidationError, Routing, Shape, Tags
from archmodel.model import Styles


def test_same_tag_merges_last_write_wins():
    styles = Styles()
    styles.add_element_style("Database", background="#111111", shape=Shape.CYLINDER)
    styles.add_element_style("Database", background="#222222", color="#ffffff")

    rule = styles.element_style("Database")
    assert rule.background == "#222222"
    assert rule.color == "#ffffff"
    # not repeated, so kept from the first call
    assert rule.shape == Shape.CYLINDER
    assert len(styles.element_styles) == 1


def test_unused_tag_has_no_rule():
    styles = Styles()
    styles.add_element_style("Database", shape="Cylinder")

    assert styles.element_style("Queue") is None
    assert styles.relationship_style("Database") is None


def test_enum_attributes_accept_strings():
    styles = Styles()
    element = styles.add_element_style("Person", shape="person")
    relationship = styles.add_relationship_style(Tags.RELATIONSHIP, routing="Orthogonal", dashed=False)

    assert element.shape == Shape.PERSON
    assert relationship.routing == Routing.ORTHOGONAL
    assert relationship.dashed is False


def test_bad_attributes_are_rejected():
    styles = Styles()
    with pytest.raises(ModelValidationError):
        styles.add_element_style("Database", colour="#ffffff")
    with pytest.raises(ModelValidationError):
        styles.add_element_style("Database", shape="Trapezoid")
    with pytest.raises(ModelValidationError):
        styles.add_relationship_style("", thickness=2)


def test_resolve_cascades_in_tag_order():
    styles = Styles()
    styles.add_element_style(Tags.ELEMENT, color="#ffffff", font_size=24)
    styles.add_element_style(Tags.CONTAINER, background="#438dd5")
    styles.add_element_style("Database", shape=Shape.CYLINDER, color="#000000")

    resolved = styles.resolve_element([Tags.ELEMENT, Tags.CONTAINER, "Database"])
    assert resolved.background == "#438dd5"
    assert resolved.color == "#000000"
    assert resolved.font_size == 24
    assert resolved.shape == Shape.CYLINDER

    # Rules added later still apply: nothing is baked into elements
    styles.add_element_style("Database", background="#ff0000")
    assert styles.resolve_element([Tags.CONTAINER, "Database"]).background == "#ff0000"
