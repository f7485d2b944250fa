"""Tests for WorkspaceBuilder: references, relationships, validation, sealing"""

import pytest

from archmodel import (
    ElementReferenceError,
    InteractionStyle,
    Location,
    ModelValidationError,
    Tags,
    WorkspaceBuilder,
)


def make_builder() -> WorkspaceBuilder:
    return WorkspaceBuilder("Test", "A test workspace")


def test_returned_refs_are_usable_immediately():
    builder = make_builder()
    user = builder.add_person("User", "Someone")
    system = builder.add_software_system("Shop", "Sells things")
    web = builder.add_container(system, "Web", "Storefront", "React", tags=["Frontend"])
    cart = builder.add_component(web, "Cart", "Holds items", "TypeScript")

    builder.add_relationship(user, system, "Browses")
    builder.add_relationship(user, web, "Uses", "HTTPS")
    builder.add_relationship(web, cart, "Renders")
    view = builder.add_component_view(web, "Web", "Web internals", include=[user])

    model = builder.model
    assert len(model.elements) == 4
    assert len(model.relationships) == 3
    assert cart.parent_id == web.id
    assert web.parent_id == system.id
    assert user.id in view.element_ids(model)


def test_ids_are_unique_and_per_model():
    first = make_builder()
    second = make_builder()
    a = first.add_person("A", "")
    b = first.add_person("B", "")
    c = second.add_person("C", "")

    assert a.id != b.id
    # Separate models allocate independently
    assert c.id == a.id
    assert second.model.get(c.id) is c


def test_default_and_custom_tags():
    builder = make_builder()
    system = builder.add_software_system("Shop", "")
    db = builder.add_container(system, "DB", "", "Postgres", tags=["Database", "Database", " "])
    rel = builder.add_relationship(system, db, "Reads", interaction_style=InteractionStyle.ASYNCHRONOUS)

    assert db.tags == [Tags.ELEMENT, Tags.CONTAINER, "Database"]
    assert rel.tags == [Tags.RELATIONSHIP, Tags.ASYNCHRONOUS]
    assert system.location == Location.INTERNAL


def test_unknown_endpoint_fails_and_no_edge_is_added():
    builder = make_builder()
    other = make_builder()
    user = builder.add_person("User", "")
    stranger = other.add_software_system("Elsewhere", "")

    with pytest.raises(ElementReferenceError):
        builder.add_relationship(user, stranger, "Uses")
    with pytest.raises(ElementReferenceError):
        builder.add_relationship(stranger, user, "Uses")
    with pytest.raises(ElementReferenceError):
        builder.add_relationship(user, "999", "Uses")

    assert builder.model.relationships == []


def test_unknown_parent_fails():
    builder = make_builder()
    other = make_builder()
    foreign_system = other.add_software_system("Foreign", "")
    system = builder.add_software_system("Shop", "")
    person = builder.add_person("User", "")

    with pytest.raises(ElementReferenceError):
        builder.add_container(foreign_system, "Web", "", "React")
    with pytest.raises(ElementReferenceError):
        # a person is not a software system
        builder.add_container(person, "Web", "", "React")
    with pytest.raises(ElementReferenceError):
        builder.add_component(system, "Cart", "", "Java")


def test_self_relationship_is_preserved():
    builder = make_builder()
    system = builder.add_software_system("Shop", "")
    rel = builder.add_relationship(system, system, "Retries itself")

    assert rel.is_self_relationship
    assert builder.model.relationships == [rel]
    assert builder.model.outgoing(system.id) == [rel]
    assert builder.model.incoming(system.id) == [rel]


def test_cycles_and_duplicates_are_kept():
    builder = make_builder()
    a = builder.add_software_system("A", "")
    b = builder.add_software_system("B", "")

    ab = builder.add_relationship(a, b, "Calls")
    ba = builder.add_relationship(b, a, "Calls back")
    ab_again = builder.add_relationship(a, b, "Calls")

    rels = builder.model.relationships
    assert rels == [ab, ba, ab_again]
    # No implicit dedup: same source, destination and label, different ids
    assert ab.id != ab_again.id
    assert (ab.source_id, ab.destination_id, ab.description) == (
        ab_again.source_id, ab_again.destination_id, ab_again.description
    )


def test_uses_is_an_alias():
    builder = make_builder()
    user = builder.add_person("User", "")
    system = builder.add_software_system("Shop", "")
    rel = builder.uses(user, system, "Orders", "HTTPS")

    assert rel.technology == "HTTPS"
    assert rel.interaction_style == InteractionStyle.SYNCHRONOUS


@pytest.mark.parametrize("name", ["", "   ", None])
def test_empty_names_are_rejected(name):
    builder = make_builder()
    with pytest.raises(ModelValidationError):
        builder.add_person(name, "")
    with pytest.raises(ModelValidationError):
        builder.add_software_system(name, "")


def test_empty_relationship_label_is_rejected():
    builder = make_builder()
    a = builder.add_person("A", "")
    b = builder.add_software_system("B", "")
    with pytest.raises(ModelValidationError):
        builder.add_relationship(a, b, "")


def test_duplicate_names_are_rejected_within_scope():
    builder = make_builder()
    system = builder.add_software_system("Shop", "")
    other = builder.add_software_system("Warehouse", "")
    builder.add_container(system, "API", "", "Go")
    # Same container name under a different system is fine
    builder.add_container(other, "API", "", "Go")

    with pytest.raises(ModelValidationError):
        builder.add_person("Shop", "")
    with pytest.raises(ModelValidationError):
        builder.add_container(system, "API", "", "Java")


def test_build_seals_the_builder():
    builder = make_builder()
    user = builder.add_person("User", "")
    system = builder.add_software_system("Shop", "")
    workspace = builder.build()

    assert builder.build() is workspace
    assert workspace.model.is_sealed
    with pytest.raises(ModelValidationError):
        builder.add_person("Late", "")
    with pytest.raises(ModelValidationError):
        builder.add_relationship(user, system, "Late")
    with pytest.raises(ModelValidationError):
        builder.add_element_style("Late", background="#000000")
    with pytest.raises(ModelValidationError):
        workspace.model.add_person("Direct", "")

    # styles and documentation reached through the workspace are sealed too
    with pytest.raises(ModelValidationError):
        workspace.styles.add_element_style("Late", background="#000000")
    with pytest.raises(ModelValidationError):
        workspace.styles.add_relationship_style("Late", thickness=2)
    with pytest.raises(ModelValidationError):
        workspace.documentation.add_section(system.id, "Context", "Late")
    assert workspace.styles.element_style("Late") is None
    assert workspace.documentation.sections == ()


def test_documentation_sections():
    builder = make_builder()
    system = builder.add_software_system("Shop", "")
    first = builder.add_documentation_section(system, "Context", "Hello")
    second = builder.add_documentation_section(system, "Containers", "World", format="AsciiDoc")

    assert (first.order, second.order) == (1, 2)
    assert second.format.value == "AsciiDoc"
    assert builder.documentation.sections_for(system.id) == [first, second]

    with pytest.raises(ElementReferenceError):
        builder.add_documentation_section("42", "Context", "Nope")


def test_documentation_rejects_unknown_elements_directly():
    builder = make_builder()
    builder.add_software_system("Shop", "")

    with pytest.raises(ElementReferenceError):
        builder.documentation.add_section("999", "Context", "dangling")
    assert builder.documentation.sections == ()


def test_documentation_format_accepts_names_and_rejects_unknown():
    builder = make_builder()
    system = builder.add_software_system("Shop", "")

    section = builder.add_documentation_section(system, "Context", "x", format="asciidoc")
    assert section.format.value == "AsciiDoc"

    with pytest.raises(ModelValidationError):
        builder.add_documentation_section(system, "Context", "x", format="rst")


def test_location_strings_are_coerced():
    builder = make_builder()
    payments = builder.add_software_system("Payments", "", location="External")
    driver = builder.add_person("Driver", "", location="internal")

    assert payments.location == Location.EXTERNAL
    assert driver.location == Location.INTERNAL

    with pytest.raises(ModelValidationError):
        builder.add_software_system("Billing", "", location="Offshore")
    with pytest.raises(ModelValidationError):
        builder.add_person("Rider", "", location="Nowhere")


def test_interaction_style_strings_are_coerced():
    builder = make_builder()
    source = builder.add_software_system("Source", "")
    sink = builder.add_software_system("Sink", "")

    rel = builder.add_relationship(source, sink, "Publishes to", interaction_style="Asynchronous")
    assert rel.interaction_style == InteractionStyle.ASYNCHRONOUS
    assert rel.tags == [Tags.RELATIONSHIP, Tags.ASYNCHRONOUS]

    with pytest.raises(ModelValidationError):
        builder.add_relationship(source, sink, "Polls", interaction_style="Sometimes")
    # a rejected relationship leaves nothing behind
    assert len(builder.model.relationships) == 1
