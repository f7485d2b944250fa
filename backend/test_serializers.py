"""Tests for the workspace JSON document"""

import json

from archmodel import Location, PaperSize, Routing, Shape, WorkspaceBuilder
from archmodel.export import serialize_workspace, workspace_to_json
from archmodel.samples.smart_mobility import build_workspace


def _all_elements(doc: dict) -> list:
    found = list(doc["model"]["people"])
    for system in doc["model"].get("softwareSystems", []):
        found.append(system)
        for container in system.get("containers", []):
            found.append(container)
            found.extend(container.get("components", []))
    return found


def _all_relationships(doc: dict) -> list:
    return [rel for el in _all_elements(doc) for rel in el.get("relationships", [])]


def test_end_to_end_minimal_workspace():
    builder = WorkspaceBuilder("Minimal", "One of everything")
    user = builder.add_person("User", "A customer")
    shop = builder.add_software_system("Shop", "Sells things", location=Location.INTERNAL)
    builder.add_software_system(
        "Payments", "Card processor", location=Location.EXTERNAL, url="https://pay.example.com"
    )
    builder.add_container(shop, "Web", "Storefront", "React")
    builder.add_relationship(user, shop, "Buys from")

    doc = serialize_workspace(builder.build())
    # only uploads carry the workspace id
    assert "id" not in doc
    assert "lastModifiedDate" not in doc

    elements = _all_elements(doc)
    relationships = _all_relationships(doc)
    assert len(elements) == 4
    assert len({el["id"] for el in elements}) == 4
    assert len(relationships) == 1

    rel = relationships[0]
    assert rel["sourceId"] == user.id
    assert rel["destinationId"] == shop.id
    assert rel["description"] == "Buys from"
    assert rel["interactionStyle"] == "Synchronous"
    assert rel["tags"] == "Relationship,Synchronous"
    assert "technology" not in rel

    systems = {s["name"]: s for s in doc["model"]["softwareSystems"]}
    assert systems["Shop"]["location"] == "Internal"
    assert systems["Payments"]["location"] == "External"
    assert systems["Payments"]["url"] == "https://pay.example.com"
    assert systems["Shop"]["containers"][0]["technology"] == "React"
    assert systems["Shop"]["containers"][0]["tags"] == "Element,Container"


def test_views_styles_and_documentation_sections():
    builder = WorkspaceBuilder("Styled", "")
    user = builder.add_person("User", "")
    shop = builder.add_software_system("Shop", "")
    web = builder.add_container(shop, "Web", "", "React")
    builder.add_relationship(user, web, "Uses")
    builder.add_system_landscape_view("Landscape", "Everything")
    builder.add_container_view(shop, "Containers", "", paper_size=PaperSize.A4_LANDSCAPE)
    builder.add_component_view(web, "Components", "")
    builder.add_element_style("Person", shape=Shape.PERSON, font_size=22)
    builder.add_relationship_style("Relationship", routing=Routing.DIRECT, thickness=3)
    builder.add_documentation_section(shop, "Context", "Some *markdown*")

    doc = serialize_workspace(builder.build())
    views = doc["views"]

    landscape = views["systemLandscapeViews"][0]
    assert landscape["enterpriseBoundaryVisible"] is True
    assert "softwareSystemId" not in landscape

    containers = views["containerViews"][0]
    assert containers["softwareSystemId"] == shop.id
    assert containers["paperSize"] == "A4_Landscape"
    assert [e["id"] for e in containers["elements"]] == [user.id, web.id]
    assert len(containers["relationships"]) == 1

    assert views["componentViews"][0]["containerId"] == web.id
    assert views["systemContextViews"] == []

    styles = views["configuration"]["styles"]
    assert styles["elements"] == [{"tag": "Person", "fontSize": 22, "shape": "Person"}]
    assert styles["relationships"] == [{"tag": "Relationship", "thickness": 3, "routing": "Direct"}]

    section = doc["documentation"]["sections"][0]
    assert section == {
        "elementId": shop.id,
        "type": "Context",
        "order": 1,
        "format": "Markdown",
        "content": "Some *markdown*",
    }


def test_sample_workspace_document():
    doc = json.loads(workspace_to_json(build_workspace()))

    assert doc["name"] == "Smart Mobility"
    assert len(doc["model"]["people"]) == 3
    assert len(doc["model"]["softwareSystems"]) == 3
    assert len(_all_elements(doc)) == 12
    assert len(_all_relationships(doc)) == 14

    database = next(el for el in _all_elements(doc) if el["name"] == "Database")
    assert database["tags"] == "Element,Container,Database"

    view_keys = [
        v["key"]
        for kind in ("systemContextViews", "containerViews", "componentViews")
        for v in doc["views"][kind]
    ]
    assert view_keys == ["Context", "Containers", "Components"]
    assert len(doc["documentation"]["sections"]) == 4


def test_string_location_serializes_like_the_enum():
    builder = WorkspaceBuilder("Strings", "")
    builder.add_software_system("Payments", "", location="External")
    builder.add_person("Driver", "", location="internal")

    doc = serialize_workspace(builder.build())

    assert doc["model"]["softwareSystems"][0]["location"] == "External"
    assert doc["model"]["people"][0]["location"] == "Internal"
