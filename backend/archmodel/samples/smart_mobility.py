# backend/archmodel/samples/smart_mobility.py
"""
Smart Mobility - real-time ridesharing for students and teachers.

The reference workspace: people, the ridesharing system and the two
external feeds it depends on, its containers and the API's components,
three views, the house style and a documentation section per level.
"""

from archmodel.builder import WorkspaceBuilder
from archmodel.model import (
    Format,
    Location,
    PaperSize,
    Routing,
    SectionType,
    Shape,
    Tags,
    Workspace,
)

DATABASE_TAG = "Database"


def build_workspace() -> Workspace:
    builder = WorkspaceBuilder("Smart Mobility", "Real-time ridesharing service.")

    # ---- People & systems ----

    driver = builder.add_person("Driver user", "A user (student/teacher) that wants to share his trip.")
    passenger = builder.add_person("Passenger user", "A user (student/teacher) that wants to travel.")
    admin = builder.add_person("Administrator user", "A system administrator user.")

    system = builder.add_software_system("Software System", "A real-time ride sharing service")
    builder.uses(driver, system, "Registers trips")
    builder.uses(passenger, system, "Finds travel plans and registers trip")
    builder.uses(admin, system, "Monitors the system.")

    transport = builder.add_software_system(
        "Public transport API",
        "Returns buss and train information.",
        location=Location.EXTERNAL,
    )
    builder.uses(system, transport, "Fetches public transportation from")

    sas = builder.add_software_system(
        "SAS Rooster",
        "Contains the calendar of a student/teacher",
        location=Location.EXTERNAL,
    )
    builder.uses(system, sas, "Fetches the appointments/classes using a webcal feed from")

    # ---- Containers ----

    mobile_app = builder.add_container(
        system,
        "Smart Mobility mobile APP",
        "The Smart Mobility mobile APP allows users to interface the Smart Mobility API on their mobile phones.",
        "Android React app",
    )
    api = builder.add_container(
        system,
        "Smart Mobility API",
        "The Smart Mobility mobile APP allows users to register trips, plan/register for travel plans and monitor the total system.",
        "Spring MVC on Apache Tomcat",
    )
    database = builder.add_container(
        system, "Database", "Stores interesting data.", "MySQL", tags=[DATABASE_TAG]
    )

    builder.uses(driver, mobile_app, "Registers trips")
    builder.uses(passenger, mobile_app, "Finds travel plans and registers trip")
    builder.uses(admin, mobile_app, "Monitors the system.")
    builder.uses(mobile_app, api, "Uses", "HTTPS")
    builder.uses(api, database, "Reads from and writes to", "JDBC")

    # ---- Components ----

    controller = builder.add_component(
        api, "Some Controller", "A description of some controller.", "Spring MVC RestController"
    )
    service = builder.add_component(
        api, "Some Service", "A description of some service.", "Spring Bean"
    )
    repository = builder.add_component(
        api, "Some Repository", "A description of some repository.", "Spring Data"
    )

    builder.uses(mobile_app, controller, "Uses", "JSON/HTTPS")
    builder.uses(controller, service, "Uses")
    builder.uses(service, repository, "Uses")
    builder.uses(repository, database, "Reads to and writes from", "JDBC")

    # ---- Views ----

    builder.add_system_context_view(
        system, "Context", "System context diagram for the Smart Mobility project.",
        paper_size=PaperSize.A5_LANDSCAPE,
    )
    builder.add_container_view(
        system, "Containers", "Container diagram for the Smart Mobility project.",
        paper_size=PaperSize.A5_LANDSCAPE,
    )
    builder.add_component_view(
        api, "Components", "Components diagram for the Smart Mobility project.",
        paper_size=PaperSize.A5_LANDSCAPE,
    )

    # ---- Styles ----

    builder.add_element_style(Tags.ELEMENT, color="#ffffff", width=650, height=400, font_size=36)
    builder.add_element_style(Tags.SOFTWARE_SYSTEM, background="#1168bd")
    builder.add_element_style(Tags.CONTAINER, background="#438dd5")
    builder.add_element_style(Tags.COMPONENT, background="#85bbf0", color="#000000")
    builder.add_relationship_style(
        Tags.RELATIONSHIP, thickness=5, routing=Routing.DIRECT, font_size=32, width=400
    )
    builder.add_element_style(Tags.PERSON, background="#08427b", width=550, shape=Shape.PERSON)
    builder.add_element_style(DATABASE_TAG, shape=Shape.CYLINDER)

    # ---- Documentation ----

    builder.add_documentation_section(
        system, SectionType.CONTEXT,
        "Here is some context about the software system...\n\n![](embed:Context)",
    )
    builder.add_documentation_section(
        system, SectionType.CONTAINERS,
        "Here is some information about the containers...\n\n![](embed:Containers)",
    )
    builder.add_documentation_section(
        api, SectionType.COMPONENTS,
        "Here is some information about the Backend for Frontend...\n\n![](embed:Components)",
    )
    builder.add_documentation_section(
        controller, SectionType.CODE,
        "Here is some information about the SomeController component...",
        format=Format.MARKDOWN,
    )

    return builder.build()
