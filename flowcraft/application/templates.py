"""Built-in diagram templates. Static catalog."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    description: str
    content: str
    category: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "content": self.content,
            "category": self.category,
        }


TEMPLATES = (
    Template(
        id="flowchart-basic",
        name="Basic Flowchart",
        description="A simple flowchart template",
        category="Flowchart",
        content=(
            "flowchart TD\n"
            "    A[Start] --> B{Decision?}\n"
            "    B -->|Yes| C[Process 1]\n"
            "    B -->|No| D[Process 2]\n"
            "    C --> E[End]\n"
            "    D --> E"
        ),
    ),
    Template(
        id="sequence-basic",
        name="Basic Sequence Diagram",
        description="A simple sequence diagram template",
        category="Sequence",
        content=(
            "sequenceDiagram\n"
            "    participant A as Alice\n"
            "    participant B as Bob\n"
            "    A->>B: Hello Bob, how are you?\n"
            "    B-->>A: Great!"
        ),
    ),
    Template(
        id="class-basic",
        name="Basic Class Diagram",
        description="A simple class diagram template",
        category="Class",
        content=(
            "classDiagram\n"
            "    class Animal {\n"
            "        +String name\n"
            "        +int age\n"
            "        +makeSound()\n"
            "    }\n"
            "    class Dog {\n"
            "        +String breed\n"
            "        +bark()\n"
            "    }\n"
            "    Animal <|-- Dog"
        ),
    ),
    Template(
        id="state-basic",
        name="Basic State Diagram",
        description="A simple state diagram template",
        category="State",
        content=(
            "stateDiagram-v2\n"
            "    [*] --> Still\n"
            "    Still --> [*]\n"
            "    Still --> Moving\n"
            "    Moving --> Still\n"
            "    Moving --> Crash\n"
            "    Crash --> [*]"
        ),
    ),
    Template(
        id="gantt-basic",
        name="Basic Gantt Chart",
        description="A simple gantt chart template",
        category="Gantt",
        content=(
            "gantt\n"
            "    title A Gantt Diagram\n"
            "    dateFormat  YYYY-MM-DD\n"
            "    section Section\n"
            "    A task           :a1, 2014-01-01, 30d\n"
            "    Another task     :after a1  , 20d\n"
            "    section Another\n"
            "    Task in sec      :2014-01-12  , 12d\n"
            "    another task      : 24d"
        ),
    ),
    Template(
        id="pie-basic",
        name="Basic Pie Chart",
        description="A simple pie chart template",
        category="Pie",
        content=(
            "pie title Sample Pie Chart\n"
            '    "Dogs" : 386\n'
            '    "Cats" : 85\n'
            '    "Birds" : 15'
        ),
    ),
)


def list_templates() -> List[Template]:
    return list(TEMPLATES)


def get_template(template_id: str) -> Optional[Template]:
    for t in TEMPLATES:
        if t.id == template_id:
            return t
    return None
