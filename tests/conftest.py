"""Shared pytest fixtures for shapegraph tests."""

import copy
import json

import pytest

from shapegraph.shared.config.settings import get_settings
from shapegraph.services.json_io import DiagramBuilder, DiagramSerializer


SAMPLE_DIAGRAM = {
    "resourceId": "oryx-canvas123",
    "properties": {
        "name": "Order handling",
        "isadhoc": False,
        "dataproperties": {"totalCount": 0, "items": []},
        "documentation": None,
    },
    "stencil": {"id": "BPMNDiagram"},
    "stencilset": {
        "url": "/stencilsets/bpmn1.1/bpmn1.1.json",
        "namespace": "http://b3mn.org/stencilset/bpmn1.1#",
    },
    "ssextensions": [],
    "bounds": {"upperLeft": {"x": 0, "y": 0}, "lowerRight": {"x": 1485, "y": 1050}},
    "childShapes": [
        {
            "resourceId": "task1",
            "properties": {
                "name": "Review order",
                "looptype": "MultiInstance",
                "mi_condition": "items.size()",
                "mi_ordering": "Parallel",
                "mi_flowcondition": "All",
                "loopcounter": "3",
                "complex_micondition": "",
            },
            "stencil": {"id": "Task"},
            "childShapes": [],
            "outgoing": [{"resourceId": "flow1"}],
            "bounds": {"upperLeft": {"x": 100, "y": 100}, "lowerRight": {"x": 200, "y": 180}},
            "glossaryIds": ["gloss-order"],
        },
        {
            "resourceId": "flow1",
            "properties": {"conditiontype": "None"},
            "stencil": {"id": "SequenceFlow"},
            "childShapes": [],
            "outgoing": [{"resourceId": "task2"}],
            "target": {"resourceId": "task2"},
            "bounds": {"upperLeft": {"x": 200, "y": 140}, "lowerRight": {"x": 300, "y": 140}},
            "dockers": [{"x": 50, "y": 40}, {"x": 50, "y": 40}],
        },
        {
            "resourceId": "lane1",
            "properties": {"name": "Clerk"},
            "stencil": {"id": "Lane"},
            "bounds": {"upperLeft": {"x": 280, "y": 60}, "lowerRight": {"x": 600, "y": 300}},
            "childShapes": [
                {
                    "resourceId": "task2",
                    "properties": {"name": "Approve order", "looptype": "Standard"},
                    "stencil": {"id": "Task"},
                    "childShapes": [],
                    "outgoing": [{"resourceId": "assoc1"}],
                    "bounds": {"upperLeft": {"x": 20, "y": 40}, "lowerRight": {"x": 120, "y": 120}},
                }
            ],
            "outgoing": [],
        },
        {
            "resourceId": "assoc1",
            "properties": {"direction": "To"},
            "stencil": {"id": "Association_Unidirectional"},
            "childShapes": [],
            "outgoing": [{"resourceId": "note1"}],
            "target": {"resourceId": "note1"},
            "bounds": {"upperLeft": {"x": 400, "y": 200}, "lowerRight": {"x": 450, "y": 260}},
            "dockers": [{"x": 10, "y": 20}, {"x": 30, "y": 40.5}],
        },
        {
            "resourceId": "note1",
            "properties": {"text": "Needs manager sign-off"},
            "stencil": {"id": "TextAnnotation"},
            "childShapes": [],
            "outgoing": [],
            "bounds": {"upperLeft": {"x": 450, "y": 260}, "lowerRight": {"x": 550, "y": 310}},
        },
    ],
}


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def diagram_data():
    """A fresh copy of the sample diagram description."""
    return copy.deepcopy(SAMPLE_DIAGRAM)


@pytest.fixture
def diagram_file(tmp_path, diagram_data):
    """The sample diagram written to a JSON file."""
    path = tmp_path / "diagram.json"
    path.write_text(json.dumps(diagram_data), encoding="utf-8")
    return path


@pytest.fixture
def builder():
    return DiagramBuilder(strict_references=True)


@pytest.fixture
def serializer():
    return DiagramSerializer(indent=2)


@pytest.fixture
def diagram(builder, diagram_data):
    """The sample diagram, imported."""
    return builder.build(diagram_data)
