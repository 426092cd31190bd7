"""Tests for the JSON importer and serializer."""

import json
import logging

import pytest

from shapegraph.shared.exceptions import (
    DiagramImportError,
    DuplicateResourceIdError,
    ExportError,
    MalformedGeometryError,
    UnresolvedReferenceError,
)
from shapegraph.shared.models import Diagram, Point
from shapegraph.services.json_io import DiagramBuilder


class TestBuilder:
    def test_root_becomes_the_diagram(self, diagram):
        assert isinstance(diagram, Diagram)
        assert diagram.resource_id == "oryx-canvas123"
        assert diagram.stencil_id == "BPMNDiagram"
        assert diagram.stencilset.url == "/stencilsets/bpmn1.1/bpmn1.1.json"
        assert diagram.stencilset.namespace == "http://b3mn.org/stencilset/bpmn1.1#"
        assert diagram.width == 1485

    def test_all_shapes_are_registered(self, diagram):
        assert len(diagram) == 6
        assert [s.resource_id for s in diagram.iter_shapes()] == [
            "task1", "flow1", "lane1", "task2", "assoc1", "note1",
        ]

    def test_children_get_their_parent(self, diagram):
        task2 = diagram.get_shape("task2")
        lane = diagram.get_shape("lane1")
        assert task2.parent is lane
        assert lane.child_shapes == [task2]
        assert diagram.get_shape("task1").parent is diagram

    def test_outgoing_references_are_mirrored_as_incomings(self, diagram):
        task1 = diagram.get_shape("task1")
        flow1 = diagram.get_shape("flow1")
        task2 = diagram.get_shape("task2")

        assert task1.outgoings == [flow1]
        assert flow1.incomings == [task1]
        assert flow1.outgoings == [task2]
        assert task2.incomings == [flow1]

    def test_references_resolve_to_the_same_instances(self, diagram):
        flow1 = diagram.get_shape("flow1")
        assert flow1.target is diagram.get_shape("task2")
        assert flow1.outgoings[0] is flow1.target

    def test_properties_are_strings(self, diagram):
        assert diagram.get_property("isadhoc") == "false"
        assert json.loads(diagram.get_property("dataproperties")) == {"totalCount": 0, "items": []}
        assert diagram.get_property("documentation") == ""
        assert diagram.get_shape("task1").get_property("mi_ordering") == "Parallel"

    def test_geometry_is_read(self, diagram):
        task1 = diagram.get_shape("task1")
        assert task1.width == 100
        assert task1.height == 80
        assert diagram.get_shape("assoc1").dockers == [Point(10, 20), Point(30, 40.5)]

    def test_glossary_ids_are_read(self, diagram):
        assert diagram.get_shape("task1").glossary_ids == ["gloss-order"]
        assert diagram.get_shape("task2").glossary_ids == []

    def test_shape_without_bounds(self, builder):
        diagram = builder.build({"resourceId": "c", "childShapes": [{"resourceId": "s"}]})
        assert diagram.get_shape("s").bounds is None
        assert diagram.bounds is None

    def test_parse_json_and_parse_file(self, builder, diagram_data, diagram_file):
        from_text = builder.parse_json(json.dumps(diagram_data))
        from_file = builder.parse_file(diagram_file)
        assert len(from_text) == len(from_file) == 6


class TestBuilderErrors:
    def test_invalid_json(self, builder):
        with pytest.raises(DiagramImportError):
            builder.parse_json("{not json")

    def test_payload_must_be_an_object(self, builder):
        with pytest.raises(DiagramImportError):
            builder.build(["resourceId"])

    def test_missing_resource_id(self, builder, diagram_data):
        del diagram_data["childShapes"][0]["resourceId"]
        with pytest.raises(DiagramImportError):
            builder.build(diagram_data)

    def test_duplicate_resource_id(self, builder, diagram_data):
        diagram_data["childShapes"][1]["resourceId"] = "task1"
        with pytest.raises(DuplicateResourceIdError):
            builder.build(diagram_data)

    def test_child_reusing_the_canvas_id(self, builder, diagram_data):
        diagram_data["childShapes"][2]["childShapes"][0]["resourceId"] = "oryx-canvas123"
        with pytest.raises(DuplicateResourceIdError):
            builder.build(diagram_data)

    def test_malformed_bounds(self, builder, diagram_data):
        diagram_data["childShapes"][0]["bounds"] = {"upperLeft": {"x": "left", "y": 0}}
        with pytest.raises(MalformedGeometryError):
            builder.build(diagram_data)

    def test_malformed_docker(self, builder, diagram_data):
        diagram_data["childShapes"][1]["dockers"] = [{"x": 1}]
        with pytest.raises(MalformedGeometryError):
            builder.build(diagram_data)

    def test_invalid_stencil(self, builder, diagram_data):
        diagram_data["childShapes"][0]["stencil"] = {"name": "Task"}
        with pytest.raises(DiagramImportError):
            builder.build(diagram_data)

    def test_unresolved_reference_fails_when_strict(self, builder, diagram_data):
        diagram_data["childShapes"][0]["outgoing"].append({"resourceId": "ghost"})
        with pytest.raises(UnresolvedReferenceError):
            builder.build(diagram_data)

    def test_unresolved_reference_is_skipped_when_lenient(self, diagram_data, caplog):
        diagram_data["childShapes"][0]["outgoing"].append({"resourceId": "ghost"})
        diagram_data["childShapes"][1]["target"] = {"resourceId": "ghost"}

        with caplog.at_level(logging.WARNING, logger="shapegraph"):
            diagram = DiagramBuilder(strict_references=False).build(diagram_data)

        assert [s.resource_id for s in diagram.get_shape("task1").outgoings] == ["flow1"]
        assert diagram.get_shape("flow1").target is None
        assert "ghost" in caplog.text

    def test_strictness_defaults_to_settings(self, monkeypatch):
        monkeypatch.setenv("SHAPEGRAPH_STRICT_REFERENCES", "false")
        assert DiagramBuilder().strict_references is False


class TestSerializer:
    def test_shape_to_dict(self, diagram, serializer):
        data = serializer.shape_to_dict(diagram.get_shape("flow1"))
        assert data["resourceId"] == "flow1"
        assert data["stencil"] == {"id": "SequenceFlow"}
        assert data["outgoing"] == [{"resourceId": "task2"}]
        assert data["target"] == {"resourceId": "task2"}
        assert data["dockers"] == [{"x": 50.0, "y": 40.0}, {"x": 50.0, "y": 40.0}]
        assert data["bounds"]["lowerRight"] == {"x": 300.0, "y": 140.0}
        assert "glossaryIds" not in data

    def test_diagram_keeps_stencilset(self, diagram, serializer):
        data = serializer.to_dict(diagram)
        assert data["stencilset"]["namespace"] == "http://b3mn.org/stencilset/bpmn1.1#"
        assert data["ssextensions"] == []

    def test_import_after_export_preserves_the_graph(self, diagram, builder, serializer):
        reimported = builder.parse_json(serializer.to_json(diagram))

        assert [s.resource_id for s in reimported.iter_shapes()] == [
            s.resource_id for s in diagram.iter_shapes()
        ]
        for original in diagram.iter_shapes():
            copy = reimported.get_shape(original.resource_id)
            assert copy.stencil_id == original.stencil_id
            assert copy.properties == original.properties
            assert copy.bounds == original.bounds
            assert copy.dockers == original.dockers
            assert copy.glossary_ids == original.glossary_ids
            assert copy.outgoings == original.outgoings
            assert copy.incomings == original.incomings
            assert copy.target == original.target
            assert copy.parent == original.parent

    def test_write_file(self, diagram, serializer, tmp_path):
        path = serializer.write_file(diagram, tmp_path / "out" / "diagram.json")
        assert json.loads(path.read_text(encoding="utf-8"))["resourceId"] == "oryx-canvas123"

    def test_write_file_wraps_os_errors(self, diagram, serializer, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(ExportError):
            serializer.write_file(diagram, blocker / "diagram.json")
