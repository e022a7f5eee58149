"""Unit tests for the Tree Walker."""

import types

from jsonlens.core.types import NodeKind
from jsonlens.core.values import JsonType
from jsonlens.core.walker import count_levels, count_nodes, walk


class TestWalk:
    def test_is_lazy(self, mixed_doc):
        """walk() returns a generator rather than a list."""
        assert isinstance(walk(mixed_doc), types.GeneratorType)

    def test_preorder_source_order(self, mixed_doc):
        """Records come depth first in document order."""
        ids = [r.node_id for r in walk(mixed_doc)]
        assert ids == [
            "root",
            "root.a",
            "root.b",
            "root.b.0",
            "root.b.1",
            "root.c",
            "root.c.d",
        ]

    def test_record_fields(self, mixed_doc):
        """Each record carries kind, position and value text."""
        records = {r.node_id: r for r in walk(mixed_doc)}

        root = records["root"]
        assert root.kind is NodeKind.ROOT
        assert root.parent_id is None
        assert root.depth == 0
        assert root.child_count == 3
        assert root.key is None

        first = records["root.b.0"]
        assert first.kind is NodeKind.BOOLEAN
        assert first.parent_id == "root.b"
        assert first.depth == 2
        assert first.key == 0
        assert first.label == "[0]"
        assert first.path == "b.0"
        assert first.accessor == "b[0]"
        assert first.sibling_index == 0
        assert not first.is_last_sibling
        assert first.value_text == "true"

        assert records["root.b.1"].kind is NodeKind.NULL
        assert records["root.b.1"].is_last_sibling
        assert records["root.c"].kind is NodeKind.OBJECT
        assert records["root.c.d"].value_text == "x"
        assert records["root.c.d"].accessor == "c.d"

    def test_depth_increases_by_one(self, mixed_doc):
        """Every child sits exactly one level below its parent."""
        records = {r.node_id: r for r in walk(mixed_doc)}
        for record in records.values():
            if record.parent_id is not None:
                assert record.depth == records[record.parent_id].depth + 1

    def test_ids_unique_and_deterministic(self, mixed_doc):
        """Two walks agree and never repeat an id."""
        first = [r.node_id for r in walk(mixed_doc)]
        second = [r.node_id for r in walk(mixed_doc)]
        assert first == second
        assert len(set(first)) == len(first)

    def test_ids_unique_with_confusable_keys(self):
        """Dotted keys and keys beside their nested lookalikes keep distinct ids."""
        doc = {"a.b": 1, "a": {"b": 2}, "x%2Ey": 3, "x.y": 4}
        ids = [r.node_id for r in walk(doc)]
        assert len(set(ids)) == len(ids) == 6

    def test_scalar_root(self):
        """A scalar document is a single leaf record."""
        records = list(walk(42))
        assert len(records) == 1
        assert records[0].kind is NodeKind.NUMBER
        assert records[0].node_id == "root"
        assert records[0].value_text == "42"

    def test_value_text_truncated_without_ellipsis(self):
        """Value text is cut at 50 characters."""
        record = list(walk({"s": "x" * 80}))[1]
        assert record.value_text == "x" * 50

    def test_value_not_serialized(self, mixed_doc):
        """The source value stays out of model dumps."""
        dumped = list(walk(mixed_doc))[0].model_dump()
        assert "value" not in dumped
        assert dumped["value_type"] == JsonType.OBJECT


class TestDepthCeiling:
    def test_default_ceiling_is_ten(self, make_deep):
        """Records stop at depth 10 inclusive."""
        records = list(walk(make_deep(15)))
        assert len(records) == 11
        assert max(r.depth for r in records) == 10

    def test_unbounded(self, make_deep):
        """max_depth=None walks the whole document."""
        records = list(walk(make_deep(15), max_depth=None))
        assert len(records) == 16
        assert records[-1].value_text == "leaf"

    def test_container_at_ceiling_keeps_real_child_count(self, make_deep):
        """A container that is not descended still reports its children."""
        records = list(walk(make_deep(15), max_depth=3))
        assert records[-1].depth == 3
        assert records[-1].child_count == 1


class TestCounts:
    def test_count_levels(self, make_deep):
        """The deepest depth is counted with root = 0 and no ceiling."""
        assert count_levels(1) == 0
        assert count_levels({}) == 0
        assert count_levels({"a": {"b": 1}}) == 2
        assert count_levels(make_deep(15)) == 15

    def test_count_nodes(self, mixed_doc):
        """Every value counts once, root included."""
        assert count_nodes(mixed_doc) == 7
