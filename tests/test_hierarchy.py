"""
Unit tests for hierarchy rebuilding and tree view state.
"""

import unittest

from threadexport.core import ExportSession, ExportPreferences, TreeViewState, build_hierarchy, make_snippet
from threadexport.core.hierarchy import parent_id_for
from threadexport.importers import MockImporter
from threadexport.models import CommentRecord


class TestSnippet(unittest.TestCase):
    """Test body truncation."""

    def test_short_body_unchanged(self):
        self.assertEqual(make_snippet("short"), "short")
        self.assertEqual(make_snippet("x" * 80), "x" * 80)

    def test_long_body_truncated(self):
        snippet = make_snippet("y" * 81)
        self.assertEqual(snippet, "y" * 80 + "...")

    def test_deleted_passes_through(self):
        self.assertEqual(make_snippet("[deleted]"), "[deleted]")


class TestBuildHierarchy(unittest.TestCase):
    """Test rebuilding the tree from flat records."""

    def setUp(self):
        importer = MockImporter()
        self.session = ExportSession(ExportPreferences())
        self.session.load(importer.get_post(), importer.get_comments())

    def test_root_and_structure(self):
        root = self.session.hierarchy()

        self.assertEqual(root.id, "root")
        self.assertIsNone(root.parent_id)
        self.assertEqual(root.name, self.session.post.title)
        self.assertEqual([c.id for c in root.children], ["1", "2", "3"])
        self.assertEqual([c.id for c in root.children[0].children], ["1.1", "1.2"])
        self.assertEqual([c.id for c in root.children[0].children[1].children], ["1.2.1"])

    def test_one_node_per_record(self):
        root = self.session.hierarchy()
        nodes = list(root.iter_nodes())

        self.assertEqual(len(nodes), len(self.session.records) + 1)
        for node in nodes:
            if node.is_root:
                continue
            self.assertEqual(node.parent_id, parent_id_for(node.id))
            for child in node.children:
                self.assertEqual(child.parent_id, node.id)

    def test_counts(self):
        root = self.session.hierarchy()
        by_id = {node.id: node for node in root.iter_nodes()}

        self.assertEqual(by_id["1.1"].count, 1)
        self.assertEqual(by_id["1.2.1"].count, 1)
        self.assertEqual(by_id["1.2"].count, 1)
        self.assertEqual(by_id["1"].count, 2)
        self.assertEqual(by_id["2"].count, 1)
        self.assertEqual(root.count, 4)

        for node in by_id.values():
            if node.children:
                self.assertEqual(node.count, sum(c.count for c in node.children))

    def test_independent_of_sort_order(self):
        expected = self.session.hierarchy().to_dict()

        self.session.sort("numbering")
        self.session.sort("numbering")
        rebuilt = self.session.hierarchy()

        # Same nodes, children listed in the current (descending) order
        self.assertEqual([c.id for c in rebuilt.children], ["3", "2", "1"])
        self.assertEqual(
            sorted(n.id for n in rebuilt.iter_nodes()),
            sorted(self._ids(expected)),
        )

    def _ids(self, data):
        yield data["id"]
        for child in data["children"]:
            yield from self._ids(child)

    def test_orphans_are_omitted(self):
        records = [
            CommentRecord(numbering="1", level=1, body="kept"),
            CommentRecord(numbering="4.2", level=2, body="orphan"),
        ]
        root = build_hierarchy(records, "Post")

        self.assertEqual([n.id for n in root.iter_nodes()], ["root", "1"])

    def test_snippet_and_score_on_nodes(self):
        records = [CommentRecord(numbering="1", level=1, body="z" * 100, score=9)]
        node = build_hierarchy(records).children[0]

        self.assertEqual(node.snippet, "z" * 80 + "...")
        self.assertEqual(node.name, node.snippet)
        self.assertEqual(node.score, 9)

    def test_empty_thread(self):
        root = build_hierarchy([], "Nothing here")
        self.assertEqual(root.children, [])
        self.assertEqual(root.count, 1)

    def test_to_dict(self):
        data = self.session.hierarchy().to_dict()

        self.assertEqual(data["id"], "root")
        self.assertEqual(data["children"][0]["parentId"], "root")
        self.assertEqual(data["children"][0]["children"][1]["parentId"], "1")
        self.assertEqual(data["children"][1]["snippet"], "[deleted]")


class TestTreeViewState(unittest.TestCase):
    """Test expand/collapse bookkeeping."""

    def setUp(self):
        importer = MockImporter()
        session = ExportSession(ExportPreferences())
        session.load(importer.get_post(), importer.get_comments())
        self.root = session.hierarchy()
        self.by_id = {node.id: node for node in self.root.iter_nodes()}
        self.view = TreeViewState()

    def test_everything_visible_by_default(self):
        visible = [n.id for n in self.view.visible_nodes(self.root)]
        self.assertEqual(visible, ["root", "1", "1.1", "1.2", "1.2.1", "2", "2.1", "3"])

    def test_toggle_hides_descendants(self):
        self.assertTrue(self.view.toggle("1"))
        visible = [n.id for n in self.view.visible_nodes(self.root)]
        self.assertEqual(visible, ["root", "1", "2", "2.1", "3"])
        self.assertEqual(self.view.hidden_count(self.by_id["1"]), 2)

        self.assertFalse(self.view.toggle("1"))
        self.assertEqual(self.view.hidden_count(self.by_id["1"]), 0)

    def test_leaf_has_no_badge(self):
        self.view.collapse("3")
        self.assertEqual(self.view.hidden_count(self.by_id["3"]), 0)

    def test_collapse_all_and_expand_all(self):
        self.view.collapse_all(self.root)
        self.assertEqual(self.view.collapsed, {"1", "1.2", "2"})
        visible = [n.id for n in self.view.visible_nodes(self.root)]
        self.assertEqual(visible, ["root", "1", "2", "3"])

        self.view.expand("1")
        self.assertFalse(self.view.is_collapsed("1"))

        self.view.expand_all()
        self.assertEqual(len(self.view.visible_nodes(self.root)), 8)


if __name__ == '__main__':
    unittest.main()
