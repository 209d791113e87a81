"""
Generic Tree Tests

Tests for nodes, glob patterns and the generic tree.

Run with: python -m pytest deskfs/tests -v
"""

import unittest

from deskfs.exceptions import (
    MissingArgumentError,
    RootAlreadyExistsError,
    ParentNotFoundError,
    TargetNotFoundError,
)
from deskfs.tree import GenericTree, Node, compile_pattern, matches


def build_sample() -> GenericTree:
    """
    Build:
        ''
        ├── a
        │   ├── a1
        │   └── a2.txt
        └── b
            └── b1.txt
    """
    tree = GenericTree()
    root = tree.insert('')
    a = tree.insert('a', root)
    tree.insert('a1', a)
    tree.insert('a2.txt', a)
    b = tree.insert('b', root)
    tree.insert('b1.txt', b)
    return tree


class TestGlob(unittest.TestCase):
    """Test restricted glob matching."""

    def test_suffix_wildcard_is_anchored(self):
        """A trailing literal must end the key."""
        self.assertTrue(matches('note.txt', '*.txt'))
        self.assertFalse(matches('note.txtx', '*.txt'))

    def test_dot_is_literal(self):
        """'.' only matches a dot."""
        self.assertTrue(matches('a.c', 'a.c'))
        self.assertFalse(matches('abc', 'a.c'))

    def test_other_characters_are_literal(self):
        """Regex metacharacters have no special meaning."""
        self.assertTrue(matches('a?b', 'a?b'))
        self.assertFalse(matches('axb', 'a?b'))
        self.assertTrue(matches('[x]+', '[x]+'))
        self.assertFalse(matches('x', '[x]+'))

    def test_star_matches_empty(self):
        """A lone star matches anything, including the empty key."""
        self.assertTrue(matches('', '*'))
        self.assertTrue(matches('anything', '*'))

    def test_literal_pattern_needs_whole_key(self):
        """Patterns without wildcards match only identical keys."""
        self.assertTrue(matches('docs', 'docs'))
        self.assertFalse(matches('docs2', 'docs'))
        self.assertFalse(matches('mydocs', 'docs'))

    def test_middle_segments_in_order(self):
        """Literal segments between stars must appear in order."""
        self.assertTrue(matches('aXbYc', 'a*b*c'))
        self.assertTrue(matches('abc', 'a*b*c'))
        self.assertFalse(matches('acb', 'a*b*c'))

    def test_overlapping_head_and_tail(self):
        """Head and tail may not share characters."""
        self.assertFalse(matches('a', 'a*a'))
        self.assertTrue(matches('aa', 'a*a'))

    def test_compiled_pattern(self):
        """Compiled patterns expose their segments."""
        pattern = compile_pattern('*.txt')
        self.assertEqual(pattern.segments, ('', '.txt'))
        self.assertFalse(pattern.is_literal)
        self.assertTrue(compile_pattern('docs').is_literal)
        self.assertEqual(str(pattern), '*.txt')


class TestNode(unittest.TestCase):
    """Test node-local operations."""

    def test_attach_and_detach(self):
        """Attaching links both ways; detaching removes the first occurrence."""
        parent = Node(ino=1, key='p')
        child = Node(ino=2, key='c')

        parent.attach(child)
        self.assertEqual(parent.children, [2])
        self.assertEqual(child.parent, 1)

        parent.detach(child)
        self.assertEqual(parent.children, [])
        self.assertIsNone(child.parent)

    def test_identity_equality(self):
        """Nodes compare by identity, not by field values."""
        self.assertNotEqual(Node(ino=1, key='x'), Node(ino=1, key='x'))


class TestInsert(unittest.TestCase):
    """Test inserting nodes."""

    def test_first_insert_sets_root(self):
        """Inserting without a parent creates the root."""
        tree = GenericTree()
        root = tree.insert('', properties={'kind': 'root'})

        self.assertIs(tree.root, root)
        self.assertTrue(root.is_root)
        self.assertIs(tree.get(root.ino), root)
        self.assertIn(root, tree)
        self.assertEqual(root.properties, {'kind': 'root'})

    def test_second_root_rejected(self):
        """A tree has exactly one root."""
        tree = GenericTree()
        tree.insert('')

        with self.assertRaises(RootAlreadyExistsError):
            tree.insert('other')
        self.assertEqual(len(tree), 1)

    def test_missing_key(self):
        """A key is required."""
        tree = GenericTree()
        with self.assertRaises(MissingArgumentError):
            tree.insert(None)

    def test_children_keep_insertion_order(self):
        """New nodes become the last child of their parent."""
        tree = build_sample()
        keys = [child.key for child in tree.children(tree.root)]
        self.assertEqual(keys, ['a', 'b'])

    def test_string_parent_uses_first_match(self):
        """A string parent is searched and the first pre-order match is used."""
        tree = build_sample()
        node = tree.insert('new', '*.txt')

        self.assertEqual(tree.parent(node).key, 'a2.txt')

    def test_string_parent_not_found(self):
        """A string parent that matches nothing fails."""
        tree = build_sample()
        with self.assertRaises(ParentNotFoundError):
            tree.insert('x', 'missing')
        self.assertEqual(len(tree), 6)

    def test_stale_parent_rejected(self):
        """A deleted node cannot receive children."""
        tree = build_sample()
        a = tree.search('a')[0]
        tree.delete(a)

        with self.assertRaises(ParentNotFoundError):
            tree.insert('x', a)


class TestDelete(unittest.TestCase):
    """Test deleting nodes."""

    def test_delete_node_removes_subtree(self):
        """Deleting a node drops it and its descendants."""
        tree = build_sample()
        a = tree.search('a')[0]

        tree.delete(a)

        self.assertEqual([n.key for n in tree.children(tree.root)], ['b'])
        self.assertEqual(tree.search('a*'), [])
        self.assertFalse(tree.contains(a))
        self.assertEqual(len(tree), 3)

    def test_delete_by_pattern_removes_all_matches(self):
        """A string locator deletes every match."""
        tree = build_sample()
        tree.delete('*.txt')

        self.assertEqual([n.key for n in tree.walk()], ['', 'a', 'a1', 'b'])

    def test_delete_nested_matches(self):
        """Matches inside an already deleted match are skipped."""
        tree = build_sample()
        tree.delete('a*')

        self.assertEqual([n.key for n in tree.walk()], ['', 'b', 'b1.txt'])

    def test_delete_root_empties_tree(self):
        """Deleting the root leaves a rootless tree."""
        tree = build_sample()
        tree.delete(tree.root)

        self.assertIsNone(tree.root)
        self.assertEqual(len(tree), 0)
        self.assertEqual(tree.search('*'), [])
        self.assertEqual(tree.traverse(), [])

    def test_root_can_be_inserted_again(self):
        """A rootless tree accepts a new root."""
        tree = build_sample()
        tree.delete(tree.root)
        root = tree.insert('fresh')
        self.assertIs(tree.root, root)

    def test_delete_errors(self):
        """Missing and unmatched locators fail."""
        tree = build_sample()

        with self.assertRaises(MissingArgumentError):
            tree.delete(None)
        with self.assertRaises(TargetNotFoundError):
            tree.delete('nothing')

        a = tree.search('a')[0]
        tree.delete(a)
        with self.assertRaises(TargetNotFoundError):
            tree.delete(a)


class TestSearch(unittest.TestCase):
    """Test search, find and traversal."""

    def test_search_is_pre_order(self):
        """Nodes come before their children, children left to right."""
        tree = build_sample()
        self.assertEqual(
            [n.key for n in tree.search('*')],
            ['', 'a', 'a1', 'a2.txt', 'b', 'b1.txt']
        )

    def test_search_matches_whole_key(self):
        """Search uses the anchored glob rule."""
        tree = build_sample()
        self.assertEqual([n.key for n in tree.search('*.txt')], ['a2.txt', 'b1.txt'])
        self.assertEqual([n.key for n in tree.search('a')], ['a'])

    def test_search_without_pattern(self):
        """A None pattern yields nothing."""
        tree = build_sample()
        self.assertEqual(tree.search(None), [])

    def test_search_subtree(self):
        """Search can start below the root."""
        tree = build_sample()
        b = tree.search('b')[0]
        self.assertEqual([n.key for n in tree.search('*', start=b)], ['b', 'b1.txt'])

    def test_find_is_direct_children_only(self):
        """find() does not descend."""
        tree = build_sample()
        self.assertEqual([n.key for n in tree.find(tree.root, '*')], ['a', 'b'])
        self.assertEqual(tree.find(tree.root, '*.txt'), [])

    def test_child_is_literal(self):
        """child() compares keys exactly."""
        tree = GenericTree()
        root = tree.insert('')
        star = tree.insert('*', root)
        tree.insert('x', root)

        self.assertIs(tree.child(root, '*'), star)
        self.assertIsNone(tree.child(root, 'y'))

    def test_traverse_levels(self):
        """Traversal groups nodes by breadth-first level."""
        tree = build_sample()
        levels = [[n.key for n in level] for level in tree.traverse()]
        self.assertEqual(levels, [[''], ['a', 'b'], ['a1', 'a2.txt', 'b1.txt']])

    def test_ancestry(self):
        """in_subtree covers the node itself and its descendants."""
        tree = build_sample()
        a = tree.search('a')[0]
        a1 = tree.search('a1')[0]
        b = tree.search('b')[0]

        self.assertTrue(tree.in_subtree(a1, a))
        self.assertTrue(tree.in_subtree(a, a))
        self.assertFalse(tree.in_subtree(b, a))
        self.assertEqual([n.key for n in tree.ancestors(a1)], ['a', ''])

    def test_deep_tree_search(self):
        """Search does not recurse, so deep trees are fine."""
        tree = GenericTree()
        node = tree.insert('')
        for depth in range(3000):
            node = tree.insert(f'd{depth}', node)

        self.assertEqual(tree.search('d2999'), [node])
        self.assertEqual(len(tree.traverse()), 3001)


if __name__ == '__main__':
    unittest.main()
