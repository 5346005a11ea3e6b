"""Linked binary trees and their depth-first traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def insert_left(self, value: Any) -> TreeNode:
        """Attach a new left child holding ``value`` and return it."""
        self.left = TreeNode(value)
        return self.left

    def insert_right(self, value: Any) -> TreeNode:
        """Attach a new right child holding ``value`` and return it."""
        self.right = TreeNode(value)
        return self.right


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values root first, then the left and right subtrees."""
    return list(_preorder(root))


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values of the left subtree, the root, then the right subtree."""
    return list(_inorder(root))


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values of both subtrees before the root."""
    return list(_postorder(root))