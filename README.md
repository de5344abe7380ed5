# bstkit

Small, dependency-free tools for binary search trees of integers: building
trees, walking them in order, answering ordered queries, and repairing or
checking them.

## Installation

```
pip install bstkit
```

To run the tests:

```
pip install "bstkit[test]"
pytest
```

## Building trees

`bstkit.node` holds the `TreeNode` dataclass (`val`, `left`, `right`) and the
basic builders.

```python
from bstkit.node import TreeNode, build, insert, inorder, size

root = build([7, 3, 15, 9, 20])
root = insert(root, 12)
print(list(inorder(root)))   # [3, 7, 9, 12, 15, 20]
print(size(root))            # 6
```

`insert` puts a value equal to a node's value into that node's right subtree.
`build` returns `None` for an empty input, and `inorder` is a generator.

## Iterating

`BSTIterator` walks a tree lazily with a stack: ascending by default,
descending when `reverse` is true. It is a normal Python iterator and also
offers `has_next()`.

```python
from bstkit.iterator import BSTIterator

print(list(BSTIterator(root)))                # [3, 7, 9, 12, 15, 20]
print(list(BSTIterator(root, reverse=True)))  # [20, 15, 12, 9, 7, 3]
```

## Queries

```python
from bstkit.queries import (
    search, ceil, floor, predecessor, successor, neighbours,
    lowest_common_ancestor, kth_smallest, kth_largest, two_sum,
)

search(root, 9)                      # the node holding 9, or None
ceil(root, 10)                       # 12: smallest value >= 10
floor(root, 10)                      # 9: largest value <= 10
neighbours(root, 9)                  # (7, 12): (predecessor, successor)
lowest_common_ancestor(root, 3, 9)   # the node holding 7
kth_smallest(root, 2)                # 7
kth_largest(root, 2)                 # 15
two_sum(root, 16)                    # True: 7 + 9
```

`ceil`, `floor`, `predecessor` and `successor` return `None` when no such
value exists. `kth_smallest` and `kth_largest` count from 1 and raise
`IndexError` when `k` is below 1 or larger than the tree. `two_sum` only
pairs two different nodes.

## Transforms and checks

```python
from bstkit.node import TreeNode, build, inorder
from bstkit.transforms import (
    delete_node, from_preorder, recover, largest_bst_size, is_valid,
)

tree = from_preorder([5, 2, 1, 3, 4, 7, 6, 8])
tree = delete_node(tree, 5)
print(list(inorder(tree)))   # [1, 2, 3, 4, 6, 7, 8]
is_valid(tree)               # True

swapped = build([5, 3, 8])
swapped.left.val, swapped.right.val = 8, 3
recover(swapped)
print(list(inorder(swapped)))  # [3, 5, 8]

mixed = TreeNode(5,
                 TreeNode(2, TreeNode(1), TreeNode(3, right=TreeNode(0))),
                 TreeNode(7, TreeNode(6), TreeNode(8)))
largest_bst_size(mixed)      # 3
```

- `delete_node` removes the first node holding the key and hangs its right
  subtree under the rightmost node of its left subtree; a tree without the key
  comes back unchanged.
- `from_preorder` rebuilds a tree from its pre-order sequence.
- `recover` swaps back two values that were exchanged, in place, and raises
  `ValueError` if the tree is already in order.
- `largest_bst_size` counts the nodes of the largest subtree that is a valid
  binary search tree.
- `is_valid` checks that every value lies strictly between its ancestors'
  bounds, so duplicate values make a tree invalid.

## What it does not do

bstkit is a library only: it has no command-line tool, does not balance
trees, and does not save or load trees.