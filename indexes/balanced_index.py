"""
Balanced Index: AVL tree of `Term` objects ordered by name.

This is the primary store of the term index. It owns every `Term` object; the
prefix index only keeps references to the objects stored here.

Classes
-------
AVLNode
    Node holding a `Term`, `left` / `right` children and a cached `height`.
BalancedIndex
    Public API: insert-or-merge, exact search, delete with rebalancing and an
    ordered listing.


Complexity
----------
- insert / search / delete: O(log n) comparisons of names
- in_order: O(n)


Conventions & Notes
-------------------
- **Normalization:** The tree compares names verbatim. Callers must pass names
  already normalized with `normalize_name`.
- **Heights:** a leaf has height 1, an absent child has height 0. The balance
  factor of a node is `height(left) - height(right)`; an absent node has
  balance 0.
- **Merging:** inserting a term whose name is already stored merges its pages
  into the stored `Term` and leaves the shape of the tree untouched.
- **Rebalancing rules differ on purpose:**
  - after an insert, the rotation is chosen by comparing the inserted name
    with the child's name;
  - after a delete, the deleted name is gone, so the rotation is chosen by the
    child's own balance factor.
- **Recursion:** insert/delete are recursive and return the new subtree root.
  AVL height stays below ~1.44 log2(n), so depth is never an issue.
"""


class AVLNode:
  __slots__ = ("term", "left", "right", "height")

  def __init__(self, term):
    self.term = term
    self.left = None
    self.right = None
    self.height = 1


def height(node):
  return 0 if node is None else node.height


def balance(node):
  return 0 if node is None else height(node.left) - height(node.right)


def _update_height(node):
  node.height = 1 + max(height(node.left), height(node.right))


def _rotate_right(y):
  x = y.left
  t2 = x.right

  x.right = y
  y.left = t2

  _update_height(y)
  _update_height(x)
  return x


def _rotate_left(x):
  y = x.right
  t2 = y.left

  y.left = x
  x.right = t2

  _update_height(x)
  _update_height(y)
  return y


class BalancedIndex:
  __slots__ = ("root", "_size")

  def __init__(self):
    self.root = None
    self._size = 0

  def __len__(self):
    return self._size

  def is_empty(self):
    return self.root is None

  def insert(self, term):
    """Insert `term`, or merge its pages into the stored term of the same name.

    Parameters
    ----------
    term : Term
        Term whose `name` is already normalized.

    Notes
    -----
    - A new node is only created for a name not yet stored.
    - Every ancestor of a new leaf gets its height recomputed and is rotated
      back into balance on the way up.
    """
    self.root = self._insert(self.root, term)

  def _insert(self, node, term):
    if node is None:
      self._size += 1
      return AVLNode(term)

    if term.name < node.term.name:
      node.left = self._insert(node.left, term)
    elif term.name > node.term.name:
      node.right = self._insert(node.right, term)
    else:
      if node.term is not term:
        node.term.add_pages(term.pages)
      return node

    _update_height(node)
    bf = balance(node)

    # left-left
    if bf > 1 and term.name < node.left.term.name:
      return _rotate_right(node)
    # right-right
    if bf < -1 and term.name > node.right.term.name:
      return _rotate_left(node)
    # left-right
    if bf > 1 and term.name > node.left.term.name:
      node.left = _rotate_left(node.left)
      return _rotate_right(node)
    # right-left
    if bf < -1 and term.name < node.right.term.name:
      node.right = _rotate_right(node.right)
      return _rotate_left(node)

    return node

  def search(self, name):
    """Return the stored `Term` named `name`, or None."""
    node = self.root
    while node is not None:
      if name == node.term.name:
        return node.term
      node = node.left if name < node.term.name else node.right
    return None

  def delete(self, name):
    """Delete the term named `name`.

    Returns
    -------
    bool
        False if no such term is stored (the tree is left unchanged).
    """
    if self.search(name) is None:
      return False
    self.root = self._delete(self.root, name)
    self._size -= 1
    return True

  def _delete(self, node, name):
    if node is None:
      return None

    if name < node.term.name:
      node.left = self._delete(node.left, name)
    elif name > node.term.name:
      node.right = self._delete(node.right, name)
    else:
      if node.left is None or node.right is None:
        node = node.left if node.left is not None else node.right
      else:
        successor = node.right
        while successor.left is not None:
          successor = successor.left
        node.term = successor.term
        node.right = self._delete(node.right, successor.term.name)

    if node is None:
      return None

    _update_height(node)
    bf = balance(node)

    if bf > 1:
      if balance(node.left) < 0:
        node.left = _rotate_left(node.left)
      return _rotate_right(node)
    if bf < -1:
      if balance(node.right) > 0:
        node.right = _rotate_right(node.right)
      return _rotate_left(node)

    return node

  def in_order(self):
    """Return every stored `Term` in ascending name order.

    Iterative traversal with an explicit stack.
    """
    out = []
    stack = []
    node = self.root
    while stack or node is not None:
      while node is not None:
        stack.append(node)
        node = node.left
      node = stack.pop()
      out.append(node.term)
      node = node.right
    return out
