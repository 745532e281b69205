"""
Prefix Index: character-per-edge trie over term names.

Secondary index of the term directory. Each terminal node holds a reference to
the `Term` object owned by the balanced index (never a copy), so a prefix query
returns the live terms with their current pages.

Classes
-------
PrefixNode
    Minimal node holding `children` (dict[str, PrefixNode] or None),
    `is_terminal` and `term`.
PrefixIndex
    Public API for insert, delete with pruning, exact search and prefix
    enumeration.


Complexity (typical)
--------------------
- insert / search / delete: O(L) where L = len(name)
- enumerate prefix: O(L + size of the subtree under the prefix)


Conventions & Notes
-------------------
- **Normalization:** names and prefixes are walked verbatim; the directory
  normalizes them before calling in.
- **Children:** `children` is `None` for leaves; the dict is created with the
  first child and dropped again when pruning empties it.
- **Enumeration order:** children are visited in ascending character order, so
  results come out in ascending name order.
- **Deletion semantics:** a present name is unmarked, then nodes are pruned
  upward until reaching a terminal node or a node with remaining children.
  A missing name leaves the trie untouched.
- **Iterative traversals:** no recursion, as names may be long.
"""


class PrefixNode:
  __slots__ = ("children", "is_terminal", "term")

  def __init__(self):
    self.children = None
    self.is_terminal = False
    self.term = None


class PrefixIndex:
  __slots__ = ("root", )

  def __init__(self):
    self.root = PrefixNode()

  def clear(self):
    self.root = PrefixNode()

  def insert(self, term):
    """Insert `term` under its name.

    Notes
    -----
    - Only missing nodes along the path are created.
    - The terminal node stores `term` itself, not a copy.

    Complexity
    ----------
    O(L) time, O(new_nodes) space where L = len(term.name).
    """
    node = self.root

    for ch in term.name:
      children = node.children
      nxt = None if children is None else children.get(ch)
      if nxt is None:
        nxt = PrefixNode()
        if children is None:
          node.children = {ch: nxt}
        else:
          children[ch] = nxt
      node = nxt
    node.is_terminal = True
    node.term = term

  def delete(self, name):
    """Delete `name` and prune the branch it leaves behind.

    Strategy
    --------
    - Descend by character, recording the path.
    - If the path is missing or the last node is not terminal, report False.
    - Otherwise unset `is_terminal` / `term`, then walk back up removing each
      edge whose child is non-terminal and childless.

    Returns
    -------
    bool
        True if `name` was stored.
    """
    path_nodes = [self.root]
    node = self.root
    for ch in name:
      children = node.children
      node = None if children is None else children.get(ch)
      if node is None:
        return False
      path_nodes.append(node)

    if not node.is_terminal:
      return False

    node.is_terminal = False
    node.term = None

    idx = len(path_nodes) - 1
    while idx > 0:
      cur = path_nodes[idx]
      if cur.is_terminal or cur.children:
        break

      parent = path_nodes[idx - 1]
      del parent.children[name[idx - 1]]
      if not parent.children:
        parent.children = None
      idx -= 1
    return True

  def prefix_node(self, prefix):
    """Return the node at the end of `prefix`, or None if the path is missing."""
    node = self.root
    for ch in prefix:
      node = None if node.children is None else node.children.get(ch)
      if node is None:
        return None
    return node

  def search(self, name):
    """Return the `Term` stored under exactly `name`, or None."""
    node = self.prefix_node(name)
    return node.term if node is not None and node.is_terminal else None

  def enumerate_prefix(self, prefix, k=None):
    """Yield terms whose name starts with `prefix` using an iterative DFS.

    Parameters
    ----------
    prefix : str
        The prefix to enumerate from. Use "" to export the entire index.
    k : int | None, default=None
        If None, yield all matches; otherwise, yield up to `k` matches.

    Yields
    ------
    Term
        Stored terms, in ascending name order.
    """
    node = self.prefix_node(prefix)
    if node is None:
      return
    if k is not None and k <= 0:
      return

    yielded = 0
    stack = [node]
    while stack:
      n = stack.pop()
      if n.is_terminal:
        yield n.term
        yielded += 1
        if k is not None and yielded >= k:
          return
      if n.children:
        # reversed so the smallest character is popped first
        stack.extend(n.children[ch] for ch in sorted(n.children, reverse=True))

  def search_by_prefix(self, prefix):
    """Return every stored term whose name starts with `prefix` (may be empty)."""
    return list(self.enumerate_prefix(prefix))

  def count_nodes(self):
    """Return the total node count, root included.

    Complexity
    ----------
    O(#nodes) time, O(depth) extra space.
    """
    total_nodes = 0
    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      if node.children:
        stack.extend(node.children.values())
    return total_nodes
