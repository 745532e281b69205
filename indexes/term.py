"""
Term entity shared by the balanced index and the prefix index.

A `Term` is a normalized name plus the set of pages it appears on. Both indexes
hold the *same* `Term` object: the balanced index owns it, the prefix index only
references it, so page edits are visible through either one.
"""


def normalize_name(name):
  """Lowercase and strip `name`. Every comparison in the index uses this form."""
  return name.lower().strip()


class Term:
  __slots__ = ("name", "pages")

  def __init__(self, name, pages=()):
    self.name = normalize_name(name)
    self.pages = set(pages)

  def add_page(self, page):
    self.pages.add(page)

  def add_pages(self, pages):
    self.pages.update(pages)

  def remove_page(self, page):
    """Remove `page`; return False if the term was not on that page."""
    if page not in self.pages:
      return False
    self.pages.discard(page)
    return True

  @property
  def page_count(self):
    return len(self.pages)

  def is_empty(self):
    return not self.pages

  def sorted_pages(self):
    return sorted(self.pages)

  def format_line(self):
    """Serialized form, e.g. ``apple: 3, 7``."""
    return f"{self.name}: " + ", ".join(str(p) for p in self.sorted_pages())

  def __eq__(self, other):
    if not isinstance(other, Term):
      return NotImplemented
    return self.name == other.name

  def __hash__(self):
    return hash(self.name)

  def __lt__(self, other):
    return self.name < other.name

  def __repr__(self):
    return f"Term({self.name!r}, {self.sorted_pages()!r})"

  def __str__(self):
    display = self.name[:1].upper() + self.name[1:]
    return f"{display}: " + ", ".join(str(p) for p in self.sorted_pages())
