from numbers import Integral

from indexes.balanced_index import BalancedIndex
from indexes.prefix_index import PrefixIndex
from indexes.term import Term, normalize_name


def _validate_pages(pages):
    """Return `pages` as a list of page numbers, or raise ValueError."""
    if isinstance(pages, Integral):
        pages = [pages]
    else:
        try:
            pages = list(pages)
        except TypeError:
            raise ValueError(f"pages must be an integer or an iterable of integers, got {pages!r}") from None
    if not pages:
        raise ValueError("at least one page is required")
    for p in pages:
        if isinstance(p, bool) or not isinstance(p, Integral):
            raise ValueError(f"page numbers must be integers, got {p!r}")
        if p <= 0:
            raise ValueError(f"page numbers must be positive, got {p}")
    return [int(p) for p in pages]


def _validate_name(name):
    norm = normalize_name(name)
    if not norm:
        raise ValueError("term name must not be blank")
    return norm


class TermDirectory:
    """
    Term index backed by a balanced index and a prefix index.

    All mutations go through this class. The balanced index is updated first
    and owns each `Term`; the prefix index is updated second and stores a
    reference to that same object. Between public calls both indexes hold
    exactly the same set of names.

    Exact lookups and ordered listings read the balanced index; prefix queries
    read the prefix index.
    """

    __slots__ = ("_tree", "_trie")

    def __init__(self):
        self._tree = BalancedIndex()
        self._trie = PrefixIndex()

    def __len__(self):
        return len(self._tree)

    def add_term(self, name, pages):
        """Add `pages` (one page or an iterable of pages) to the term `name`.

        Creates the term if needed. Raises ValueError for a blank name or an
        invalid page before anything is stored. Returns the stored `Term`.
        """
        norm = _validate_name(name)
        pages = _validate_pages(pages)

        term = self._tree.search(norm)
        if term is not None:
            term.add_pages(pages)
            return term

        term = Term(norm, pages)
        self._tree.insert(term)
        self._trie.insert(term)
        return term

    def get_term(self, name):
        return self._tree.search(normalize_name(name))

    def remove_term(self, name):
        """Remove `name` from both indexes; False if it is not stored."""
        norm = normalize_name(name)
        if not self._tree.delete(norm):
            return False
        self._trie.delete(norm)
        return True

    def remove_page_from_term(self, page, name):
        """Remove one page from a term, dropping the term once it has no pages.

        Returns False if the term does not exist or was not on `page`.
        """
        norm = normalize_name(name)
        term = self._tree.search(norm)
        if term is None or not term.remove_page(page):
            return False
        if term.is_empty():
            self.remove_term(norm)
        return True

    def update_term_name(self, old_name, new_name):
        """Rename a term, merging into `new_name` if that term already exists.

        Returns False if `old_name` is not stored. Raises ValueError for a blank
        `new_name` without touching the index.
        """
        new_norm = _validate_name(new_name)
        term = self._tree.search(normalize_name(old_name))
        if term is None:
            return False

        pages = set(term.pages)
        self.remove_term(term.name)
        self.add_term(new_norm, pages)
        return True

    def get_terms_with_prefix(self, prefix):
        return self._trie.search_by_prefix(normalize_name(prefix))

    def get_most_frequent_term(self):
        """Term with the most pages; ties go to the alphabetically first term."""
        best = None
        for term in self._tree.in_order():
            if best is None or term.page_count > best.page_count:
                best = term
        return best

    def get_all_terms(self):
        return self._tree.in_order()

    def is_empty(self):
        return self._tree.is_empty()

    def clear(self):
        self._tree = BalancedIndex()
        self._trie.clear()
