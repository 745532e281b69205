import os
import random
import string
import sys
import unittest

# ---------------- Import shim (works from dev_tests/) ----------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from components.term_directory import TermDirectory


def assert_in_sync(tc, directory):
    """Exact lookup and empty-prefix search must see the same Term objects."""
    listed = directory.get_all_terms()
    by_prefix = directory.get_terms_with_prefix("")
    tc.assertEqual([t.name for t in listed], [t.name for t in by_prefix])
    for a, b in zip(listed, by_prefix):
        tc.assertIs(a, b)
        tc.assertIs(directory.get_term(a.name), a)
        tc.assertFalse(a.is_empty())


# ---------------------------------- Tests ----------------------------------
class TestAddTerm(unittest.TestCase):
    def test_single_page_and_page_list(self):
        d = TermDirectory()
        d.add_term("cat", 1)
        d.add_term("cat", [2, 3])
        self.assertEqual(d.get_term("cat").sorted_pages(), [1, 2, 3])
        self.assertEqual(len(d), 1)

    def test_merge_is_idempotent(self):
        d = TermDirectory()
        d.add_term("apple", 3)
        d.add_term("apple", 3)
        self.assertEqual(d.get_term("apple").pages, {3})

    def test_names_are_normalized(self):
        d = TermDirectory()
        term = d.add_term("  Apple Pie ", 4)
        self.assertEqual(term.name, "apple pie")
        self.assertIs(d.get_term("APPLE PIE"), term)
        self.assertEqual([t.name for t in d.get_terms_with_prefix(" APP")], ["apple pie"])

    def test_invalid_input_is_rejected(self):
        d = TermDirectory()
        for name, pages in [
            ("", 1),
            ("   ", 1),
            ("cat", 0),
            ("cat", -4),
            ("cat", []),
            ("cat", [1, 0]),
            ("cat", ["2"]),
            ("cat", [True]),
            ("cat", 2.5),
        ]:
            with self.assertRaises(ValueError, msg=f"{name!r} {pages!r}"):
                d.add_term(name, pages)
        self.assertTrue(d.is_empty())
        self.assertEqual(d.get_terms_with_prefix(""), [])


class TestScenarios(unittest.TestCase):
    def test_prefix_and_most_frequent(self):
        d = TermDirectory()
        d.add_term("apple", 3)
        d.add_term("apple", 7)
        d.add_term("app", 5)
        self.assertEqual([t.name for t in d.get_terms_with_prefix("app")], ["app", "apple"])
        self.assertEqual(d.get_most_frequent_term().name, "apple")

    def test_cascading_page_removal(self):
        d = TermDirectory()
        d.add_term("cat", [1, 2])
        self.assertTrue(d.remove_page_from_term(1, "cat"))
        self.assertFalse(d.is_empty())
        self.assertTrue(d.remove_page_from_term(2, "cat"))
        self.assertTrue(d.is_empty())
        self.assertEqual(d.get_terms_with_prefix("c"), [])
        self.assertIsNone(d.get_term("cat"))

    def test_rename_merges_into_existing(self):
        d = TermDirectory()
        d.add_term("dog", [1])
        d.add_term("doll", [2])
        self.assertTrue(d.update_term_name("dog", "doll"))
        self.assertIsNone(d.get_term("dog"))
        self.assertEqual(d.get_term("doll").pages, {1, 2})
        self.assertEqual([t.name for t in d.get_all_terms()], ["doll"])
        assert_in_sync(self, d)


class TestRemove(unittest.TestCase):
    def test_remove_term(self):
        d = TermDirectory()
        d.add_term("app", 1)
        d.add_term("apple", 2)
        self.assertTrue(d.remove_term("APP"))
        self.assertFalse(d.remove_term("app"))
        self.assertEqual([t.name for t in d.get_terms_with_prefix("ap")], ["apple"])
        assert_in_sync(self, d)

    def test_remove_missing_touches_nothing(self):
        d = TermDirectory()
        d.add_term("cat", 1)
        self.assertFalse(d.remove_term("dog"))
        self.assertEqual(len(d), 1)
        assert_in_sync(self, d)

    def test_remove_page_not_found(self):
        d = TermDirectory()
        d.add_term("cat", [1, 2])
        self.assertFalse(d.remove_page_from_term(9, "cat"))
        self.assertFalse(d.remove_page_from_term(1, "dog"))
        self.assertEqual(d.get_term("cat").pages, {1, 2})


class TestRename(unittest.TestCase):
    def test_rename_missing(self):
        d = TermDirectory()
        d.add_term("cat", 1)
        self.assertFalse(d.update_term_name("dog", "wolf"))
        self.assertEqual([t.name for t in d.get_all_terms()], ["cat"])

    def test_rename_to_new_name(self):
        d = TermDirectory()
        d.add_term("colour", [4, 9])
        self.assertTrue(d.update_term_name("Colour", " Color "))
        self.assertIsNone(d.get_term("colour"))
        self.assertEqual(d.get_term("color").pages, {4, 9})
        assert_in_sync(self, d)

    def test_rename_to_same_name(self):
        d = TermDirectory()
        d.add_term("cat", [1, 2])
        self.assertTrue(d.update_term_name("cat", "CAT"))
        self.assertEqual(d.get_term("cat").pages, {1, 2})
        assert_in_sync(self, d)

    def test_rename_to_blank_keeps_old(self):
        d = TermDirectory()
        d.add_term("cat", 1)
        with self.assertRaises(ValueError):
            d.update_term_name("cat", "  ")
        self.assertIsNotNone(d.get_term("cat"))


class TestMostFrequent(unittest.TestCase):
    def test_empty(self):
        self.assertIsNone(TermDirectory().get_most_frequent_term())

    def test_tie_goes_to_first_in_order(self):
        d = TermDirectory()
        d.add_term("zebra", [1, 2])
        d.add_term("apple", [3, 4])
        d.add_term("mango", [5])
        self.assertEqual(d.get_most_frequent_term().name, "apple")

    def test_sees_page_changes(self):
        d = TermDirectory()
        d.add_term("apple", [1, 2])
        d.add_term("zebra", [1])
        d.add_term("zebra", [2, 3])
        self.assertEqual(d.get_most_frequent_term().name, "zebra")


class TestClear(unittest.TestCase):
    def test_clear_resets_both_indexes(self):
        d = TermDirectory()
        d.add_term("cat", 1)
        d.add_term("car", 2)
        d.clear()
        self.assertTrue(d.is_empty())
        self.assertEqual(len(d), 0)
        self.assertEqual(d.get_terms_with_prefix(""), [])
        d.add_term("cat", 3)
        self.assertEqual(d.get_term("cat").pages, {3})
        assert_in_sync(self, d)


class TestRandomizedSync(unittest.TestCase):
    def test_mixed_operations_keep_indexes_in_sync(self):
        rng = random.Random(42)
        pool = ["".join(rng.choice("abc") for _ in range(rng.randint(1, 4))) for _ in range(60)]
        d = TermDirectory()
        expected = {}

        for _ in range(1500):
            op = rng.random()
            name = rng.choice(pool)
            if op < 0.45:
                page = rng.randint(1, 6)
                d.add_term(name, page)
                expected.setdefault(name, set()).add(page)
            elif op < 0.6:
                self.assertEqual(d.remove_term(name), name in expected)
                expected.pop(name, None)
            elif op < 0.85:
                page = rng.randint(1, 6)
                removed = d.remove_page_from_term(page, name)
                self.assertEqual(removed, page in expected.get(name, set()))
                if removed:
                    expected[name].discard(page)
                    if not expected[name]:
                        del expected[name]
            else:
                new_name = rng.choice(pool)
                ok = d.update_term_name(name, new_name)
                self.assertEqual(ok, name in expected)
                if ok:
                    pages = expected.pop(name)
                    expected.setdefault(new_name, set()).update(pages)

            assert_in_sync(self, d)

        self.assertEqual({t.name: t.pages for t in d.get_all_terms()}, expected)


class TestLargeRandom(unittest.TestCase):
    def test_1000_terms_500_removed(self):
        rng = random.Random(7)
        names = set()
        while len(names) < 1000:
            names.add("".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 9))))
        names = list(names)
        rng.shuffle(names)

        d = TermDirectory()
        for n in names:
            d.add_term(n, rng.randint(1, 400))
        doomed = rng.sample(names, 500)
        for n in doomed:
            self.assertTrue(d.remove_term(n))

        survivors = sorted(set(names) - set(doomed))
        self.assertEqual([t.name for t in d.get_all_terms()], survivors)
        self.assertEqual([t.name for t in d.get_terms_with_prefix("")], survivors)
        for n in doomed:
            self.assertIsNone(d.get_term(n))
            self.assertEqual([t.name for t in d.get_terms_with_prefix(n) if t.name == n], [])


if __name__ == "__main__":
    unittest.main(verbosity=2)
