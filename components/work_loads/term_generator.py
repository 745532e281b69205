import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Tuple
from faker import Faker

# consecutive duplicate names tolerated in unique mode before giving up
max_misses = 2000

## === Config Class === ##

@dataclass
class TermWorkloadConfig:
    """
    Configuration for generate_terms
        max_page: int, highest page number that can be drawn
        min_pages: int, fewest pages per term
        max_pages: int, most pages per term
        max_words: int, most words per term name
        seed: int, seed for Faker and the numpy generator
    """
    max_page: int = 500
    min_pages: int = 1
    max_pages: int = 5
    max_words: int = 2
    seed: Optional[int] = None

    def __post_init__(self):
        if self.max_page < 1:
            raise ValueError("max_page must be >= 1")
        if self.min_pages < 1 or self.max_pages < self.min_pages:
            raise ValueError("need 1 <= min_pages <= max_pages")
        if self.max_pages > self.max_page:
            raise ValueError("max_pages cannot exceed max_page")
        if self.max_words < 1:
            raise ValueError("max_words must be >= 1")


def generate_terms(num_terms, config=None, unique=False) -> List[Tuple[str, List[int]]]:
  """
  Return `num_terms` (name, pages) pairs for populating a term index.
  - names are 1..max_words lorem words joined by spaces
  - pages are distinct, sorted, drawn from 1..max_page
  - unique=True: no name repeats (raises ValueError if the word pool runs dry)
  """
  config = config or TermWorkloadConfig()
  if num_terms < 1:
    raise ValueError("num_terms must be >= 1")

  fake = Faker()
  if config.seed is not None:
    fake.seed_instance(config.seed)
  rng = np.random.default_rng(config.seed)

  out = []
  seen = set()
  misses = 0
  while len(out) < num_terms:
    nb = int(rng.integers(1, config.max_words + 1))
    name = " ".join(fake.words(nb=nb)).lower()
    if unique:
      if name in seen:
        misses += 1
        if misses > max_misses:
          raise ValueError(f"could not generate {num_terms} unique term names")
        continue
      seen.add(name)
      misses = 0

    k = int(rng.integers(config.min_pages, config.max_pages + 1))
    pages = rng.choice(config.max_page, size=k, replace=False) + 1
    out.append((name, sorted(int(p) for p in pages)))
  return out
