#!/usr/bin/env python3
from components.work_loads.term_generator import TermWorkloadConfig, generate_terms


class WorkLoad:
    def __init__(self, seed=None):
        self.seed = seed

    def terms(self, num_terms, unique=False, **config):
        return generate_terms(num_terms, TermWorkloadConfig(seed=self.seed, **config), unique)

    def populate(self, directory, num_terms, unique=False, **config):
        """Add generated terms to `directory`; return the pairs that were added."""
        pairs = self.terms(num_terms, unique, **config)
        for name, pages in pairs:
            directory.add_term(name, pages)
        return pairs
