"""Find, measure and prune node_modules directories."""

__version__ = "0.1.0"