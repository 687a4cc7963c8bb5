"""Queue, stack, heap, hash table, linked list, tree, geographic graph and CSV loaders for modelling a city."""

__version__ = "0.1.0"