"""Classic data structures and algorithms: dynamic programming, graphs, hashing, heaps, lists, queues, stacks, sorting and tries."""

__version__ = "0.1.0"