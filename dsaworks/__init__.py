"""Classic data structures and algorithms: recursion, arrays, matrices, hashing, sorting, linked lists, stacks, queues, graphs and trees."""

__version__ = "0.1.0"