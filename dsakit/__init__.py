"""Queues, stacks, a preorder-built binary tree, greedy and sliding-window algorithms."""

__version__ = "0.1.0"
__all__ = ["queues", "stacks", "binary_tree", "greedy", "sliding_window"]