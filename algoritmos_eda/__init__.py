"""Graph, priority-queue and greedy algorithms with judge-problem solvers."""

__version__ = "0.1.0"