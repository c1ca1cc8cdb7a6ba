from npuzzle.engine.frontier.priority_queue import PriorityQueue

__all__ = ["PriorityQueue"]
