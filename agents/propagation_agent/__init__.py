from .agent import PropagationAgent

__all__ = ["PropagationAgent"]
