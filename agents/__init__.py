from .actions import Action, ActionType
from .propagation_agent import PropagationAgent

AGENT_REGISTRY = {
    "propagation": PropagationAgent,
}

__all__ = ["AGENT_REGISTRY", "Action", "ActionType", "PropagationAgent"]
