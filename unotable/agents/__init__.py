"""Built-in agents."""

from unotable.agents.computer_policy import ComputerPolicy
from unotable.agents.human_agent import HumanAgent
from unotable.agents.random_agent import RandomAgent

__all__ = ["ComputerPolicy", "HumanAgent", "RandomAgent"]
