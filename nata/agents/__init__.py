"""LLM agents for optional relationship phrasing."""

from nata.agents.llm_client import LLMClient
from nata.agents.phrasing_agent import PhrasingAgent, PhrasingRequest, PhrasingOutcome

__all__ = [
    "LLMClient",
    "PhrasingAgent",
    "PhrasingRequest",
    "PhrasingOutcome"
]
