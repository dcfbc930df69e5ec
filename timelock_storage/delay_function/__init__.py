"""Delay function evaluators: trapdoor (owner) and sequential (verifier)."""

from .TrapdoorDelayStep import TrapdoorDelayStep
from .SequentialDelayStep import SequentialDelayStep
from .abstract.IDelayStep import IDelayStep

__all__ = ["TrapdoorDelayStep", "SequentialDelayStep", "IDelayStep"]
