"""Utility modules for configuration, validation and resource management."""

from .SystemSpecs import SystemSpecs
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables

__all__ = ["SystemSpecs", "EnvironmentManager", "EnvironmentVariables"]
