"""
Orchestration Layer

Turn-level conversation handling and the HTTP transport in front of it.
"""

from statusbot.orchestration.orchestrator import handle_message

__all__ = ["handle_message"]
