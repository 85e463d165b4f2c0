"""
Agent templates.
"""

from .template_store import AgentRecord, AgentTemplateStore

__all__ = ["AgentRecord", "AgentTemplateStore"]
