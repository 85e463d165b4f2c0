#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
AgentTemplateStore - Agent name -> base prompt lookup backed by a JSON file.

File format:
    {
      "version": "1.0",
      "agents": [
        {"name": "SA", "description": "Strategic Advisor", "base_prompt": "..."}
      ]
    }
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from config.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AgentRecord:
    name: str
    base_prompt: str
    description: str = ""


class AgentTemplateStore:
    """
    Read-only agent templates.

    Lookup is a case-insensitive exact match on the trimmed agent name.
    Records without a base prompt are treated as missing.
    """

    def __init__(self, records: Optional[List[AgentRecord]] = None):
        self._records: Dict[str, AgentRecord] = {}
        for record in records or []:
            key = record.name.strip().lower()
            # First definition wins, matching a top-down sheet scan
            if key and key not in self._records:
                self._records[key] = record

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "AgentTemplateStore":
        """
        Load templates from a JSON file.

        A missing file yields an empty store (every lookup misses).

        Raises:
            ValueError: If the file exists but is not valid template JSON
        """
        path = Path(path)
        if not path.exists():
            logger.warning(f"Agent templates file not found: {path}")
            return cls()

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid agent templates file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Invalid agent templates file {path}: expected a JSON object")
        entries = data.get("agents", [])
        if not isinstance(entries, list) or not all(isinstance(entry, dict) for entry in entries):
            raise ValueError(f"Invalid agent templates file {path}: \"agents\" must be a list of objects")

        records = [
            AgentRecord(
                name=str(entry.get("name") or ""),
                base_prompt=str(entry.get("base_prompt") or ""),
                description=str(entry.get("description") or ""),
            )
            for entry in entries
        ]
        store = cls(records)
        logger.info(f"Loaded {len(store)} agent templates from {path.name}")
        return store

    def get(self, agent_name: str) -> Optional[AgentRecord]:
        """Return the agent record, or None when not found."""
        if not agent_name:
            return None
        record = self._records.get(agent_name.lower())
        if record is None or not record.base_prompt:
            return None
        return record

    def get_base_prompt(self, agent_name: str) -> Optional[str]:
        record = self.get(agent_name)
        return record.base_prompt if record else None

    def list_agents(self) -> List[AgentRecord]:
        return list(self._records.values())

    def __contains__(self, agent_name: str) -> bool:
        return self.get(agent_name) is not None

    def __len__(self) -> int:
        return len(self._records)
