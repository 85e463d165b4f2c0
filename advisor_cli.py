#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Advisor CLI - Run one agent from the command line

    advisor --agent SA --context "Q3 deadlines" --format HTML --output report.html
    advisor --list-agents
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from config.constants import OUTPUT_FORMATS, DEFAULT_OUTPUT_FORMAT
from config.logging_config import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advisor",
        description="Run a strategic advisor agent and deliver its output",
    )
    parser.add_argument("--agent", "-a", help="Agent name (e.g. EA, SA, CT, SM)")
    parser.add_argument("--context", "-c", default="", help="Task description for the agent")
    parser.add_argument(
        "--format", "-f",
        dest="output_format",
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format: {', '.join(OUTPUT_FORMATS)} (default {DEFAULT_OUTPUT_FORMAT})",
    )
    parser.add_argument("--output", "-o", help="Write the HTML output to this file")
    parser.add_argument("--list-agents", action="store_true", help="List configured agents and exit")
    return parser


def list_agents(settings) -> int:
    from core.agents.template_store import AgentTemplateStore

    try:
        store = AgentTemplateStore.from_file(settings.agents_file)
    except ValueError as e:
        print(json.dumps({"status": "error", "message": str(e)}, indent=2))
        return 1

    payload = {"agents": [
        {"name": record.name, "description": record.description}
        for record in store.list_agents()
    ]}
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def run_agent(args, dispatcher=None) -> int:
    from core.dispatcher import DispatchRequest, OutputDispatcher

    if dispatcher is None:
        from config.settings import settings
        try:
            dispatcher = OutputDispatcher.from_settings(settings)
        except ValueError as e:
            print(json.dumps({"status": "error", "message": str(e)}, indent=2))
            return 1

    result = asyncio.run(dispatcher.dispatch(DispatchRequest(
        agent_name=args.agent,
        context=args.context,
        output_format=args.output_format,
    )))
    payload = result.to_dict()

    if result.ok and args.output and result.output is not None:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.output, encoding="utf-8")
        logger.info(f"HTML written to {output_path}")

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0 if result.ok else 1


def main(argv=None, dispatcher=None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_agents:
        from config.settings import settings
        return list_agents(settings)

    return run_agent(args, dispatcher=dispatcher)


if __name__ == "__main__":
    sys.exit(main())
