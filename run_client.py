"""
Command Line Client

Runs the upload, summarize and email workflow against a running
Meeting Recap API and prints the resulting summary sections.
"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from recap.client import ClientOrchestrator, RecapAPIClient, DEFAULT_BASE_URL, DEFAULT_INSTRUCTION
from recap.client.composer import SECTION_TITLES

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("recap_client")


def parse_arguments():
    """Parse command line arguments for the client."""
    parser = argparse.ArgumentParser(description="Summarize a meeting transcript and optionally email it")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", type=Path, help="Transcript file to upload")
    source.add_argument("--text", type=str, help="Transcript text to use directly")

    parser.add_argument(
        "--instruction",
        type=str,
        default=DEFAULT_INSTRUCTION,
        help="Instruction steering the summary"
    )
    parser.add_argument(
        "--to",
        type=str,
        default="",
        help="Comma-separated recipients; the summary is emailed when given"
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help=f"API base URL (default: $RECAP_API_URL or {DEFAULT_BASE_URL})"
    )
    return parser.parse_args()


async def run(args) -> int:
    base_url = args.base_url or os.getenv("RECAP_API_URL", DEFAULT_BASE_URL)
    orchestrator = ClientOrchestrator(RecapAPIClient(base_url), instruction=args.instruction)

    if args.file is not None:
        if not await orchestrator.upload(args.file.name, args.file.read_bytes()):
            print(orchestrator.notices.messages[-1], file=sys.stderr)
            return 1
    else:
        orchestrator.transcript = args.text

    if await orchestrator.summarize() is None:
        print(orchestrator.notices.messages[-1], file=sys.stderr)
        return 1

    for key, title in SECTION_TITLES:
        print(f"{title}:\n{orchestrator.sections[key]}\n")

    if args.to:
        orchestrator.recipients = args.to
        if await orchestrator.send_email() is None:
            print(orchestrator.notices.messages[-1], file=sys.stderr)
            return 1
        print(orchestrator.notices.messages[-1])
    return 0


def main():
    load_dotenv()
    args = parse_arguments()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
