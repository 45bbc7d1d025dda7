#!/usr/bin/env python
"""CLI for VoterBlock representative and news lookup."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator, model_validator

from voterblock.config import create_from_config, get_default_config_path, load_config
from voterblock.data import Address
from voterblock.service import LookupFailedError, VoterBlockService

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["reps", "news"]
    config: Path
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    name: str = ""
    office: str = ""
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @model_validator(mode="after")
    def required_fields_present(self) -> "CLIArgs":
        if self.command == "reps":
            missing = [
                f for f in ("street", "city", "state", "zip_code") if not getattr(self, f).strip()
            ]
            if missing:
                raise ValueError(f"Missing address fields: {', '.join(missing)}")
        elif not (self.name.strip() or self.office.strip()):
            raise ValueError("Query is required")
        return self


async def show_representatives(service: VoterBlockService, args: CLIArgs) -> None:
    address = Address(
        street=args.street,
        city=args.city,
        state=args.state,
        zip_code=args.zip_code,
    )
    grouped = await service.lookup_representatives(address)

    for level, reps in grouped.items():
        print(f"\n== {level.value.title()} ({len(reps)}) ==")
        for rep in reps:
            party = f" [{rep.party}]" if rep.party else ""
            print(f"{rep.name}{party}: {rep.office}")
            for phone in rep.phones:
                print(f"   Phone: {phone}")
            for email in rep.emails:
                print(f"   Email: {email}")
            for url in rep.urls:
                print(f"   Web: {url}")


async def show_news(service: VoterBlockService, args: CLIArgs) -> None:
    articles = await service.find_news(args.name, args.office)

    print(f"\nFound {len(articles)} articles:\n")
    for i, article in enumerate(articles, 1):
        print(f"{i}. {article.title}")
        if article.source:
            print(f"   Source: {article.source}")
        if article.date:
            print(f"   Published: {article.date}")
        if article.url:
            print(f"   URL: {article.url}")
        if article.snippet:
            print(f"   {article.snippet}")


async def run(args: CLIArgs) -> None:
    """Execute a lookup with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    service, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )
    logger.info(f"Config: {args.config}")

    if args.command == "reps":
        await show_representatives(service, args)
    else:
        await show_news(service, args)

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Find your elected officials and recent news about them."
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON run log for each lookup",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    reps = subparsers.add_parser("reps", help="Look up representatives for an address")
    reps.add_argument("--street", required=True)
    reps.add_argument("--city", required=True)
    reps.add_argument("--state", required=True)
    reps.add_argument("--zip", dest="zip_code", required=True)

    news = subparsers.add_parser("news", help="Find recent news about an official")
    news.add_argument("name", help="Official's name")
    news.add_argument("office", nargs="?", default="", help="Office held")

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            street=getattr(ns, "street", ""),
            city=getattr(ns, "city", ""),
            state=getattr(ns, "state", ""),
            zip_code=getattr(ns, "zip_code", ""),
            name=getattr(ns, "name", ""),
            office=getattr(ns, "office", ""),
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except (LookupFailedError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
