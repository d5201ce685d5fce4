"""Seed the event collections with the CoShow 2024 booth event fixture.

Run only against an empty or disposable event store.

Usage:
    python -m scripts.seed_events            # seed; refuses if event data already exists
    python -m scripts.seed_events --reset    # wipe all event collections, then seed
    python -m scripts.seed_events --clean    # wipe all event collections only

--reset and --clean delete EVERY document in events, event_missions,
event_rewards and event_participations, including data this script never wrote.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from event_seed.config import Settings, settings
from event_seed.database import connect_db, disconnect_db, get_database
from event_seed.errors import SeedError
from event_seed.events.report import format_summary
from event_seed.events.seeder import Seeder, clean

logger = logging.getLogger("seed_events")


async def run_clean(config: Settings) -> None:
    client = await connect_db(config)
    try:
        deleted = await clean(get_database(client, config))
    finally:
        disconnect_db(client)
    print(
        f"Deleted {sum(deleted.values())} documents from '{config.DATABASE_NAME}' "
        f"({', '.join(f'{name}: {count}' for name, count in deleted.items())})"
    )


async def run_seed(config: Settings, reset: bool) -> None:
    client = await connect_db(config)
    try:
        summary = await Seeder(get_database(client, config), config, reset=reset).run()
    finally:
        disconnect_db(client)

    print(format_summary(summary))
    if summary.verified:
        print("\n✅ 이벤트 데이터 초기화 완료!")
    else:
        print("\n⚠️  데이터는 저장되었지만 검증되지 않았습니다.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed or clean the event fixture collections")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--reset",
        action="store_true",
        help="Delete ALL documents in the event collections before seeding",
    )
    mode.add_argument(
        "--clean",
        action="store_true",
        help="Delete ALL documents in the event collections and exit",
    )
    return parser


def main(argv: Optional[list[str]] = None, config: Settings = settings) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.clean:
            asyncio.run(run_clean(config))
        else:
            asyncio.run(run_seed(config, reset=args.reset))
    except SeedError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
