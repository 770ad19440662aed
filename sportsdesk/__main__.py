import argparse
import asyncio
import json
import logging
import sys
from typing import Callable, Optional

from sportsdesk.chat import WELCOME_MESSAGE, resolve_sport_name
from sportsdesk.config import ConfigManager
from sportsdesk.desk import SportsDesk

EXIT_WORDS = {"quit", "exit", "bye"}


def setup_logging(log_level):
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
    )


async def run_single_message(config: ConfigManager, message: str) -> int:
    async with SportsDesk(config) as desk:
        print(await desk.ask(message))
    return 0


async def run_sport_listing(config: ConfigManager, sport_name: str) -> int:
    sport = resolve_sport_name(sport_name)
    if not sport:
        print(f"Unknown sport {sport_name!r}. Try NFL, NBA, MLB, NHL, NCAAF or NCAAB.", file=sys.stderr)
        return 2
    async with SportsDesk(config) as desk:
        print(await desk.ask(sport))
    return 0


async def _ask_once(desk: SportsDesk, message: str) -> str:
    async with desk:
        return await desk.ask(message)


def run_chat_loop(
    config: ConfigManager,
    desk: Optional[SportsDesk] = None,
    read_line: Optional[Callable[[], Optional[str]]] = None,
) -> int:
    """
    Interactive chat on stdin/stdout until EOF or an exit word

    Input is read on the main thread and each message gets its own event
    loop, so Ctrl-C interrupts a blocked read immediately. The desk (and its
    game cache) lives across messages; the HTTP session does not.
    """
    desk = desk or SportsDesk(config)
    read_line = read_line or _read_line
    print(WELCOME_MESSAGE)
    while True:
        line = read_line()
        if line is None:
            break
        message = line.strip()
        if not message:
            continue
        if message.lower() in EXIT_WORDS:
            print(desk.greeting())
            break
        print(asyncio.run(_ask_once(desk, message)))
        print()
    return 0


def _read_line() -> Optional[str]:
    try:
        return input("> ")
    except EOFError:
        return None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Sports betting chat desk")
    parser.add_argument('--config', type=str, default=None, help='Path to config JSON file')
    parser.add_argument('--log-level', type=str, default='WARNING', help='Logging level')
    parser.add_argument('--message', type=str, help='Answer one message and exit')
    parser.add_argument('--games', type=str, metavar='SPORT', help="Print today's games for one sport and exit")
    parser.add_argument('--show-config', action='store_true', help='Print effective non-secret config and exit')
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger("sportsdesk")

    try:
        config = ConfigManager(args.config)
    except (ValueError, json.JSONDecodeError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    if args.show_config:
        print(json.dumps(config.to_dict(), indent=2))
        return 0

    config.log_config_summary()

    try:
        if args.message:
            return asyncio.run(run_single_message(config, args.message))
        if args.games:
            return asyncio.run(run_sport_listing(config, args.games))
        return run_chat_loop(config)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
