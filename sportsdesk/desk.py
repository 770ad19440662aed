"""Wires the scoreboard client, cache, stats gateway and classifier together"""

import logging
import random
from typing import Optional

from sportsdesk.api_clients import RawDataSource, ScoreboardClient
from sportsdesk.chat import IntentClassifier, ResponseFormatter
from sportsdesk.config import ConfigManager
from sportsdesk.data import GameCache, StatsGateway

logger = logging.getLogger(__name__)


class SportsDesk:
    """
    One chat backend for the whole process

    Use as an async context manager so the HTTP session is opened and
    closed around the conversation::

        async with SportsDesk(config) as desk:
            reply = await desk.ask("what nba games are on tonight?")

    Passing ``source`` skips the HTTP client entirely.
    """

    def __init__(self, config: ConfigManager, source: Optional[RawDataSource] = None):
        self.config = config
        self._owns_client = source is None
        self.client: Optional[ScoreboardClient] = None

        if source is None:
            self.client = ScoreboardClient(config.source)
            source = self.client

        self.game_cache = GameCache.from_config(source, config.cache)
        self.stats_gateway = StatsGateway(source)
        self.classifier = IntentClassifier(
            self.game_cache,
            self.stats_gateway,
            formatter=ResponseFormatter(),
            rng=random.Random(config.chat.seed),
            top_performers_limit=config.chat.top_performers_limit,
        )

    async def __aenter__(self):
        if self._owns_client and self.client:
            await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_client and self.client:
            await self.client.__aexit__(exc_type, exc_val, exc_tb)

    async def ask(self, message: str) -> str:
        return await self.classifier.classify(message)

    def greeting(self) -> str:
        return self.classifier.greeting()
