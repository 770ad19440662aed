"""Configuration management for the sports desk with validation and typed access"""

import json
import logging
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Dict, Any, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


# ============================================================================
# CONFIGURATION DATACLASSES
# ============================================================================

@dataclass
class SourceConfig:
    """Configuration for the scoreboard JSON service"""

    base_url: str = "http://localhost:3000/api"
    timeout_seconds: int = 60
    api_key: Optional[str] = None

    def validate(self) -> None:
        """Validate source configuration"""
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
        if self.timeout_seconds < 1:
            raise ValueError(f"timeout_seconds must be >= 1, got {self.timeout_seconds}")


@dataclass
class CacheConfig:
    """Configuration for the per-sport game cache"""

    ttl_seconds: float = 300.0  # 5 minutes
    max_attempts: int = 2
    retry_delay_seconds: float = 2.0

    def validate(self) -> None:
        """Validate cache configuration"""
        if self.ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be > 0, got {self.ttl_seconds}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.retry_delay_seconds < 0:
            raise ValueError(f"retry_delay_seconds must be >= 0, got {self.retry_delay_seconds}")


@dataclass
class ChatConfig:
    """Configuration for the chat responder"""

    top_performers_limit: int = 5
    seed: Optional[int] = None  # Fixes canned-reply selection when set

    def validate(self) -> None:
        """Validate chat configuration"""
        if self.top_performers_limit < 1:
            raise ValueError(f"top_performers_limit must be >= 1, got {self.top_performers_limit}")


# ============================================================================
# MAIN CONFIG MANAGER
# ============================================================================

class ConfigManager:
    """
    Central configuration management with validation and typed access

    Values come from an optional JSON file; environment variables (and a
    ``.env`` file) override the source URL and API key.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Load and validate configuration from JSON file

        Args:
            config_file: Path to config JSON file (optional)

        Raises:
            json.JSONDecodeError: If config file is invalid JSON
            ValueError: If configuration validation fails
        """
        load_dotenv()

        self.config_path = Path(config_file) if config_file else None

        if self.config_path is None:
            raw_config = {}
        elif not self.config_path.exists():
            logger.warning(f"Config file not found: {config_file}. Using defaults and environment variables.")
            raw_config = {}
        else:
            with open(self.config_path) as f:
                raw_config = json.load(f)

        self._parse_config(raw_config)

    def _get_secret(self, env_var: str, json_value: Optional[str] = None) -> Optional[str]:
        """
        Get secret from environment variable, falling back to JSON value.
        Filters out placeholder values starting with 'YOUR_'.
        """
        val = os.getenv(env_var)
        if not val:
            val = json_value

        if val and isinstance(val, str) and 'YOUR_' in val:
            return None
        return val

    def _parse_config(self, raw_config: Dict[str, Any]) -> None:
        """Parse raw JSON config into typed dataclasses"""

        source_raw = raw_config.get('source', {})
        self.source = SourceConfig(
            base_url=os.getenv('SPORTSDESK_SOURCE_URL') or source_raw.get('base_url', SourceConfig.base_url),
            timeout_seconds=source_raw.get('timeout_seconds', 60),
            api_key=self._get_secret('SPORTSDESK_API_KEY', source_raw.get('api_key')),
        )
        try:
            self.source.validate()
        except ValueError as e:
            raise ValueError(f"Invalid source config: {e}")

        cache_raw = raw_config.get('cache', {})
        self.cache = CacheConfig(
            ttl_seconds=cache_raw.get('ttl_seconds', 300.0),
            max_attempts=cache_raw.get('max_attempts', 2),
            retry_delay_seconds=cache_raw.get('retry_delay_seconds', 2.0),
        )
        try:
            self.cache.validate()
        except ValueError as e:
            raise ValueError(f"Invalid cache config: {e}")

        chat_raw = raw_config.get('chat', {})
        self.chat = ChatConfig(
            top_performers_limit=chat_raw.get('top_performers_limit', 5),
            seed=chat_raw.get('seed'),
        )
        try:
            self.chat.validate()
        except ValueError as e:
            raise ValueError(f"Invalid chat config: {e}")

        logger.info(f"✅ Configuration loaded and validated from {self.config_path or 'defaults'}")

    # ========================================================================
    # HELPER METHODS
    # ========================================================================

    def log_config_summary(self) -> None:
        """Log a summary of the loaded configuration"""
        logger.info("=" * 60)
        logger.info("📋 CONFIGURATION SUMMARY")
        logger.info("=" * 60)
        logger.info(f"🌐 Source: {self.source.base_url} (timeout {self.source.timeout_seconds}s)")
        logger.info(
            f"🗄️  Cache: ttl {self.cache.ttl_seconds:.0f}s, "
            f"{self.cache.max_attempts} attempts, {self.cache.retry_delay_seconds:.1f}s between"
        )
        logger.info(f"💬 Chat: top {self.chat.top_performers_limit} performers")
        logger.info("=" * 60)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for debugging/serialization"""
        return {
            'source': {
                'base_url': self.source.base_url,
                'timeout_seconds': self.source.timeout_seconds,
                'api_key': (self.source.api_key[:4] + '...') if self.source.api_key else None,  # redact
            },
            'cache': {
                'ttl_seconds': self.cache.ttl_seconds,
                'max_attempts': self.cache.max_attempts,
                'retry_delay_seconds': self.cache.retry_delay_seconds,
            },
            'chat': {
                'top_performers_limit': self.chat.top_performers_limit,
                'seed': self.chat.seed,
            },
        }
