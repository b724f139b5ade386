"""Process-lifetime wiring of stores, transport and reachability probe.

One container is built per application instance. Its stores hold all
in-memory state, so a fresh container means fresh seed data.
"""

import logging
from dataclasses import dataclass

from article_cms.config import Settings
from article_cms.domain.entities import Article, Category
from article_cms.infrastructure.http import (
    HttpContentApi,
    StaticReachabilityProbe,
    TimeoutHttpClient,
)
from article_cms.infrastructure.memory import (
    InMemoryRecordStore,
    seed_articles,
    seed_categories,
)

logger = logging.getLogger(__name__)


@dataclass
class ContentContainer:
    article_store: InMemoryRecordStore[Article]
    category_store: InMemoryRecordStore[Category]
    remote_api: HttpContentApi
    probe: StaticReachabilityProbe


def build_container(settings: Settings) -> ContentContainer:
    """Create the stores and remote adapter described by ``settings``."""
    client = TimeoutHttpClient(default_timeout_ms=settings.remote_api_timeout_ms)
    container = ContentContainer(
        article_store=InMemoryRecordStore("articles", seed_articles),
        category_store=InMemoryRecordStore("categories", seed_categories),
        remote_api=HttpContentApi(settings.remote_api_base_url, client),
        probe=StaticReachabilityProbe(reachable=settings.remote_api_enabled),
    )
    logger.info(
        "Content container ready (remote API %s at %s)",
        "enabled" if settings.remote_api_enabled else "disabled",
        settings.remote_api_base_url,
    )
    return container
