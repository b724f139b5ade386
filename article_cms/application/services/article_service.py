"""Application service (use case) for Article operations."""

import dataclasses
from datetime import datetime, timezone
from typing import Any

from article_cms.application.schemas import (
    ArticleCreate,
    ArticleFields,
    ArticleForm,
    ArticleResponse,
    ArticleUpdate,
)
from article_cms.application.services.article_listing import (
    DEFAULT_PER_PAGE,
    Page,
    Role,
    filter_articles,
    paginate,
    related_to,
)
from article_cms.application.services.content_formatter import (
    estimate_read_time,
    html_to_editor_text,
    paragraphs_to_html,
)
from article_cms.application.services.content_service import ContentService, merge_sources
from article_cms.domain.entities import (
    Article,
    ArticleStatus,
    DeleteAcknowledgement,
    ServiceResult,
)

DEFAULT_CATEGORY = "Uncategorized"
DEFAULT_CONTENT = "<p>No content provided</p>"
EDITOR_AUTHOR = "Admin User"
EXCERPT_LENGTH = 50


def today_iso() -> str:
    """Current UTC calendar date as ``YYYY-MM-DD``."""
    return datetime.now(timezone.utc).date().isoformat()


def build_new_article(data: ArticleCreate) -> Article:
    """Fill the creation defaults. Empty strings count as absent."""
    if data.excerpt:
        excerpt = data.excerpt
    elif data.title:
        excerpt = f"{data.title[:EXCERPT_LENGTH]}..."
    else:
        excerpt = ""

    return Article(
        title=data.title,
        category=data.category or DEFAULT_CATEGORY,
        author=data.author,
        date=data.date or today_iso(),
        read_time=data.read_time,
        status=data.status or ArticleStatus.PUBLISHED,
        excerpt=excerpt,
        content=data.content or DEFAULT_CONTENT,
        related_articles=list(data.related_articles or []),
    )


class ArticleService(ContentService[Article]):
    """Orchestrates article CRUD with remote-first, store-fallback semantics."""

    resource = "articles"
    entity_name = "Article"

    def _decode(self, payload: Any) -> Article:
        return ArticleResponse.model_validate(payload).to_entity()

    def _encode(self, entity: Article) -> dict[str, Any]:
        return ArticleFields.payload_from_entity(entity)

    async def list_articles(self) -> ServiceResult[list[Article]]:
        return await self._list_records()

    async def get_article(self, article_id: int | str) -> ServiceResult[Article | None]:
        return await self._get_record(article_id)

    async def create_article(self, data: ArticleCreate) -> ServiceResult[Article]:
        # Defaults are applied before the remote attempt so both paths see one shape.
        return await self._create_record(build_new_article(data))

    async def update_article(
        self, article_id: int | str, data: ArticleUpdate
    ) -> ServiceResult[Article]:
        return await self._update_record(article_id, Article(**data.model_dump()))

    async def delete_article(self, article_id: int | str) -> ServiceResult[DeleteAcknowledgement]:
        return await self._delete_record(article_id)

    async def publish_article(self, article_id: int | str) -> ServiceResult[Article | None]:
        """Mark an article Published and stamp today's date."""
        return await self._restamp(article_id, ArticleStatus.PUBLISHED)

    async def save_draft(self, article_id: int | str) -> ServiceResult[Article | None]:
        """Move an article back to Draft and stamp today's date."""
        return await self._restamp(article_id, ArticleStatus.DRAFT)

    async def _restamp(
        self, article_id: int | str, status: ArticleStatus
    ) -> ServiceResult[Article | None]:
        current = await self.get_article(article_id)
        if current.data is None:
            return current
        changed = dataclasses.replace(current.data, status=status, date=today_iso())
        return await self._update_record(article_id, changed)

    async def submit_form(self, form: ArticleForm, *, draft: bool = False) -> ServiceResult[Article]:
        """Create an article from raw editor input.

        Content is converted to paragraph HTML; a missing body gets a short
        placeholder naming the article.
        """
        if form.content:
            content = paragraphs_to_html(form.content)
        else:
            label = "Draft content" if draft else "Content"
            content = f'<p>{label} for "{form.title}"</p>'

        data = ArticleCreate(
            title=form.title,
            category=form.category or DEFAULT_CATEGORY,
            author=EDITOR_AUTHOR,
            date=today_iso(),
            read_time=estimate_read_time(form.content),
            status=ArticleStatus.DRAFT if draft else ArticleStatus.PUBLISHED,
            excerpt=form.excerpt or f"{form.title[:EXCERPT_LENGTH]}...",
            content=content,
            related_articles=[],
        )
        return await self.create_article(data)

    async def editor_form(self, article_id: int | str) -> ServiceResult[ArticleForm | None]:
        """Load an article into the editor, its HTML turned back into plain text."""
        current = await self.get_article(article_id)
        if current.data is None:
            return current
        article = current.data
        form = ArticleForm(
            title=article.title,
            category=article.category,
            content=html_to_editor_text(article.content),
            excerpt=article.excerpt or "",
        )
        return ServiceResult(
            data=form, source=current.source, fallback_reason=current.fallback_reason
        )

    async def submit_edit(
        self, article_id: int | str, form: ArticleForm, *, draft: bool = False
    ) -> ServiceResult[Article | None]:
        """Merge editor input into an existing article and save it.

        Publishing takes the form as given and keeps the current status. Saving a
        draft sets Draft and keeps the stored value wherever a form field is empty.
        Both stamp today's date. ``None`` data when the article does not exist.
        """
        current = await self.get_article(article_id)
        if current.data is None:
            return current
        article = current.data

        if draft:
            changed = dataclasses.replace(
                article,
                title=form.title,
                category=form.category or article.category,
                excerpt=form.excerpt or article.excerpt,
                content=paragraphs_to_html(form.content) if form.content else article.content,
                status=ArticleStatus.DRAFT,
                date=today_iso(),
            )
        else:
            changed = dataclasses.replace(
                article,
                title=form.title,
                category=form.category,
                excerpt=form.excerpt,
                content=paragraphs_to_html(form.content or ""),
                date=today_iso(),
            )
        return await self._update_record(article_id, changed)

    async def related_articles(self, article_id: int | str) -> ServiceResult[list[Article]]:
        """Articles the given one links to, in listing order; [] when it is missing."""
        current = await self.get_article(article_id)
        if current.data is None:
            return ServiceResult(
                data=[], source=current.source, fallback_reason=current.fallback_reason
            )

        listing = await self.list_articles()
        source, reason = merge_sources(current, listing)
        return ServiceResult(
            data=related_to(current.data, listing.data),
            source=source,
            fallback_reason=reason,
        )

    async def search_articles(
        self,
        *,
        search: str | None = None,
        category: str | None = None,
        status: str | None = None,
        role: Role = Role.USER,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> ServiceResult[Page[Article]]:
        listing = await self.list_articles()
        matches = filter_articles(
            listing.data, search=search, category=category, status=status, role=role
        )
        return ServiceResult(
            data=paginate(matches, page=page, per_page=per_page),
            source=listing.source,
            fallback_reason=listing.fallback_reason,
        )
