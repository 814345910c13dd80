"""HTML pages and fragments: the browse and create views over the article queries.

The selected article id (``?article=``) and the mode (``/`` browse, ``/new``
create) live in the URL. An unsettled article list renders as a loading
skeleton pointing at a fragment URL that the page script swaps in; the
selected article is always rendered settled, and card clicks fetch the
detail fragment behind a client-side skeleton.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.datastructures import URL

from blog_reader.application.schemas import ArticleForm
from blog_reader.application.services import ArticleQueries
from blog_reader.config import get_settings
from blog_reader.domain.exceptions import RequestFailedError
from blog_reader.infrastructure.dependencies import get_article_queries
from blog_reader.presentation.web import formatting

logger = logging.getLogger(__name__)

WEB_DIR = Path(__file__).resolve().parent
STATIC_DIR = WEB_DIR / "static"

LIST_SKELETON_COUNT = 5
CREATE_FAILED_MESSAGE = "Failed to create blog. Please try again."
FIELD_LABELS = {
    "title": "Title",
    "category": "Categories",
    "description": "Description",
    "cover_image": "Cover Image URL",
    "content": "Content",
}

templates = Jinja2Templates(directory=str(WEB_DIR / "templates"))
templates.env.filters["time_ago"] = formatting.time_ago
templates.env.filters["short_date"] = formatting.short_date
templates.env.filters["long_date"] = formatting.long_date
templates.env.filters["card_categories"] = formatting.card_categories
templates.env.filters["query_value"] = formatting.query_value
templates.env.globals["reading_time"] = formatting.READING_TIME_LABEL
templates.env.globals["list_skeleton_count"] = LIST_SKELETON_COUNT

router = APIRouter(tags=["Pages"])


def _path(request: Request, name: str, query: dict[str, str | None] | None = None, **path_params: str) -> str:
    """Root-relative URL for a named route, dropping empty query values."""
    url = URL(request.url_for(name, **path_params).path)
    params = {key: value for key, value in (query or {}).items() if value}
    if params:
        url = url.include_query_params(**params)
    return str(url)


def _page_context(request: Request, selected_id: str | None, create_mode: bool) -> dict:
    return {
        "settings": get_settings(),
        "selected_id": selected_id,
        "create_mode": create_mode,
        "browse_url": _path(request, "browse", {"article": selected_id}),
        "create_url": _path(request, "create_form", {"article": selected_id}),
    }


def _render_form(
    request: Request,
    form: ArticleForm,
    selected_id: str | None,
    *,
    error: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    context = _page_context(request, selected_id, create_mode=True)
    context.update(form=form, form_error=error, field_labels=FIELD_LABELS)
    return templates.TemplateResponse(request, "index.html", context, status_code=status_code)


# ── Pages ────────────────────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse, name="browse")
async def browse(
    request: Request,
    article: str | None = None,
    queries: ArticleQueries = Depends(get_article_queries),
) -> HTMLResponse:
    """Browse mode: article list beside the selected article.

    The selected article is awaited so a failed lookup renders its error
    panel directly; the list may still be loading.
    """
    list_state = queries.peek_articles().state
    detail = await queries.article(article)

    context = _page_context(request, article, create_mode=False)
    context.update(
        list_state=list_state,
        detail_state=detail.state,
        list_fragment_url=_path(request, "article_list_fragment", {"selected": article}),
    )
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/new", response_class=HTMLResponse, name="create_form")
async def create_form(request: Request, article: str | None = None) -> HTMLResponse:
    """Create mode: an empty article form."""
    return _render_form(request, ArticleForm(), article)


@router.post("/new", response_class=HTMLResponse, name="create_article")
async def create_article(
    request: Request,
    title: str = Form(""),
    category: str = Form(""),
    description: str = Form(""),
    cover_image: str = Form(""),
    content: str = Form(""),
    article: str = Form(""),
    queries: ArticleQueries = Depends(get_article_queries),
):
    """Publish the submitted article, then return to browse mode."""
    selected_id = article or None
    form = ArticleForm(
        title=title,
        category=category,
        description=description,
        cover_image=cover_image,
        content=content,
    )

    missing = form.missing_fields()
    if missing:
        labels = ", ".join(FIELD_LABELS[name] for name in missing)
        return _render_form(
            request,
            form,
            selected_id,
            error=f"Please fill in the required fields: {labels}.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    mutation = queries.create_mutation()
    try:
        await mutation.mutate_async(form.to_create())
    except RequestFailedError as exc:
        logger.error("Failed to create blog: %s", exc)
        return _render_form(
            request,
            form,
            selected_id,
            error=CREATE_FAILED_MESSAGE,
            status_code=status.HTTP_502_BAD_GATEWAY,
        )

    return RedirectResponse(
        _path(request, "browse", {"article": selected_id}),
        status_code=status.HTTP_303_SEE_OTHER,
    )


# ── Fragments ────────────────────────────────────────────────────────

@router.get("/fragments/articles", response_class=HTMLResponse, name="article_list_fragment")
async def article_list_fragment(
    request: Request,
    selected: str | None = None,
    queries: ArticleQueries = Depends(get_article_queries),
) -> HTMLResponse:
    """The list panel once the article list has settled."""
    result = await queries.articles()
    return templates.TemplateResponse(
        request,
        "partials/article_list.html",
        {"list_state": result.state, "selected_id": selected},
    )


@router.get("/fragments/article", response_class=HTMLResponse, name="article_detail_fragment")
async def article_detail_fragment(
    request: Request,
    article: str,
    queries: ArticleQueries = Depends(get_article_queries),
) -> HTMLResponse:
    """The detail panel once the selected article has settled.

    Ids are opaque and may contain ``/``, so the id travels as a query value.
    """
    result = await queries.article(article)
    return templates.TemplateResponse(
        request,
        "partials/article_detail.html",
        {"detail_state": result.state, "selected_id": article},
    )
