# dashboard/api/deps.py

from functools import lru_cache
from typing import Any, Callable, Dict

from fastapi import Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from sqlalchemy.engine import Engine

from dashboard.actions.context import ActionContext
from dashboard.actions.navigation import PageCache, Redirect
from dashboard.db.engine import get_engine


@lru_cache(maxsize=1)
def get_page_cache() -> PageCache:
    return PageCache()


def get_action_context(
    engine: Engine = Depends(get_engine),
    cache: PageCache = Depends(get_page_cache),
) -> ActionContext:
    return ActionContext(engine=engine, revalidate_path=cache.revalidate_path)


async def form_data(request: Request) -> Dict[str, Any]:
    form = await request.form()
    return {key: form.get(key) for key in form.keys()}


def run_form_action(action: Callable[..., Any], *args) -> Response:
    """
    Call a form action and translate its outcome into a response.

    Redirect → 303, returned state with field errors → 422, returned state
    without them (a storage failure) → 500.
    """
    try:
        state = action(*args)
    except Redirect as nav:
        return RedirectResponse(nav.location, status_code=status.HTTP_303_SEE_OTHER)

    if state is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    code = (
        status.HTTP_422_UNPROCESSABLE_ENTITY
        if state.errors
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(status_code=code, content=state.model_dump(exclude_none=True))
