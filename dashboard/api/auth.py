# dashboard/api/auth.py

from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse

from dashboard.actions.auth import authenticate
from dashboard.actions.context import ActionContext
from dashboard.api.deps import form_data, get_action_context

router = APIRouter(tags=["auth"])

DASHBOARD_PATH = "/dashboard"


@router.post("/login")
def login(
    form: Dict[str, Any] = Depends(form_data),
    ctx: ActionContext = Depends(get_action_context),
):
    error_message = authenticate(ctx, form)
    if error_message is not None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": error_message},
        )
    return RedirectResponse(DASHBOARD_PATH, status_code=status.HTTP_303_SEE_OTHER)
