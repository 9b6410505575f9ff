# dashboard/actions/auth.py

from typing import Any, Mapping, Optional

from dashboard.actions.context import ActionContext
from dashboard.auth import CREDENTIALS_PROVIDER, AuthError, CredentialsSignin, sign_in


def authenticate(
    ctx: ActionContext,
    form: Mapping[str, Any],
    prev_state: Optional[str] = None,
) -> Optional[str]:
    """
    Sign in with the submitted email/password.

    Returns None on success, otherwise the message to show on the login form.
    Errors outside the AuthError family propagate.
    """
    try:
        sign_in(CREDENTIALS_PROVIDER, form, engine=ctx.engine)
    except AuthError as error:
        if error.type == CredentialsSignin.type:
            return "Invalid credentials."
        return "Something went wrong."
    return None
