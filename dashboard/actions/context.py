# dashboard/actions/context.py

import uuid
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, NoReturn

from sqlalchemy.engine import Engine
from zoneinfo import ZoneInfo

from dashboard.actions.navigation import redirect as _redirect
from dashboard.config import get_settings


def current_date() -> date:
    return datetime.now(ZoneInfo(get_settings().timezone)).date()


def generate_id() -> str:
    return str(uuid.uuid4())


@dataclass
class ActionContext:
    """
    Collaborators a form action needs besides the submitted form.

    revalidate_path and redirect are the two effects that follow a
    successful write; tests swap them for recorders.
    """

    engine: Engine
    revalidate_path: Callable[[str], None]
    redirect: Callable[[str], NoReturn] = _redirect
    today: Callable[[], date] = current_date
    new_id: Callable[[], str] = generate_id
