# dashboard/actions/__init__.py
"""
Form actions: validate a submitted form, write one row, then invalidate the
affected page and redirect to it.
"""

from .auth import authenticate
from .context import ActionContext
from .customers import create_customer, delete_customer, update_customer
from .invoices import create_invoice, delete_invoice, update_invoice
from .navigation import PageCache, Redirect, redirect

__all__ = [
    "ActionContext",
    "PageCache",
    "Redirect",
    "authenticate",
    "create_customer",
    "create_invoice",
    "delete_customer",
    "delete_invoice",
    "redirect",
    "update_customer",
    "update_invoice",
]
