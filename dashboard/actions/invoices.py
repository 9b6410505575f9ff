# dashboard/actions/invoices.py

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from dashboard.actions.context import ActionContext
from dashboard.db.schema import invoices
from dashboard.models.forms import FormState, flatten_errors, parse_form
from dashboard.models.invoices import InvoiceForm

logger = logging.getLogger(__name__)

INVOICES_PATH = "/dashboard/invoices"


def create_invoice(
    ctx: ActionContext,
    form: Mapping[str, Any],
    prev_state: Optional[FormState] = None,
) -> Optional[FormState]:
    try:
        data = parse_form(InvoiceForm, form)
    except ValidationError as exc:
        return FormState(
            errors=flatten_errors(exc),
            message="Missing Fields. Failed to Create Invoice.",
        )

    stmt = invoices.insert().values(
        customer_id=data.customer_id,
        amount=data.amount_in_cents,
        status=data.status,
        date=ctx.today(),
    )

    try:
        with ctx.engine.begin() as conn:
            conn.execute(stmt)
    except SQLAlchemyError:
        logger.exception("Failed to create invoice for customer %s", data.customer_id)
        return FormState(message="Database Error: Failed to Create Invoice.")

    ctx.revalidate_path(INVOICES_PATH)
    ctx.redirect(INVOICES_PATH)


def update_invoice(
    ctx: ActionContext,
    invoice_id: str,
    form: Mapping[str, Any],
    prev_state: Optional[FormState] = None,
) -> Optional[FormState]:
    try:
        data = parse_form(InvoiceForm, form)
    except ValidationError as exc:
        return FormState(
            errors=flatten_errors(exc),
            message="Missing Fields. Failed to Update Invoice.",
        )

    # No existence check: an unknown id simply matches no row
    stmt = (
        invoices.update()
        .where(invoices.c.id == invoice_id)
        .values(
            customer_id=data.customer_id,
            amount=data.amount_in_cents,
            status=data.status,
        )
    )

    try:
        with ctx.engine.begin() as conn:
            conn.execute(stmt)
    except SQLAlchemyError:
        logger.exception("Failed to update invoice %s", invoice_id)
        return FormState(message="Database Error: Failed to Update Invoice.")

    ctx.revalidate_path(INVOICES_PATH)
    ctx.redirect(INVOICES_PATH)


def delete_invoice(ctx: ActionContext, invoice_id: str) -> Optional[FormState]:
    """
    Delete an invoice by id. The list page that issued the delete is
    invalidated but not redirected to.
    """
    try:
        with ctx.engine.begin() as conn:
            conn.execute(invoices.delete().where(invoices.c.id == invoice_id))
    except SQLAlchemyError:
        logger.exception("Failed to delete invoice %s", invoice_id)
        return FormState(message="Database Error: Failed to Delete Invoice.")

    ctx.revalidate_path(INVOICES_PATH)
    return None
