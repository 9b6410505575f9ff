# dashboard/api/invoices.py

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy import select
from sqlalchemy.engine import Engine

from dashboard.actions.context import ActionContext
from dashboard.actions.invoices import (
    INVOICES_PATH,
    create_invoice,
    delete_invoice,
    update_invoice,
)
from dashboard.actions.navigation import PageCache
from dashboard.api.deps import form_data, get_action_context, get_page_cache, run_form_action
from dashboard.db.engine import get_engine
from dashboard.db.schema import customers, invoices
from dashboard.models.invoices import InvoiceOut

router = APIRouter(prefix=INVOICES_PATH, tags=["invoices"])


def _invoice_select():
    return (
        select(
            invoices.c.id,
            invoices.c.customer_id,
            customers.c.name.label("customer_name"),
            customers.c.email.label("customer_email"),
            invoices.c.amount,
            invoices.c.status,
            invoices.c.date,
        )
        .select_from(invoices.join(customers))
    )


def _row_to_invoice(row) -> InvoiceOut:
    return InvoiceOut(
        id=row["id"],
        customer_id=row["customer_id"],
        customer_name=row["customer_name"],
        customer_email=row["customer_email"],
        amount=row["amount"],
        status=row["status"],
        date=row["date"],
    )


@router.get("", response_model=List[InvoiceOut])
def list_invoices(
    engine: Engine = Depends(get_engine),
    cache: PageCache = Depends(get_page_cache),
) -> List[InvoiceOut]:
    """
    Return all invoices, newest first. Served from the page cache until a
    write to invoices revalidates it.
    """

    def render() -> List[InvoiceOut]:
        with engine.connect() as conn:
            stmt = _invoice_select().order_by(invoices.c.date.desc(), invoices.c.id)
            rows = conn.execute(stmt).mappings().all()
        return [_row_to_invoice(row) for row in rows]

    return cache.get_or_render(INVOICES_PATH, render)


@router.get("/{invoice_id}", response_model=InvoiceOut)
def get_invoice(invoice_id: str, engine: Engine = Depends(get_engine)) -> InvoiceOut:
    with engine.connect() as conn:
        stmt = _invoice_select().where(invoices.c.id == invoice_id)
        row = conn.execute(stmt).mappings().first()

    if row is None:
        raise HTTPException(status_code=404, detail="Invoice not found")

    return _row_to_invoice(row)


@router.post("/create")
def create_invoice_form(
    form: Dict[str, Any] = Depends(form_data),
    ctx: ActionContext = Depends(get_action_context),
):
    return run_form_action(create_invoice, ctx, form)


@router.post("/{invoice_id}/edit")
def update_invoice_form(
    invoice_id: str,
    form: Dict[str, Any] = Depends(form_data),
    ctx: ActionContext = Depends(get_action_context),
):
    return run_form_action(update_invoice, ctx, invoice_id, form)


@router.post("/{invoice_id}/delete")
def delete_invoice_form(
    invoice_id: str,
    ctx: ActionContext = Depends(get_action_context),
):
    state = delete_invoice(ctx, invoice_id)
    if state is not None:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=state.model_dump(exclude_none=True),
        )
    return RedirectResponse(INVOICES_PATH, status_code=status.HTTP_303_SEE_OTHER)
