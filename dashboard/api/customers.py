# dashboard/api/customers.py

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy import case, func, select
from sqlalchemy.engine import Engine

from dashboard.actions.context import ActionContext
from dashboard.actions.customers import (
    CUSTOMERS_PATH,
    create_customer,
    delete_customer,
    update_customer,
)
from dashboard.actions.navigation import PageCache
from dashboard.api.deps import form_data, get_action_context, get_page_cache, run_form_action
from dashboard.db.engine import get_engine
from dashboard.db.schema import customers, invoices
from dashboard.models.customers import CustomerOut, CustomerSummaryOut

router = APIRouter(prefix=CUSTOMERS_PATH, tags=["customers"])


def _amount_with_status(status_value: str):
    return func.coalesce(
        func.sum(case((invoices.c.status == status_value, invoices.c.amount), else_=0)),
        0,
    )


@router.get("", response_model=List[CustomerSummaryOut])
def list_customers(
    engine: Engine = Depends(get_engine),
    cache: PageCache = Depends(get_page_cache),
) -> List[CustomerSummaryOut]:
    """
    Return all customers with invoice count and pending/paid totals in cents.
    """

    def render() -> List[CustomerSummaryOut]:
        with engine.connect() as conn:
            stmt = (
                select(
                    customers.c.id,
                    customers.c.name,
                    customers.c.email,
                    customers.c.image_url,
                    func.count(invoices.c.id).label("total_invoices"),
                    _amount_with_status("pending").label("total_pending"),
                    _amount_with_status("paid").label("total_paid"),
                )
                .select_from(customers.outerjoin(invoices))
                .group_by(
                    customers.c.id,
                    customers.c.name,
                    customers.c.email,
                    customers.c.image_url,
                )
                .order_by(customers.c.name)
            )
            rows = conn.execute(stmt).mappings().all()

        return [CustomerSummaryOut(**row) for row in rows]

    return cache.get_or_render(CUSTOMERS_PATH, render)


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(customer_id: str, engine: Engine = Depends(get_engine)) -> CustomerOut:
    """
    Return a single customer by ID.
    """
    with engine.connect() as conn:
        stmt = (
            select(
                customers.c.id,
                customers.c.name,
                customers.c.email,
                customers.c.image_url,
            )
            .where(customers.c.id == customer_id)
        )

        row = conn.execute(stmt).mappings().first()

    if row is None:
        raise HTTPException(status_code=404, detail="Customer not found")

    return CustomerOut(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        image_url=row["image_url"],
    )


@router.post("/create")
def create_customer_form(
    form: Dict[str, Any] = Depends(form_data),
    ctx: ActionContext = Depends(get_action_context),
):
    return run_form_action(create_customer, ctx, form)


@router.post("/{customer_id}/edit")
def update_customer_form(
    customer_id: str,
    form: Dict[str, Any] = Depends(form_data),
    ctx: ActionContext = Depends(get_action_context),
):
    return run_form_action(update_customer, ctx, customer_id, form)


@router.post("/{customer_id}/delete")
def delete_customer_form(
    customer_id: str,
    ctx: ActionContext = Depends(get_action_context),
):
    state = delete_customer(ctx, customer_id)
    if state is not None:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=state.model_dump(exclude_none=True),
        )
    return RedirectResponse(CUSTOMERS_PATH, status_code=status.HTTP_303_SEE_OTHER)
