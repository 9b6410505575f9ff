# dashboard/actions/customers.py

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError

from dashboard.actions.context import ActionContext
from dashboard.db.schema import customers
from dashboard.models.customers import CustomerForm
from dashboard.models.forms import FormState, flatten_errors, parse_form

logger = logging.getLogger(__name__)

CUSTOMERS_PATH = "/dashboard/customers"

_DIALECT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


def insert_customer_ignoring_conflict(dialect_name: str, row: dict):
    """INSERT ... ON CONFLICT (id) DO NOTHING for the engine's dialect."""
    try:
        dialect_insert = _DIALECT_INSERTS[dialect_name]
    except KeyError:
        raise ValueError(f"Conflict-ignore insert not supported on {dialect_name!r}")

    stmt = dialect_insert(customers).values(**row)
    return stmt.on_conflict_do_nothing(index_elements=[customers.c.id])


def create_customer(
    ctx: ActionContext,
    form: Mapping[str, Any],
    prev_state: Optional[FormState] = None,
) -> Optional[FormState]:
    try:
        data = parse_form(CustomerForm, form)
    except ValidationError as exc:
        return FormState(
            errors=flatten_errors(exc),
            message="Missing Fields. Failed to Add Customer.",
        )

    customer_id = ctx.new_id()
    stmt = insert_customer_ignoring_conflict(
        ctx.engine.dialect.name,
        {
            "id": customer_id,
            "name": data.name,
            "email": data.email,
            "image_url": data.image_url,
        },
    )

    try:
        with ctx.engine.begin() as conn:
            result = conn.execute(stmt)
    except SQLAlchemyError:
        logger.exception("Failed to add customer %s", customer_id)
        return FormState(message="Database Error: Failed to Add Customer.")

    if result.rowcount == 0:
        logger.warning("Customer id %s already exists; nothing inserted", customer_id)

    ctx.revalidate_path(CUSTOMERS_PATH)
    ctx.redirect(CUSTOMERS_PATH)


def update_customer(
    ctx: ActionContext,
    customer_id: str,
    form: Mapping[str, Any],
    prev_state: Optional[FormState] = None,
) -> Optional[FormState]:
    try:
        data = parse_form(CustomerForm, form)
    except ValidationError as exc:
        return FormState(
            errors=flatten_errors(exc),
            message="Missing Fields. Failed to Update Customer.",
        )

    stmt = (
        customers.update()
        .where(customers.c.id == customer_id)
        .values(name=data.name, email=data.email, image_url=data.image_url)
    )

    try:
        with ctx.engine.begin() as conn:
            conn.execute(stmt)
    except SQLAlchemyError:
        logger.exception("Failed to update customer %s", customer_id)
        return FormState(message="Database Error: Failed to Update Customer.")

    ctx.revalidate_path(CUSTOMERS_PATH)
    ctx.redirect(CUSTOMERS_PATH)


def delete_customer(ctx: ActionContext, customer_id: str) -> Optional[FormState]:
    # A customer that still has invoices is rejected by the foreign key
    try:
        with ctx.engine.begin() as conn:
            conn.execute(customers.delete().where(customers.c.id == customer_id))
    except SQLAlchemyError:
        logger.exception("Failed to delete customer %s", customer_id)
        return FormState(message="Database Error: Failed to Delete Customer.")

    ctx.revalidate_path(CUSTOMERS_PATH)
    return None
