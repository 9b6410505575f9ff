import os
import sys
from datetime import date

import pytest
from fastapi.testclient import TestClient

# Make sure the project root is on sys.path so 'dashboard' is importable
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from dashboard import app
from dashboard.actions.context import ActionContext
from dashboard.actions.navigation import PageCache
from dashboard.api.deps import get_page_cache
from dashboard.db.engine import create_db_engine, get_engine
from dashboard.db.schema import customers, invoices, metadata

TODAY = date(2024, 3, 14)
CUSTOMER_ID = "3958dc9e-712f-4377-85e9-fec4b6a6442a"


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def customer_id(engine) -> str:
    with engine.begin() as conn:
        conn.execute(
            customers.insert().values(
                id=CUSTOMER_ID,
                name="Delba de Oliveira",
                email="delba@oliveira.com",
                image_url="https://example.com/delba.png",
            )
        )
    return CUSTOMER_ID


@pytest.fixture
def invoice_id(engine, customer_id) -> str:
    with engine.begin() as conn:
        result = conn.execute(
            invoices.insert().values(
                customer_id=customer_id,
                amount=15795,
                status="pending",
                date=date(2023, 12, 6),
            )
        )
    return result.inserted_primary_key[0]


@pytest.fixture
def revalidated():
    """Paths passed to revalidate_path, in call order."""
    return []


@pytest.fixture
def ctx(engine, revalidated) -> ActionContext:
    return ActionContext(
        engine=engine,
        revalidate_path=revalidated.append,
        today=lambda: TODAY,
    )


@pytest.fixture
def page_cache():
    return PageCache()


@pytest.fixture
def client(engine, page_cache):
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_page_cache] = lambda: page_cache
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
