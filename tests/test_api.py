from datetime import date

from dashboard.auth import hash_password
from dashboard.db.schema import customers, invoices, users


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_create_invoice_redirects_to_list(client, customer_id):
    form = {"customerId": customer_id, "amount": "45.00", "status": "paid"}

    res = client.post("/dashboard/invoices/create", data=form, follow_redirects=False)

    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard/invoices"

    listed = client.get("/dashboard/invoices").json()
    assert len(listed) == 1
    assert listed[0]["amount"] == 4500
    assert listed[0]["status"] == "paid"
    assert listed[0]["customer_name"] == "Delba de Oliveira"


def test_create_invoice_validation_errors(client, customer_id):
    form = {"customerId": customer_id, "amount": "0", "status": "late"}

    res = client.post("/dashboard/invoices/create", data=form, follow_redirects=False)

    assert res.status_code == 422
    assert res.json() == {
        "errors": {
            "amount": ["Please enter an amount greater than $0."],
            "status": ["Please select an invoice status."],
        },
        "message": "Missing Fields. Failed to Create Invoice.",
    }


def test_create_invoice_database_error(client):
    form = {"customerId": "unknown", "amount": "10", "status": "paid"}

    res = client.post("/dashboard/invoices/create", data=form, follow_redirects=False)

    assert res.status_code == 500
    assert res.json() == {"message": "Database Error: Failed to Create Invoice."}


def test_invoice_list_is_cached_until_revalidated(client, engine, invoice_id, customer_id):
    first = client.get("/dashboard/invoices").json()
    assert [inv["id"] for inv in first] == [invoice_id]

    # A write that bypasses the actions is not seen by the cached page
    with engine.begin() as conn:
        conn.execute(
            invoices.insert().values(
                customer_id=customer_id, amount=500, status="paid", date=date(2022, 1, 1)
            )
        )
    assert len(client.get("/dashboard/invoices").json()) == 1

    res = client.post(f"/dashboard/invoices/{invoice_id}/delete", follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard/invoices"

    after = client.get("/dashboard/invoices").json()
    assert [inv["amount"] for inv in after] == [500]


def test_get_invoice(client, invoice_id):
    res = client.get(f"/dashboard/invoices/{invoice_id}")
    assert res.status_code == 200
    assert res.json()["amount"] == 15795
    assert res.json()["date"] == "2023-12-06"

    assert client.get("/dashboard/invoices/does-not-exist").status_code == 404


def test_update_invoice(client, invoice_id, customer_id):
    form = {"customerId": customer_id, "amount": "1.5", "status": "paid"}

    res = client.post(f"/dashboard/invoices/{invoice_id}/edit", data=form, follow_redirects=False)

    assert res.status_code == 303
    assert client.get(f"/dashboard/invoices/{invoice_id}").json()["amount"] == 150


def test_customer_crud(client):
    form = {"name": "Steph Dietz", "email": "steph@dietz.com", "image": "https://example.com/s.png"}
    res = client.post("/dashboard/customers/create", data=form, follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard/customers"

    listed = client.get("/dashboard/customers").json()
    assert len(listed) == 1
    cid = listed[0]["id"]
    assert listed[0]["total_invoices"] == 0

    upd = {"name": "Steph D.", "email": "steph@dietz.com"}
    res = client.post(f"/dashboard/customers/{cid}/edit", data=upd, follow_redirects=False)
    assert res.status_code == 303
    assert client.get(f"/dashboard/customers/{cid}").json()["name"] == "Steph D."

    res = client.post(f"/dashboard/customers/{cid}/delete", follow_redirects=False)
    assert res.status_code == 303
    assert client.get(f"/dashboard/customers/{cid}").status_code == 404
    assert client.get("/dashboard/customers").json() == []


def test_create_customer_validation_errors(client):
    res = client.post(
        "/dashboard/customers/create",
        data={"name": "Jo", "email": "jo"},
        follow_redirects=False,
    )

    assert res.status_code == 422
    assert res.json()["errors"] == {
        "name": ["Must be 3 or more characters long"],
        "email": ["Invalid email address"],
    }


def test_customer_totals(client, engine, customer_id):
    with engine.begin() as conn:
        conn.execute(
            invoices.insert(),
            [
                {"customer_id": customer_id, "amount": 1000, "status": "paid", "date": date(2024, 1, 1)},
                {"customer_id": customer_id, "amount": 250, "status": "pending", "date": date(2024, 1, 2)},
                {"customer_id": customer_id, "amount": 50, "status": "pending", "date": date(2024, 1, 3)},
            ],
        )
        conn.execute(customers.insert().values(id="idle", name="Zed Idle", email="zed@idle.com"))

    listed = client.get("/dashboard/customers").json()

    assert [c["name"] for c in listed] == ["Delba de Oliveira", "Zed Idle"]
    assert listed[0]["total_invoices"] == 3
    assert listed[0]["total_pending"] == 300
    assert listed[0]["total_paid"] == 1000
    assert listed[1]["total_invoices"] == 0
    assert listed[1]["total_pending"] == 0


def test_login(client, engine):
    with engine.begin() as conn:
        conn.execute(
            users.insert().values(
                name="User", email="user@nextmail.com", password=hash_password("123456")
            )
        )

    ok = client.post(
        "/login",
        data={"email": "user@nextmail.com", "password": "123456"},
        follow_redirects=False,
    )
    assert ok.status_code == 303
    assert ok.headers["location"] == "/dashboard"

    bad = client.post(
        "/login",
        data={"email": "user@nextmail.com", "password": "654321"},
        follow_redirects=False,
    )
    assert bad.status_code == 401
    assert bad.json() == {"message": "Invalid credentials."}
