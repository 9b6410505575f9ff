from fastapi import FastAPI

from dashboard.api.auth import router as auth_router
from dashboard.api.customers import router as customers_router
from dashboard.api.invoices import router as invoices_router
from dashboard.config import get_settings
from dashboard.logging_config import setup_logging

settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(auth_router)
app.include_router(customers_router)
app.include_router(invoices_router)
