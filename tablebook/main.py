import yaml
from fastapi import FastAPI

from tablebook.presentation.routers import router
from tablebook.services.reservation_service import get_reservation_repository

app = FastAPI(title="Restaurant Reservations", description="API for managing reservations in a restaurant")


# Use the contractual schema
def custom_openapi():
    from tablebook.infrastructure.config import settings
    with open(settings.openapi_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@app.on_event("startup")
def _open_reservation_store_on_startup() -> None:
    """
    Create the process-wide store up front (tables included for the sql backend) instead of on
    the first request
    """
    get_reservation_repository()


app.openapi = custom_openapi
app.include_router(router)
