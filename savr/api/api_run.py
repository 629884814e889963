import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from savr.api.routes import foods, grocery, inventory, meals, plan, profile
from savr.events.Event_Bus import GLOBAL_EVENT_BUS, INVENTORY_NEAR_EXPIRY
from savr.utilities.exceptions import ItemNotFoundError, ProfileStoreError, StaleIndexError

# Logging
logger = logging.getLogger("savr_app")

# Initialize FastAPI app
app = FastAPI(title="Savr Inventory & Meal Planner API")

# Include routers
app.include_router(profile.router)
app.include_router(inventory.router)
app.include_router(grocery.router)
app.include_router(meals.router)
app.include_router(plan.router)
app.include_router(foods.router)


def _log_near_expiry(event_name, payload):
    item = payload.get("item")
    logger.info(f"{event_name}: {getattr(item, 'name', '?')} expires {getattr(item, 'expiry_label', '?')}")


@app.on_event("startup")
def _startup_observers():
    """Log urgent inventory additions while the app is running."""
    GLOBAL_EVENT_BUS.subscribe(INVENTORY_NEAR_EXPIRY, _log_near_expiry)
    logger.info("Inventory expiry observer started")


@app.on_event("shutdown")
def _shutdown_observers():
    GLOBAL_EVENT_BUS.unsubscribe(INVENTORY_NEAR_EXPIRY, _log_near_expiry)


# -------------------- Error mapping --------------------
@app.exception_handler(ItemNotFoundError)
def _not_found(request: Request, exc: ItemNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(StaleIndexError)
def _stale_index(request: Request, exc: StaleIndexError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(ProfileStoreError)
def _store_error(request: Request, exc: ProfileStoreError):
    logger.error(f"Profile store failure on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Profile store unavailable"})


@app.get("/health")
def health():
    return {"status": "ok"}
