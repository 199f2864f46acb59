from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
import logging

from mealmatch.api.routes import inventory, pantry, shopping, suggestions

# Logging
logger = logging.getLogger("mealmatch_app")

# Initialize FastAPI app
app = FastAPI(title="Meal Match: inventory-aware recipe suggestions")

# Include routers
app.include_router(suggestions.router)
app.include_router(inventory.router)
app.include_router(shopping.router)
app.include_router(pantry.router)


@app.exception_handler(RequestValidationError)
async def _log_rejected_payload(request: Request, exc: RequestValidationError):
    logger.warning("Rejected payload on %s: %d validation errors", request.url.path, len(exc.errors()))
    return await request_validation_exception_handler(request, exc)


# -------------------- API: Health --------------------
@app.get('/api/health')
def api_health():
    return {'status': 'ok'}
