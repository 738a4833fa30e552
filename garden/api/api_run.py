from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from garden.domain.errors import GardenError
from garden.api.routes import plants, gardens

# Logging
logger = logging.getLogger("garden_app")

# Initialize FastAPI app
app = FastAPI(title="Garden Planner API")

# The browser client is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(plants.router)
app.include_router(gardens.router)


# -------------------- Error mapping --------------------
@app.exception_handler(GardenError)
async def garden_error_handler(request: Request, exc: GardenError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.detail)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors like any other validation failure: 400, not 422."""
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()) if p != 'body')}: {err.get('msg')}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=400, content={"message": "Invalid request body", "error": problems})


# -------------------- Health --------------------
@app.get("/api/health")
def health():
    return {"status": "ok"}
