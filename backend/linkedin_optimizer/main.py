import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from linkedin_optimizer.config import settings
from linkedin_optimizer.errors import PROFILE_REQUIRED_MESSAGE, OptimizerError
from linkedin_optimizer.api import linkedin_routes, llm_routes

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="AI-powered LinkedIn headline, keyword, experience and summary suggestions",
)

# ── CORS ────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Errors ──────────────────────────────────────────────────────────────────


@app.exception_handler(OptimizerError)
async def optimizer_error_handler(request: Request, exc: OptimizerError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": PROFILE_REQUIRED_MESSAGE})


# ── Routers ─────────────────────────────────────────────────────────────────

app.include_router(linkedin_routes.router, prefix="/api/linkedin", tags=["LinkedIn"])
app.include_router(llm_routes.router, prefix="/api/llm", tags=["LLM"])

# ── Health Check ────────────────────────────────────────────────────────────


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name, "version": "0.1.0"}
