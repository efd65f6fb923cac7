from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from loguru import logger
import uuid
from moodreply.core.config import settings
from moodreply.core.exceptions import AppException, app_exception_handler
from moodreply.api.endpoints import router as api_router
from moodreply.api.dependencies import get_credential_store, get_gemini_transport, get_provider_client
from moodreply.core.logging import setup_logging
from moodreply.core.constants import ProviderConfig
from moodreply.services.credentials import CredentialStore

def seed_configured_credential(store: CredentialStore) -> None:
    """Register GEMINI_API_KEY once, unless a Gemini credential already exists."""
    if not settings.GEMINI_API_KEY:
        return
    if store.find_by_provider_family(ProviderConfig.PROVIDER_FAMILY) is not None:
        return
    store.add(
        display_name="Gemini",
        secret=settings.GEMINI_API_KEY,
        provider_family="Gemini",
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    seed_configured_credential(get_credential_store())
    logger.info("🚀 Application startup")
    yield
    await get_gemini_transport().aclose()
    get_provider_client.cache_clear()
    get_gemini_transport.cache_clear()
    logger.info("🛑 Application shutdown")

app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(AppException, app_exception_handler)

@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    request_id = str(uuid.uuid4())
    with logger.contextualize(request_id=request_id):
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

app.include_router(api_router, prefix="/api/v1")

@app.get("/health")
async def health_check():
    return {"status": "ok", "project": settings.PROJECT_NAME}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("moodreply.main:app", host="127.0.0.1", port=8000, reload=True)
