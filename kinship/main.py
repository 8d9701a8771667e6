import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from kinship.core.config import CORS_ORIGINS, LOG_LEVEL
from kinship.core.db import SessionLocal, init_db
from kinship.services.store import ConnectionStore
from kinship.utils.llm_client import SummarizerClient

# === Logging ===
logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)

# === Routers ===
from kinship.routes import connections, drafts, interactions


# === App lifecycle ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        init_db()
        store = ConnectionStore(SessionLocal)
        store.load()
        app.state.store = store
        app.state.summarizer = SummarizerClient()
        if app.state.summarizer.offline:
            logger.warning("⚠️ OPENAI_API_KEY not set, summaries run in offline mode.")
        logger.info("✅ Startup complete: connections loaded.")
        yield
    except Exception as e:
        logger.exception("❌ Startup failed.")
        raise e
    finally:
        logger.info("🛑 Shutdown complete.")


def create_app(lifespan=lifespan) -> FastAPI:
    app = FastAPI(
        title="Kinship API",
        version="1.0.0",
        lifespan=lifespan
    )

    # === Global Exception Handler ===
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        logger.warning(f"⚠️ Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=422,
            content={"detail": jsonable_encoder(exc.errors())}
        )

    # === CORS ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # === Health Check ===
    @app.get("/ping")
    async def ping():
        return {"status": "ok", "message": "Kinship API is live"}

    # === Mount API Routes ===
    app.include_router(connections.router, prefix="/api")
    app.include_router(interactions.router, prefix="/api")
    app.include_router(drafts.router, prefix="/api")

    return app


app = create_app()

# === Dev Hot Reload ===
if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run("kinship.main:app", host="0.0.0.0", port=8000, reload=os.getenv("ENV") == "dev")
