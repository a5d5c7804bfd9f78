from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from categories import router as categories_router
from core import config
from core.db import Database
from core.errors import register_exception_handlers
from core.logging_setup import configure_logging
from users import router as users_router

# Local .env feeds PG* and friends; config reads the environment on each call.
load_dotenv()
configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, owned by app.state for the app's lifetime.
    app.state.db = await Database.connect()
    try:
        yield
    finally:
        await app.state.db.close()
        app.state.db = None


_docs_enabled = config.api_docs_enabled()

app = FastAPI(
    title="Recipe API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api-docs" if _docs_enabled else None,
    openapi_url="/api-docs/openapi.json" if _docs_enabled else None,
    redoc_url=None,
)

_cors_origins = config.cors_origins()
if _cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

app.include_router(users_router.router, prefix="/api/user", tags=["Users"])
app.include_router(categories_router.router, prefix="/api/category", tags=["Categories"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "recipe api"}
