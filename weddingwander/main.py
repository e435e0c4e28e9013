from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weddingwander.accounts.router import router as accounts_router
from weddingwander.config import settings
from weddingwander.database import close_database, get_store, init_database
from weddingwander.exception_handlers import register_exception_handlers
from weddingwander.logging_config import setup_logging
from weddingwander.registrations.router import router as registrations_router
from weddingwander.weddings.router import router as weddings_router
from weddingwander.weddings.seed import seed_if_needed


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await init_database()
    await seed_if_needed(get_store())
    yield
    await close_database()


app = FastAPI(
    title="WeddingWander",
    description="Discover wedding events and register to attend",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(accounts_router, prefix="/api/v1/auth", tags=["auth"])
app.include_router(weddings_router, prefix="/api/v1/weddings", tags=["weddings"])
app.include_router(registrations_router, prefix="/api/v1/registrations", tags=["registrations"])


@app.get("/api/v1/health")
async def health():
    from weddingwander.database import check_health

    await check_health()
    return {"status": "healthy"}
