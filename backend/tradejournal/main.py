"""
Trade Journal Backend - FastAPI Application

Trade journaling API: accounts, trades, collections and Stripe subscriptions.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradejournal.config import get_settings
from tradejournal.database.connections import close_connections, get_database
from tradejournal.database.registry import initialize_database
from tradejournal.routers import auth, billing, collections, health, trades

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("tradejournal")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Create indexes (unique username and email)
    - Ensure the identifier counters document exists

    Shutdown:
    - Close all database connections
    """
    logger.info("Starting up Trade Journal backend...")

    try:
        db = await get_database()
        await initialize_database(db)
        logger.info("Indexes created and counters initialized")
    except Exception as e:
        logger.warning("Database initialization warning: %s", e)

    yield

    logger.info("Shutting down Trade Journal backend...")
    await close_connections()
    logger.info("Database connections closed")


app = FastAPI(
    title="Trade Journal API",
    description="""
## Trade Journal API

Record trades, group them in collections and manage a subscription plan.

### Authentication
Log in via `POST /api/auth/login` to start a session. All protected
endpoints require the returned token as a query parameter:
```
GET /api/trades?token=your_session_token
```
`POST /api/auth/logout` ends the session and invalidates the token.

### Billing
Stripe endpoints answer 503 unless `STRIPE_SECRET_KEY` is configured.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router, prefix="/api")
app.include_router(trades.router, prefix="/api")
app.include_router(collections.router, prefix="/api")
app.include_router(billing.router, prefix="/api")


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Trade Journal API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
