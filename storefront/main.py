import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.core.config import CORS_ALLOW_ORIGIN_REGEX, CORS_ORIGINS, DATABASE_URL, ENV
from storefront.core.errors import register_exception_handlers
from storefront.core.logging_setup import configure_logging
from storefront.middleware.observability import ObservabilityMiddleware
from storefront.store.entity_store import build_store

from storefront.routers.menu import router as menu_router
from storefront.routers.admin_menu import router as admin_menu_router
from storefront.routers.orders import router as orders_router
from storefront.routers.settings import router as settings_router
from storefront.routers.menu_categories import router as categories_router
from storefront.routers.reviews import router as reviews_router
from storefront.routers.promotions import router as promotions_router
from storefront.routers.scheduled_orders import router as scheduled_orders_router
from storefront.routers.internal_metrics import router as internal_metrics_router

configure_logging()

logger = logging.getLogger(__name__)
STARTUP_PREFIX = "[STARTUP]"


@asynccontextmanager
async def lifespan(_: FastAPI):
    _startup_tasks()
    yield


app = FastAPI(
    title="Sabor Digital API",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_origin_regex=CORS_ALLOW_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(ObservabilityMiddleware)
register_exception_handlers(app)

# criado no import para que o TestClient funcione sem lifespan
app.state.store = build_store()


def _startup_tasks() -> None:
    store = app.state.store
    logger.info(
        "%s ready env=%s database=%s menu_items=%s categories=%s",
        STARTUP_PREFIX,
        ENV,
        DATABASE_URL.split("://", 1)[0],
        len(store.get_menu_items()),
        len(store.get_categories()),
    )


app.include_router(menu_router)
app.include_router(admin_menu_router)
app.include_router(orders_router)
app.include_router(settings_router)
app.include_router(categories_router)
app.include_router(reviews_router)
app.include_router(promotions_router)
app.include_router(scheduled_orders_router)
app.include_router(internal_metrics_router)


@app.get("/")
def root():
    return {"status": "ok", "service": "Sabor Digital API"}


@app.get("/health")
def health():
    return {"status": "ok"}
