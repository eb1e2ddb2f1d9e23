"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from budget_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware, register_error_handlers
from budget_gateway.api.v1 import categories, consult, dashboard, debts, expenses, incomes, savings_goals
from budget_gateway.infrastructure.observability.logging import setup_logging
from budget_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Budget Gateway",
        description="Budget tracking and affordability consult service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(incomes.router, prefix="/v1", tags=["incomes"])
    app.include_router(expenses.router, prefix="/v1", tags=["expenses"])
    app.include_router(debts.router, prefix="/v1", tags=["debts"])
    app.include_router(savings_goals.router, prefix="/v1", tags=["savings"])
    app.include_router(categories.router, prefix="/v1", tags=["categories"])
    app.include_router(dashboard.router, prefix="/v1", tags=["dashboard"])
    app.include_router(consult.router, prefix="/v1", tags=["consult"])

    return app


app = create_app()
