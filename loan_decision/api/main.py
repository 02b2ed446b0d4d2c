"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_decision.api.dependencies import build_decision_engine
from loan_decision.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_decision.api.v1 import decision
from loan_decision.infrastructure.observability.logging import setup_logging
from loan_decision.config import Settings, settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(app_settings: Settings = settings) -> FastAPI:
    """
    Create and configure FastAPI application.

    The decision rules are validated here, so a misconfigured environment
    stops the service at startup instead of failing every request.
    """
    app = FastAPI(
        title="Loan Decision Engine",
        description="Maximum approvable loan amount and period for a customer",
        version="0.1.0",
    )
    app.state.decision_engine = build_decision_engine(app_settings)

    # Last added runs first: request ID is set before latency is measured
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": app_settings.service_name}

    if app_settings.metrics_enabled:
        @app.get("/metrics")
        def metrics():
            return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(decision.router, prefix="/v1", tags=["decisions"])

    return app


app = create_app()
