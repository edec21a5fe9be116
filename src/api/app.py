import logging
import random
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from src.adapter.memory.store import EntityStore
from src.adapter.memory.unit_of_work import InMemoryUnitOfWork
from src.adapter.seed import seed_demo_data
from src.adapter.services.logging_notification_sink import LoggingNotificationSink
from src.adapter.services.simulated_payment_gateway import SimulatedPaymentGateway
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(
        status_code=exc.status_code, content={"error": {**error_dict, **exc.details}}
    )


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.STORE_BACKEND == "memory" and ApplicationConfig.SEED_DEMO_DATA:
            await seed_demo_data(InMemoryUnitOfWork(app.state.entity_store))
        yield

    app = FastAPI(title="Property Management API", version="0.1.0", lifespan=lifespan)

    app.state.entity_store = EntityStore()
    app.state.notifier = LoggingNotificationSink()
    app.state.payment_gateway = SimulatedPaymentGateway(
        rng=random.Random(ApplicationConfig.PAYMENT_RANDOM_SEED),
        delay_seconds=ApplicationConfig.PAYMENT_DELAY_SECONDS,
        success_rate=ApplicationConfig.PAYMENT_SUCCESS_RATE,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import (
        apartments,
        auth,
        dashboard,
        health_check,
        locations,
        payments,
        service_requests,
        users,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(apartments.router, tags=["Apartments"])
    app.include_router(service_requests.router, tags=["Service Requests"])
    app.include_router(payments.router, tags=["Payments"])
    app.include_router(users.router, tags=["Users"])
    app.include_router(locations.router, tags=["Locations"])
    app.include_router(dashboard.router, tags=["Dashboard"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
