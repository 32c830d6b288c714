"""
HTTP binding for the wind park.

Run:  windpark --config park.yaml
"""

import logging
import threading
from typing import List

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from .core import WindPark
from .exceptions import InvalidArgumentError

logger = logging.getLogger("windpark.api")


class ProductionPlanItem(BaseModel):
    """Expected production of a single turbine."""

    identifier: str
    expected_production: int = Field(..., alias="expectedProduction", ge=0)

    model_config = ConfigDict(populate_by_name=True)


def create_app(park: WindPark, prefix: str = "/api") -> FastAPI:
    """Create the FastAPI application serving ``park``.

    Every park operation runs under one lock so concurrent requests see a
    consistent price, target and fleet.
    """
    app = FastAPI(
        title="Wind Park API",
        version="1.0.0",
        description="Plans which wind turbines run to meet the production target."
    )
    app.state.park = park
    app.state.lock = threading.Lock()
    router = APIRouter(prefix=prefix)

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        logger.warning(f"{request.method} {request.url.path} - {exc}")
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        messages = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        logger.warning(f"{request.method} {request.url.path} - {messages}")
        return PlainTextResponse(messages, status_code=400)

    @router.post("/set-market-price")
    def set_market_price(market_price: int = Query(..., alias="marketPrice")):
        with app.state.lock:
            park.set_market_price(market_price)
        logger.info(f"POST {prefix}/set-market-price - Successfully set market price to {market_price}€")
        return Response(status_code=200)

    @router.post("/update-production-target")
    def update_production_target(delta: int = Query(...)):
        with app.state.lock:
            park.update_production_target(delta)
            target = park.get_production_target()
        logger.info(
            f"POST {prefix}/update-production-target - Successfully updated production target to {target}MWh"
        )
        return Response(status_code=200)

    @router.get("/production-plan", response_model=List[ProductionPlanItem])
    def production_plan():
        with app.state.lock:
            plan = park.compute_production_plan()
        logger.info(f"GET {prefix}/production-plan - Successfully retrieved the production plan")
        return [entry.to_dict() for entry in plan]

    app.include_router(router)
    return app
