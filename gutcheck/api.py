"""
HTTP service for the gut check engine

Each request is one atomic unit: names are validated before anything
is evaluated, and a missing name returns 400 with no partial result.
"""

import os
import logging
from typing import Optional

from fastapi import FastAPI, APIRouter, HTTPException

from . import __version__
from .config import GutcheckConfig, DEFAULT_CONFIG, load_config
from .errors import MissingNameError
from .evaluator import NameEvaluator
from .links import build_next_step_links
from .schemas import EvaluateRequest, EvaluateResponse, HealthResponse

logger = logging.getLogger(__name__)


def create_app(config: Optional[GutcheckConfig] = None) -> FastAPI:
    """Build an app bound to one read-only config"""

    evaluator = NameEvaluator(config or DEFAULT_CONFIG)

    app = FastAPI(title="Name Gut Check", version=__version__)
    api_router = APIRouter(prefix="/api")

    @api_router.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", version=__version__)

    @api_router.post("/evaluate", response_model=EvaluateResponse)
    async def evaluate(request: EvaluateRequest):
        try:
            if request.mode == "compare":
                report = evaluator.compare(request.name, request.name_b)
                data = report.to_dict()
                preferred = report.preferred_name
                response = EvaluateResponse(
                    mode="compare",
                    a=data['a'],
                    b=data['b'],
                    comparison_summary=data['comparison_summary'],
                    preferred_name=preferred,
                    links=build_next_step_links(preferred),
                )
            else:
                result = evaluator.evaluate(request.name)
                response = EvaluateResponse(
                    mode="single",
                    a=result.to_dict(),
                    preferred_name=result.name,
                    links=build_next_step_links(result.name),
                )
        except MissingNameError as e:
            raise HTTPException(status_code=400, detail=str(e))

        logger.info(f"Evaluated {request.mode} request, preferred '{response.preferred_name}'")
        return response

    app.include_router(api_router)
    return app


def _config_from_env() -> GutcheckConfig:
    config_path = os.environ.get('GUTCHECK_CONFIG')
    if not config_path:
        return DEFAULT_CONFIG
    return load_config(config_path)


app = create_app(_config_from_env())
