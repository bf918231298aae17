"""The HTTP application serving the review endpoints."""

from __future__ import annotations

import uvicorn
from sqlalchemy.engine import Engine
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Route

from hamburguer.config import Config
from hamburguer.controller import ReviewController
from hamburguer.di import new_review_controller

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Accept", "Authorization", "Content-Type", "X-CSRF-Token"]
DEFAULT_PORT = 3000


def create_app(controller: ReviewController) -> Starlette:
    """Build the application routing requests to *controller*."""
    routes = [
        Route("/review", controller.save, methods=["POST"]),
        Route("/review/alexa", controller.get_top3_reviews, methods=["POST"]),
        Route("/review/count", controller.count, methods=["GET"]),
    ]
    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=ALLOWED_METHODS,
            allow_headers=ALLOWED_HEADERS,
        )
    ]
    return Starlette(routes=routes, middleware=middleware)


def serve(
    engine: Engine,
    config: Config,
    host: str = "0.0.0.0",
    port: int = DEFAULT_PORT,
) -> None:
    """Run the review server until it is stopped."""
    app = create_app(new_review_controller(engine, config))
    print(f"Server running on port {port}")
    uvicorn.run(app, host=host, port=port)