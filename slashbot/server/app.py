from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from slashbot.commands.numbers import UniformNumberGenerator
from slashbot.commands.registry import CommandRegistry, build_registry

from .config import BotConfig
from .dispatch import DispatchContext, dispatch

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(*, config: BotConfig, registry: CommandRegistry | None = None) -> FastAPI:
    ctx = DispatchContext(config=config, registry=registry or build_registry())
    app = FastAPI(title="Slashbot Interactions API", version="0.1.0")
    app.state.dispatch_context = ctx

    @app.exception_handler(StarletteHTTPException)
    async def bodiless_method_not_allowed(request: Request, exc: StarletteHTTPException) -> Response:
        # Methods outside ALL_METHODS are rejected by the router before dispatch runs.
        if exc.status_code == 405 and request.url.path == config.interactions_path:
            return Response(status_code=405)
        return await http_exception_handler(request, exc)

    @app.api_route(config.interactions_path, methods=ALL_METHODS)
    async def interactions(request: Request) -> Response:
        body = await request.body() if request.method == "POST" else None
        result = dispatch(ctx, method=request.method, headers=request.headers, body=body)
        if result.payload is None:
            return Response(status_code=result.status_code)
        return JSONResponse(result.payload, status_code=result.status_code)

    @app.get("/api/test")
    def test_roll() -> dict:
        return {"message": str(UniformNumberGenerator(1, 7).next_number())}

    return app
