from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from calcsuite.api.routes import age, area, basic, conversions, emi, gst, percentage, tds
from calcsuite.api.routes.frontend import build_frontend_router
from calcsuite.core.config import get_settings
from calcsuite.core.exceptions import register_exception_handlers
from calcsuite.core.logging import configure_logging
from calcsuite.core.middleware import RequestContextMiddleware


def create_app() -> FastAPI:
    """
    Application factory for the calculator service.
    Calculator routes live in their respective modules; the frontend router is
    attached last because it answers every remaining GET path.
    """

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.api_title,
        description="Stateless financial and unit-conversion calculators.",
        version=settings.api_version,
    )

    cors_origins = settings.resolved_cors_origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=False,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)

    app.include_router(basic.router)
    app.include_router(gst.router)
    app.include_router(tds.router)
    app.include_router(emi.router)
    app.include_router(percentage.router)
    app.include_router(conversions.router)
    app.include_router(age.router)
    app.include_router(area.router)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(build_frontend_router(settings.frontend_dir))

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
