from fastapi import FastAPI

from src.projects_api.api.routes import fallback, meta, test_projects


def include_routers(app: FastAPI, enable_openapi: bool = True) -> None:
    """Register all routers. The catch-all fallback router must come last."""
    app.include_router(meta.router)
    if enable_openapi:
        app.include_router(meta.docs_router)
    app.include_router(test_projects.router)
    app.include_router(fallback.router)
