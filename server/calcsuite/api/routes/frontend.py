from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from calcsuite.core.exceptions import NotFoundError


def build_frontend_router(frontend_dir: Path) -> APIRouter:
    """
    Serves static assets from ``frontend_dir`` and falls back to ``index.html``
    for every other non-API path so client-side routing keeps working.
    """
    root = frontend_dir.resolve()
    router = APIRouter(tags=["frontend"])

    @router.get("/{asset_path:path}", include_in_schema=False)
    async def serve_frontend(asset_path: str) -> FileResponse:
        if asset_path == "api" or asset_path.startswith("api/"):
            raise NotFoundError(f"No API endpoint at '/{asset_path}'.")

        if asset_path:
            candidate = (root / asset_path).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return FileResponse(candidate)

        index = root / "index.html"
        if not index.is_file():
            raise NotFoundError("Frontend is not available.")
        return FileResponse(index)

    return router
