from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from controller import Auth, Message
from config import Env, get_env
from database import connect_db
from errors import APIError, NotFound
import logging
import uvicorn

logger = logging.getLogger(__name__)

FRONTEND_DIST = Path(__file__).resolve().parent / ".." / "frontend" / "dist"


def configure_logging(env: Env):
    logging.basicConfig(
        level=logging.INFO if env.is_production else logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def api_error_handler(request: Request, exc: APIError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def add_spa_fallback(app: FastAPI, dist_dir: Path):
    """Serve the built frontend, answering unknown paths with index.html."""
    root = dist_dir.resolve()

    @app.get("/{full_path:path}", include_in_schema=False)
    def serve_frontend(full_path: str):
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and root in candidate.parents:
            return FileResponse(candidate)
        index = root / "index.html"
        if not index.is_file():
            raise NotFound("Not Found")
        return FileResponse(index)


def create_app(env: Optional[Env] = None, frontend_dist: Optional[Path] = None) -> FastAPI:
    env = env or get_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        connect_db(env)
        yield

    app = FastAPI(title="BradChat", lifespan=lifespan)
    app.dependency_overrides[get_env] = lambda: env
    app.add_exception_handler(APIError, api_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[env.CLIENT_URL] if env.CLIENT_URL else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(Auth.router, prefix="/api/auth")
    app.include_router(Message.router, prefix="/api/messages")

    if env.is_production:
        add_spa_fallback(app, frontend_dist or FRONTEND_DIST)

    return app


def run():
    env = get_env()
    configure_logging(env)
    app = create_app(env)
    logger.info("Server is running on port %s", env.PORT)
    uvicorn.run(app, host="0.0.0.0", port=env.PORT)


if __name__ == "__main__":
    run()
