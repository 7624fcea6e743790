# server/main.py

import logging
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from core import config
from core.errors import ApiError, MISSING_FIELDS
from api import auth, products
from database import build_engine, build_session_factory, init_db


logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(database_url: str | None = None, protect_product_routes: bool | None = None) -> FastAPI:
    """
    Builds the application with its own engine and session factory.
    Product routes go through the token guard only when protection is on.
    """
    engine = build_engine(database_url or config.DATABASE_URL)
    init_db(engine)

    if protect_product_routes is None:
        protect_product_routes = config.PROTECT_PRODUCT_ROUTES

    app = FastAPI(
        title="Product Catalog",
        description="User signup/login and product CRUD.",
        version="1.0.0",
    )
    app.state.engine = engine
    app.state.SessionLocal = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"message": MISSING_FIELDS})

    @app.get("/health", tags=["monitoring"])
    def health_check():
        return {"status": "ok"}

    product_dependencies = [Depends(auth.require_token)] if protect_product_routes else []
    if protect_product_routes:
        logger.info("Product routes require a token.")

    app.include_router(auth.router)
    app.include_router(products.router, dependencies=product_dependencies)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
