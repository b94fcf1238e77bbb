import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Import lifespan manager and API router from their new locations
from app.db.lifespan import lifespan
from app.api.v1.router import api_router
from app.core.config import APP_HOST, APP_PORT, CORS_ORIGINS
from app.domains.common.utils.response import INTERNAL_ERROR_MESSAGE, WebResponse

logger = logging.getLogger(__name__)

# Create FastAPI app instance using the lifespan manager
app = FastAPI(
    title="IoT Device API",
    description="API for managing devices and sensors",
    version="1.0.0",
    lifespan=lifespan,  # Use the imported lifespan context manager
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],  # 允許所有方法
    allow_headers=["*"],  # 允許所有頭部
)
logger.info(f"CORS middleware added with origins: {CORS_ORIGINS}")


# --- Exception Handlers ---
@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    """無法解析的請求（非 JSON 物件的 body、非整數的分頁參數）一律回 400"""
    if any(error.get("loc", ("",))[0] == "body" for error in exc.errors()):
        message = "Failed to parse request body"
    else:
        message = "Failed to parse request parameters"
    logger.warning(f"{message} : {request.method} {request.url.path} {exc.errors()}")
    return WebResponse.error(status.HTTP_400_BAD_REQUEST, message).to_response()


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True
    )
    return WebResponse.error(
        status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
    ).to_response()


# --- Test Endpoint (Before API v1 Router) ---
@app.get("/ping", tags=["Test"])
async def ping():
    return {"message": "pong"}


# --- Include API Routers ---
app.include_router(api_router, prefix="/api/v1")  # Add a /api/v1 prefix
logger.info("Included API router v1 at /api/v1.")


# --- Uvicorn Entry Point (for direct run, if needed) ---
if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Uvicorn server on {APP_HOST}:{APP_PORT}...")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
