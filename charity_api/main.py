import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from charity_api.config import get_settings
from charity_api.database import Base, engine
from charity_api.errors import CharityError
from charity_api.log import configure_logging
from charity_api.routes import router
from charity_api.schemas import first_error_message

settings = get_settings()
configure_logging(settings.log_level, settings.log_format)
logger = structlog.get_logger()

app = FastAPI(title="Charity Website Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

Base.metadata.create_all(bind=engine)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = first_error_message(exc.errors())
    logger.info("Request rejected", path=request.url.path, error=message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(CharityError)
async def charity_error_handler(request: Request, exc: CharityError):
    logger.error("Request failed", path=request.url.path, error_type=type(exc).__name__, error=str(exc))
    return JSONResponse(status_code=500, content={"error": "Server error"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error", path=request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Server error"})


if __name__ == "__main__":
    uvicorn.run("charity_api.main:app", host="0.0.0.0", port=settings.port)
