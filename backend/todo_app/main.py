import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from todo_app.core.config import settings
from todo_app.core.database import engine, init_db
from todo_app.core.exceptions import NotFoundError, ValidationError
from todo_app.core.logging_setup import setup_logging
from todo_app.routers import tasks, users

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tasks.router)
app.include_router(users.router)


def _problem(request: Request, status_code: int, error_type: str, title: str, detail: str, **extra):
    body = {
        "type": error_type,
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": request.url.path,
    }
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body)

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return _problem(
        request,
        status.HTTP_400_BAD_REQUEST,
        "ValidationError",
        "Bad Request",
        "One or more validation errors occurred.",
        errors=exc.by_field(),
    )

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _problem(request, status.HTTP_404_NOT_FOUND, "NotFoundError", "Not Found", str(exc))

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _problem(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "InternalServerError",
        "Internal Server Error",
        "An unexpected error occurred. Please try again later.",
    )

@app.on_event("startup")
async def startup():
    setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)
    await init_db(engine, seed_demo_data=settings.SEED_DEMO_DATA)
    logger.info("%s ready database=%s", settings.APP_NAME, engine.url.render_as_string(hide_password=True))

@app.on_event("shutdown")
async def shutdown():
    await engine.dispose()

@app.get("/api/health")
async def health():
    return {"status": "healthy"}

@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} is running"}
