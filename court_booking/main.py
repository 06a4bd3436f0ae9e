"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from court_booking.api import auth, bookings, courts, stream, users
from court_booking.core.config import settings
from court_booking.core.database import get_db, init_db
from court_booking.core.exceptions import InternalError

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Court Booking API")
    logger.info(f"Debug mode: {settings.DEBUG}")

    if settings.CREATE_TABLES_ON_STARTUP:
        await init_db()

    yield

    # Shutdown
    logger.info("Shutting down Court Booking API")


# Create FastAPI app
app = FastAPI(
    title="Court Booking API",
    description="Book sports courts without double-booking a slot",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(courts.router)
app.include_router(bookings.router)
app.include_router(stream.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request payloads as 400."""
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unexpected errors and hide their details from the client."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.message})


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Booking API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/version")
async def version(db: AsyncSession = Depends(get_db)):
    """Report the database engine and server version."""
    try:
        conn = await db.connection()
    except SQLAlchemyError:
        logger.exception("Error connecting to database")
        raise HTTPException(status_code=500, detail="Internal server error")

    dialect = conn.dialect
    server_version = ".".join(str(part) for part in dialect.server_version_info or ())
    return {"version": f"{dialect.name} {server_version}".strip()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "court_booking.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
