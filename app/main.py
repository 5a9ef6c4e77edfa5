from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.security import RESPONSE_HEADERS
from app.services.admission import get_client_address
from app.api import booking, contact, admin
from app.core.logger import setup_logging, logger
from contextlib import asynccontextmanager
from datetime import datetime

setup_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("🚀 Starting Open Door Professionals backend")
    yield
    # Shutdown
    logger.info("🛑 Shutting down backend")

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan
)

# CORS + hardening headers on every response, client address on every log line
@app.middleware("http")
async def add_response_headers(request: Request, call_next):
    client = get_client_address(request.headers, request.client.host if request.client else None)
    with logger.contextualize(client=client):
        response = await call_next(request)
    for name, value in RESPONSE_HEADERS.items():
        response.headers.setdefault(name, value)
    return response

# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"🔥 UNHANDLED ERROR: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "details": "An unexpected error occurred. Please contact support."},
        headers=RESPONSE_HEADERS
    )

# Include routers
app.include_router(booking.router, prefix=settings.API_V1_STR, tags=["Booking"])
app.include_router(contact.router, prefix=settings.API_V1_STR, tags=["Contact"])
app.include_router(admin.router, prefix=settings.API_V1_STR, tags=["Admin"])

@app.get("/")
async def health_check():
    return {'status': 'active', 'time': datetime.now().isoformat()}

@app.get("/health")
async def health_check_std():
    return {"status": "ok", "environment": settings.ENVIRONMENT, "timestamp": datetime.now().isoformat()}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
