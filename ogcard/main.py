from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ogcard.core.config import settings
from ogcard.exceptions.handlers import register_exception_handlers
from ogcard.routers import router


# Initialize FastAPI application
app = FastAPI(
    title="ogcard",
    description="Open Graph / Twitter Card preview metadata API",
    version="1.0.0"
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

register_exception_handlers(app)

# Include the centralized router
app.include_router(router, prefix="/api")
