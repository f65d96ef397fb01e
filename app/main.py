from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.middleware_correlation import CorrelationIdMiddleware
from app.core.logging import setup_logging
from app.core.errors import register_exception_handlers


# Routers
from fastapi import APIRouter
from app.api.routes.authors import router as authors_router
from app.api.routes.books import router as books_router
from app.api.routes.search import router as search_router
from app.api.routes.health import router as health_router


setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Book Catalog API - manage and search books and their authors.",
    version="1.0.0",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middlewares
app.add_middleware(CorrelationIdMiddleware)

# Root endpoint
@app.get("/")
async def root():
    """API root endpoint with basic information."""
    return {
        "message": "Welcome to the Book Catalog API",
        "version": "1.0.0",
        "docs_url": "/docs",
        "redoc_url": "/redoc",
        "api_prefix": settings.API_PREFIX,
        "endpoints": {
            "authors": f"{settings.API_PREFIX}/authors",
            "books": f"{settings.API_PREFIX}/books",
            "search": f"{settings.API_PREFIX}/search",
            "health": "/health",
        },
    }

register_exception_handlers(app)

# Mount routers
api = APIRouter(prefix=settings.API_PREFIX)
api.include_router(authors_router)
api.include_router(books_router)
api.include_router(search_router)
app.include_router(api)
app.include_router(health_router)
