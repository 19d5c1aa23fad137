"""
FastAPI backend for the book template editor

Serves book format resolution, guide geometry and template import/export to
the canvas front end.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from book_builder.config.sizes import DEFAULT_CATALOG
from book_builder.errors import BookBuilderError
from book_builder.logging_config import configure_logging
from web.backend.api import formats, guides, templates

configure_logging()

app = FastAPI(
    title="Book Template Editor API",
    description="Book formats, print specifications and template export for the book template editor",
    version="1.0.0"
)

# CORS middleware - allow frontend to communicate
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",  # Vite default port
        "http://localhost:3000",  # Alternative React port
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BookBuilderError)
async def engine_exception_handler(request: Request, exc: BookBuilderError):
    """Engine errors not mapped by a route are caller errors."""
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": str(exc)},
    )


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Book Template Editor API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "services": {
            "api": "running",
            "catalog": f"{len(DEFAULT_CATALOG)} formats"
        }
    }


app.include_router(formats.router, prefix="/api/formats", tags=["formats"])
app.include_router(guides.router, prefix="/api/guides", tags=["guides"])
app.include_router(templates.router, prefix="/api/templates", tags=["templates"])

if __name__ == "__main__":
    import uvicorn
    print("🚀 Starting Book Template Editor API...")
    print("📚 API Documentation: http://localhost:8000/docs")
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
    )
