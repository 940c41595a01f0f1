"""
Main application entry point.
"""

import logging

from fastapi import FastAPI
from bookstore.api.v1.book_item_endpoints import router as book_item_router
from bookstore.api.v1.dependencies import API_TITLE, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title=API_TITLE,
    description="Validation and rendering of book store catalog items.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Include API routers
app.include_router(book_item_router, prefix="/api/v1", tags=["book-items"])

@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Book Store Catalog API",
        "docs": "/docs",
        "health": "/api/v1/health"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("bookstore.main:app", host="0.0.0.0", port=8000, reload=True)
