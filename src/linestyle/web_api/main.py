"""
FastAPI Application
===================
Main entry point for the linestyle API.

Run with:
    uvicorn linestyle.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linestyle import __version__
from linestyle.web_api.config import settings
from linestyle.web_api.routers import check, health

# Create application
app = FastAPI(
    title="linestyle API",
    description="Line-oriented style checks for Java sources",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(check.router, tags=["Check"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "linestyle API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m linestyle.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
