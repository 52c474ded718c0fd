"""Main FastAPI application."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from artvault.app import ShopApplication
from artvault.config import settings
from artvault.routes.shop import router as shop_router

# Initialize FastAPI app
app = FastAPI(
    title=settings.project_name,
    version=settings.api_version,
    description="ArtVault storefront widget - catalog, cart and filters"
)

# One page session per process
app.state.shop = ShopApplication()

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(shop_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "ArtVault Storefront API",
        "version": settings.api_version,
        "docs": "/docs"
    }


@app.head("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
