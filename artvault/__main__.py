"""Serve the storefront: python -m artvault."""
import uvicorn
from artvault.config import settings


def main():
    """Run the FastAPI app with uvicorn."""
    uvicorn.run(
        "artvault.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    main()
