"""
Entry point for the Grocery List API

Runs the FastAPI app under uvicorn. Configure via environment or .env
(see config/settings.py).
"""

if __name__ == "__main__":
    import uvicorn
    from app import app
    from config.settings import settings

    print("🛒 Starting Grocery List API...")

    # Single worker: JSON file storage is not safe across processes
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        workers=1,
        log_level="debug" if settings.debug else "info"
    )
