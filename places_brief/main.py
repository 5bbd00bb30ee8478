from importlib.metadata import PackageNotFoundError, version
from fastapi import FastAPI
from places_brief.routes.places_route import router as places_router

try:
    __version__ = version("places-brief")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

app = FastAPI(title="Places Brief", version=__version__)
app.include_router(places_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to Places Brief API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "search": "/places/search",
            "docs": "/docs"
        },
        "version": __version__
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Places Brief"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("places_brief.main:app", host="0.0.0.0", port=8000, reload=True)
