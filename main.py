from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before config is read
load_dotenv()

from colorscheme import __version__
from colorscheme.api.v1 import catalog_summary, router as v1_router
from colorscheme.config import config
from colorscheme.schemas import HealthResponse
from colorscheme.utils.logging import get_logger
from colorscheme.utils.metrics import get_metrics

app = FastAPI(
    title="ColorScheme Backend",
    description="Color scheme generation and preset sharing API",
    version=__version__
)

# Add CORS middleware with basic configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"]
)

app.include_router(v1_router)

get_logger().info("ColorScheme backend initialised", extra={
    "version": __version__,
    "metrics_enabled": config.METRICS_ENABLED
})


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(ok=True, version=__version__, service="colorscheme")


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "ColorScheme Backend API",
        "version": __version__,
        "docs": "/docs",
        "catalog": catalog_summary()
    }


@app.get("/metrics")
def metrics():
    """Get in-process request metrics."""
    if not config.METRICS_ENABLED:
        raise HTTPException(status_code=404, detail="Metrics are disabled")
    return get_metrics().get_summary()
