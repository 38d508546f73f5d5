"""
NuGet Diagnostics status API
"""

import certifi
import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel
from typing import Optional
from contextlib import asynccontextmanager

from nuget_diagnostics.utils.logger import setup_logging, get_logger
from nuget_diagnostics.orchestrator.orchestrator import DiagnosticOrchestrator
from nuget_diagnostics.config import config

logger = get_logger(__name__, "DiagnosticsAPI")


def configure_ssl_certificates() -> str:
    """
    Configure SSL certificates for HTTPS requests (dev/local only).

    Only the in-process config is touched; os.environ stays as the user set
    it, since that environment is what the diagnostic reports on. An explicit
    CA bundle override is kept.
    """
    cert_path = config.get_ca_bundle()
    if cert_path:
        logger.info(f"Keeping configured CA bundle: {cert_path}", correlation_id="SYSTEM")
        return cert_path

    cert_path = certifi.where()
    config.REQUESTS_CA_BUNDLE = cert_path

    logger.info(f"Using SSL certificates from: {cert_path}", correlation_id="SYSTEM")
    return cert_path


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    """
    setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)
    logger.info("NuGet Diagnostics API starting...", correlation_id="SYSTEM")
    logger.info(f"Version: {app.version} | Log Level: {config.LOG_LEVEL}", correlation_id="SYSTEM")

    if config.IS_LOCAL:
        configure_ssl_certificates()

    yield
    logger.info("NuGet Diagnostics API shutting down", correlation_id="SYSTEM")


app = FastAPI(
    title="NuGet Diagnostics API",
    description="NuGet connectivity and certificate revocation diagnostics",
    version="1.0.0",
    lifespan=lifespan,
)


class ConnectivityModel(BaseModel):
    reachable: bool
    status_code: Optional[int] = None
    failure_kind: str
    message: str
    content_length: Optional[int] = None


class EnvironmentModel(BaseModel):
    socket_handler_disabled: Optional[str] = None
    cert_revocation_mode: Optional[str] = None


class NuGetConfigModel(BaseModel):
    local_path: str
    local_exists: bool
    local_has_source: Optional[bool] = None
    global_path: str
    global_exists: bool


class DiagnosticResponse(BaseModel):
    """Response model for a diagnostic run."""
    status: str
    correlation_id: str
    verdict: Optional[str] = None
    connectivity: Optional[ConnectivityModel] = None
    environment: Optional[EnvironmentModel] = None
    nuget_config: Optional[NuGetConfigModel] = None
    report: Optional[str] = None
    error: Optional[str] = None


@app.get("/")
async def root():
    return {
        "name": "NuGet Diagnostics API",
        "version": app.version,
        "status": "running",
        "endpoints": {
            "root": "/",
            "health": "/health",
            "diagnose": "/diagnose",
        },
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": app.version}


@app.get("/diagnose", response_model=DiagnosticResponse)
def diagnose(timeout: Optional[float] = None, check_config: bool = False):
    """Run one diagnostic; blocks for at most the probe timeout."""
    result = DiagnosticOrchestrator().run(timeout=timeout, check_config=check_config)

    if not result["success"]:
        return DiagnosticResponse(
            status="error",
            correlation_id=result["correlation_id"],
            error=result["error"],
        )

    nuget_config = result.get("nuget_config")

    return DiagnosticResponse(
        status="success",
        correlation_id=result["correlation_id"],
        verdict=result["verdict"],
        connectivity=ConnectivityModel(**result["connectivity"]),
        environment=EnvironmentModel(**result["environment"]),
        nuget_config=NuGetConfigModel(**nuget_config) if nuget_config else None,
        report=result["report"],
    )


def start_server():
    uvicorn.run(
        "nuget_diagnostics.main:app",
        host=config.API_HOST,
        port=config.API_PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    start_server()
