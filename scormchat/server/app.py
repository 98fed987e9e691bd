"""
SCORM Test Server - scormchat

Serves the extracted SCORM package so it can be exercised in a browser
against the chat backend, with a JSON health endpoint describing what has
been built and extracted.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, APIRouter, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse

from .middleware import RequestLoggingMiddleware
from .models import HealthResponse, ServerDirectories
from ..config.builder import BuilderSettings
from ..widgets.renderer import PageTemplateRenderer
from ..utils.logging import get_logger

TEST_TOPIC_COMMAND = "scormchat test-topic --topic your-topic-name"


class ScormTestServer:
    """
    FastAPI app serving ``test-output`` with CORS open to every origin

    Endpoints:
    - ``/health``: packages available in ``output`` and whether content is extracted
    - ``/``: the extracted ``index.html``, or a hint page when there is none
    - ``/<path>``: any other extracted file
    """

    def __init__(self, settings: Optional[BuilderSettings] = None,
                 renderer: Optional[PageTemplateRenderer] = None,
                 enable_request_logging: bool = True):
        self.settings = settings or BuilderSettings()
        self.renderer = renderer or PageTemplateRenderer()
        self.logger = get_logger('server.app')

        self.app = FastAPI(
            title="SCORM Test Server",
            description="Serves the latest extracted SCORM package",
        )
        self.router = APIRouter()

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
        )
        if enable_request_logging:
            self.app.add_middleware(RequestLoggingMiddleware)

        self._create_endpoints()
        self.app.include_router(self.router)

    @property
    def output_dir(self) -> Path:
        return self.settings.output_dir

    @property
    def test_output_dir(self) -> Path:
        return self.settings.test_output_dir

    def available_packages(self) -> List[str]:
        if not self.output_dir.is_dir():
            return []
        return sorted(p.stem for p in self.output_dir.iterdir() if p.is_file() and p.suffix == ".zip")

    def has_test_content(self) -> bool:
        return (self.test_output_dir / "index.html").is_file()

    def health(self) -> HealthResponse:
        return HealthResponse(
            status="OK",
            timestamp=datetime.now(timezone.utc).isoformat(),
            available_packages=self.available_packages(),
            test_content=self.has_test_content(),
            directories=ServerDirectories(
                output=str(self.output_dir),
                test_output=str(self.test_output_dir),
            ),
        )

    def _hint_page(self, template_name: str) -> HTMLResponse:
        return HTMLResponse(self.renderer.render(template_name, {"command": TEST_TOPIC_COMMAND}))

    def _create_endpoints(self):
        """Create all FastAPI endpoints"""

        @self.router.get("/health", response_model=HealthResponse)
        async def health_check():
            return self.health()

        @self.router.get("/")
        async def index():
            if not self.test_output_dir.is_dir():
                return self._hint_page("no_package.html")
            if not self.has_test_content():
                return self._hint_page("no_content.html")
            return FileResponse(self.test_output_dir / "index.html")

        @self.router.get("/{file_path:path}")
        async def static_file(file_path: str):
            root = self.test_output_dir.resolve()
            target = (root / file_path).resolve()
            if root not in target.parents or not target.is_file():
                raise HTTPException(status_code=404, detail=f"Not found: /{file_path}")
            return FileResponse(target)

    def run(self, host: str = "127.0.0.1", port: Optional[int] = None):
        port = port or self.settings.port
        self.logger.info(f"🌐 SCORM Test Server running at http://localhost:{port}")
        self.logger.info(f"❤️  Health check: http://localhost:{port}/health")
        uvicorn.run(self.app, host=host, port=port, log_level="warning")


def create_server(settings: Optional[BuilderSettings] = None, **kwargs) -> ScormTestServer:
    """Create a test server for ``settings`` (default: from the environment)"""
    return ScormTestServer(settings=settings or BuilderSettings.from_env(), **kwargs)
