"""Settings for the SCORM builder tooling (build, extract, test server)"""

import os
import shlex
from pathlib import Path
from typing import List
from pydantic import BaseModel, Field

DEV_BACKEND_URL = "https://learning-platform-ecosystem.onrender.com"
TEST_SERVER_PORT = 8080


class BuilderSettings(BaseModel):
    """Where the builder writes packages and how it is invoked"""
    root_dir: Path = Field(default_factory=Path.cwd, description="Builder project root")
    output_dir_name: str = Field("output", description="Directory the build writes .zip packages to")
    test_output_dir_name: str = Field("test-output", description="Directory the latest package is extracted to")
    port: int = Field(TEST_SERVER_PORT, gt=0, lt=65536, description="Test server port")
    dev_backend_url: str = Field(DEV_BACKEND_URL, description="Backend URL implied for test builds")
    build_command: List[str] = Field(default_factory=lambda: ["node", "build.js"],
                                     description="Command that runs the packaging step")

    @property
    def output_dir(self) -> Path:
        return self.root_dir / self.output_dir_name

    @property
    def test_output_dir(self) -> Path:
        return self.root_dir / self.test_output_dir_name

    @classmethod
    def from_env(cls) -> "BuilderSettings":
        """Build settings from ``SCORM_*`` environment variables"""
        values = {}
        if os.getenv("SCORM_BUILDER_ROOT"):
            values["root_dir"] = Path(os.environ["SCORM_BUILDER_ROOT"])
        if os.getenv("SCORM_BUILD_COMMAND"):
            values["build_command"] = shlex.split(os.environ["SCORM_BUILD_COMMAND"])
        if os.getenv("SCORM_TEST_PORT"):
            values["port"] = int(os.environ["SCORM_TEST_PORT"])
        if os.getenv("SCORM_DEV_BACKEND"):
            values["dev_backend_url"] = os.environ["SCORM_DEV_BACKEND"]
        return cls(**values)
