"""
Test Server Response Models - scormchat

Pydantic models for the test server's JSON endpoints.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class ServerDirectories(BaseModel):
    """Directories the test server reads from"""
    model_config = ConfigDict(populate_by_name=True)

    output: str = Field(..., description="Directory holding built .zip packages")
    test_output: str = Field(..., alias="testOutput", description="Directory holding the extracted package")


class HealthResponse(BaseModel):
    """Health check response"""
    model_config = ConfigDict(populate_by_name=True)

    status: str = Field("OK", description="Health status")
    timestamp: str = Field(..., description="ISO-8601 time of the check")
    available_packages: List[str] = Field(..., alias="availablePackages", description="Built package names without .zip")
    test_content: bool = Field(..., alias="testContent", description="Whether an extracted index.html exists")
    directories: ServerDirectories = Field(..., description="Directories in use")
