"""
Package Extraction - scormchat

Unpacks the most recently built SCORM package into the test directory the
test server serves from.
"""

import shutil
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..config.builder import BuilderSettings
from ..errors import ExtractionError
from ..utils.logging import get_logger


@dataclass
class ExtractionResult:
    """Outcome of a successful extraction"""
    package: Path
    test_output_dir: Path
    extracted_files: List[str] = field(default_factory=list)
    success: bool = True


class TopicExtractor:
    """Finds the newest ``.zip`` in the output directory and extracts it"""

    def __init__(self, output_dir: Path, test_output_dir: Path):
        self.output_dir = Path(output_dir)
        self.test_output_dir = Path(test_output_dir)
        self.logger = get_logger('tooling.extract')

    @classmethod
    def from_settings(cls, settings: BuilderSettings) -> "TopicExtractor":
        return cls(settings.output_dir, settings.test_output_dir)

    def find_latest_package(self) -> Path:
        """Return the package with the newest modification time

        Raises:
            ExtractionError: If the output directory is missing or holds no packages
        """
        if not self.output_dir.is_dir():
            raise ExtractionError(f"Output directory not found: {self.output_dir}", str(self.output_dir))

        packages = [p for p in self.output_dir.iterdir() if p.is_file() and p.suffix == ".zip"]
        if not packages:
            raise ExtractionError("No SCORM packages found in output directory", str(self.output_dir))

        return max(packages, key=lambda p: p.stat().st_mtime)

    def extract_latest(self, package: Optional[Path] = None) -> ExtractionResult:
        package = package or self.find_latest_package()
        self.logger.info(f"📂 Extracting: {package.name}")

        self._empty_test_output_dir()
        try:
            with zipfile.ZipFile(package) as archive:
                archive.extractall(self.test_output_dir)
        except (zipfile.BadZipFile, OSError) as e:
            raise ExtractionError(f"{package.name}: {e}", str(self.output_dir)) from e

        extracted = self.list_extracted_files()
        self.logger.info(f"✅ Extracted {len(extracted)} files to test directory")
        return ExtractionResult(
            package=package,
            test_output_dir=self.test_output_dir,
            extracted_files=extracted,
        )

    def list_extracted_files(self) -> List[str]:
        """Relative paths under the test directory; directories end with ``/``"""
        files = []
        for path in self.test_output_dir.rglob("*"):
            relative = path.relative_to(self.test_output_dir).as_posix()
            files.append(f"{relative}/" if path.is_dir() else relative)
        return sorted(files)

    def _empty_test_output_dir(self) -> None:
        self.test_output_dir.mkdir(parents=True, exist_ok=True)
        for child in self.test_output_dir.iterdir():
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
