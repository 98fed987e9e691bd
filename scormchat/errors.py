"""
Exceptions - scormchat

Error hierarchy for the build/extract/serve tooling. Browser-side components
never raise these to their callers; they degrade instead.
"""

from typing import Dict, Any, List, Optional


class ScormChatError(Exception):
    """Base error carrying an error code and context for CLI reporting"""

    def __init__(self,
                 message: str,
                 error_code: str,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON output"""
        return {
            'error': self.error_code,
            'message': super().__str__(),
            'context': self.context
        }


class ExtractionError(ScormChatError):
    """Raised when the latest SCORM package cannot be located or unpacked"""

    def __init__(self, message: str, output_dir: Optional[str] = None):
        context = {'output_dir': output_dir} if output_dir else {}
        super().__init__(
            message=f"Failed to extract topic: {message}",
            error_code="EXTRACTION_FAILED",
            context=context
        )


class CommandError(ScormChatError):
    """Raised when a spawned child process exits with a non-zero status"""

    def __init__(self, command: List[str], exit_code: int):
        super().__init__(
            message=f"Command failed with exit code {exit_code}",
            error_code="COMMAND_FAILED",
            context={'command': list(command), 'exit_code': exit_code}
        )
        self.command = list(command)
        self.exit_code = exit_code


class CrossOriginError(PermissionError):
    """Raised by a browsing context whose properties the caller may not read"""
