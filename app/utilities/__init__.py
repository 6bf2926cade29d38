"""
Utilities package for the frame extraction API.
"""

from .execution_timer import ExecutionTimer
from .scratch_file_response import ScratchFileResponse

__all__ = ["ExecutionTimer", "ScratchFileResponse"]
