"""
Custom exceptions for cube construction and configuration
"""

class CubeError(Exception):
    """Base class for cube errors"""
    def __init__(self, message: str, error_type: str = None, details: dict = None):
        self.message = message
        self.error_type = error_type or "CubeError"
        self.details = details or {}
        super().__init__(self.message)

class CubeSizeError(CubeError, ValueError):
    """Raised when a cube size or facelet array shape is invalid"""
    def __init__(self, message: str, size: int = None, details: dict = None):
        self.size = size
        super().__init__(message, "CubeSizeError", details)
