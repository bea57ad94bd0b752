#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/exceptions.py
"""Custom exceptions for the mmarkfmt library.

This module defines the exception classes raised while rendering a parsed
mmark document back into canonical markup.

Exception Hierarchy
-------------------
- MmarkFmtError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - RenderingError (output generation failures)
    - UnsupportedNodeError (node variant without a handler)

"""

from __future__ import annotations

from typing import Any


class MmarkFmtError(Exception):
    """Base exception class for all mmarkfmt-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MmarkFmtError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is given to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error with type information."""
        if message is None:
            message = (
                f"Renderer '{renderer_name}' expected options of type "
                f"'{expected_type.__name__}' but received '{received_type.__name__}'."
            )

        super().__init__(
            message,
            parameter_name="options",
            parameter_value=received_type,
            original_error=original_error,
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(MmarkFmtError):
    """Exception raised when output generation fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        Stage at which rendering failed (e.g., "dispatch", "table")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        rendering_stage: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the rendering error with stage information."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class UnsupportedNodeError(RenderingError):
    """Exception raised when the renderer meets a node it has no handler for.

    Skipping such a node would silently drop content from the output, so
    the whole render is aborted instead.

    Parameters
    ----------
    node_type : str
        Class name of the offending node
    message : str, optional
        Custom error message

    """

    def __init__(self, node_type: str, message: str | None = None):
        """Initialize the error with the unsupported node type."""
        super().__init__(message or f"Unknown node {node_type}", rendering_stage="dispatch")
        self.node_type = node_type
