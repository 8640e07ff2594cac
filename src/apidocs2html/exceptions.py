#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the apidocs2html library.

This module defines the exception classes raised while loading markup
documents, resolving build recipes and exporting HTML pages. Every exception
carries a human-readable message; the API facade and the CLI only ever show
that message to the user.

Exception Hierarchy
-------------------
- ApiDocsError (base exception)

  - ValidationError (options, code styles, build recipes)

  - FileError (file access and I/O)
    - FileNotFoundError (file or directory doesn't exist)
    - FileAccessError (permissions, unreadable files)

  - ParsingError (document loading failures)

  - RenderingError (HTML export failures)
    - TemplateMacroError (template lacks a required macro)
    - OutputWriteError (file write failures)

"""

from typing import Any


class ApiDocsError(Exception):
    """Base exception class for all apidocs2html-specific errors.

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


class ValidationError(ApiDocsError):
    """Exception raised for invalid input parameters or options.

    This exception covers validation errors such as:
    - Invalid regular expressions in a code style
    - Incomplete build recipes
    - Exporting a document with no categories

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


class FileError(ApiDocsError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when a file or directory cannot be found.

    Parameters
    ----------
    file_path : str
        Path to the file that was not found
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file cannot be read.

    Parameters
    ----------
    file_path : str
        Path to the file that cannot be accessed
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(ApiDocsError):
    """Exception raised when a markup document cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(ApiDocsError):
    """Exception raised when HTML export fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class TemplateMacroError(RenderingError):
    """Exception raised when the HTML template lacks required macros.

    Parameters
    ----------
    missing_macros : list[str]
        The literal macros that could not be found in the template
    template_name : str, optional
        Name or path of the offending template, used in the message

    Attributes
    ----------
    missing_macros : list[str]
        The literal macros that could not be found

    """

    def __init__(self, missing_macros: list[str], template_name: str | None = None):
        """Initialize the template macro error."""
        where = f"HTML template '{template_name}'" if template_name else "HTML template"
        macros = ", ".join(f"'{macro}'" for macro in missing_macros)
        message = f"{where} doesn't contain the required macro(s): {macros}"
        super().__init__(message, rendering_stage="template_scan")
        self.missing_macros = missing_macros


class OutputWriteError(RenderingError):
    """Exception raised when writing an output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path
