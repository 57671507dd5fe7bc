"""Custom exceptions for gapicgen.

This module defines the exceptions raised while loading service models,
reading generator configuration and writing generated output. The import
section transformers themselves are pure and raise nothing of their own.
"""


class GapicGenError(Exception):
    """Base exception for all gapicgen errors.

    Example:
        try:
            model = DescriptorLoader().load('library.yaml')
        except GapicGenError as e:
            print(f"gapicgen error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ModelError(GapicGenError):
    """Base exception for service model errors."""

    pass


class ModelLoadError(ModelError):
    """Failed to load a service descriptor from a source.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load service descriptor from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class ModelValidationError(ModelError):
    """A service descriptor was read but does not describe a consistent model.

    Attributes:
        source: The source path or URL of the descriptor.
        errors: List of problems found in the descriptor.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Service descriptor validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class ModelLookupError(ModelError):
    """A named element does not exist in a loaded service model.

    Attributes:
        kind: The kind of element, e.g. 'interface' or 'message'.
        name: The name that was looked up.
    """

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Unknown {kind} '{name}'")


class ConfigurationError(GapicGenError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class UnsupportedLanguageError(GapicGenError):
    """No import section transformer is registered for a target language.

    Attributes:
        language: The requested target language.
        supported: The languages that are available.
    """

    def __init__(self, language: str, supported: list[str] | None = None):
        self.language = language
        self.supported = supported or []
        message = f"Unsupported target language '{language}'"
        if supported:
            message += f'. Supported languages: {", ".join(supported)}'
        super().__init__(message)


class OutputError(GapicGenError):
    """Error writing generated output.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
