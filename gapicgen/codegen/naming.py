"""Naming policies mapping schema files to generated identifiers.

A SurfaceNamer answers the naming questions the surface transformers ask:
which namespace a file's types live in, the short nickname used to refer to
that namespace in generated code, and the import paths of the generated
data-model and service-stub files for a schema file.
"""

import re
from abc import ABC, abstractmethod

from gapicgen.config import NamingConfig
from gapicgen.exceptions import UnsupportedLanguageError
from gapicgen.model import ProtoFile

__all__ = ('RubySurfaceNamer', 'SurfaceNamer', 'get_surface_namer')

_PROTO_SUFFIX = '.proto'


class SurfaceNamer(ABC):
    """Language-specific naming policy used by the surface transformers."""

    @abstractmethod
    def get_namespace(self, file: ProtoFile) -> str:
        """Get the canonical namespace of the types declared in a file."""
        pass

    @abstractmethod
    def get_namespace_nickname(self, file: ProtoFile) -> str:
        """Get the short name generated code uses for a file's namespace."""
        pass

    @abstractmethod
    def get_proto_file_import_name(self, filename: str) -> str:
        """Get the import path of the generated data-model file for a schema file."""
        pass

    @abstractmethod
    def get_service_file_import_name(self, filename: str) -> str:
        """Get the import path of the generated service-stub file for a schema file."""
        pass


class RubySurfaceNamer(SurfaceNamer):
    """Naming policy for Ruby clients.

    Example:
        >>> namer = RubySurfaceNamer()
        >>> file = ProtoFile('google/cloud/vision/v1/image.proto', 'google.cloud.vision.v1')
        >>> namer.get_namespace(file)
        'Google::Cloud::Vision::V1'
        >>> namer.get_namespace_nickname(file)
        'VisionV1'
        >>> namer.get_service_file_import_name(file.name)
        'google/cloud/vision/v1/image_services_pb'
    """

    def __init__(self, config: NamingConfig | None = None):
        self.config = config or NamingConfig()

    def get_namespace(self, file: ProtoFile) -> str:
        if file.ruby_package:
            return file.ruby_package
        return '::'.join(
            _pascal_case(segment) for segment in file.package.split('.') if segment
        )

    def get_namespace_nickname(self, file: ProtoFile) -> str:
        namespace = self.get_namespace(file)
        for prefix in self.config.nickname_strip_prefixes:
            if namespace.startswith(prefix) and len(namespace) > len(prefix):
                namespace = namespace[len(prefix) :]
                break
        return namespace.replace('::', '')

    def get_proto_file_import_name(self, filename: str) -> str:
        return f'{_strip_proto_suffix(filename)}_pb'

    def get_service_file_import_name(self, filename: str) -> str:
        return f'{_strip_proto_suffix(filename)}_services_pb'


def _strip_proto_suffix(filename: str) -> str:
    if filename.endswith(_PROTO_SUFFIX):
        return filename[: -len(_PROTO_SUFFIX)]
    return filename


def _pascal_case(segment: str) -> str:
    return ''.join(
        part[0].upper() + part[1:] for part in re.split(r'[_\-]+', segment) if part
    )


_NAMERS: dict[str, type[SurfaceNamer]] = {
    'ruby': RubySurfaceNamer,
}


def get_surface_namer(
    language: str, config: NamingConfig | None = None
) -> SurfaceNamer:
    """Get the naming policy for a target language.

    Raises:
        UnsupportedLanguageError: If no namer exists for the language.
    """
    try:
        namer_class = _NAMERS[language.lower()]
    except KeyError:
        raise UnsupportedLanguageError(language, sorted(_NAMERS)) from None
    return namer_class(config)
