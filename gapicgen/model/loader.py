"""Loading of service descriptors into a ServiceModel.

This module reads service descriptors from URLs or local files (YAML or
JSON), validates them against the descriptor document models and links
type references into an in-memory ServiceModel.
"""

import json
import logging
from pathlib import Path
from urllib.parse import urlparse

import httpx
import yaml
from pydantic import ValidationError

from gapicgen.exceptions import ModelLoadError, ModelValidationError
from gapicgen.model.descriptor import SCALAR_TYPES, ServiceDescriptor
from gapicgen.model.model import (
    EnumType,
    Field,
    Interface,
    MessageType,
    Method,
    ProtoFile,
    ServiceModel,
    TypeRef,
)

logger = logging.getLogger(__name__)


class DescriptorLoader:
    """Loads service descriptors from URLs or file paths.

    Example:
        >>> loader = DescriptorLoader()
        >>> model = loader.load('https://example.com/library.json')
        >>> # or
        >>> model = loader.load('/path/to/library.yaml')
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_path: str | Path | None = None,
    ):
        """Initialize the descriptor loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
            base_path: Base path for resolving relative file paths.
                      Defaults to current working directory.
        """
        self._http_client = http_client
        self._base_path = Path(base_path) if base_path else Path.cwd()

    def load(self, source: str) -> ServiceModel:
        """Load and link a service descriptor from a URL or file path.

        Args:
            source: URL or file path to the descriptor.

        Returns:
            The linked ServiceModel.

        Raises:
            ModelLoadError: If the descriptor cannot be read or parsed.
            ModelValidationError: If the descriptor is not self-consistent.
        """
        try:
            if self._is_url(source):
                content = self._load_from_url(source)
            else:
                content = self._load_from_file(source)
            return self.load_content(content, source)

        except ModelLoadError:
            raise
        except ModelValidationError:
            raise
        except Exception as e:
            raise ModelLoadError(source, cause=e)

    def load_content(self, content: dict, source: str = '<memory>') -> ServiceModel:
        """Validate and link an already-parsed descriptor document."""
        try:
            descriptor = ServiceDescriptor.model_validate(content)
        except ValidationError as e:
            errors = [
                f'{".".join(str(loc) for loc in err["loc"])}: {err["msg"]}'
                for err in e.errors()
            ]
            raise ModelValidationError(source, errors)

        return _ModelLinker(descriptor, source).link()

    def _is_url(self, text: str) -> bool:
        try:
            result = urlparse(text)
            return result.scheme in ('http', 'https')
        except ValueError:
            return False

    def _load_from_url(self, url: str) -> dict:
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=30.0)

            response.raise_for_status()
            content_type = response.headers.get('content-type', '')
            content = response.text

            if 'yaml' in content_type or url.endswith(('.yaml', '.yml')):
                return yaml.safe_load(content)
            else:
                return json.loads(content)

        except httpx.HTTPError as e:
            raise ModelLoadError(url, cause=e)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ModelLoadError(url, cause=e)

    def _load_from_file(self, file_path: str) -> dict:
        path = Path(file_path)
        if not path.is_absolute():
            path = self._base_path / path

        if not path.exists():
            raise ModelLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            if path.suffix.lower() in ('.yaml', '.yml'):
                return yaml.safe_load(content)
            else:
                return json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ModelLoadError(str(file_path), cause=e)
        except OSError as e:
            raise ModelLoadError(str(file_path), cause=e)


class _ModelLinker:
    """Turns a validated descriptor into linked model objects.

    All problems are collected and reported together in one
    ModelValidationError.
    """

    def __init__(self, descriptor: ServiceDescriptor, source: str):
        self.descriptor = descriptor
        self.source = source
        self.errors: list[str] = []
        self._files: dict[str, ProtoFile] = {}
        self._messages: dict[str, MessageType] = {}
        self._enums: dict[str, EnumType] = {}

    def link(self) -> ServiceModel:
        self._declare_types()
        self._link_fields()
        interfaces = self._link_interfaces()

        if self.errors:
            raise ModelValidationError(self.source, self.errors)

        logger.debug(
            f'Loaded {len(self._files)} files and {len(interfaces)} interfaces '
            f'from {self.source}'
        )
        return ServiceModel(
            files=list(self._files.values()),
            messages=list(self._messages.values()),
            enums=list(self._enums.values()),
            interfaces=interfaces,
        )

    def _declare_types(self) -> None:
        for file_desc in self.descriptor.files:
            if file_desc.name in self._files:
                self.errors.append(f"duplicate file '{file_desc.name}'")
                continue
            proto_file = ProtoFile(
                name=file_desc.name,
                package=file_desc.package,
                ruby_package=file_desc.ruby_package,
            )
            self._files[proto_file.name] = proto_file

            for message_desc in file_desc.messages:
                message = MessageType(name=message_desc.name, file=proto_file)
                self._declare(self._messages, message.full_name, message)
            for enum_desc in file_desc.enums:
                enum = EnumType(
                    name=enum_desc.name,
                    file=proto_file,
                    values=tuple(enum_desc.values),
                )
                self._declare(self._enums, enum.full_name, enum)

    def _declare(self, registry: dict, full_name: str, value) -> None:
        if full_name in self._messages or full_name in self._enums:
            self.errors.append(f"duplicate type '{full_name}'")
            return
        registry[full_name] = value

    def _link_fields(self) -> None:
        for file_desc in self.descriptor.files:
            package = file_desc.package
            for message_desc in file_desc.messages:
                message = self._messages.get(
                    f'{package}.{message_desc.name}' if package else message_desc.name
                )
                if message is None or message.file.name != file_desc.name:
                    continue
                for field_desc in message_desc.fields:
                    type_ref = self._resolve_type(
                        field_desc.type, f'{message.full_name}.{field_desc.name}'
                    )
                    if type_ref is not None:
                        message.fields.append(
                            Field(name=field_desc.name, type=type_ref)
                        )

    def _link_interfaces(self) -> list[Interface]:
        interfaces: list[Interface] = []
        seen: set[str] = set()
        for interface_desc in self.descriptor.interfaces:
            proto_file = self._files.get(interface_desc.file)
            if proto_file is None:
                self.errors.append(
                    f"interface '{interface_desc.name}' refers to unknown file "
                    f"'{interface_desc.file}'"
                )
                continue

            methods = []
            for method_desc in interface_desc.methods:
                location = f'{interface_desc.name}.{method_desc.name}'
                input_type = self._resolve_type(method_desc.input_type, location)
                output_type = self._resolve_type(method_desc.output_type, location)
                if input_type is None or output_type is None:
                    continue
                methods.append(
                    Method(
                        name=method_desc.name,
                        input_type=input_type,
                        output_type=output_type,
                    )
                )

            interface = Interface(
                name=interface_desc.name, file=proto_file, methods=tuple(methods)
            )
            if interface.full_name in seen:
                self.errors.append(f"duplicate interface '{interface.full_name}'")
                continue
            seen.add(interface.full_name)
            interfaces.append(interface)
        return interfaces

    def _resolve_type(self, type_name: str, location: str) -> TypeRef | None:
        if type_name in SCALAR_TYPES:
            return TypeRef.primitive(type_name)

        full_name = type_name.lstrip('.')
        if full_name in self._messages:
            return TypeRef.of_message(self._messages[full_name])
        if full_name in self._enums:
            return TypeRef.of_enum(self._enums[full_name])

        self.errors.append(f"unknown type '{type_name}' at {location}")
        return None
