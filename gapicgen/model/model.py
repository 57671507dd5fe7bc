"""In-memory service model consumed by the surface transformers.

The classes in this module describe an already-loaded protocol schema:
files, the messages and enums they declare, and the service interfaces
with their methods. Instances are built once by the descriptor loader and
treated as read-only afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum

from gapicgen.exceptions import ModelLookupError

__all__ = (
    'EnumType',
    'Field',
    'InitCodeNode',
    'Interface',
    'MessageType',
    'Method',
    'ProtoFile',
    'ServiceModel',
    'TypeKind',
    'TypeRef',
    'build_sample_nodes',
)


class TypeKind(str, Enum):
    PRIMITIVE = 'primitive'
    MESSAGE = 'message'
    ENUM = 'enum'


@dataclass(frozen=True)
class ProtoFile:
    """A schema file.

    Attributes:
        name: Path-like file name, e.g. 'google/example/library/v1/library.proto'.
        package: Dotted package declared by the file.
        ruby_package: Explicit Ruby namespace override, if the file declares one.
    """

    name: str
    package: str
    ruby_package: str | None = None

    @property
    def simple_name(self) -> str:
        return self.name


@dataclass(eq=False)
class MessageType:
    """A message declared in a file.

    Fields are filled in after construction so that messages may refer to
    themselves or to each other.
    """

    name: str
    file: ProtoFile
    fields: list['Field'] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return _qualify(self.file.package, self.name)


@dataclass(eq=False)
class EnumType:
    name: str
    file: ProtoFile
    values: tuple[str, ...] = ()

    @property
    def full_name(self) -> str:
        return _qualify(self.file.package, self.name)


@dataclass(frozen=True)
class TypeRef:
    """A reference to the type of a field, request or response."""

    kind: TypeKind
    primitive_name: str | None = None
    message_type: MessageType | None = None
    enum_type: EnumType | None = None

    @classmethod
    def primitive(cls, name: str) -> 'TypeRef':
        return cls(kind=TypeKind.PRIMITIVE, primitive_name=name)

    @classmethod
    def of_message(cls, message_type: MessageType) -> 'TypeRef':
        return cls(kind=TypeKind.MESSAGE, message_type=message_type)

    @classmethod
    def of_enum(cls, enum_type: EnumType) -> 'TypeRef':
        return cls(kind=TypeKind.ENUM, enum_type=enum_type)

    @property
    def is_message(self) -> bool:
        return self.kind is TypeKind.MESSAGE

    @property
    def is_enum(self) -> bool:
        return self.kind is TypeKind.ENUM

    @property
    def is_primitive(self) -> bool:
        return self.kind is TypeKind.PRIMITIVE

    @property
    def file(self) -> ProtoFile | None:
        """The file declaring this type, or None for primitives."""
        if self.is_message:
            return self.message_type.file
        if self.is_enum:
            return self.enum_type.file
        return None

    @property
    def name(self) -> str:
        if self.is_message:
            return self.message_type.full_name
        if self.is_enum:
            return self.enum_type.full_name
        return self.primitive_name or ''


@dataclass(frozen=True)
class Field:
    name: str
    type: TypeRef


@dataclass(frozen=True)
class Method:
    name: str
    input_type: TypeRef
    output_type: TypeRef


@dataclass(frozen=True)
class Interface:
    """A service interface and the methods it declares."""

    name: str
    file: ProtoFile
    methods: tuple[Method, ...] = ()

    @property
    def full_name(self) -> str:
        return _qualify(self.file.package, self.name)

    def get_method(self, name: str) -> Method:
        for method in self.methods:
            if method.name == name:
                return method
        raise ModelLookupError('method', f'{self.full_name}.{name}')


@dataclass(frozen=True)
class InitCodeNode:
    """A typed value used to initialize a generated sample.

    Attributes:
        key: The field name the value is assigned to.
        type: The type of the value.
        children: Nodes for the fields of a message-typed value.
    """

    key: str
    type: TypeRef
    children: tuple['InitCodeNode', ...] = ()


class ServiceModel:
    """A loaded service model with lookups by fully qualified name.

    Example:
        >>> model = DescriptorLoader().load('library.yaml')
        >>> interface = model.get_interface('google.example.library.v1.LibraryService')
        >>> interface.file.name
        'google/example/library/v1/library.proto'
    """

    def __init__(
        self,
        files: list[ProtoFile],
        messages: list[MessageType],
        enums: list[EnumType],
        interfaces: list[Interface],
    ):
        self._files = {f.name: f for f in files}
        self._messages = {m.full_name: m for m in messages}
        self._enums = {e.full_name: e for e in enums}
        self._interfaces = {i.full_name: i for i in interfaces}

    @property
    def files(self) -> list[ProtoFile]:
        return list(self._files.values())

    @property
    def interfaces(self) -> list[Interface]:
        return list(self._interfaces.values())

    def get_file(self, name: str) -> ProtoFile:
        try:
            return self._files[name]
        except KeyError:
            raise ModelLookupError('file', name) from None

    def get_message(self, full_name: str) -> MessageType:
        try:
            return self._messages[full_name.lstrip('.')]
        except KeyError:
            raise ModelLookupError('message', full_name) from None

    def get_enum(self, full_name: str) -> EnumType:
        try:
            return self._enums[full_name.lstrip('.')]
        except KeyError:
            raise ModelLookupError('enum', full_name) from None

    def get_interface(self, full_name: str) -> Interface:
        try:
            return self._interfaces[full_name.lstrip('.')]
        except KeyError:
            raise ModelLookupError('interface', full_name) from None

    def has_interface(self, full_name: str) -> bool:
        return full_name.lstrip('.') in self._interfaces


def build_sample_nodes(method: Method) -> list[InitCodeNode]:
    """Build one sample node per field of the method's request message.

    Message-typed fields carry child nodes for their own fields. A message
    that is already being expanded higher up the tree gets no children, so
    recursive messages terminate. The import collector only reads the
    top-level nodes.
    """
    if not method.input_type.is_message:
        return []
    request = method.input_type.message_type
    return list(_build_field_nodes(request, (request,)))


def _build_field_nodes(
    message: MessageType, path: tuple[MessageType, ...]
) -> tuple[InitCodeNode, ...]:
    nodes = []
    for f in message.fields:
        children: tuple[InitCodeNode, ...] = ()
        nested = f.type.message_type
        if nested is not None and not any(nested is m for m in path):
            children = _build_field_nodes(nested, path + (nested,))
        nodes.append(InitCodeNode(key=f.name, type=f.type, children=children))
    return tuple(nodes)


def _qualify(package: str, name: str) -> str:
    return f'{package}.{name}' if package else name
