"""Pydantic document models for service descriptor files.

A service descriptor is a YAML or JSON rendering of the parts of a protocol
schema the generator needs: files with their messages and enums, and the
service interfaces declared in them.

Example:
    files:
      - name: google/example/library/v1/library.proto
        package: google.example.library.v1
        messages:
          - name: GetBookRequest
            fields:
              - {name: name, type: string}
    interfaces:
      - name: LibraryService
        file: google/example/library/v1/library.proto
        methods:
          - name: GetBook
            input_type: google.example.library.v1.GetBookRequest
            output_type: google.example.library.v1.Book
"""

from pydantic import BaseModel, ConfigDict, Field

SCALAR_TYPES = frozenset(
    {
        'double',
        'float',
        'int32',
        'int64',
        'uint32',
        'uint64',
        'sint32',
        'sint64',
        'fixed32',
        'fixed64',
        'sfixed32',
        'sfixed64',
        'bool',
        'string',
        'bytes',
    }
)


class DescriptorModel(BaseModel):
    model_config = ConfigDict(extra='forbid')


class FieldDescriptor(DescriptorModel):
    name: str
    type: str = Field(
        ..., description='Scalar type name or fully qualified message/enum name.'
    )


class MessageDescriptor(DescriptorModel):
    name: str
    fields: list[FieldDescriptor] = Field(default_factory=list)


class EnumDescriptor(DescriptorModel):
    name: str
    values: list[str] = Field(default_factory=list)


class FileDescriptor(DescriptorModel):
    name: str = Field(..., description='File name, e.g. "library.proto".')
    package: str = ''
    ruby_package: str | None = Field(
        None, description='Explicit Ruby namespace for the file.'
    )
    messages: list[MessageDescriptor] = Field(default_factory=list)
    enums: list[EnumDescriptor] = Field(default_factory=list)


class MethodDescriptor(DescriptorModel):
    name: str
    input_type: str
    output_type: str


class InterfaceDescriptor(DescriptorModel):
    name: str
    file: str = Field(..., description='Name of the file declaring the interface.')
    methods: list[MethodDescriptor] = Field(default_factory=list)


class ServiceDescriptor(DescriptorModel):
    files: list[FileDescriptor] = Field(default_factory=list)
    interfaces: list[InterfaceDescriptor] = Field(default_factory=list)
