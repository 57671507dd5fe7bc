"""Service model and descriptor loading."""

from gapicgen.model.loader import DescriptorLoader
from gapicgen.model.model import (
    EnumType,
    Field,
    InitCodeNode,
    Interface,
    MessageType,
    Method,
    ProtoFile,
    ServiceModel,
    TypeKind,
    TypeRef,
    build_sample_nodes,
)

__all__ = [
    'DescriptorLoader',
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
]
