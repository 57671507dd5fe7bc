"""Code generation module for gapicgen.

This module provides the surface transformers that turn a service model
into view models for the template layer.

Main Components:
    - SurfaceTransformerContext / MethodTransformerContext: per-interface and
      per-method inputs to the transformers
    - SurfaceNamer: language-specific naming policy
    - ImportSectionTransformer: builds categorized import sections
    - ImportSectionEmitter: renders import sections as source text

Example:
    >>> from gapicgen.codegen import (
    ...     SurfaceTransformerContext,
    ...     get_import_section_transformer,
    ...     get_surface_namer,
    ... )
    >>> namer = get_surface_namer(config.language, config.naming)
    >>> context = SurfaceTransformerContext.create(model, config, interface_name, namer)
    >>> section = get_import_section_transformer(config.language).generate_import_section(context)
"""

from gapicgen.codegen.codegen import Codegen, client_file_name
from gapicgen.codegen.context import MethodTransformerContext, SurfaceTransformerContext
from gapicgen.codegen.emitter import FileEmitter, ImportSectionEmitter, StringEmitter
from gapicgen.codegen.import_collector import (
    collect_import_filenames,
    collect_sample_namespaces,
)
from gapicgen.codegen.import_section import (
    ImportSectionTransformer,
    RubyImportSectionTransformer,
    get_import_section_transformer,
    resolve_alias_imports,
)
from gapicgen.codegen.naming import RubySurfaceNamer, SurfaceNamer, get_surface_namer
from gapicgen.codegen.viewmodel import (
    ImportFileView,
    ImportSectionView,
    ImportTypeView,
    create_alias_import,
    create_import,
)

__all__ = [
    # Main codegen class
    'Codegen',
    'client_file_name',
    # Contexts
    'SurfaceTransformerContext',
    'MethodTransformerContext',
    # Naming
    'SurfaceNamer',
    'RubySurfaceNamer',
    'get_surface_namer',
    # Import collection
    'collect_import_filenames',
    'collect_sample_namespaces',
    # Import sections
    'ImportSectionTransformer',
    'RubyImportSectionTransformer',
    'get_import_section_transformer',
    'resolve_alias_imports',
    # View models
    'ImportFileView',
    'ImportSectionView',
    'ImportTypeView',
    'create_import',
    'create_alias_import',
    # Emission
    'ImportSectionEmitter',
    'FileEmitter',
    'StringEmitter',
]
