"""gapicgen - Resolve the import sections of generated client libraries.

gapicgen takes a service model derived from a protocol schema and decides
which import/require statements a generated client or sample file needs,
grouped into standard-library, external-library, application and service
imports.

Quick Start:
    >>> from gapicgen import Codegen, GeneratorConfig
    >>>
    >>> config = GeneratorConfig(descriptor='./library.yaml', output='./client')
    >>> codegen = Codegen(config)
    >>> sections = codegen.generate_import_sections()

CLI Usage:
    $ gapicgen imports --config gapicgen.yaml
    $ gapicgen sample-imports -i google.example.library.v1.LibraryService -m GetBook
"""

from importlib.metadata import PackageNotFoundError, version

from gapicgen.codegen import (
    Codegen,
    ImportFileView,
    ImportSectionTransformer,
    ImportSectionView,
    ImportTypeView,
    RubyImportSectionTransformer,
    RubySurfaceNamer,
    SurfaceNamer,
    get_import_section_transformer,
    get_surface_namer,
)
from gapicgen.config import GeneratorConfig, InterfaceConfig, MethodConfig, get_config
from gapicgen.exceptions import (
    ConfigurationError,
    GapicGenError,
    ModelError,
    ModelLoadError,
    ModelLookupError,
    ModelValidationError,
    OutputError,
    UnsupportedLanguageError,
)
from gapicgen.model import DescriptorLoader, ServiceModel

__all__ = [
    # Main classes
    'Codegen',
    'DescriptorLoader',
    'ServiceModel',
    'ImportSectionTransformer',
    'RubyImportSectionTransformer',
    'SurfaceNamer',
    'RubySurfaceNamer',
    'get_import_section_transformer',
    'get_surface_namer',
    # View models
    'ImportFileView',
    'ImportSectionView',
    'ImportTypeView',
    # Configuration
    'GeneratorConfig',
    'InterfaceConfig',
    'MethodConfig',
    'get_config',
    # Exceptions
    'GapicGenError',
    'ModelError',
    'ModelLoadError',
    'ModelValidationError',
    'ModelLookupError',
    'ConfigurationError',
    'UnsupportedLanguageError',
    'OutputError',
]

try:
    __version__ = version('gapicgen')
except PackageNotFoundError:
    __version__ = 'unknown'
