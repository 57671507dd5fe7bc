"""Import section transformers.

An ImportSectionTransformer decides which imports a generated source file
needs and groups them into the four categories of an ImportSectionView:
standard library, external libraries, application (generated model) files
and service client files. One transformer exists per target language and
is selected from the generator configuration.

Example:
    >>> transformer = get_import_section_transformer('ruby')
    >>> section = transformer.generate_import_section(context)
    >>> [i.module_name for i in section.external_imports]
    ['google/gax']
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from gapicgen.codegen.context import MethodTransformerContext, SurfaceTransformerContext
from gapicgen.codegen.import_collector import (
    collect_import_filenames,
    collect_sample_namespaces,
)
from gapicgen.codegen.viewmodel import (
    ImportFileView,
    ImportSectionView,
    create_alias_import,
    create_import,
)
from gapicgen.exceptions import UnsupportedLanguageError
from gapicgen.model import InitCodeNode

__all__ = (
    'ImportSectionTransformer',
    'RubyImportSectionTransformer',
    'get_import_section_transformer',
    'resolve_alias_imports',
)


class ImportSectionTransformer(ABC):
    """Builds the import section of generated client and sample files."""

    @abstractmethod
    def generate_import_section(
        self, context: SurfaceTransformerContext
    ) -> ImportSectionView:
        """Build the import section for a full client surface."""
        pass

    @abstractmethod
    def generate_sample_import_section(
        self,
        context: MethodTransformerContext,
        spec_item_nodes: Iterable[InitCodeNode],
    ) -> ImportSectionView:
        """Build the import section for a sample calling one method."""
        pass


class RubyImportSectionTransformer(ImportSectionTransformer):
    STANDARD_IMPORTS = ('json', 'pathname')
    GAX_IMPORT = 'google/gax'
    LONG_RUNNING_IMPORTS = (
        'google/gax/operation',
        'google/longrunning/operations_client',
    )
    GRPC_IMPORT = 'google/gax/grpc'

    def generate_import_section(
        self, context: SurfaceTransformerContext
    ) -> ImportSectionView:
        filenames = collect_import_filenames(context)
        return ImportSectionView(
            standard_imports=self._generate_standard_imports(),
            external_imports=self._generate_external_imports(context),
            app_imports=self._generate_app_imports(context, filenames),
            service_imports=self._generate_service_imports(context, filenames),
        )

    def generate_sample_import_section(
        self,
        context: MethodTransformerContext,
        spec_item_nodes: Iterable[InitCodeNode],
    ) -> ImportSectionView:
        namespaces = collect_sample_namespaces(context, spec_item_nodes)
        return ImportSectionView(app_imports=resolve_alias_imports(namespaces))

    def _generate_standard_imports(self) -> tuple[ImportFileView, ...]:
        return tuple(create_import(name) for name in self.STANDARD_IMPORTS)

    def _generate_external_imports(
        self, context: SurfaceTransformerContext
    ) -> tuple[ImportFileView, ...]:
        imports = [create_import(self.GAX_IMPORT)]
        if context.interface_config.has_long_running_operations:
            imports.extend(create_import(name) for name in self.LONG_RUNNING_IMPORTS)
        return tuple(imports)

    def _generate_app_imports(
        self, context: SurfaceTransformerContext, filenames: Iterable[str]
    ) -> tuple[ImportFileView, ...]:
        return tuple(
            create_import(context.namer.get_proto_file_import_name(filename))
            for filename in filenames
        )

    def _generate_service_imports(
        self, context: SurfaceTransformerContext, filenames: Iterable[str]
    ) -> tuple[ImportFileView, ...]:
        imports = [create_import(self.GRPC_IMPORT)]
        imports.extend(
            create_import(context.namer.get_service_file_import_name(filename))
            for filename in filenames
        )
        return tuple(imports)


def resolve_alias_imports(namespaces: Mapping[str, str]) -> tuple[ImportFileView, ...]:
    """Create alias imports for namespaces whose nickname differs from their name.

    Namespaces that are their own nickname need no alias and are skipped.
    The result is ordered by module name.
    """
    return tuple(
        create_alias_import(nickname, namespace)
        for namespace, nickname in sorted(namespaces.items())
        if namespace != nickname
    )


_TRANSFORMERS: dict[str, type[ImportSectionTransformer]] = {
    'ruby': RubyImportSectionTransformer,
}


def get_import_section_transformer(language: str) -> ImportSectionTransformer:
    """Get the import section transformer for a target language.

    Raises:
        UnsupportedLanguageError: If no transformer exists for the language.
    """
    try:
        return _TRANSFORMERS[language.lower()]()
    except KeyError:
        raise UnsupportedLanguageError(language, sorted(_TRANSFORMERS)) from None
