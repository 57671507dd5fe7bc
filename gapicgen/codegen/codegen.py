"""Code generation orchestration for import sections.

This module ties together descriptor loading, language selection and the
import section transformers for every interface named in a configuration.
"""

import logging
import re

from gapicgen.codegen.context import SurfaceTransformerContext
from gapicgen.codegen.emitter import FileEmitter
from gapicgen.codegen.import_section import get_import_section_transformer
from gapicgen.codegen.naming import get_surface_namer
from gapicgen.codegen.viewmodel import ImportSectionView
from gapicgen.config import GeneratorConfig
from gapicgen.exceptions import ConfigurationError
from gapicgen.model import DescriptorLoader, Interface, ServiceModel, build_sample_nodes

logger = logging.getLogger(__name__)


class Codegen:
    """Generates import sections for the interfaces of a service model.

    The transformer and namer for the configured language are selected once,
    when the generator is created.

    Attributes:
        config: The GeneratorConfig naming the descriptor and interfaces.
        model: The loaded ServiceModel (populated by load_model).

    Example:
        >>> config = GeneratorConfig(descriptor='./library.yaml', output='./out')
        >>> codegen = Codegen(config)
        >>> codegen.generate()
        ['out/google/example/library/v1/library_service_client.rb']
    """

    def __init__(
        self,
        config: GeneratorConfig,
        loader: DescriptorLoader | None = None,
        model: ServiceModel | None = None,
    ):
        self.config = config
        self.model = model
        self._loader = loader or DescriptorLoader()
        self.namer = get_surface_namer(config.language, config.naming)
        self.transformer = get_import_section_transformer(config.language)

    def load_model(self) -> ServiceModel:
        if self.model is None:
            self.model = self._loader.load(self.config.descriptor)
        return self.model

    def get_interface_names(self) -> list[str]:
        """Names of the interfaces to generate.

        Configured interfaces are used when present, otherwise every
        interface of the model. Configured names missing from the model are
        skipped with a warning.
        """
        model = self.load_model()
        if not self.config.interfaces:
            return [interface.full_name for interface in model.interfaces]

        names = []
        for interface_config in self.config.interfaces:
            if model.has_interface(interface_config.name):
                names.append(interface_config.name)
            else:
                logger.warning(
                    f'Configured interface {interface_config.name} is not in the model'
                )
        return names

    def create_context(self, interface_name: str) -> SurfaceTransformerContext:
        return SurfaceTransformerContext.create(
            self.load_model(), self.config, interface_name, self.namer
        )

    def generate_import_sections(
        self, interface_names: list[str] | None = None
    ) -> dict[str, ImportSectionView]:
        """Build the full-surface import section for each interface.

        Args:
            interface_names: Interfaces to generate; defaults to
                get_interface_names().

        Returns:
            Mapping of interface full name to its import section.
        """
        names = interface_names or self.get_interface_names()
        return {
            name: self.transformer.generate_import_section(self.create_context(name))
            for name in names
        }

    def generate_sample_import_section(
        self, interface_name: str, method_name: str
    ) -> ImportSectionView:
        """Build the import section for a sample calling one method.

        The sample initializes every field of the method's request message.
        """
        context = self.create_context(interface_name)
        method = context.interface.get_method(method_name)
        method_context = context.as_request_method_context(method)
        return self.transformer.generate_sample_import_section(
            method_context, build_sample_nodes(method)
        )

    def generate(self, interface_names: list[str] | None = None) -> list[str]:
        """Render and write the import section of every interface.

        Args:
            interface_names: Interfaces to generate; defaults to
                get_interface_names().

        Returns:
            Paths of the written files.

        Raises:
            ConfigurationError: If no output directory is configured.
        """
        if not self.config.output:
            raise ConfigurationError('No output directory configured', field='output')

        emitter = FileEmitter(self.config.output)
        for name, section in self.generate_import_sections(interface_names).items():
            emitter.emit(section, client_file_name(self.model.get_interface(name)))
        return emitter.get_written_files()


def client_file_name(interface: Interface) -> str:
    """Relative file name, without extension, of an interface's generated client."""
    directory = interface.file.simple_name.rsplit('/', 1)
    snake = re.sub(r'(?<!^)(?=[A-Z])', '_', interface.name).lower()
    if len(directory) == 1:
        return f'{snake}_client'
    return f'{directory[0]}/{snake}_client'
