"""Transformer contexts bundling the model, configuration and namer.

A SurfaceTransformerContext describes one interface being generated; a
MethodTransformerContext narrows it to one method of that interface.
"""

from dataclasses import dataclass

from gapicgen.codegen.naming import SurfaceNamer
from gapicgen.config import GeneratorConfig, InterfaceConfig
from gapicgen.model import Interface, Method, ServiceModel


@dataclass(frozen=True)
class SurfaceTransformerContext:
    """Everything a transformer needs to generate code for one interface.

    Example:
        >>> context = SurfaceTransformerContext.create(
        ...     model, config, 'google.example.library.v1.LibraryService', namer
        ... )
        >>> [m.name for m in context.supported_methods]
        ['GetBook', 'ListShelves']
    """

    model: ServiceModel
    interface: Interface
    interface_config: InterfaceConfig
    namer: SurfaceNamer

    @classmethod
    def create(
        cls,
        model: ServiceModel,
        config: GeneratorConfig,
        interface_name: str,
        namer: SurfaceNamer,
    ) -> 'SurfaceTransformerContext':
        """Build a context for an interface of the model.

        Raises:
            ModelLookupError: If the interface is not part of the model.
        """
        interface = model.get_interface(interface_name)
        return cls(
            model=model,
            interface=interface,
            interface_config=config.get_interface_config(interface.full_name),
            namer=namer,
        )

    @property
    def supported_methods(self) -> list[Method]:
        """The interface's methods that are surfaced, in declaration order."""
        return [
            method
            for method in self.interface.methods
            if self.interface_config.is_supported(method.name)
        ]

    def as_request_method_context(self, method: Method) -> 'MethodTransformerContext':
        return MethodTransformerContext(surface_context=self, method=method)


@dataclass(frozen=True)
class MethodTransformerContext:
    surface_context: SurfaceTransformerContext
    method: Method

    @property
    def interface(self) -> Interface:
        return self.surface_context.interface

    @property
    def namer(self) -> SurfaceNamer:
        return self.surface_context.namer

    @property
    def target_interface(self) -> Interface:
        """The interface that handles the call.

        This differs from the declaring interface when the method is
        rerouted to a mixin or delegate.
        """
        method_config = self.surface_context.interface_config.get_method_config(
            self.method.name
        )
        if method_config and method_config.reroute_to_interface:
            return self.surface_context.model.get_interface(
                method_config.reroute_to_interface
            )
        return self.interface
