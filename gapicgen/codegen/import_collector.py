"""Collection of the files and namespaces a generated file refers to.

Two collection modes are provided: one for a full client surface, walking
the supported methods of an interface, and one for a generated sample,
walking the typed values the sample initializes.
"""

import logging
from collections.abc import Iterable

from gapicgen.codegen.context import MethodTransformerContext, SurfaceTransformerContext
from gapicgen.model import InitCodeNode

logger = logging.getLogger(__name__)


def collect_import_filenames(context: SurfaceTransformerContext) -> tuple[str, ...]:
    """Collect the files defining an interface and the targets of its methods.

    The interface's own file is always included. Each supported method
    contributes the file of its target interface, which for rerouted methods
    is not the declaring one.

    Returns:
        Distinct file names in lexicographic order.
    """
    filenames = {context.interface.file.simple_name}
    for method in context.supported_methods:
        target_interface = context.as_request_method_context(method).target_interface
        filenames.add(target_interface.file.simple_name)

    logger.debug(
        f'Collected {len(filenames)} import files for {context.interface.full_name}'
    )
    return tuple(sorted(filenames))


def collect_sample_namespaces(
    context: MethodTransformerContext, spec_item_nodes: Iterable[InitCodeNode]
) -> dict[str, str]:
    """Collect the namespaces a sample refers to, mapped to their nicknames.

    The interface's namespace is always present since the sample uses the
    client. Message- and enum-typed nodes add the namespace of their declaring
    file; primitive nodes have no file and add nothing.

    Returns:
        Mapping of canonical namespace to nickname.
    """
    namer = context.namer
    service_file = context.interface.file
    namespaces = {
        namer.get_namespace(service_file): namer.get_namespace_nickname(service_file)
    }

    for node in spec_item_nodes:
        file = node.type.file
        if file is None:
            logger.debug(f'Skipping {node.key}: {node.type.name} has no declaring file')
            continue
        namespaces[namer.get_namespace(file)] = namer.get_namespace_nickname(file)

    return namespaces
