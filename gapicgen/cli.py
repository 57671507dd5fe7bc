import json
from enum import Enum
from typing import Annotated

import typer
from rich.console import Console

from gapicgen.codegen import Codegen, StringEmitter
from gapicgen.codegen.viewmodel import ImportSectionView
from gapicgen.config import get_config
from gapicgen.exceptions import GapicGenError

console = Console()
app = typer.Typer(
    name='gapicgen',
    help='Resolve the import sections of generated client libraries',
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    ruby = 'ruby'
    json = 'json'


ConfigOption = Annotated[
    str | None,
    typer.Option('--config', '-c', help='Path to configuration file (YAML)'),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option('--format', '-f', help='Output format'),
]


def _print_section(
    section: ImportSectionView, title: str, output_format: OutputFormat
) -> None:
    console.print(f'[bold]{title}[/bold]')
    if output_format is OutputFormat.json:
        console.print_json(json.dumps(section.to_dict()))
        return
    source = StringEmitter().emit(section, title)
    if source:
        console.print(source.rstrip(), markup=False, highlight=False)
    else:
        console.print('[dim](no imports)[/dim]')


@app.command()
def imports(
    config: ConfigOption = None,
    interface: Annotated[
        list[str] | None,
        typer.Option(
            '--interface', '-i', help='Fully qualified interface name (repeatable)'
        ),
    ] = None,
    output_format: FormatOption = OutputFormat.ruby,
) -> None:
    """Show the import section of each generated client.

    When the configuration names an output directory, the rendered sections
    are also written there.

    Examples:
        gapicgen imports
        gapicgen imports -c gapicgen.yaml -i google.example.library.v1.LibraryService
        gapicgen imports --format json
    """
    try:
        generator_config = get_config(config)
        codegen = Codegen(generator_config)

        sections = codegen.generate_import_sections(interface or None)
        for name, section in sections.items():
            _print_section(section, name, output_format)

        if generator_config.output:
            written = codegen.generate(interface or None)
            console.print('[dim]Generated files:[/dim]')
            for path in written:
                console.print(f'  - {path}')

    except GapicGenError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


@app.command('sample-imports')
def sample_imports(
    interface: Annotated[
        str, typer.Option('--interface', '-i', help='Fully qualified interface name')
    ],
    method: Annotated[str, typer.Option('--method', '-m', help='Method name')],
    config: ConfigOption = None,
    output_format: FormatOption = OutputFormat.ruby,
) -> None:
    """Show the import section of a sample calling one method.

    Examples:
        gapicgen sample-imports -i google.example.library.v1.LibraryService -m GetBook
    """
    try:
        codegen = Codegen(get_config(config))
        section = codegen.generate_sample_import_section(interface, method)
        _print_section(section, f'{interface}.{method}', output_format)

    except GapicGenError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of gapicgen."""
    from gapicgen import __version__

    console.print(f'gapicgen version: {__version__}')


if __name__ == '__main__':
    app()
