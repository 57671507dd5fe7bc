"""Import section emitters.

This module provides the ImportSectionEmitter interface and concrete
implementations for rendering an ImportSectionView as source text and
emitting it to strings or files.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from upath import UPath

from gapicgen.codegen.viewmodel import ImportFileView, ImportSectionView
from gapicgen.exceptions import OutputError


class ImportSectionEmitter(ABC):
    """Abstract base class for import section emitters.

    Subclasses decide where rendered text goes; the rendering itself is
    shared and produces Ruby source.
    """

    file_extension = '.rb'

    def render(self, section: ImportSectionView) -> str:
        """Render an import section as Ruby source.

        Plain imports become ``require`` lines and alias imports become
        constant assignments. Non-empty groups are separated by a blank line
        in the order standard, external, app, service.
        """
        blocks = [
            '\n'.join(self._render_import(record) for record in group)
            for group in section.groups
            if group
        ]
        return '\n\n'.join(blocks) + '\n' if blocks else ''

    def _render_import(self, record: ImportFileView) -> str:
        if record.is_alias:
            alias = record.types[0]
            return f'{alias.nickname} = {alias.full_name}'
        return f'require "{record.module_name}"'

    @abstractmethod
    def emit(self, section: ImportSectionView, name: str) -> str:
        """Emit a rendered import section.

        Args:
            section: The import section to render.
            name: Identifier of the generated file the section belongs to.

        Returns:
            The path to the emitted file, or the rendered text, depending
            on the implementation.
        """
        pass


class FileEmitter(ImportSectionEmitter):
    """Writes rendered import sections to files in an output directory."""

    def __init__(self, output_dir: str | Path | UPath):
        self.output_dir = UPath(output_dir)
        self._written_files: list[str] = []

    def emit(self, section: ImportSectionView, name: str) -> str:
        return self._write_file(f'{name}{self.file_extension}', self.render(section))

    def _write_file(self, filename: str, content: str) -> str:
        file_path = self.output_dir / filename
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise OutputError(str(file_path), cause=e)
        self._written_files.append(str(file_path))

        return str(file_path)

    def get_written_files(self) -> list[str]:
        """Get list of all files written by this emitter."""
        return self._written_files.copy()


class StringEmitter(ImportSectionEmitter):
    """Keeps rendered import sections in memory.

    Useful for testing or for printing sections instead of writing them.
    """

    def __init__(self):
        self._sections: dict[str, str] = {}

    def emit(self, section: ImportSectionView, name: str) -> str:
        source = self.render(section)
        self._sections[name] = source
        return source

    def get_section(self, name: str) -> str | None:
        return self._sections.get(name)

    def get_all_sections(self) -> dict[str, str]:
        return self._sections.copy()
