"""View models consumed by the template layer.

These are plain immutable values: transformers build each sequence as a
finished tuple and then construct the view in one step.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImportTypeView:
    """A single name pulled in by an import, possibly under a nickname."""

    full_name: str
    nickname: str


@dataclass(frozen=True)
class ImportFileView:
    """One import statement.

    Attributes:
        module_name: The module or file being imported.
        types: Empty for plain imports. Alias imports carry exactly one entry
            whose full_name equals module_name.
    """

    module_name: str
    types: tuple[ImportTypeView, ...] = ()

    @property
    def is_alias(self) -> bool:
        return bool(self.types)

    def to_dict(self) -> dict:
        return {
            'module_name': self.module_name,
            'types': [
                {'full_name': t.full_name, 'nickname': t.nickname} for t in self.types
            ],
        }


@dataclass(frozen=True)
class ImportSectionView:
    """The categorized imports prepended to a generated source file."""

    standard_imports: tuple[ImportFileView, ...] = ()
    external_imports: tuple[ImportFileView, ...] = ()
    app_imports: tuple[ImportFileView, ...] = ()
    service_imports: tuple[ImportFileView, ...] = ()

    @property
    def groups(self) -> tuple[tuple[ImportFileView, ...], ...]:
        """The four import groups in rendering order."""
        return (
            self.standard_imports,
            self.external_imports,
            self.app_imports,
            self.service_imports,
        )

    @property
    def is_empty(self) -> bool:
        return not any(self.groups)

    def to_dict(self) -> dict:
        return {
            'standard_imports': [i.to_dict() for i in self.standard_imports],
            'external_imports': [i.to_dict() for i in self.external_imports],
            'app_imports': [i.to_dict() for i in self.app_imports],
            'service_imports': [i.to_dict() for i in self.service_imports],
        }


def create_import(name: str) -> ImportFileView:
    return ImportFileView(module_name=name)


def create_alias_import(nickname: str, full_name: str) -> ImportFileView:
    return ImportFileView(
        module_name=full_name,
        types=(ImportTypeView(full_name=full_name, nickname=nickname),),
    )
