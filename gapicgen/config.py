import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from gapicgen.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['gapicgen.yaml', 'gapicgen.yml']

logger = logging.getLogger(__name__)


class MethodConfig(BaseModel):
    """Per-method generation settings."""

    name: str = Field(..., description='Simple name of the method.')

    long_running: bool = Field(
        False, description='Whether the method returns a long-running operation.'
    )

    reroute_to_interface: str | None = Field(
        None,
        description='Fully qualified name of the interface that actually handles '
        'the call, for mixins and delegated methods.',
    )


class InterfaceConfig(BaseModel):
    """Per-interface generation settings."""

    name: str = Field(..., description='Fully qualified name of the interface.')

    methods: list[MethodConfig] = Field(
        default_factory=list, description='Method-level settings.'
    )

    excluded_methods: list[str] = Field(
        default_factory=list,
        description='Methods that are not surfaced in the generated client.',
    )

    @property
    def has_long_running_operations(self) -> bool:
        return any(method.long_running for method in self.methods)

    def get_method_config(self, name: str) -> MethodConfig | None:
        for method in self.methods:
            if method.name == name:
                return method
        return None

    def is_supported(self, method_name: str) -> bool:
        return method_name not in self.excluded_methods


class NamingConfig(BaseModel):
    nickname_strip_prefixes: list[str] = Field(
        default_factory=lambda: ['Google::Cloud::', 'Google::'],
        description='Namespace prefixes dropped when deriving namespace nicknames. '
        'The first matching prefix wins.',
    )


class GeneratorConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='GAPICGEN_')

    language: str = Field('ruby', description='Target language of the client.')

    descriptor: str = Field(
        ..., description='Path or URL to the service descriptor (YAML or JSON).'
    )

    output: str | None = Field(
        None, description='Optional output directory for rendered import sections.'
    )

    interfaces: list[InterfaceConfig] = Field(
        default_factory=list, description='Interfaces to generate clients for.'
    )

    naming: NamingConfig = Field(default_factory=NamingConfig)

    def get_interface_config(self, full_name: str) -> InterfaceConfig:
        """Return the settings for an interface, or empty defaults if unconfigured."""
        for interface in self.interfaces:
            if interface.name == full_name:
                return interface
        return InterfaceConfig(name=full_name)


def load_yaml(path: str | Path) -> dict:
    try:
        return yaml.safe_load(Path(path).read_text())
    except (yaml.YAMLError, OSError) as e:
        raise ConfigurationError(
            'Could not read configuration', config_path=str(path)
        ) from e


def _validate(data: dict, config_path: str) -> GeneratorConfig:
    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        field = '.'.join(str(loc) for loc in e.errors()[0]['loc'])
        raise ConfigurationError(
            'Invalid configuration', config_path=config_path, field=field or None
        ) from e


def get_config(path: str | None = None) -> GeneratorConfig:
    """Load configuration from a file, the working directory or pyproject.toml."""
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        return _validate(load_yaml(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            logger.debug(f'Using configuration from {candidate}')
            return _validate(load_yaml(candidate), str(candidate))

    pyproject_path = Path(os.getcwd()) / 'pyproject.toml'

    if pyproject_path.exists():
        import tomllib

        try:
            pyproject = tomllib.loads(pyproject_path.read_text())
        except (tomllib.TOMLDecodeError, OSError) as e:
            raise ConfigurationError(
                'Could not read configuration', config_path=str(pyproject_path)
            ) from e
        tools = pyproject.get('tool', {})

        if 'gapicgen' in tools:
            return _validate(tools['gapicgen'], str(pyproject_path))

    raise ConfigurationError('Configuration not found')
