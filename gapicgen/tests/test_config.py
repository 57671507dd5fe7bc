"""Test configuration for gapicgen package."""

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from gapicgen.config import (
    GeneratorConfig,
    InterfaceConfig,
    MethodConfig,
    NamingConfig,
    get_config,
)
from gapicgen.exceptions import ConfigurationError

from .fixtures import LIBRARY_CONFIG, LIBRARY_SERVICE, LONG_RUNNING_CONFIG, SHELF_SERVICE


class TestInterfaceConfig:
    """Test InterfaceConfig model."""

    def test_defaults(self):
        """Test an interface config with only a name."""
        config = InterfaceConfig(name=LIBRARY_SERVICE)
        assert config.methods == []
        assert config.excluded_methods == []
        assert config.has_long_running_operations is False

    def test_has_long_running_operations(self):
        """Test that any long-running method enables the flag."""
        config = InterfaceConfig(
            name=LIBRARY_SERVICE,
            methods=[MethodConfig(name='GetBook'), MethodConfig(name='CreateBook', long_running=True)],
        )
        assert config.has_long_running_operations is True

    def test_get_method_config(self):
        """Test method config lookup."""
        config = InterfaceConfig(
            name=LIBRARY_SERVICE,
            methods=[MethodConfig(name='MoveBook', reroute_to_interface=SHELF_SERVICE)],
        )
        assert config.get_method_config('MoveBook').reroute_to_interface == SHELF_SERVICE
        assert config.get_method_config('GetBook') is None

    def test_is_supported(self):
        """Test excluded methods are not supported."""
        config = InterfaceConfig(name=LIBRARY_SERVICE, excluded_methods=['DeleteBook'])
        assert config.is_supported('GetBook')
        assert not config.is_supported('DeleteBook')


class TestGeneratorConfig:
    """Test GeneratorConfig model."""

    def test_valid_config(self):
        """Test creating a config from a mapping."""
        config = GeneratorConfig.model_validate(LIBRARY_CONFIG)
        assert config.language == 'ruby'
        assert config.descriptor == 'library.yaml'
        assert config.output is None
        assert len(config.interfaces) == 2
        assert config.naming == NamingConfig()

    def test_get_interface_config(self):
        """Test that configured interfaces are returned."""
        config = GeneratorConfig.model_validate(LONG_RUNNING_CONFIG)
        assert config.get_interface_config(LIBRARY_SERVICE).has_long_running_operations

    def test_get_interface_config_default(self):
        """Test that unconfigured interfaces get empty defaults."""
        config = GeneratorConfig.model_validate(LIBRARY_CONFIG)
        default = config.get_interface_config('google.example.Other')
        assert default.name == 'google.example.Other'
        assert default.methods == []

    def test_missing_descriptor(self):
        """Test that the descriptor is required."""
        with pytest.raises(ValueError):
            GeneratorConfig.model_validate({'language': 'ruby'})


class TestGetConfig:
    """Test get_config function."""

    def test_get_config_with_yaml_file(self):
        """Test loading config from an explicit YAML file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'custom.yaml'
            path.write_text(yaml.safe_dump(LIBRARY_CONFIG))

            config = get_config(str(path))

        assert config.descriptor == 'library.yaml'

    def test_get_config_missing_explicit_file(self):
        """Test that a missing explicit file raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            get_config('/nonexistent/gapicgen.yaml')
        assert exc_info.value.config_path == '/nonexistent/gapicgen.yaml'

    def test_get_config_default_filename(self):
        """Test discovery of gapicgen.yaml in the working directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / 'gapicgen.yml').write_text(yaml.safe_dump(LIBRARY_CONFIG))

            with patch('os.getcwd', return_value=tmpdir):
                config = get_config()

        assert config.language == 'ruby'

    def test_get_config_from_pyproject(self):
        """Test loading config from the [tool.gapicgen] table."""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / 'pyproject.toml').write_text(
                '[tool.gapicgen]\n'
                'descriptor = "api/library.yaml"\n'
                'output = "generated"\n'
            )

            with patch('os.getcwd', return_value=tmpdir):
                config = get_config()

        assert config.descriptor == 'api/library.yaml'
        assert config.output == 'generated'

    def test_get_config_not_found(self):
        """Test that no configuration raises ConfigurationError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch('os.getcwd', return_value=tmpdir):
                with pytest.raises(ConfigurationError, match='Configuration not found'):
                    get_config()

    def test_get_config_invalid(self):
        """Test that invalid fields are reported with their location."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'gapicgen.yaml'
            path.write_text(yaml.safe_dump({'language': 'ruby'}))

            with pytest.raises(ConfigurationError) as exc_info:
                get_config(str(path))

        assert exc_info.value.field == 'descriptor'
        assert exc_info.value.config_path == str(path)

    def test_get_config_malformed_yaml(self):
        """Test that unparsable YAML raises ConfigurationError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'gapicgen.yaml'
            path.write_text('descriptor: [unclosed\n')

            with pytest.raises(ConfigurationError) as exc_info:
                get_config(str(path))

        assert exc_info.value.config_path == str(path)
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_get_config_malformed_pyproject(self):
        """Test that an unparsable pyproject.toml raises ConfigurationError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            pyproject_path = Path(tmpdir) / 'pyproject.toml'
            pyproject_path.write_text('[tool.gapicgen\ndescriptor = "x"\n')

            with patch('os.getcwd', return_value=tmpdir):
                with pytest.raises(ConfigurationError) as exc_info:
                    get_config()

        assert exc_info.value.config_path == str(pyproject_path)
