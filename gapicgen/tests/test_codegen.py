"""Tests for the Codegen orchestrator."""

import logging
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gapicgen.codegen.codegen import Codegen, client_file_name
from gapicgen.codegen.import_section import RubyImportSectionTransformer
from gapicgen.config import GeneratorConfig
from gapicgen.exceptions import (
    ConfigurationError,
    ModelLookupError,
    UnsupportedLanguageError,
)
from gapicgen.model import DescriptorLoader

from .fixtures import LIBRARY_CONFIG, LIBRARY_DESCRIPTOR, LIBRARY_SERVICE, SHELF_SERVICE


@pytest.fixture
def model():
    return DescriptorLoader().load_content(LIBRARY_DESCRIPTOR)


@pytest.fixture
def config():
    return GeneratorConfig.model_validate(LIBRARY_CONFIG)


class TestCodegenSetup:
    """Tests for Codegen construction and model loading."""

    def test_selects_language_components(self, config):
        """Test that the transformer is chosen from the configured language."""
        codegen = Codegen(config)
        assert isinstance(codegen.transformer, RubyImportSectionTransformer)

    def test_unsupported_language(self):
        """Test that an unsupported language fails at construction."""
        config = GeneratorConfig.model_validate({'descriptor': 'x', 'language': 'cobol'})
        with pytest.raises(UnsupportedLanguageError):
            Codegen(config)

    def test_model_loaded_once(self, config, model):
        """Test that the descriptor is loaded lazily and only once."""
        loader = MagicMock()
        loader.load.return_value = model
        codegen = Codegen(config, loader=loader)

        codegen.load_model()
        codegen.load_model()

        loader.load.assert_called_once_with('library.yaml')


class TestInterfaceSelection:
    """Tests for get_interface_names."""

    def test_configured_interfaces(self, config, model):
        """Test that configured interfaces are used in order."""
        codegen = Codegen(config, model=model)
        assert codegen.get_interface_names() == [LIBRARY_SERVICE, SHELF_SERVICE]

    def test_all_interfaces_without_configuration(self, model):
        """Test that every model interface is used when none are configured."""
        codegen = Codegen(GeneratorConfig(descriptor='library.yaml'), model=model)
        assert codegen.get_interface_names() == [LIBRARY_SERVICE, SHELF_SERVICE]

    def test_unknown_configured_interface_skipped(self, model, caplog):
        """Test that unknown configured interfaces are skipped with a warning."""
        config = GeneratorConfig.model_validate(
            {
                'descriptor': 'library.yaml',
                'interfaces': [{'name': 'google.example.Missing'}, {'name': SHELF_SERVICE}],
            }
        )
        codegen = Codegen(config, model=model)

        with caplog.at_level(logging.WARNING):
            names = codegen.get_interface_names()

        assert names == [SHELF_SERVICE]
        assert 'google.example.Missing' in caplog.text


class TestGeneration:
    """Tests for import section generation."""

    def test_generate_import_sections(self, config, model):
        """Test one section per interface."""
        sections = Codegen(config, model=model).generate_import_sections()

        assert list(sections) == [LIBRARY_SERVICE, SHELF_SERVICE]
        shelf_section = sections[SHELF_SERVICE]
        assert [i.module_name for i in shelf_section.app_imports] == [
            'google/example/library/v1/shelf_pb'
        ]

    def test_generate_selected_interface(self, config, model):
        """Test generating a single named interface."""
        sections = Codegen(config, model=model).generate_import_sections([SHELF_SERVICE])
        assert list(sections) == [SHELF_SERVICE]

    def test_unknown_interface(self, config, model):
        """Test that naming an unknown interface raises ModelLookupError."""
        with pytest.raises(ModelLookupError):
            Codegen(config, model=model).generate_import_sections(['google.Missing'])

    def test_generate_sample_import_section(self, config, model):
        """Test the sample section for a method's request fields."""
        section = Codegen(config, model=model).generate_sample_import_section(
            LIBRARY_SERVICE, 'CreateBook'
        )
        assert [i.module_name for i in section.app_imports] == [
            'Google::Example::Library::V1',
            'Status::V1',
        ]
        assert section.service_imports == ()

    def test_generate_writes_files(self, model):
        """Test that generate() writes one Ruby file per interface."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config = GeneratorConfig.model_validate({**LIBRARY_CONFIG, 'output': tmpdir})
            written = Codegen(config, model=model).generate()

            expected = Path(tmpdir) / 'google/example/library/v1/library_service_client.rb'
            assert len(written) == 2
            assert str(expected) in written
            assert 'require "google/gax/grpc"' in expected.read_text()

    def test_generate_requires_output(self, config, model):
        """Test that generate() needs an output directory."""
        with pytest.raises(ConfigurationError) as exc_info:
            Codegen(config, model=model).generate()
        assert exc_info.value.field == 'output'


class TestClientFileName:
    """Tests for client_file_name."""

    def test_nested_file(self, model):
        """Test a client next to a nested schema file."""
        interface = model.get_interface(LIBRARY_SERVICE)
        assert client_file_name(interface) == 'google/example/library/v1/library_service_client'

    def test_flat_file(self):
        """Test a client for a schema file without directories."""
        model = DescriptorLoader().load_content(
            {
                'files': [{'name': 'echo.proto', 'package': 'echo'}],
                'interfaces': [{'name': 'EchoService', 'file': 'echo.proto'}],
            }
        )
        assert client_file_name(model.get_interface('echo.EchoService')) == 'echo_service_client'
