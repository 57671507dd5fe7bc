"""Test fixtures for gapicgen tests.

This module provides sample service descriptors and configurations for
testing import section generation.
"""

LIBRARY_FILE = 'google/example/library/v1/library.proto'
SHELF_FILE = 'google/example/library/v1/shelf.proto'
STATUS_FILE = 'google/example/status/v1/status.proto'

LIBRARY_SERVICE = 'google.example.library.v1.LibraryService'
SHELF_SERVICE = 'google.example.library.v1.ShelfService'

# Library service whose MoveBook method is handled by the shelf service
LIBRARY_DESCRIPTOR = {
    'files': [
        {
            'name': LIBRARY_FILE,
            'package': 'google.example.library.v1',
            'messages': [
                {
                    'name': 'Book',
                    'fields': [
                        {'name': 'name', 'type': 'string'},
                        {'name': 'author', 'type': 'string'},
                        {'name': 'status', 'type': 'google.example.status.v1.Status'},
                    ],
                },
                {
                    'name': 'GetBookRequest',
                    'fields': [{'name': 'name', 'type': 'string'}],
                },
                {
                    'name': 'CreateBookRequest',
                    'fields': [
                        {'name': 'parent', 'type': 'string'},
                        {'name': 'book', 'type': '.google.example.library.v1.Book'},
                        {'name': 'status', 'type': 'google.example.status.v1.Status'},
                    ],
                },
                {
                    'name': 'MoveBookRequest',
                    'fields': [
                        {'name': 'name', 'type': 'string'},
                        {'name': 'shelf', 'type': 'google.example.library.v1.Shelf'},
                    ],
                },
            ],
        },
        {
            'name': SHELF_FILE,
            'package': 'google.example.library.v1',
            'messages': [
                {
                    'name': 'Shelf',
                    'fields': [
                        {'name': 'name', 'type': 'string'},
                        {'name': 'books', 'type': 'google.example.library.v1.Book'},
                    ],
                },
                {
                    'name': 'GetShelfRequest',
                    'fields': [{'name': 'name', 'type': 'string'}],
                },
            ],
        },
        {
            'name': STATUS_FILE,
            'package': 'google.example.status.v1',
            'ruby_package': 'Status::V1',
            'enums': [{'name': 'Status', 'values': ['AVAILABLE', 'LOANED']}],
        },
    ],
    'interfaces': [
        {
            'name': 'LibraryService',
            'file': LIBRARY_FILE,
            'methods': [
                {
                    'name': 'GetBook',
                    'input_type': 'google.example.library.v1.GetBookRequest',
                    'output_type': 'google.example.library.v1.Book',
                },
                {
                    'name': 'CreateBook',
                    'input_type': 'google.example.library.v1.CreateBookRequest',
                    'output_type': 'google.example.library.v1.Book',
                },
                {
                    'name': 'MoveBook',
                    'input_type': 'google.example.library.v1.MoveBookRequest',
                    'output_type': 'google.example.library.v1.Book',
                },
            ],
        },
        {
            'name': 'ShelfService',
            'file': SHELF_FILE,
            'methods': [
                {
                    'name': 'GetShelf',
                    'input_type': 'google.example.library.v1.GetShelfRequest',
                    'output_type': 'google.example.library.v1.Shelf',
                },
            ],
        },
    ],
}

LIBRARY_CONFIG = {
    'language': 'ruby',
    'descriptor': 'library.yaml',
    'interfaces': [
        {
            'name': LIBRARY_SERVICE,
            'methods': [
                {'name': 'MoveBook', 'reroute_to_interface': SHELF_SERVICE},
            ],
        },
        {'name': SHELF_SERVICE},
    ],
}

# Same interfaces with long-running CreateBook
LONG_RUNNING_CONFIG = {
    'language': 'ruby',
    'descriptor': 'library.yaml',
    'interfaces': [
        {
            'name': LIBRARY_SERVICE,
            'methods': [
                {'name': 'CreateBook', 'long_running': True},
                {'name': 'MoveBook', 'reroute_to_interface': SHELF_SERVICE},
            ],
        },
    ],
}

LIBRARY_DESCRIPTOR_YAML = f"""
files:
  - name: {LIBRARY_FILE}
    package: google.example.library.v1
    messages:
      - name: Book
        fields:
          - {{name: name, type: string}}
      - name: GetBookRequest
        fields:
          - {{name: name, type: string}}
interfaces:
  - name: LibraryService
    file: {LIBRARY_FILE}
    methods:
      - name: GetBook
        input_type: google.example.library.v1.GetBookRequest
        output_type: google.example.library.v1.Book
"""
