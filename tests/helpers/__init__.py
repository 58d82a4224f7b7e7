"""Test helper modules for the schemaform test suite.

- fakes: scripted prompt executor and recording identity probe
- io_utils: writing YAML/JSON fixture files
- config: loading configuration isolated from the process environment
"""
from __future__ import annotations
