"""Test suite for modpack.

Test Structure:
- unit/: Unit tests for individual components
  - dist/: Label documents and decoding
  - buildpack/: Module extraction and lazy layer access
  - image/: Package implementations (fake, OCI layout)
  - config/, utils/, cli/: Ambient support code
- conftest.py: Shared fixtures (fake packages, on-disk layouts)
"""
