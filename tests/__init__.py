"""
Test suite for the pyimgproc package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for the pixel codec, accessor, averager, pool and each transform
- Integration tests chaining transforms and file I/O
- CLI tests

Run with: pytest
"""
