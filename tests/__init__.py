# MathMaze Test Suite
"""
Test suite including:
- Unit tests for the primitives, solving paths and block transform
- Chained cipher and public-key messaging tests
- Security tests (tampering, wrong keys, malformed input)

Run with: pytest
"""
