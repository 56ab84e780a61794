"""Test suite for momentum.

Test Structure:
- unit/animation/: Solvers, frame scheduler and succession controller
- unit/utils/: Math, JSON and logging utilities
- unit/config/: Config models and loader
- unit/cli/: Command-line interface
- conftest.py: Shared fixtures
"""
