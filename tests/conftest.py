"""Pytest configuration for circline tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import matplotlib

# Headless backend for figure tests; must be selected before pyplot import
matplotlib.use("Agg")

import pytest  # noqa: E402
import taichi as ti  # noqa: E402
from loguru import logger  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts. Batch kernels need
    float64 as the default float type.
    """
    ti.init(arch=ti.cpu, default_fp=ti.f64, fast_math=False)
    yield


@pytest.fixture
def log_messages():
    """Capture circline log records as (level, message) tuples."""
    records = []

    def _sink(message):
        record = message.record
        records.append((record["level"].name, record["message"]))

    logger.enable("circline")
    handler_id = logger.add(_sink, level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)
    logger.disable("circline")


@pytest.fixture
def engine():
    """Create a fresh GeometryEngine with default configuration."""
    from circline.engine import GeometryEngine

    return GeometryEngine()
