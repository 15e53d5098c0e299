"""Shared fixtures for biome-suppressed tests."""

from __future__ import annotations

import logging

import pytest

REPORTER_OUTPUT = """\
Checked 3 files in 12ms.
::error title=lint/suspicious/noExplicitAny,file=src/types.ts,line=15,endLine=15,col=5,endColumn=8::Avoid using any type
::warning title=lint/style/noVar,file=src/api.ts,line=2,endLine=2,col=1,endColumn=4::Use let or const
::error title=lint/suspicious/noExplicitAny,file=src/api.ts,line=10,endLine=10,col=20,endColumn=23::Avoid using any type
::error title=lint/style/useNamingConvention,file=src/utils.ts,line=5,endLine=5,col=10,endColumn=20::Use camelCase
Found 3 errors.
"""


@pytest.fixture
def reporter_output() -> str:
    """Reporter output with noise lines and three errors in unsorted order."""
    return REPORTER_OUTPUT


@pytest.fixture(autouse=True)
def isolate_logging():
    """Restore the package logger after tests that reconfigure logging."""
    package_logger = logging.getLogger("biome_suppressed")
    root_level = logging.getLogger().level
    saved = (
        package_logger.level,
        list(package_logger.handlers),
        package_logger.propagate,
    )

    yield

    package_logger.setLevel(saved[0])
    package_logger.handlers[:] = saved[1]
    package_logger.propagate = saved[2]
    logging.getLogger().setLevel(root_level)
