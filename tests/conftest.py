from datetime import datetime

import pytest

from formatkit import IndexedFieldFormatter, MarkedFieldFormatter
from formatkit.handlers import DEFAULT_ALIGN, DEFAULT_DATE_HANDLERS, DEFAULT_HANDLERS


@pytest.fixture
def sample_date():
    # Tuesday
    return datetime(2024, 4, 23, 13, 5, 2, 33000)


@pytest.fixture
def indexed():
    return IndexedFieldFormatter(DEFAULT_HANDLERS, DEFAULT_ALIGN)


@pytest.fixture
def marked():
    return MarkedFieldFormatter(DEFAULT_DATE_HANDLERS)
