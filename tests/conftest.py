import logging
import pytest
from horizoncalc.models.heights import HeightInput, UnitMode

@pytest.fixture(autouse=True)
def reset_root_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

@pytest.fixture
def cruising_altitude():
    # Airliner at 30,000 ft looking at the sea-level horizon
    return HeightInput(observer_height=30000.0)

@pytest.fixture
def metric_mast():
    return HeightInput(observer_height=100.0, subject_height=10.0, unit_mode=UnitMode.METRIC)
