import os
import tempfile
from pathlib import Path

import pytest

# Test layer markers, keyed by the directory a test module lives in
_LAYER_MARKERS = {
    "domain": pytest.mark.domain,
    "application": pytest.mark.application,
    "integration": pytest.mark.integration,
    "bdd": pytest.mark.bdd,
}


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Environment the storefront runs in while testing",
    )


def pytest_sessionstart(session):
    """Select the environment before any storefront module is imported.

    Logging is configured on import of the domain module, so the level and
    the log directory have to be in place first.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "townsquare-test-logs"))


def pytest_collection_modifyitems(config, items):
    for item in items:
        for part in Path(item.fspath).parts:
            marker = _LAYER_MARKERS.get(part)
            if marker is not None:
                item.add_marker(marker)
                break
