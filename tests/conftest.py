"""Root conftest: environment must be set before worldclock is imported.

``worldclock.web.main`` reads settings at import time, so the data directory
and local timezone are pinned here before test collection imports it.
"""

import os
import tempfile

# Force-set so a developer's .env or shell cannot leak into tests
os.environ["DATA_DIR"] = tempfile.mkdtemp(prefix="worldclock-test-")
os.environ["DEFAULT_TIMEZONE"] = "UTC"
os.environ["DEFAULT_SORT_ORDER"] = "chronological"
os.environ["LOG_LEVEL"] = "INFO"
