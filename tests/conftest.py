"""Global test fixtures."""

import os

# Keep a developer's YAML config out of unit tests
os.environ.pop("VCSAUTH_CONFIG_FILE", None)
