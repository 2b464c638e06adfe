"""
Configuration constants for searchgraph.

Default file names, logging settings and other tunable values live here.
The log level can be overridden from the environment.
"""

import logging
import os
from typing import Optional, Union

# =============================================================================
# Record File Configuration
# =============================================================================

# Node list: one label per whitespace-separated token
DEFAULT_NODES_FILE = "dornodes.txt"

# Arc list: "from to weight" triples
DEFAULT_ARCS_FILE = "dorarcs.txt"

# Separator between a label and its optional integer attribute in node files
NODE_ATTRIBUTE_SEPARATOR = ":"

# Text encoding used for record files
RECORD_ENCODING = "utf-8"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("SEARCHGRAPH_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None):
    """
    Configure the root logger for command line use.

    Args:
        level: Level name or number; defaults to LOG_LEVEL
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
