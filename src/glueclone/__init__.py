# Copyright (c) 2021-2024 SuperCowPowers LLC

"""
GlueClone: Copy AWS Glue Workflows
- Cross-Region Copy
  - Source workflow in one region, rebuilt in another under a replaced name
- Prefixed Duplication
  - New workflow named prefix + original name in the same account

  The high level entry points live in glueclone.api:
     from glueclone.api import load_prefix_config, copy_workflow_prefix
     result = copy_workflow_prefix(load_prefix_config("prefix_copy.json"))
"""
import os
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("glueclone")
except PackageNotFoundError:
    __version__ = "unknown"

# GlueClone Logging (GLUECLONE_SKIP_LOGGING=true leaves the logger untouched)
from glueclone.utils.glueclone_logging import logging_setup

if os.getenv("GLUECLONE_SKIP_LOGGING", "false").lower() != "true":
    logging_setup()
