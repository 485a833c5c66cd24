"""Welcome to the GlueClone API

These functions provide high-level APIs for the GlueClone package:

- copy_workflow_region: Copy a Glue Workflow from one region to another
- copy_workflow_prefix: Duplicate a Glue Workflow in place under a prefixed name
- load_region_config / load_prefix_config: Load and validate the JSON configuration files
"""

from glueclone.core.clone_config import load_region_config, load_prefix_config, ConfigError
from glueclone.core.workflow_cloner import WorkflowCloneError
from .workflow_copy import copy_workflow_region, copy_workflow_prefix

__all__ = [
    "copy_workflow_region",
    "copy_workflow_prefix",
    "load_region_config",
    "load_prefix_config",
    "ConfigError",
    "WorkflowCloneError",
]
