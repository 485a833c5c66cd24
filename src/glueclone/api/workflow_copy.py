"""Workflow Copy: High-level entry points for the two clone variants"""

import logging

# GlueClone Imports
from glueclone.core.cloud_platform.aws.aws_session import AWSSession
from glueclone.core.clone_config import RegionCopyConfig, PrefixCopyConfig
from glueclone.core.workflow_cloner import WorkflowCloner, RegionNaming, PrefixNaming, CloneResult

log = logging.getLogger("glueclone")


def copy_workflow_region(config: RegionCopyConfig, aws_session: AWSSession = None) -> CloneResult:
    """Copy a workflow from workflow_region to workflow_target_region

    Args:
        config (RegionCopyConfig): A validated cross-region configuration
        aws_session (AWSSession, optional): Session to build the Glue clients from (default: AWSSession())

    Returns:
        CloneResult: Summary of what was created
    """
    aws_session = aws_session or AWSSession()
    source_glue = aws_session.glue_client(config.workflow_region)
    target_glue = aws_session.glue_client(config.workflow_target_region)
    log.info(f"Copying {config.workflow_name}: {config.workflow_region} -> {config.workflow_target_region}")
    cloner = WorkflowCloner(source_glue, target_glue, RegionNaming(config.name_replacer()))
    result = cloner.clone(config.workflow_name)
    log.important(f"Clone complete\n{result}")
    return result


def copy_workflow_prefix(config: PrefixCopyConfig, aws_session: AWSSession = None) -> CloneResult:
    """Duplicate a workflow in place as workflow_prefix + workflow_name

    Args:
        config (PrefixCopyConfig): A validated prefix configuration
        aws_session (AWSSession, optional): Session to build the Glue client from (default: AWSSession())

    Returns:
        CloneResult: Summary of what was created
    """
    aws_session = aws_session or AWSSession()
    glue_client = aws_session.glue_client(config.workflow_region)
    log.info(f"Duplicating {config.workflow_name} as {config.workflow_prefix}{config.workflow_name}")
    cloner = WorkflowCloner(glue_client, glue_client, PrefixNaming(config.workflow_prefix, config.name_replacer()))
    result = cloner.clone(config.workflow_name)
    log.important(f"Clone complete\n{result}")
    return result
