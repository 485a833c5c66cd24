"""Detect AWS managed runtimes, where credentials come from the execution role"""

import os


def running_on_lambda() -> bool:
    """Lambda sets AWS_LAMBDA_FUNCTION_NAME for every invocation"""
    return "AWS_LAMBDA_FUNCTION_NAME" in os.environ


def running_on_glue() -> bool:
    """Glue Python shell and Spark jobs export their runtime version"""
    return any(var in os.environ for var in ("GLUE_VERSION", "GLUE_PYTHON_VERSION"))
