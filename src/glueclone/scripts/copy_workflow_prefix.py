"""Duplicate an AWS Glue Workflow (and its triggers) in place under a prefixed name"""

import sys
import argparse
import logging

# GlueClone Imports
from glueclone.core.clone_config import load_prefix_config, ConfigError
from glueclone.api.workflow_copy import copy_workflow_prefix
from glueclone.utils.repl_utils import print_clone_result
from glueclone.utils.glueclone_logging import exception_log_forward

log = logging.getLogger("glueclone")


def main():
    parser = argparse.ArgumentParser(description="Duplicate an AWS Glue workflow as prefix + name")
    parser.add_argument("-conf", "--conf", default="", help="Path of the configuration file")
    args = parser.parse_args()
    if not args.conf.strip():
        parser.print_usage()
        log.critical("-conf parameter not provided")
        sys.exit(1)

    try:
        config = load_prefix_config(args.conf)
    except ConfigError as e:
        log.critical(f"Invalid configuration: {e}")
        sys.exit(1)
    log.info(f"Using the following configuration:\n{config}")

    with exception_log_forward(call_on_exception=lambda e: sys.exit(1)):
        result = copy_workflow_prefix(config)
        print_clone_result(result)


if __name__ == "__main__":
    main()
