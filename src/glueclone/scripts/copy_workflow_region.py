"""Copy an AWS Glue Workflow (and its triggers) from one region to another"""

import sys
import argparse
import logging

# GlueClone Imports
from glueclone.core.clone_config import load_region_config, ConfigError
from glueclone.api.workflow_copy import copy_workflow_region
from glueclone.utils.repl_utils import print_clone_result
from glueclone.utils.glueclone_logging import exception_log_forward

log = logging.getLogger("glueclone")


def main():
    parser = argparse.ArgumentParser(description="Copy an AWS Glue workflow to another region")
    parser.add_argument("-conf", "--conf", default="", help="Path of the configuration file")
    args = parser.parse_args()
    if not args.conf.strip():
        parser.print_usage()
        log.critical("-conf parameter not provided")
        sys.exit(1)

    try:
        config = load_region_config(args.conf)
    except ConfigError as e:
        log.critical(f"Invalid configuration: {e}")
        sys.exit(1)
    log.info(f"Using the following configuration:\n{config}")

    # Any remote failure aborts the copy
    with exception_log_forward(call_on_exception=lambda e: sys.exit(1)):
        result = copy_workflow_region(config)
        print_clone_result(result)


if __name__ == "__main__":
    main()
