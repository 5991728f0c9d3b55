# Main Entry Point
import argparse
import logging
import os
import sys
import traceback

from dotenv import load_dotenv

from deploy_action import constants
from deploy_action.config_loader import AppConfig
from deploy_action.exceptions import DeploymentError
from deploy_action.logger import setup_logging
from deploy_action.services.action_io import ActionInputs, ActionOutputs, PipelineContext
from deploy_action.services.deployment_orchestrator import DeploymentOrchestrator

logger = logging.getLogger(__name__)


def input_parser(argv=None):
    parser = argparse.ArgumentParser(
        description="Trigger a service deployment and wait for it to become active"
    )

    parser.add_argument(
        "--execution-mode",
        choices=constants.EXECUTION_MODES,
        default="execute",
        help="Choose 'preview' to only build and log the deployment request or 'execute' to deploy."
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to an alternate config.yaml."
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = input_parser(argv)
    load_dotenv()
    setup_logging()

    return_code = 0
    try:
        logger.info(f"======================= Deployment started: Execution mode={args.execution_mode} ==========================")
        config = AppConfig(args.config) if args.config else AppConfig()
        orchestrator = DeploymentOrchestrator(
            inputs=ActionInputs(os.environ),
            outputs=ActionOutputs(os.environ),
            context=PipelineContext.from_environ(os.environ),
            environ=os.environ,
            config=config,
        )
        orchestrator.run(args.execution_mode)
        logger.info("======================= Deployment completed successfully ==========================")
    except DeploymentError as e:
        logger.error(f"Error : {e}")
        logger.info("======================= Deployment completed with errors ==========================")
        return_code = 1
    except Exception as ex:
        logger.error(f"Unexpected failure during deployment: {ex}")
        traceback.print_exc()
        return_code = 1

    logger.info(f"Exit code = {return_code}")
    return return_code


if __name__ == "__main__":
    sys.exit(main())
