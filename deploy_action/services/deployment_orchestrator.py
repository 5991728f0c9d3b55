import logging
import time
from typing import Mapping, Optional

from deploy_action import constants
from deploy_action.config_loader import AppConfig
from deploy_action.exceptions import PollTimeoutError
from deploy_action.services.action_io import ActionInputs, ActionOutputs, PipelineContext
from deploy_action.services.deployment_client import DeploymentClient
from deploy_action.services.descriptor_builder import DescriptorBuilder
from deploy_action.services.secrets_injector import SecretsInjector
from deploy_action.services.status_poller import StatusPoller

logger = logging.getLogger(__name__)


class DeploymentOrchestrator:
    """Runs one deployment: build, submit, inject secrets, wait for the deployment to become active."""

    def __init__(self, inputs: ActionInputs, outputs: ActionOutputs, context: PipelineContext,
                 environ: Optional[Mapping[str, str]] = None, client: Optional[DeploymentClient] = None,
                 sleep=None, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()
        self.inputs = inputs
        self.outputs = outputs
        self.builder = DescriptorBuilder(inputs, context, environ, self.config)
        self.client = client or DeploymentClient(config=self.config)
        self.secrets_injector = SecretsInjector(self.client)
        self.sleep = sleep or time.sleep

    def run(self, execution_mode="execute") -> Optional[str]:
        token = self.inputs.get_input(constants.INPUT_DEPLOYMENT_TOKEN, required=True)
        self.outputs.mask(token)

        request = self.builder.build()
        logger.info(request.to_json())

        if execution_mode == "preview":
            logger.info(f"Preview mode: deployment of '{request.service_name}' to {request.submit_url} not submitted.")
            return None

        location = self.client.submit(token, request)
        self.outputs.set_output(constants.OUTPUT_DEPLOYMENT_URL, location)
        if not location:
            logger.info("No location returned.  Assume the deployment is ok!")
            return None

        self.secrets_injector.inject(token, location, self.inputs.get_input(constants.INPUT_SECRETS_STRING))

        poller = StatusPoller(
            query_status=lambda loc: self.client.query_status(token, loc),
            sleep=self.sleep,
            max_attempts=self.config.get(constants.POLLER_MAX_ATTEMPTS, constants.FALLBACK_MAX_ATTEMPTS),
            success_status=self.config.get(constants.POLLER_SUCCESS_STATUS, constants.FALLBACK_SUCCESS_STATUS),
        )
        state = poller.poll(location)
        if not state.is_active:
            raise PollTimeoutError(location, state.attempt)
        return location
