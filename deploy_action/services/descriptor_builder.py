import logging
import os
from typing import Iterable, List, Mapping, Optional

from pydantic import ValidationError

from deploy_action import constants
from deploy_action.config_loader import AppConfig
from deploy_action.exceptions import MalformedInputError
from deploy_action.models.deployment_kind import DeploymentKind
from deploy_action.models.deployment_request import DeploymentRequest
from deploy_action.models.probe_config import ProbeConfig
from deploy_action.models.volume_config import PersistentVolumeEntry, VolumeConfig, VolumeMountConfig
from deploy_action.services.action_io import ActionInputs, PipelineContext
from deploy_action.util.common_util import strip_first

logger = logging.getLogger(__name__)


def get_deployment_kind(type_name: str) -> DeploymentKind:
    return DeploymentKind.from_type(type_name)


def parse_optional_int(value: str, input_name: str) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise MalformedInputError(input_name, f"'{value}' is not an integer") from None


def parse_required_int(value: str, input_name: str) -> int:
    number = parse_optional_int(value, input_name)
    if number is None:
        raise MalformedInputError(input_name, "an integer is required")
    return number


def get_probe_configuration(inputs: ActionInputs, probe_type: str) -> ProbeConfig:
    path, command, period, initial_delay, timeout = (
        inputs.get_input(f"{probe_type}-{name}") for name in constants.PROBE_FIELDS
    )
    return ProbeConfig(
        path=path or None,
        command=[command] if command else None,
        period_seconds=parse_optional_int(period, f"{probe_type}-period"),
        initial_delay_seconds=parse_optional_int(initial_delay, f"{probe_type}-initialdelay"),
        timeout_seconds=parse_optional_int(timeout, f"{probe_type}-timeout"),
    )


def get_volume_config(volumes_input: Iterable[str], volume_type: str,
                      input_name: str = constants.INPUT_PERSISTENT_VOLUMES) -> List[VolumeConfig]:
    volumes = []
    for line_no, line in enumerate(volumes_input, start=1):
        try:
            entry = PersistentVolumeEntry.model_validate_json(line)
        except ValidationError as e:
            raise MalformedInputError(input_name, f"line {line_no}: {e}") from e
        volumes.append(VolumeConfig.from_entry(entry, volume_type))
    return volumes


def get_volume_mounts(mounts_input: Iterable[str],
                      input_name: str = constants.INPUT_VOLUME_MOUNTS) -> List[VolumeMountConfig]:
    mounts = []
    for line_no, line in enumerate(mounts_input, start=1):
        try:
            mounts.append(VolumeMountConfig.model_validate_json(line))
        except ValidationError as e:
            raise MalformedInputError(input_name, f"line {line_no}: {e}") from e
    return mounts


def extract_environment_variables(environ: Mapping[str, str], prefix: str) -> dict:
    return {key[len(prefix):]: value for key, value in environ.items() if key.startswith(prefix)}


def resolve_branch(ref: str) -> str:
    # refs/tags/* is only stripped when removing refs/heads/ leaves nothing
    return strip_first(ref, constants.REF_HEADS_PREFIX) or strip_first(ref, constants.REF_TAGS_PREFIX)


def resolve_version(explicit_version: str, ref: str) -> str:
    return explicit_version or strip_first(ref, constants.REF_TAGS_PREFIX)


class DescriptorBuilder:
    """Turns step inputs, pipeline context and process environment into a DeploymentRequest."""

    def __init__(self, inputs: ActionInputs, context: PipelineContext,
                 environ: Optional[Mapping[str, str]] = None, config: Optional[AppConfig] = None):
        self.inputs = inputs
        self.context = context
        self.environ = dict(os.environ if environ is None else environ)
        self.config = config or AppConfig()

    def get_deployment_uri(self):
        default_uri = self.config.get(constants.DEFAULT_DEPLOYMENT_URI, constants.FALLBACK_DEPLOYMENT_URI)
        return self.environ.get(constants.DEPLOYMENT_URI_ENV) or default_uri

    def build(self) -> DeploymentRequest:
        inputs = self.inputs
        ref = self.context.ref
        env_prefix = self.config.get(constants.ENV_VARIABLE_PREFIX, constants.FALLBACK_ENV_PREFIX)
        volume_type = self.config.get(constants.VOLUME_TYPE, constants.FALLBACK_VOLUME_TYPE)

        deployment_kind = get_deployment_kind(inputs.get_input(constants.INPUT_TYPE))
        logger.info(f"Type {deployment_kind.route}")
        deployment_uri = self.get_deployment_uri()
        logger.info(f"Using url {deployment_uri}")

        request = DeploymentRequest(
            environment=inputs.get_input(constants.INPUT_ENVIRONMENT),
            service_name=inputs.get_input(constants.INPUT_SERVICE_NAME),
            version=resolve_version(inputs.get_input(constants.INPUT_VERSION), ref),
            deployment_kind=deployment_kind,
            target_uri=deployment_uri,
            is_release_channel=inputs.get_boolean_input(constants.INPUT_RELEASE_CHANNEL),
            branch=resolve_branch(ref),
            environment_variables=extract_environment_variables(self.environ, env_prefix),
            container_port=parse_optional_int(inputs.get_input(constants.INPUT_CONTAINER_PORT),
                                              constants.INPUT_CONTAINER_PORT),
            http_endpoint=inputs.get_input(constants.INPUT_HTTP_ENDPOINT) or None,
            module=inputs.get_input(constants.INPUT_MODULE),
            team=inputs.get_input(constants.INPUT_TEAM),
            readiness_probe=get_probe_configuration(inputs, constants.READINESS_PROBE_PREFIX),
            liveness_probe=get_probe_configuration(inputs, constants.LIVENESS_PROBE_PREFIX),
            volumes=get_volume_config(inputs.get_multiline_input(constants.INPUT_PERSISTENT_VOLUMES), volume_type),
            volume_mounts=get_volume_mounts(inputs.get_multiline_input(constants.INPUT_VOLUME_MOUNTS)),
            datadog_service=inputs.get_input(constants.INPUT_DD_SERVICE),
            instance_count=parse_required_int(inputs.get_input(constants.INPUT_INSTANCES),
                                              constants.INPUT_INSTANCES),
            image_name=inputs.get_input(constants.INPUT_IMAGE_NAME),
            deployer_name=self.context.actor,
            proxy_buffer_size=inputs.get_input(constants.INPUT_PROXY_BUFFER_SIZE) or None,
        )
        logger.debug(f"Deployment request: {request}")
        return request
