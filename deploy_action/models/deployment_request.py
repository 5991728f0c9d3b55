import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from deploy_action.models.deployment_kind import DeploymentKind
from deploy_action.models.probe_config import ProbeConfig
from deploy_action.models.volume_config import VolumeConfig, VolumeMountConfig


@dataclass(frozen=True)
class DeploymentRequest:
    environment: str
    service_name: str
    version: str
    deployment_kind: DeploymentKind
    target_uri: str
    branch: str
    module: str
    team: str
    datadog_service: str
    instance_count: int
    image_name: str
    deployer_name: str
    is_release_channel: bool = False
    environment_variables: Dict[str, str] = field(default_factory=dict)
    container_port: Optional[int] = None
    http_endpoint: Optional[str] = None
    proxy_buffer_size: Optional[str] = None
    readiness_probe: ProbeConfig = field(default_factory=ProbeConfig)
    liveness_probe: ProbeConfig = field(default_factory=ProbeConfig)
    volumes: List[VolumeConfig] = field(default_factory=list)
    volume_mounts: List[VolumeMountConfig] = field(default_factory=list)

    @property
    def submit_url(self):
        return f"{self.target_uri.rstrip('/')}/{self.deployment_kind.route}"

    def to_payload(self):
        """Convert to the JSON body expected by the deployment API. Unset optional fields are left out."""
        payload = {
            "env": self.environment,
            "serviceName": self.service_name,
            "version": self.version,
            "type": self.deployment_kind.route,
            "uri": self.target_uri,
            "isReleaseChannel": self.is_release_channel,
            "branch": self.branch,
            "environmentVariables": dict(self.environment_variables),
            "containerPort": self.container_port,
            "httpEndpoint": self.http_endpoint,
            "module": self.module,
            "team": self.team,
            "readinessProbe": self.readiness_probe.to_dict() if self.readiness_probe.is_configured() else None,
            "livenessProbe": self.liveness_probe.to_dict() if self.liveness_probe.is_configured() else None,
            "volumes": [volume.to_dict() for volume in self.volumes],
            "volumeMounts": [mount.to_dict() for mount in self.volume_mounts],
            "dd_service": self.datadog_service,
            "instances": self.instance_count,
            "imageName": self.image_name,
            "deployerName": self.deployer_name,
            "proxyBufferSize": self.proxy_buffer_size,
        }
        return {key: value for key, value in payload.items() if value is not None}

    def to_json(self):
        return json.dumps(self.to_payload())
