from enum import Enum


class DeploymentKind(Enum):
    STATIC_SITE = "v2/staticsite"
    CONTAINER_UPGRADE_V3 = "container-upgradev3"
    CONTAINER_UPGRADE = "container-upgrade"

    @property
    def route(self) -> str:
        return self.value

    @classmethod
    def from_type(cls, type_name: str) -> "DeploymentKind":
        """Map the caller's ``type`` input to a backend route.

        Every value is accepted: ``api``, empty and unknown types all fall
        back to a plain container upgrade.
        """
        return DEPLOYMENT_KIND_MAPPING.get((type_name or "").strip(), DEFAULT_DEPLOYMENT_KIND)


DEFAULT_DEPLOYMENT_KIND = DeploymentKind.CONTAINER_UPGRADE

DEPLOYMENT_KIND_MAPPING = {
    'website': DeploymentKind.STATIC_SITE,
    'rancher2': DeploymentKind.CONTAINER_UPGRADE_V3,
    'api': DeploymentKind.CONTAINER_UPGRADE,
}
