import logging
from urllib.parse import urlparse

from deploy_action.exceptions import MalformedInputError, SecretsError
from deploy_action.services.deployment_client import DeploymentClient

logger = logging.getLogger(__name__)


def parse_location(location: str) -> str:
    parsed = urlparse(location or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise MalformedInputError("location", f"'{location}' is not an absolute http(s) URL")
    return parsed.geturl()


class SecretsInjector:
    def __init__(self, client: DeploymentClient):
        self.client = client

    def inject(self, token: str, location: str, secrets: str) -> bool:
        """Post the secrets payload to the deployment. Returns False when there was nothing to post."""
        if not secrets:
            logger.info("No secrets supplied, skipping secrets injection.")
            return False

        target = parse_location(location)
        logger.info("Setting secrets...")
        self.client.send_request("POST", target, token, SecretsError, data=secrets.encode("utf-8"),
                                 content_type='text/plain')
        logger.info("Secrets was set.")
        return True
