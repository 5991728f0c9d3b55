import logging
from typing import Optional

import requests
import urllib3

from deploy_action import constants
from deploy_action.config_loader import AppConfig
from deploy_action.exceptions import StatusQueryError, SubmissionError
from deploy_action.models.deployment_request import DeploymentRequest

logger = logging.getLogger(__name__)


def bearer_headers(token, content_type='application/json'):
    return {
        'Accept': 'application/json',
        'Content-Type': content_type,
        'Authorization': f"Bearer {token}",
    }


class DeploymentClient:
    def __init__(self, session: Optional[requests.Session] = None, config: Optional[AppConfig] = None):
        config = config or AppConfig()
        self.session = session or requests.Session()
        self.timeout = config.get(constants.HTTP_TIMEOUT_SECONDS, constants.FALLBACK_HTTP_TIMEOUT)
        self.verify = config.get(constants.HTTP_VERIFY_SSL, True)
        if not self.verify:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def send_request(self, method, url, token, error_type, payload=None, data=None, content_type='application/json',
                     allow_redirects=True):
        """Issue one request and return the response; any failure is raised as ``error_type``."""
        headers = bearer_headers(token, content_type)
        try:
            response = self.session.request(method, url, json=payload, data=data, headers=headers,
                                            timeout=self.timeout, verify=self.verify,
                                            allow_redirects=allow_redirects)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            logger.error(f"HTTPError exception during {method} {url} : {str(e)}")
            if e.response is not None:
                raise error_type(f"HTTPError exception during {method} {url}, Text: {e.response.text}") from e
            raise error_type(f"HTTPError exception during {method} {url} : {str(e)}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request exception during {method} {url} : {str(e)}")
            raise error_type(f"Request exception during {method} {url} : {str(e)}") from e

        logger.debug(f"{method} {url} Finished!! status_code: {response.status_code}")
        return response

    @staticmethod
    def _json_body(response):
        try:
            return response.json()
        except ValueError:
            return None

    def submit(self, token: str, request: DeploymentRequest) -> Optional[str]:
        """Submit the deployment; returns its location, or None when nothing needs tracking."""
        # a 3xx answer names the new deployment in its Location header, so it is not followed
        response = self.send_request("POST", request.submit_url, token, SubmissionError,
                                     payload=request.to_payload(), allow_redirects=False)
        location = response.headers.get('Location')
        if not location:
            body = self._json_body(response)
            location = body.get('location') if isinstance(body, dict) else None
        return location or None

    def query_status(self, token: str, location: str) -> str:
        response = self.send_request("GET", location, token, StatusQueryError)
        body = self._json_body(response)
        if isinstance(body, dict):
            return str(body.get('status') or "")
        if isinstance(body, str):
            return body.strip()
        return response.text.strip()
