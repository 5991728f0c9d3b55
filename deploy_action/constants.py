CONFIG_FILENAME = "config.yaml"
LOGGING_FILENAME = "logging.yaml"
CONFIG_PATH_ENV = "DEPLOY_ACTION_CONFIG"

# Configuration keys (dot notation, see config.yaml)
DEFAULT_DEPLOYMENT_URI = "app.default_deployment_uri"
ENV_VARIABLE_PREFIX = "app.env_prefix"
VOLUME_TYPE = "app.volume_type"
POLLER_MAX_ATTEMPTS = "poller.max_attempts"
POLLER_SUCCESS_STATUS = "poller.success_status"
HTTP_TIMEOUT_SECONDS = "http.timeout_seconds"
HTTP_VERIFY_SSL = "http.verify_ssl"

# Fallbacks when config.yaml does not define a key
FALLBACK_DEPLOYMENT_URI = "https://deployment.api.24sevenoffice.com"
FALLBACK_ENV_PREFIX = "TFSO_"
FALLBACK_VOLUME_TYPE = "persistentVolumeClaim"
FALLBACK_MAX_ATTEMPTS = 15
FALLBACK_SUCCESS_STATUS = "active"
FALLBACK_HTTP_TIMEOUT = 30

# Process environment
DEPLOYMENT_URI_ENV = "DEPLOYMENT_URI"
GITHUB_REF_ENV = "GITHUB_REF"
GITHUB_ACTOR_ENV = "GITHUB_ACTOR"
GITHUB_OUTPUT_ENV = "GITHUB_OUTPUT"

REF_HEADS_PREFIX = "refs/heads/"
REF_TAGS_PREFIX = "refs/tags/"

# Action inputs
INPUT_DEPLOYMENT_TOKEN = "deployment_token"
INPUT_ENVIRONMENT = "environment"
INPUT_SERVICE_NAME = "service_name"
INPUT_IMAGE_NAME = "image_name"
INPUT_VERSION = "version"
INPUT_TYPE = "type"
INPUT_RELEASE_CHANNEL = "release-channel"
INPUT_CONTAINER_PORT = "container-port"
INPUT_HTTP_ENDPOINT = "http-endpoint"
INPUT_PROXY_BUFFER_SIZE = "proxy-buffer-size"
INPUT_PERSISTENT_VOLUMES = "persistent-volumes"
INPUT_VOLUME_MOUNTS = "volume-mounts"
INPUT_MODULE = "module"
INPUT_TEAM = "team"
INPUT_DD_SERVICE = "dd-service"
INPUT_INSTANCES = "instances"
INPUT_SECRETS_STRING = "secrets_string"

READINESS_PROBE_PREFIX = "readytest"
LIVENESS_PROBE_PREFIX = "healthtest"
PROBE_FIELDS = ['path', 'command', 'period', 'initialdelay', 'timeout']

# Action outputs
OUTPUT_DEPLOYMENT_URL = "deploymenturl"

TRUE_VALUES = ['true', 'True', 'TRUE']
FALSE_VALUES = ['false', 'False', 'FALSE']

EXECUTION_MODES = ["preview", "execute"]
