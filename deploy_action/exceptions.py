class DeploymentError(Exception):
    """Base class for every fatal outcome of a deployment run."""


class MalformedInputError(DeploymentError):
    """An input could not be parsed; raised before any network call."""

    def __init__(self, input_name, message):
        self.input_name = input_name
        super().__init__(f"Malformed input '{input_name}': {message}")


class SubmissionError(DeploymentError):
    pass


class SecretsError(DeploymentError):
    pass


class StatusQueryError(DeploymentError):
    pass


class PollTimeoutError(DeploymentError):

    def __init__(self, location, attempts):
        self.location = location
        self.attempts = attempts
        super().__init__(
            f"Deployment at {location} was not set to active within set period "
            f"({attempts} status checks)."
        )
