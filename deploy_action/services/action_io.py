import logging
import os
import sys
import uuid
from dataclasses import dataclass
from typing import List, Mapping, Optional

from deploy_action import constants
from deploy_action.exceptions import MalformedInputError

logger = logging.getLogger(__name__)


class ActionInputs:
    """Reads step inputs the way the Actions runner exposes them: ``INPUT_<NAME>`` variables."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    @staticmethod
    def _variable_name(name):
        return f"INPUT_{name.replace(' ', '_').upper()}"

    def get_input(self, name: str, required: bool = False) -> str:
        value = self.environ.get(self._variable_name(name), "").strip()
        if required and not value:
            raise MalformedInputError(name, "input required and not supplied")
        return value

    def get_multiline_input(self, name: str) -> List[str]:
        return [line.strip() for line in self.get_input(name).split("\n") if line.strip()]

    def get_boolean_input(self, name: str, default: bool = False) -> bool:
        value = self.get_input(name)
        if not value:
            return default
        if value in constants.TRUE_VALUES:
            return True
        if value in constants.FALSE_VALUES:
            return False
        raise MalformedInputError(name, f"'{value}' is not a boolean (expected true or false)")


class ActionOutputs:
    def __init__(self, environ: Optional[Mapping[str, str]] = None, stream=None):
        self.environ = os.environ if environ is None else environ
        self.stream = stream or sys.stdout

    def set_output(self, name: str, value: Optional[str]):
        value = value or ""
        output_file = self.environ.get(constants.GITHUB_OUTPUT_ENV)
        if not output_file:
            logger.info(f"Output {name}={value} (no {constants.GITHUB_OUTPUT_ENV} file to write to)")
            return
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with open(output_file, "a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        logger.debug(f"Output {name} written to {output_file}")

    def mask(self, value: str):
        """Ask the runner to redact ``value`` from all further log output."""
        if value:
            self.stream.write(f"::add-mask::{value}\n")
            self.stream.flush()


@dataclass(frozen=True)
class PipelineContext:
    ref: str = ""
    actor: str = ""

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None):
        environ = os.environ if environ is None else environ
        return cls(
            ref=environ.get(constants.GITHUB_REF_ENV, ""),
            actor=environ.get(constants.GITHUB_ACTOR_ENV, ""),
        )
