import logging.config
from datetime import datetime

import yaml

from deploy_action import constants
from deploy_action.util.common_util import get_root_path, get_package_path


def get_log_file(logs_dir):
    """One file per run: deploy_<YYYYmmdd_HHMMSS>.log"""
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir / f"deploy_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"


def setup_logging(config_path=None):
    config_path = config_path or get_package_path() / constants.LOGGING_FILENAME
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    file_handler = config["handlers"]["file"]
    file_handler["filename"] = str(get_log_file(get_root_path() / "logs"))
    file_handler["mode"] = "w"

    logging.config.dictConfig(config)
