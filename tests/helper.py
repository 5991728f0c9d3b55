import json
import os
from unittest.mock import MagicMock

import requests

from tests.constants import *


def read_test_data(data_type=None):
    if data_type:
        with open(os.path.join(os.path.dirname(__file__)+TEST_DATA_PATH, data_type+".json")) as f:
            data_list = f.read()
    else:
        data_list = "{}"
    return json.loads(data_list)


def fake_response(status_code=200, data=None, headers=None, text=None):
    # Build a fake response whose raise_for_status() is a no-op
    fake_resp = MagicMock()
    fake_resp.status_code = status_code
    fake_resp.headers = headers or {}
    if data is None:
        fake_resp.json.side_effect = ValueError("No JSON body")
        fake_resp.text = text or ""
    else:
        fake_resp.json.return_value = data
        fake_resp.text = text if text is not None else json.dumps(data)
    fake_resp.raise_for_status = MagicMock()  # <-- no exception
    return fake_resp


def mock_request(*args, **kwargs):
    """Answers a submit with ``location`` and every status check from ``statuses`` in turn."""
    method, url = args[0], args[1]
    if method == "POST" and url == kwargs.get("secrets_url"):
        return fake_response(204)
    if method == "POST":
        location = kwargs.get("location")
        return fake_response(201, headers={"Location": location} if location else {})
    statuses = kwargs.get("statuses")
    return fake_response(200, data={"status": statuses.pop(0) if statuses else PENDING})


def mock_excep_request(*args, **kwargs):
    fake_resp = MagicMock()
    resp = requests.Response()
    resp.status_code = 500
    resp._content = b'{"errorMessage":"Error found"}'
    if kwargs.get('param') == 'HTTPError':
        fake_resp.raise_for_status.side_effect = requests.exceptions.HTTPError(ERROR_500_MSG, response=resp)
    elif kwargs.get('param') == 'HTTPErrorWithoutResp':
        fake_resp.raise_for_status.side_effect = requests.exceptions.HTTPError(ERROR_500_MSG, response=None)
    else:
        raise requests.exceptions.ConnectionError(CONNECTION_ERROR_MSG)
    return fake_resp


class RecordingSleep:
    """Stands in for time.sleep and remembers every requested delay."""

    def __init__(self):
        self.delays = []

    def __call__(self, seconds):
        self.delays.append(seconds)


def read_outputs(output_file):
    """Parse a GITHUB_OUTPUT file written with ``name<<delimiter`` blocks."""
    outputs = {}
    with open(output_file, encoding="utf-8") as f:
        lines = f.read().splitlines()
    i = 0
    while i < len(lines):
        name, delimiter = lines[i].split("<<", 1)
        end = lines.index(delimiter, i + 1)
        outputs[name] = "\n".join(lines[i + 1:end])
        i = end + 1
    return outputs
