import io
import json
import urllib.error
import urllib.parse
from unittest import mock

import pytest

from sysbro.express import (
    API_URL,
    NETWORK_ERROR,
    NO_PROGRESS,
    build_query_url,
    format_tracking,
    main,
    query,
)

REPLY = {
    "status": "1",
    "data": [
        {"time": "t2", "context": "c2"},
        {"time": "t1", "context": "c1"},
    ],
}


def test_build_query_url_fields():
    url = build_query_url("id-placeholder", "顺丰快递", "123")
    base, _, qs = url.partition("?")
    assert base == API_URL
    params = urllib.parse.parse_qs(qs)
    assert params == {
        "id": ["id-placeholder"],
        "com": ["shunfeng"],
        "nu": ["123"],
        "show": ["0"],
        "mullti": ["1"],
        "order": ["desc"],
    }


def test_build_query_url_accepts_code_and_rejects_unknown():
    assert "com=ems" in build_query_url("x", "ems", "1")
    with pytest.raises(ValueError):
        build_query_url("x", "unknown", "1")


def test_format_tracking_lists_entries():
    assert format_tracking(REPLY) == "t2\nc2\n\nt1\nc1\n\n"


def test_format_tracking_accepts_json_bytes():
    assert format_tracking(json.dumps(REPLY).encode()) == format_tracking(REPLY)


@pytest.mark.parametrize("payload", [{"status": "0"}, {}, b"not json", {"status": "x"}])
def test_format_tracking_without_progress(payload):
    assert format_tracking(payload) == NO_PROGRESS


def test_query_reads_service_reply():
    body = io.BytesIO(json.dumps(REPLY).encode())
    with mock.patch("urllib.request.urlopen", return_value=body) as urlopen:
        assert query("x", "韵达快递", "42") == format_tracking(REPLY)
    assert "nu=42" in urlopen.call_args.args[0]


def test_query_rejects_empty_number():
    with pytest.raises(ValueError):
        query("x", "韵达快递", "")


def test_main_reports_network_error(capsys):
    with mock.patch("urllib.request.urlopen", side_effect=urllib.error.URLError("down")):
        assert main(["韵达快递", "42", "--api-id", "x"]) == 1
    assert NETWORK_ERROR in capsys.readouterr().err