"""Parcel tracking through the kuaidi100 query service."""

from __future__ import annotations

import argparse
import json
import os
import sys
import urllib.parse
import urllib.request
from collections.abc import Mapping, Sequence
from typing import Any

__all__ = ["COMPANIES", "build_query_url", "format_tracking", "query", "main"]

API_URL = "http://api.kuaidi100.com/api"

COMPANIES: dict[str, str] = {
    "申通快递": "shentong",
    "顺丰快递": "shunfeng",
    "圆通快递": "yuantong",
    "中通快递": "zhongtong",
    "EMS快递": "ems",
    "韵达快递": "yunda",
    "天天快递": "tiantian",
}

NO_PROGRESS = "：( 该单号暂无物流进展，请稍后再试，或检查公司和单号是否有误。"
NETWORK_ERROR = "请检查您的网络"


def _company_code(company: str) -> str:
    if company in COMPANIES:
        return COMPANIES[company]
    if company in COMPANIES.values():
        return company
    raise ValueError(f"unknown courier company: {company!r}")


def build_query_url(api_id: str, company: str, number: str) -> str:
    """Return the query URL for a parcel; ``company`` is a display name or code."""
    params = [
        ("id", api_id),
        ("com", _company_code(company)),
        ("nu", number),
        ("show", "0"),
        ("mullti", "1"),
        ("order", "desc"),
    ]
    return f"{API_URL}?{urllib.parse.urlencode(params)}"


def format_tracking(payload: str | bytes | Mapping[str, Any]) -> str:
    """Turn a service reply into readable text, newest entry first as delivered."""
    if isinstance(payload, Mapping):
        data: Mapping[str, Any] = payload
    else:
        try:
            decoded = json.loads(payload)
        except ValueError:
            decoded = {}
        data = decoded if isinstance(decoded, dict) else {}

    status = data.get("status")
    try:
        ok = isinstance(status, str) and int(status) == 1
    except ValueError:
        ok = False
    if not ok:
        return NO_PROGRESS

    entries = data.get("data")
    if not isinstance(entries, list):
        entries = []
    parts = []
    for entry in entries:
        entry = entry if isinstance(entry, dict) else {}
        parts.append(f"{entry.get('time', '')}\n{entry.get('context', '')}\n\n")
    return "".join(parts)


def query(api_id: str, company: str, number: str, timeout: float = 10.0) -> str:
    """Look up a parcel and return the formatted tracking text.

    Raises ``ValueError`` for an empty number and ``OSError`` on network failure.
    """
    if not number:
        raise ValueError("tracking number is empty")
    url = build_query_url(api_id, company, number)
    with urllib.request.urlopen(url, timeout=timeout) as response:
        body = response.read()
    return format_tracking(body)


def main(argv: Sequence[str] | None = None) -> int:
    """Query a parcel from the command line."""
    parser = argparse.ArgumentParser(prog="sysbro-express", description="Track a parcel.")
    parser.add_argument("company", choices=sorted(COMPANIES), help="courier company")
    parser.add_argument("number", help="tracking number")
    parser.add_argument("--api-id", default=os.environ.get("KUAIDI100_ID"),
                        help="service id (default: $KUAIDI100_ID)")
    parser.add_argument("--timeout", type=float, default=10.0)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if not args.api_id:
        parser.error("a service id is required (--api-id or KUAIDI100_ID)")
    try:
        print(query(args.api_id, args.company, args.number, args.timeout))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError:
        print(NETWORK_ERROR, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())