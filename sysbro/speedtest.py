"""Download speed test against a redirecting test file."""

from __future__ import annotations

import argparse
import sys
import time
import urllib.error
import urllib.request
from collections.abc import Callable, Sequence
from typing import Any

__all__ = [
    "SpeedTestError",
    "SpeedTest",
    "format_bytes",
    "main",
    "PROBE_URL",
    "CHUNK_SIZE",
]

PROBE_URL = "http://dlied6.qq.com/invc/xfspeed/qqpcmgr/download/Test216MB.dat"
CHUNK_SIZE = 64 * 1024
DEFAULT_SAMPLES = 60

FAILED_MESSAGE = "网络连接失败，请检查您的网络"


class SpeedTestError(Exception):
    """Raised when the speed test cannot be carried out."""


def format_bytes(rate: int) -> str:
    """Format a rate in bytes per second; rates of 1024 GB/s and more give ``""``."""
    for unit in ("B/s", "KB/s", "MB/s", "GB/s"):
        if rate < 1024:
            return f"{rate:.1f}{unit}"
        rate /= 1024
    return ""


class _NoRedirect(urllib.request.HTTPRedirectHandler):
    """Reports redirects as HTTP errors instead of following them."""

    def redirect_request(self, req, fp, code, msg, headers, newurl):
        raise urllib.error.HTTPError(req.full_url, code, msg, headers, fp)


def _default_opener() -> urllib.request.OpenerDirector:
    return urllib.request.build_opener(urllib.request.ProxyHandler({}), _NoRedirect())


class SpeedTest:
    """Measures the highest download rate reached over a number of samples."""

    def __init__(self, probe_url: str = PROBE_URL, samples: int = DEFAULT_SAMPLES,
                 opener: Any = None) -> None:
        if samples < 1:
            raise ValueError("samples must be at least 1")
        self.probe_url = probe_url
        self.samples = samples
        self.real_url: str | None = None
        self._opener = opener if opener is not None else _default_opener()

    def resolve_url(self) -> str:
        """Return the URL the probe URL redirects to with a 302 reply."""
        try:
            response = self._opener.open(self.probe_url, timeout=30)
        except urllib.error.HTTPError as exc:
            try:
                location = exc.headers.get("Location") if exc.headers else None
                if exc.code == 302 and location:
                    return location
            finally:
                exc.close()
            raise SpeedTestError(f"probe answered with status {exc.code}") from exc
        except OSError as exc:
            raise SpeedTestError(f"probe failed: {exc}") from exc
        with response:
            pass
        raise SpeedTestError("probe was not redirected")

    def measure(self, url: str,
                on_status: Callable[[str], None] | None = None) -> int:
        """Download ``url`` and return the fastest rate seen, in bytes per second.

        A rate is sampled after every chunk; once ``samples`` rates are
        collected the download stops. A download that ends sooner fails.
        """
        speeds: list[int] = []
        received = 0
        start = time.monotonic()
        try:
            with self._opener.open(url, timeout=30) as response:
                while chunk := response.read(CHUNK_SIZE):
                    received += len(chunk)
                    elapsed_ms = max((time.monotonic() - start) * 1000.0, 1.0)
                    speed = int(received * 1000.0 / elapsed_ms)
                    speeds.append(speed)
                    if on_status is not None:
                        on_status(format_bytes(speed))
                    if len(speeds) >= self.samples:
                        return max(speeds)
        except OSError as exc:
            raise SpeedTestError(f"download failed: {exc}") from exc
        raise SpeedTestError("download ended before enough samples were taken")

    def run(self, on_status: Callable[[str], None] | None = None) -> int:
        """Resolve the test file once, then measure; return the fastest rate."""
        if not self.real_url:
            self.real_url = self.resolve_url()
        return self.measure(self.real_url, on_status)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a speed test and print the result."""
    parser = argparse.ArgumentParser(prog="sysbro-network-test",
                                     description="Measure the download speed.")
    parser.add_argument("--url", default=PROBE_URL, help="probe URL")
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES)
    parser.add_argument("--quiet", action="store_true", help="do not show progress")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    test = SpeedTest(args.url, args.samples)
    on_status = None if args.quiet else (lambda text: print(text, flush=True))
    try:
        speed = test.run(on_status)
    except SpeedTestError:
        print(FAILED_MESSAGE, file=sys.stderr)
        return 1
    print(f"最大的接入速度为 {format_bytes(speed)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())