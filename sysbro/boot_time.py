"""Report how long the last boot took as a desktop notification."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
from collections.abc import Sequence

__all__ = ["parse_boot_time", "boot_time_message", "main"]

_TOTAL = re.compile(r"\s=.*s")
NOTIFY_TITLE = "开机助手"


def parse_boot_time(output: str) -> str:
    """Extract the total boot time from ``systemd-analyze`` output.

    Only the first line is examined. Raises ``ValueError`` when no total is found.
    """
    lines = output.splitlines()
    first = lines[0] if lines else ""
    match = _TOTAL.search(first)
    if match is None:
        raise ValueError(f"no boot time found in {first!r}")
    return match.group(0).replace(" = ", "")


def boot_time_message(boot_time: str) -> str:
    """Return the notification text for ``boot_time``."""
    return f"本次开机时间为: {boot_time}"


def main(argv: Sequence[str] | None = None) -> int:
    """Ask systemd for the boot time and show it with ``notify-send``."""
    parser = argparse.ArgumentParser(prog="sysbro-boot-assistant",
                                     description="Show the last boot time.")
    parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        output = subprocess.run(["systemd-analyze"], capture_output=True,
                                text=True, check=False).stdout
        boot_time = parse_boot_time(output)
        subprocess.run(["notify-send", "-i", "sysbro", NOTIFY_TITLE,
                        boot_time_message(boot_time)], check=False)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())