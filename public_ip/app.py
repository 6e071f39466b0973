"""
public_ip/app.py

Responsibility: Command-line entry point. Resolves the public IP address once
and prints it.
Does NOT: accept arguments, read configuration, or translate errors.
"""

from __future__ import annotations

import asyncio
import logging

from public_ip.services.ip_service import get_public_ip_address


def main() -> None:
    # Logs go to stderr so stdout carries only the address.
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Any ResolutionError propagates and aborts with a traceback.
    my_ip = asyncio.run(get_public_ip_address())
    print(repr(my_ip))


if __name__ == "__main__":
    main()
