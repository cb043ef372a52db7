"""
Show a platform user.

Reads connection settings from ATRIUM_* environment variables (or .env)
and prints the user's properties as JSON.

    python scripts/show_user.py Administrator
"""
import argparse
import asyncio
import json
import logging
import sys

from atrium import PlatformClient
from atrium.modules.exceptions import PlatformError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def show_user(username: str) -> int:
    async with PlatformClient() as platform:
        try:
            user = await platform.users().fetch(username)
        except PlatformError as e:
            logger.error(f"Could not fetch user {username}: {e}")
            return 1
    print(json.dumps({"id": user.id, "properties": user.to_dict()["properties"]}, indent=2))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Show a platform user")
    parser.add_argument("username", help="Username to fetch")
    parser.add_argument("--debug", action="store_true", help="Log every request")
    args = parser.parse_args()

    if args.debug:
        logging.getLogger("atrium").setLevel(logging.DEBUG)

    sys.exit(asyncio.run(show_user(args.username)))
