import argparse
import asyncio
import logging

from iris_console.config import get_settings
from iris_console.logging_config import configure_logging
from iris_console.services.console import create_console

logger = logging.getLogger(__name__)


async def run(count: int, interval: float) -> None:
    console = create_console()
    await console.notifications.request_authorization_once()

    for _ in range(count):
        request = console.simulate_alert()
        logger.info("Banner: %s (%s)", console.banner.text, request.urgency.value)
        await asyncio.sleep(interval)

    await asyncio.sleep(console.banner.dismiss_after)
    summary = console.summary()
    logger.info(
        "Done: %s requests retained, %s pending, %s critical, banner=%r",
        summary.total,
        summary.pending,
        summary.critical,
        console.banner.text,
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Fire simulated resident alerts")
    parser.add_argument("--count", type=int, default=5)
    parser.add_argument("--interval", type=float, default=0.5)
    args = parser.parse_args()

    configure_logging(get_settings())
    asyncio.run(run(args.count, args.interval))
