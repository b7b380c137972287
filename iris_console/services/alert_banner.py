import asyncio
import logging

from ..config import get_settings

logger = logging.getLogger(__name__)


class AlertBanner:
    """Transient message that clears itself after a fixed delay.

    With ``cancel_previous`` off, an older dismiss timer still fires and can
    clear a newer message before its own delay has elapsed.
    """

    def __init__(self, dismiss_after: float | None = None, cancel_previous: bool | None = None):
        settings = get_settings()
        self.dismiss_after = (
            dismiss_after if dismiss_after is not None else settings.BANNER_DISMISS_SECONDS
        )
        self.cancel_previous = (
            cancel_previous if cancel_previous is not None else settings.BANNER_CANCEL_PREVIOUS
        )
        self.text: str | None = None
        self._timers: set[asyncio.Task] = set()

    def show(self, message: str) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        if self.cancel_previous:
            self._cancel_pending()
        self.text = message
        task = loop.create_task(self._dismiss_later())
        self._timers.add(task)
        task.add_done_callback(self._timers.discard)
        return task

    def dismiss(self) -> None:
        self._cancel_pending()
        self.text = None

    async def _dismiss_later(self) -> None:
        await asyncio.sleep(self.dismiss_after)
        logger.debug("Dismissing banner %r", self.text)
        self.text = None

    def _cancel_pending(self) -> None:
        for task in list(self._timers):
            if not task.done():
                task.cancel()
