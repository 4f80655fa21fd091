"""Mutation-and-refresh flow — writes followed by a full reload of the list.

After any successful create/update/delete the page re-runs its own fetch
instead of patching the records it holds: values the backend assigns
(defaults, timestamps, computed flags) are only known after a reload.
Failures never raise to the page; they come back as a ``MutationResult``
carrying the message to show, and nothing is reloaded.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from jewelcrm.domain.entities import ApiResponse

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Request failed"

Action = Callable[[], Awaitable[ApiResponse]]
Refresh = Callable[[], Awaitable[Any]]
Confirm = Callable[[str], bool]


@dataclass
class MutationResult:
    ok: bool
    message: str | None = None
    data: Any = None

    @classmethod
    def failed(cls, message: str | None) -> "MutationResult":
        return cls(ok=False, message=message or DEFAULT_FAILURE_MESSAGE)


async def run_mutation(
    action: Action,
    *,
    refresh: Refresh | None = None,
    description: str = "mutation",
) -> MutationResult:
    """Run one write call; reload through ``refresh`` only when it succeeded."""
    try:
        response = await action()
    except Exception as exc:
        logger.error("%s failed: %s", description, exc)
        return MutationResult.failed(str(exc))

    if not response.success:
        logger.warning("%s rejected by backend: %s", description, response.message)
        return MutationResult.failed(response.message)

    if refresh is not None:
        await refresh()
    return MutationResult(ok=True, message=response.message, data=response.data)


async def confirm_and_run(
    prompt: str,
    confirm: Confirm,
    action: Action,
    *,
    refresh: Refresh | None = None,
    description: str = "mutation",
) -> MutationResult | None:
    """Ask ``confirm`` first; returns ``None`` (and sends nothing) when declined."""
    if not confirm(prompt):
        logger.debug("%s cancelled by user", description)
        return None
    return await run_mutation(action, refresh=refresh, description=description)


class FormDialog:
    """A modal form: collects values, submits them, closes only on success.

    Usage:
        dialog = FormDialog(refresh=controller.refresh)
        dialog.open({"first_name": "Priya"})
        dialog.update(status="lead")
        result = await dialog.submit(api.create_client)
    """

    def __init__(self, *, refresh: Refresh | None = None, description: str = "form"):
        self._refresh = refresh
        self._description = description
        self.is_open = False
        self.values: dict[str, Any] = {}
        self.error: str | None = None
        self.submitting = False

    def open(self, initial: dict[str, Any] | None = None) -> None:
        self.values = dict(initial or {})
        self.error = None
        self.is_open = True

    def update(self, **fields: Any) -> None:
        self.values.update(fields)

    def close(self) -> None:
        self.is_open = False
        self.values = {}
        self.error = None

    async def submit(
        self, send: Callable[[dict[str, Any]], Awaitable[ApiResponse]]
    ) -> MutationResult:
        """Send the current values; on failure keep the dialog open with its input intact."""
        self.submitting = True
        try:
            result = await run_mutation(
                lambda: send(dict(self.values)),
                refresh=self._refresh,
                description=self._description,
            )
        finally:
            self.submitting = False

        if result.ok:
            self.close()
        else:
            self.error = result.message
        return result
