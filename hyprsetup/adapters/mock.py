"""
Mock adapter — stands in for the package manager.

Used by ``--mock`` to walk through an install without touching the
system, and by the tests to script per-package failures.
"""

from __future__ import annotations

from hyprsetup.adapters.base import Adapter, ExecutionContext
from hyprsetup.core.models.action import Receipt


class MockAdapter(Adapter):
    """Package-manager double.

    Every action succeeds unless a response was scripted for its id
    (``"install:wlroots"``). Each call is recorded in ``call_log``.
    """

    def __init__(
        self,
        adapter_name: str = "mock",
        available: bool = True,
        default_output: str = "[mock] executed",
    ):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._scripted: dict[str, Receipt] = {}
        self.call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_count(self) -> int:
        return len(self.call_log)

    @property
    def action_ids(self) -> list[str]:
        """Ids of the actions received so far, in order."""
        return [ctx.action.id for ctx in self.call_log]

    def is_available(self) -> bool:
        return self._available

    def set_response(self, action_id: str, receipt: Receipt) -> None:
        self._scripted[action_id] = receipt

    def set_failure(
        self,
        action_id: str,
        error: str = "Mock failure",
        output: str = "",
        return_code: int = 1,
    ) -> None:
        """Make ``action_id`` fail the way a non-zero exit would."""
        self.set_response(
            action_id,
            Receipt.failure(
                adapter=self._name,
                action_id=action_id,
                error=error,
                output=output,
                return_code=return_code,
            ),
        )

    def reset(self) -> None:
        self._scripted.clear()
        self.call_log.clear()

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self.call_log.append(context)
        scripted = self._scripted.get(context.action.id)
        if scripted is not None:
            return scripted
        return Receipt.success(
            adapter=self._name,
            action_id=context.action.id,
            output=self._default_output,
            return_code=0,
            metadata={"mock": True},
        )
