"""
Action and Receipt models — what the install task hands an adapter and
what it gets back.

One Action is one external command (``install:waybar``). The adapter
answers with a Receipt and never raises: a non-zero exit, a timeout or
a missing binary all come back as ``status="failed"`` so the install
task alone decides how a failed package ends the action.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

ReceiptStatus = Literal["ok", "failed"]


class Action(BaseModel):
    """A single external operation, e.g. installing one package."""

    id: str                         # "install:<pkg>"
    name: str = ""
    adapter: str
    params: dict[str, Any] = Field(default_factory=dict)


class Receipt(BaseModel):
    """What came back from running an Action."""

    adapter: str
    action_id: str
    status: ReceiptStatus = "ok"
    duration_ms: int = 0

    output: str = ""                # stdout and stderr, interleaved
    error: str | None = None
    return_code: int | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @property
    def detail(self) -> str:
        """Text to show for a failure: command output if any, else the error."""
        return self.output or self.error or ""

    @classmethod
    def success(cls, adapter: str, action_id: str, output: str = "", **kwargs: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, output=output, **kwargs)

    @classmethod
    def failure(cls, adapter: str, action_id: str, error: str, **kwargs: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, status="failed", error=error, **kwargs)
