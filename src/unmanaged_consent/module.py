"""Plugin contract shared with the mediation runtime.

The runtime talks to every consent adapter through :class:`ConsentAdapter`
and receives consent change notifications through the
:class:`ConsentAdapterDelegate` it installs on the adapter.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from unmanaged_consent.models.consent import ConsentDialogType, ConsentKey, ConsentSource, ConsentValue


class ModuleConfiguration(BaseModel):
    """Configuration the runtime passes to ``initialize``."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    app_id: str | None = None
    extra: dict[str, Any] = Field(default_factory=dict)


@runtime_checkable
class ConsentAdapterDelegate(Protocol):
    """Receives one call per consent key whose resolved value changed."""

    def on_consent_change(self, key: ConsentKey) -> None: ...


@runtime_checkable
class ConsentAdapter(Protocol):
    module_id: str
    module_version: str
    should_collect_consent: bool

    @property
    def delegate(self) -> ConsentAdapterDelegate | None: ...

    @delegate.setter
    def delegate(self, value: ConsentAdapterDelegate | None) -> None: ...

    @property
    def consents(self) -> dict[ConsentKey, ConsentValue]: ...

    async def initialize(self, configuration: ModuleConfiguration | None = None) -> None: ...

    async def grant_consent(self, source: ConsentSource) -> bool: ...

    async def deny_consent(self, source: ConsentSource) -> bool: ...

    async def reset_consent(self) -> bool: ...

    async def show_consent_dialog(self, dialog_type: ConsentDialogType, view: Any = None) -> bool: ...
