"""Host adapter wiring the mode controller into renderer callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from amanita.editor import EditorView
from amanita.modes import Command, ModeController, ModeResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class HostHooks:
    """Callbacks invoked by the adapter to update the host UI."""

    update_view: Callable[[EditorView], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class EditorAdapter:
    """Feeds decoded commands to a ModeController and pushes views back out."""

    EVENTS = (
        "mode.switch",
        "visual.selection",
        "clipboard.yank",
        "completion.insert",
    )

    def __init__(self, controller: ModeController, hooks: HostHooks) -> None:
        self.controller = controller
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_view()

    def handle(self, command: Command) -> ModeResult:
        """Run a synchronous command and refresh the host."""

        self._log_state("command ->", command=command)
        result = self.controller.handle(command)
        self._after_mode_result(result)
        return result

    async def dispatch(self, command: Command) -> ModeResult:
        """Run any command, including ``Save``, and refresh the host."""

        self._log_state("command ->", command=command)
        result = await self.controller.dispatch(command)
        self._after_mode_result(result)
        return result

    def _after_mode_result(self, result: ModeResult) -> None:
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._refresh_view()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to.value if result.switch_to else None,
        )

    def _subscribe_events(self) -> None:
        bus = self.controller.bus
        for event in self.EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.controller.editor.view())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        editor = self.controller.editor
        buffer = editor.buffer
        return {
            "mode": editor.mode.value,
            "cursor": buffer.cursor.as_tuple(),
            "offset": buffer.offset.as_tuple(),
            "raw": buffer.raw_position,
            "buffer": buffer.name,
            "buffer_version": buffer.store.version,
        }


__all__ = ["EditorAdapter", "HostHooks"]
