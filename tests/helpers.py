"""Shared test helpers for Pomobar."""

from pomobar.timer.model import PomodoroModel


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class ManualHandle:
    def __init__(self, interval: float, callback):
        self.interval = interval
        self.callback = callback
        self.active = True

    def cancel(self):
        self.active = False


class ManualScheduler:
    """Scheduler fake: callbacks fire only when ``advance`` is called."""

    def __init__(self):
        self.handles: list[ManualHandle] = []

    def schedule(self, interval_seconds, callback):
        handle = ManualHandle(interval_seconds, callback)
        self.handles.append(handle)
        return handle

    @property
    def active_handles(self) -> list[ManualHandle]:
        return [h for h in self.handles if h.active]

    def advance(self, seconds: int = 1) -> None:
        """Fire every active callback once per elapsed second."""
        for _ in range(seconds):
            for handle in list(self.active_handles):
                if handle.active:
                    handle.callback()


def run_to_zero(model: PomodoroModel, scheduler: ManualScheduler) -> None:
    """Tick the current countdown until it completes."""
    scheduler.advance(model.remaining)
