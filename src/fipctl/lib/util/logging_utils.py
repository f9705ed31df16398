"""Utility functions for logging."""


def _log_debug(message: str) -> None:
    """Append a simple debug line to the fipctl log.

    Used by the API client to leave a trace of every request sent to the
    daemon, which helps when the CLI only prints the daemon's terse error.

    Writes timestamped lines to ``state_root()/fipctl.log``. Fully
    exception-safe: any IO error is silently ignored so this function never
    raises or affects callers.
    """
    try:
        import time

        from ..core.config import state_root

        log_path = state_root() / "fipctl.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
