# debug.py
from __future__ import annotations
import logging
from typing import Dict

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# one switch per stage of the signal path
COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "encipher")

_shared: "Debug | None" = None


class Debug:
    """Per-component trace switches in front of the ``ENIGMA`` logger."""

    _root_configured: bool = False          # class-level guard

    def __init__(self) -> None:
        if not Debug._root_configured:
            logging.basicConfig(
                level=logging.DEBUG,
                format=LOG_FORMAT,
                datefmt=DATE_FORMAT,
                handlers=[logging.StreamHandler()],
            )
            Debug._root_configured = True

        self.logger = logging.getLogger("ENIGMA")
        self.enabled = True        # global switch
        self._file_handler: logging.FileHandler | None = None
        self.components: Dict[str, bool] = dict.fromkeys(COMPONENTS, False)

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if self.enabled and self.components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def log_to_file(self, path: str) -> None:
        """Copy trace output to *path* as well as the console.

        Only one trace file is open at a time; a second call replaces it.
        """
        self.close_file()
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self.logger.addHandler(handler)
        self._file_handler = handler

    def close_file(self) -> None:
        if self._file_handler is not None:
            self.logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    def toggle_global(self, state: bool) -> None:
        self.enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return self.components.copy()

    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"


def get_debug() -> Debug:
    """Return the process-wide instance every module traces through."""
    global _shared
    if _shared is None:
        _shared = Debug()
    return _shared
