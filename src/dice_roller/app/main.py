from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6 import QtWidgets

from ..core.io import deserialize_roller_definition
from ..core.roller_definition import RollerDefinition
from .window import MainWindow

_LOG = logging.getLogger(__name__)


def load_startup_definition(path: Path) -> RollerDefinition | None:
    try:
        return deserialize_roller_definition(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        _LOG.error("Unable to load roller %s: %s; using defaults", path, exc)
        return None


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    app = QtWidgets.QApplication(sys.argv)
    definition = None
    args = app.arguments()[1:]
    if args:
        definition = load_startup_definition(Path(args[0]))
    window = MainWindow(definition)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
