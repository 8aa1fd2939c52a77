from __future__ import annotations

import argparse
import logging
import sys

from PySide6 import QtWidgets

from ..core.io import load_scenario_file
from .window import MainWindow


def _parse_args(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(prog="solar-system-workbench")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--scenario", default=None, help="built-in scenario id to open first")
    source.add_argument("--scenario-file", default=None, help="JSON scenario definition to open first")
    parser.add_argument("--verbose", action="store_true", help="log debug output from the simulation core")
    # Unrecognised arguments are left for Qt.
    return parser.parse_known_args(argv[1:])


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    args, qt_args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    definition = None if args.scenario_file is None else load_scenario_file(args.scenario_file)
    app = QtWidgets.QApplication([argv[0], *qt_args])
    window = MainWindow(scenario_id=args.scenario, definition=definition)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
