# -*- coding: utf-8 -*-
"""UI hooks demo entrypoint.

Intentionally minimal:
- dependency check
- bootstrap (settings, logging)
- QApplication creation
- show demo window
"""
import sys


def main() -> None:
    from app.deps import ensure_runtime_deps

    try:
        ensure_runtime_deps()
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)

    from PyQt5.QtWidgets import QApplication

    from app.bootstrap import bootstrap
    from app.controller import create_main_window
    from infra.crash_handler import install_global_exception_handlers

    bootstrap()
    # Ensure unexpected exceptions are captured in logs
    install_global_exception_handlers()

    app = QApplication(sys.argv)
    window = create_main_window()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
