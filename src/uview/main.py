from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI (when arguments are given) or the GUI, and
installs a global exception hook so that fatal errors are logged and
reported through the interface the user is looking at.
"""

import logging
import sys
import traceback
from typing import Any

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and report it to the user.

    CLI runs get the traceback on stderr; GUI runs get the crash modal,
    falling back to a plain Tk message box and finally to stderr.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("uview.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    if len(sys.argv) > 1:
        print("\n" + "=" * 80, file=sys.stderr)
        print("CRITICAL ERROR (UVIEW CLI)", file=sys.stderr)
        print("=" * 80, file=sys.stderr)
        print(stack_trace, file=sys.stderr)
        sys.exit(1)

    try:
        from uview.interface.gui.dialogs.crash_modal import show_crash_modal
        show_crash_modal(error_msg, stack_trace)
    except Exception as e:
        logger.error(f"Crash modal failed: {e}. Falling back to system alert.")
        try:
            import tkinter.messagebox as mb
            from tkinter import Tk
            root = Tk()
            root.withdraw()
            mb.showerror("UView - Fatal Error", f"A critical error occurred:\n\n{error_msg}")
            root.destroy()
        except Exception:
            print(f"CRITICAL SYSTEM ERROR: {error_msg}\n{stack_trace}", file=sys.stderr)

    sys.exit(1)


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Dispatch to the CLI or GUI depending on command line arguments.

    Returns:
        int: Process exit code.
    """
    sys.excepthook = global_exception_handler

    if len(sys.argv) > 1:
        from uview.interface.cli.app import main as cli_main
        return cli_main()

    from uview.interface.gui.app import main as gui_main
    gui_main()
    return 0


if __name__ == "__main__":
    sys.exit(main())
