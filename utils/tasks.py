"""
Tasks Module - Best-effort side tasks

A best-effort task runs detached from the request that spawned it. Its
outcome never reaches the caller: failures are logged and dropped.
"""

import threading
from flask import current_app


def run_best_effort(func, *args, name=None, **kwargs):
    """
    Dispatch func as a best-effort side task

    The task runs on a daemon thread inside a fresh app context. When
    BACKGROUND_TASKS_ASYNC is disabled it runs inline instead, with the
    same failure capture.

    Args:
        func (callable): Work to run
        *args: Positional arguments for func
        name (str, optional): Label used in logs and as the thread name
        **kwargs: Keyword arguments for func

    Returns:
        threading.Thread or None: The started thread, None when run inline
    """
    app = current_app._get_current_object()
    label = name or getattr(func, '__name__', 'task')

    def _run():
        with app.app_context():
            try:
                func(*args, **kwargs)
                app.logger.debug(f"Best-effort task '{label}' completed")
            except Exception as e:
                app.logger.error(f"Best-effort task '{label}' failed: {str(e)}", exc_info=True)

    if not app.config.get('BACKGROUND_TASKS_ASYNC', True):
        _run()
        return None

    thread = threading.Thread(target=_run, name=label, daemon=True)
    thread.start()
    return thread
