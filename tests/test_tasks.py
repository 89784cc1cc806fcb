import logging
import threading

from utils.tasks import run_best_effort


def test_inline_task_runs_and_returns_none(app):
    calls = []
    with app.app_context():
        result = run_best_effort(calls.append, 'payload')

    assert result is None
    assert calls == ['payload']


def test_inline_task_failure_is_logged_not_raised(app, caplog):
    def explode():
        raise ValueError('mail server said no')

    with app.app_context(), caplog.at_level(logging.ERROR):
        run_best_effort(explode, name='send-mail')

    assert "Best-effort task 'send-mail' failed: mail server said no" in caplog.text


def test_async_task_runs_on_its_own_thread(app):
    app.config['BACKGROUND_TASKS_ASYNC'] = True
    seen = {}

    def work(value, flag=None):
        from flask import current_app
        seen['thread'] = threading.current_thread().name
        seen['app'] = current_app.name
        seen['args'] = (value, flag)

    with app.app_context():
        thread = run_best_effort(work, 1, flag='x', name='background-work')
    thread.join(timeout=5)

    assert seen['thread'] == 'background-work'
    assert seen['app'] == app.name
    assert seen['args'] == (1, 'x')
    assert thread.daemon


def test_async_task_failure_is_contained(app, caplog):
    app.config['BACKGROUND_TASKS_ASYNC'] = True

    def explode():
        raise RuntimeError('boom')

    with app.app_context(), caplog.at_level(logging.ERROR):
        thread = run_best_effort(explode)
        thread.join(timeout=5)

    assert "Best-effort task 'explode' failed: boom" in caplog.text
