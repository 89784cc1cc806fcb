import pytest
from app import create_app
from extensions import db
from tests.fakes import RecordingNotifier


@pytest.fixture
def static_root(tmp_path):
    root = tmp_path / 'public'
    (root / 'css').mkdir(parents=True)
    (root / 'index.html').write_text('<html><body>Portfolio home</body></html>')
    (root / 'css' / 'style.css').write_text('body { margin: 0; }')
    return root


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def make_app(static_root):
    apps = []

    def _make_app(**kwargs):
        app = create_app('testing', **kwargs)
        app.config['STATIC_ROOT'] = str(static_root)
        apps.append(app)
        return app

    yield _make_app

    for app in apps:
        with app.app_context():
            db.session.remove()
            db.drop_all()


@pytest.fixture
def app(make_app, notifier):
    return make_app(notifier=notifier)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def submit(client):
    """POST a JSON payload to the contact endpoint"""
    def _submit(payload, **kwargs):
        return client.post('/api/contact', json=payload, **kwargs)
    return _submit
