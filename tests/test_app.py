from store import EnquiryStore


def test_security_headers_are_applied(client):
    res = client.get('/')

    csp = res.headers['Content-Security-Policy']
    assert "default-src 'self'" in csp
    assert "style-src 'self' 'unsafe-inline' https://cdnjs.cloudflare.com" in csp
    assert "script-src 'self'" in csp
    assert "img-src 'self' data: https:" in csp
    assert "font-src 'self' https://cdnjs.cloudflare.com" in csp
    assert res.headers['X-Content-Type-Options'] == 'nosniff'
    assert res.headers['X-Frame-Options'] == 'SAMEORIGIN'


def test_api_responses_carry_security_headers(client):
    res = client.post('/api/contact', json={'name': ''})
    assert 'Content-Security-Policy' in res.headers


def test_cors_allows_any_origin(client):
    res = client.get('/api/contact/stats', headers={'Origin': 'https://elsewhere.example'})
    assert res.headers['Access-Control-Allow-Origin'] == '*'


def test_cors_preflight(client):
    res = client.options('/api/contact', headers={
        'Origin': 'https://elsewhere.example',
        'Access-Control-Request-Method': 'POST',
        'Access-Control-Request-Headers': 'Content-Type'
    })
    assert res.status_code == 200
    assert res.headers['Access-Control-Allow-Origin'] == '*'


def test_root_serves_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert b'Portfolio home' in res.data


def test_static_files_are_served(client):
    res = client.get('/css/style.css')
    assert res.status_code == 200
    assert b'margin: 0' in res.data
    assert res.mimetype == 'text/css'


def test_unmatched_paths_fall_back_to_index(client):
    for path in ('/projects/portfolio-site', '/css/missing.css', '/../../etc/passwd'):
        res = client.get(path)
        assert res.status_code == 200
        assert b'Portfolio home' in res.data


def test_health_check_reports_database(client):
    res = client.get('/health')
    assert res.status_code == 200
    assert res.get_json() == {'status': 'ok', 'database': 'connected'}


def test_unsupported_method_gets_json_error(client):
    res = client.post('/projects')
    assert res.status_code == 405
    body = res.get_json()
    assert body['success'] is False
    assert body['message']


def test_default_store_is_registered(app):
    assert isinstance(app.extensions['enquiry_store'], EnquiryStore)


def test_injected_store_is_used(make_app):
    from tests.fakes import UnavailableStore

    store = UnavailableStore()
    app = make_app(store=store)

    assert app.extensions['enquiry_store'] is store
    assert app.test_client().get('/health').get_json()['database'] == 'disconnected'


def test_body_size_ceiling_is_configured(app):
    assert app.config['MAX_CONTENT_LENGTH'] == 10 * 1024 * 1024
