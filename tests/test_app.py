from conftest import MENU_IDS
from constants import LABEL_SHOW_ALTERNATES, LABEL_SHOW_EVERYTHING


def test_status_ready(client):
    response = client.get('/api/status')
    assert response.status_code == 200
    data = response.get_json()
    assert data['status'] == 'ready'
    assert data['schemaVersion'] == 3


def test_today(client):
    data = client.get('/api/today').get_json()
    assert data['phase'] == 'today'
    assert data['controlLabel'] == LABEL_SHOW_ALTERNATES
    assert data['message']['optionA'] == {'id': 5, 'description': 'Fish pie'}
    assert data['message']['optionB'] == {'id': 7, 'description': 'Lasagne'}


def test_suggestion_control_cycles(client):
    first = client.post('/api/suggestions/next').get_json()
    assert first['phase'] == 'alternates'
    assert first['controlLabel'] == LABEL_SHOW_EVERYTHING
    ids = {first['message']['optionA']['id'], first['message']['optionB']['id']}
    assert not ids & {5, 7}

    second = client.post('/api/suggestions/next').get_json()
    assert second['phase'] == 'full-list'
    assert [item['id'] for item in second['message']['items']] == MENU_IDS

    third = client.post('/api/suggestions/next').get_json()
    assert third['phase'] == 'alternates'


def test_menu(client):
    data = client.get('/api/menu').get_json()
    assert [item['id'] for item in data] == MENU_IDS
    assert data[0] == {'id': 1, 'description': 'Chicken and rice'}


def test_collection_detail(client):
    data = client.get('/api/collections/2').get_json()
    assert data['title'] == 'Tofu bowl'
    assert data['resolvedMethodText'] == 'Press the Tofu and add Pea.'
    assert [line['ingredientDescription'] for line in data['ingredientLines']] == ['Tofu', 'Pea']


def test_missing_collection(client):
    response = client.get('/api/collections/404')
    assert response.status_code == 404
    assert response.get_json()['status'] == 'missing-recipe'


def test_schedule(client):
    data = client.get('/api/schedule').get_json()
    assert [entry['day'] for entry in data] == ['Monday', 'Tuesday']
    assert client.get('/api/schedule/monday').get_json()['easyId'] == 5

    response = client.get('/api/schedule/Wednesday')
    assert response.status_code == 404
    assert response.get_json()['status'] == 'no-schedule'


def test_pantry(client):
    data = client.get('/api/pantry').get_json()
    assert len(data) == 6
    assert {'id', 'description', 'type', 'unit', 'storage'} == set(data[0])


def test_view_switching(client):
    assert client.get('/api/view').get_json() == {'currentView': 'suggestions'}
    response = client.put('/api/view', json={'view': 'schedule'})
    assert response.get_json() == {'currentView': 'schedule'}
    assert client.get('/api/view').get_json() == {'currentView': 'schedule'}

    response = client.put('/api/view', json={'view': 'garage'})
    assert response.status_code == 400
    assert client.get('/api/view').get_json() == {'currentView': 'schedule'}


def test_refresh_reseeds_and_resets_session(client, app):
    client.post('/api/suggestions/next')
    client.put('/api/view', json={'view': 'pantry'})

    response = client.post('/api/refresh')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'ready'

    assert client.get('/api/today').get_json()['phase'] == 'today'
    assert client.get('/api/view').get_json() == {'currentView': 'suggestions'}
    assert len(client.get('/api/menu').get_json()) == len(MENU_IDS)


def test_failed_initialization_reports_single_status(make_app):
    app = make_app()
    (app.data_dir / 'ingredient.json').unlink()
    with app.app_context():
        app.extensions['recipe_book'].initialize()
    client = app.test_client()

    status = client.get('/api/status').get_json()
    assert status['status'] == 'bootstrap-failed'
    assert 'ingredient.json' in status['text']

    response = client.get('/api/menu')
    assert response.status_code == 503
    assert response.get_json()['status'] == 'bootstrap-failed'


def test_refresh_recovers_after_payload_fix(make_app):
    app = make_app()
    payload = (app.data_dir / 'ingredient.json').read_text()
    (app.data_dir / 'ingredient.json').unlink()
    with app.app_context():
        app.extensions['recipe_book'].initialize()
    client = app.test_client()
    assert client.get('/api/menu').status_code == 503

    (app.data_dir / 'ingredient.json').write_text(payload)
    assert client.post('/api/refresh').status_code == 200
    assert client.get('/api/menu').status_code == 200


def test_auto_initialize_on_create(make_app):
    app = make_app(AUTO_INITIALIZE=True)
    response = app.test_client().get('/api/status')
    assert response.get_json()['status'] == 'ready'


def test_cli_seed_and_reset(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['seed'])
    assert 'Ready.' in result.output
    assert 'ingredient: 6' in result.output

    result = runner.invoke(args=['seed'])
    assert 'ingredient' not in result.output

    result = runner.invoke(args=['reset'])
    assert 'Ready.' in result.output
