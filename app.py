import logging

import click
from flask import Blueprint, Flask, current_app, jsonify, request

from config import get_config
from constants import STATUS_MISSING_RECIPE, STATUS_NO_SCHEDULE, WEEKDAYS
from errors import RecipeBookError, UnknownViewError
from models import db, RecipeStore
from services import RecipeBook, StatusMessage, make_loader

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__, url_prefix='/api')

# Endpoints that stay reachable while initialization has failed
ALWAYS_AVAILABLE = {'api.status', 'api.refresh'}


def create_app(config_name=None, rng=None, clock=None, **overrides):
    """
    Build the Flask app, bind the database and wire the recipe book.

    `rng` and `clock` are passed through to the suggestion services;
    `overrides` are applied on top of the selected configuration.
    """
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    app.config.update(overrides)

    db.init_app(app)

    store = RecipeStore(db)
    loader = make_loader(app.config['BOOTSTRAP_SOURCE'], timeout=app.config['BOOTSTRAP_TIMEOUT'])
    book_kwargs = {'rng': rng}
    if clock is not None:
        book_kwargs['clock'] = clock
    app.extensions['recipe_book'] = RecipeBook(store, loader, **book_kwargs)

    app.register_blueprint(api)
    register_commands(app)

    if app.config['AUTO_INITIALIZE']:
        with app.app_context():
            status = app.extensions['recipe_book'].initialize(app.config['SCHEMA_VERSION'])
            logger.info("Startup status: %s", status.text)

    return app


def get_book():
    return current_app.extensions['recipe_book']


def _status_response(message, code):
    return jsonify(message.to_dict()), code


def _suggestion_response(book, message):
    return jsonify({
        'message': message.to_dict(),
        'phase': book.session.phase.value,
        'controlLabel': book.session.control_label,
    })


@api.before_request
def require_initialized():
    book = get_book()
    if not book.ready and request.endpoint not in ALWAYS_AVAILABLE:
        return _status_response(book.status, 503)


@api.errorhandler(UnknownViewError)
def handle_unknown_view(e):
    return jsonify({'kind': 'status', 'status': 'unknown-view', 'text': str(e)}), 400


@api.errorhandler(RecipeBookError)
def handle_recipe_book_error(e):
    logger.error("Request failed: %s", e)
    return jsonify({'kind': 'status', 'status': 'error', 'text': str(e)}), 500


# ============================================
# ROUTES - STATUS
# ============================================

@api.route('/status')
def status():
    book = get_book()
    payload = book.status.to_dict()
    payload['schemaVersion'] = book.store.version
    return jsonify(payload)


@api.route('/refresh', methods=['POST'])
def refresh():
    book = get_book()
    message = book.refresh(current_app.config['SCHEMA_VERSION'])
    return _status_response(message, 200 if book.ready else 503)


# ============================================
# ROUTES - SUGGESTIONS
# ============================================

@api.route('/today')
def today():
    book = get_book()
    return _suggestion_response(book, book.session.today())


@api.route('/suggestions/next', methods=['POST'])
def next_suggestion():
    book = get_book()
    # Report the phase this press produced, not one from a concurrent press
    with book.session.lock:
        return _suggestion_response(book, book.session.advance())


# ============================================
# ROUTES - CATALOGUE
# ============================================

@api.route('/menu')
def menu():
    items = get_book().catalogue.list_menu()
    return jsonify([{'id': c.id, 'description': c.description} for c in items])


@api.route('/collections/<int:id>')
def collection_detail(id):
    detail = get_book().recipe_detail(id)
    if detail is None:
        return _status_response(StatusMessage(STATUS_MISSING_RECIPE, f"Recipe {id} is missing."), 404)
    return jsonify(detail.to_dict())


@api.route('/schedule')
def schedule_list():
    return jsonify([entry.to_dict() for entry in get_book().catalogue.list_schedule()])


@api.route('/schedule/<day>')
def schedule_day(day):
    day = day.capitalize()
    entry = get_book().catalogue.schedule_for(day) if day in WEEKDAYS else None
    if entry is None:
        return _status_response(StatusMessage(STATUS_NO_SCHEDULE, f"No schedule for {day}."), 404)
    return jsonify(entry.to_dict())


@api.route('/pantry')
def pantry():
    return jsonify([
        {
            'id': i.id,
            'description': i.description,
            'type': i.type,
            'unit': i.unit,
            'storage': i.storage,
        }
        for i in get_book().catalogue.list_pantry()
    ])


# ============================================
# ROUTES - VIEW STATE
# ============================================

@api.route('/view', methods=['GET', 'PUT'])
def view():
    view_state = get_book().view_state
    if request.method == 'PUT':
        data = request.get_json(silent=True) or {}
        view_state.switch(data.get('view'))
    return jsonify({'currentView': view_state.current()})


# ============================================
# CLI COMMANDS
# ============================================

def register_commands(app):

    @app.cli.command('seed')
    def seed_command():
        """Open the store and seed any empty families."""
        book = get_book()
        status = book.initialize(current_app.config['SCHEMA_VERSION'])
        click.echo(status.text)
        if book.last_seed is not None and book.ready:
            for family, count in book.last_seed.inserted.items():
                click.echo(f"  {family}: {count}")

    @app.cli.command('reset')
    def reset_command():
        """Destroy every record and re-seed from the bootstrap payloads."""
        status = get_book().refresh(current_app.config['SCHEMA_VERSION'])
        click.echo(status.text)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
