import copy
import itertools
import json
import random
from datetime import date

import pytest

from app import create_app

# 2026-10-19 is a Monday
MONDAY = date(2026, 10, 19)

PAYLOADS = {
    'ingredient': [
        {'id': 1, 'description': 'Chicken', 'type': 'protein', 'unit': 'g', 'storage': 'fridge'},
        {'id': 2, 'description': 'Rice', 'type': 'carbs', 'unit': 'g', 'storage': 'cupboard'},
        {'id': 3, 'description': 'Carrot', 'type': 'veg', 'unit': None, 'storage': 'fridge'},
        {'id': 4, 'description': 'Pea', 'type': 'Veg', 'unit': 'g', 'storage': 'freezer'},
        {'id': 5, 'description': 'Soy sauce', 'type': 'sauce', 'unit': 'tbsp', 'storage': 'cupboard'},
        {'id': 6, 'description': 'Tofu', 'type': 'Proteins', 'unit': 'g', 'storage': 'fridge'},
    ],
    'collection': [
        {'id': 1, 'description': 'Chicken and rice', 'type': 'recipe',
         'methodBasic': 'Fry the <protein>.',
         'methodDetailed': 'Fry the <protein> with <veg>, serve on <carbs> with <sauce>. '
                           'Garnish with <nonexistent>.'},
        {'id': 2, 'description': 'Tofu bowl', 'type': 'recipe',
         'methodBasic': 'Press the <Proteins> and add <veggies>.'},
        {'id': 3, 'description': 'Frozen pizza', 'type': 'ready-meal'},
        {'id': 4, 'description': 'Veg curry', 'type': 'recipe'},
        {'id': 5, 'description': 'Fish pie', 'type': 'ready-meal'},
        {'id': 6, 'description': 'Stir fry', 'type': 'recipe'},
        {'id': 7, 'description': 'Lasagne', 'type': 'recipe'},
        {'id': 8, 'description': 'Stock', 'type': 'component'},
    ],
    'quantity': [
        {'collectionId': 1, 'ingredientId': 1, 'quantity': 200},
        {'collectionId': 1, 'ingredientId': 2, 'quantity': 150},
        {'collectionId': 1, 'ingredientId': 3, 'quantity': 2},
        {'collectionId': 1, 'ingredientId': 4, 'quantity': 80},
        {'collectionId': 1, 'ingredientId': 5, 'quantity': 1.5},
        {'collectionId': 1, 'ingredientId': 99, 'quantity': 1},
        {'collectionId': 2, 'ingredientId': 6, 'quantity': 300},
        {'collectionId': 2, 'ingredientId': 4, 'quantity': 'a handful'},
    ],
    'schedule': [
        {'day': 'Monday', 'easyId': 5, 'lessEasyId': 7},
        {'day': 'Tuesday', 'easyId': 1, 'lessEasyId': 99},
    ],
}

MENU_IDS = [1, 2, 3, 4, 5, 6, 7]


def write_payloads(directory, payloads):
    directory.mkdir(parents=True, exist_ok=True)
    for family, records in payloads.items():
        (directory / f"{family}.json").write_text(json.dumps(records), encoding='utf-8')
    return directory


@pytest.fixture
def payloads():
    return copy.deepcopy(PAYLOADS)


@pytest.fixture
def make_app(tmp_path):
    """Build apps over a temporary SQLite file and payload directory."""
    counter = itertools.count()

    def _make_app(payloads=None, clock=lambda: MONDAY, seed=1234, database=None, **overrides):
        n = next(counter)
        data_dir = write_payloads(tmp_path / f"data{n}", PAYLOADS if payloads is None else payloads)
        overrides.setdefault('SQLALCHEMY_DATABASE_URI', f"sqlite:///{database or tmp_path / f'recipebook{n}.db'}")
        overrides.setdefault('BOOTSTRAP_SOURCE', str(data_dir))
        app = create_app('testing', rng=random.Random(seed), clock=clock, **overrides)
        app.data_dir = data_dir
        return app

    return _make_app


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def book(app):
    """Initialized recipe book, used inside an app context."""
    with app.app_context():
        book = app.extensions['recipe_book']
        status = book.initialize()
        assert book.ready, status.text
        yield book


@pytest.fixture
def client(app):
    with app.app_context():
        app.extensions['recipe_book'].initialize()
    return app.test_client()
