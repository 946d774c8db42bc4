import numpy as np
import pytest

from tokenplot.app import create_app
from tokenplot.sentence_history import SentenceHistory
from tokenplot.settings import Settings


@pytest.fixture
def history():
    return SentenceHistory(capacity=5)


@pytest.fixture
def app(history):
    app = create_app(Settings(), history=history, rng=np.random.default_rng(0))
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
