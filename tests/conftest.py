import pytest

from app import create_app
from config import TestConfig
from models import Produto, db


@pytest.fixture
def app(tmp_path):
    class Config(TestConfig):
        SQLALCHEMY_DATABASE_URI = 'sqlite:///' + str(tmp_path / 'teste.sqlite')

    app = create_app(Config)
    with app.app_context():
        app.extensions['produto_store'].abrir()
    yield app
    with app.app_context():
        app.extensions['produto_store'].fechar()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions['produto_store']


@pytest.fixture
def adicionar(app):
    """Insere um produto direto no banco e retorna o id."""
    def _adicionar(**campos):
        campos.setdefault('nome', 'Produto')
        with app.app_context():
            produto = Produto(**campos)
            db.session.add(produto)
            db.session.commit()
            return produto.id
    return _adicionar
