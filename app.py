"""Catálogo de produtos: painel de estoque e CRUD de produtos (Flask + SQLite).

Para executar o servidor:
$ python app.py
abrir no navegador: http://localhost:4000
"""
import sys

from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from config import Config
from models import db
from repositorio import ProdutoStore
from rotas import criar_blueprint


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    db.init_app(app)

    store = ProdutoStore(db)
    app.extensions['produto_store'] = store
    app.register_blueprint(criar_blueprint(store))
    return app


def abrir_store(app):
    """Abre o banco no startup; falha aqui encerra o processo."""
    with app.app_context():
        try:
            app.extensions['produto_store'].abrir()
        except SQLAlchemyError as e:
            app.logger.critical('Erro ao abrir banco de dados: %s', e)
            sys.exit(1)


def fechar_store(app):
    with app.app_context():
        app.extensions['produto_store'].fechar()


if __name__ == '__main__':
    app = create_app()
    abrir_store(app)
    app.logger.info('Servidor rodando em http://localhost:%s', app.config['PORT'])
    try:
        app.run(host=app.config['HOST'], port=app.config['PORT'], debug=app.config['DEBUG'])
    finally:
        fechar_store(app)
