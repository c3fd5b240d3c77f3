# Configuração da aplicação (lida do ambiente / arquivo .env)
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Configuração padrão usada pelo servidor."""
    SECRET_KEY = os.getenv('SECRET_KEY', 'chave-de-desenvolvimento')  # Necessária para flash e formulários
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///' + os.path.join(BASE_DIR, 'db.sqlite'))
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 4000))  # Porta padrão 4000
    DEBUG = os.getenv('FLASK_DEBUG', '0') == '1'
    WTF_CSRF_ENABLED = False  # Os endpoints aceitam POST de formulário simples
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    """Configuração para os testes (banco temporário definido pelo conftest)."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'teste'
