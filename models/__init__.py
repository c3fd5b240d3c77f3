# Inicialização do SQLAlchemy e importação dos modelos do sistema
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()  # Instância do banco, ligada ao app pela factory

# Importação dos modelos para registro no SQLAlchemy
from .produto import Produto
