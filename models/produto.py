# Modelo Produto: representa um item do estoque no sistema
from . import db


class Produto(db.Model):
    __tablename__ = 'produtos'  # Nome da tabela no banco de dados
    __table_args__ = {'sqlite_autoincrement': True}  # IDs nunca são reutilizados após exclusão
    id = db.Column(db.Integer, primary_key=True)  # Identificador único do produto
    nome = db.Column(db.Text, nullable=False)  # Nome do produto
    descricao = db.Column(db.Text, nullable=True)  # Descrição detalhada do produto
    preco = db.Column(db.Float, nullable=False, default=0, server_default='0')  # Preço unitário
    quantidade = db.Column(db.Integer, nullable=False, default=0, server_default='0')  # Quantidade em estoque

    def __repr__(self):
        return f'<Produto {self.nome}>'  # Representação legível para debug
