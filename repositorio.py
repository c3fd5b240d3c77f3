"""Acesso à tabela de produtos.

O ``ProdutoStore`` é criado pela factory da aplicação, aberto no startup
(criação da tabela) e fechado no encerramento. As rotas recebem a instância
pronta em vez de usar um handle global.
"""
from sqlalchemy import delete, func, inspect, or_, select, update

from conversao import id_da_busca
from models import Produto


class ProdutoStore:

    def __init__(self, db):
        self.db = db

    def abrir(self):
        """Cria a tabela de produtos caso ainda não exista."""
        self.db.create_all()
        return 'produtos' in inspect(self.db.engine).get_table_names()

    def fechar(self):
        self.db.session.remove()
        self.db.engine.dispose()

    def estatisticas(self):
        """Total de produtos, estoque total e valor total em uma única consulta."""
        consulta = select(
            func.count(Produto.id),
            func.coalesce(func.sum(Produto.quantidade), 0),
            func.coalesce(func.sum(Produto.preco * Produto.quantidade), 0),
        )
        total, estoque, valor = self.db.session.execute(consulta).one()
        return {
            'total': total or 0,
            'estoque': estoque or 0,
            'valor': f'{float(valor or 0):.2f}',
        }

    def listar(self, q=''):
        consulta = select(Produto)
        if q:
            consulta = consulta.where(or_(
                Produto.nome.contains(q, autoescape=True),
                Produto.descricao.contains(q, autoescape=True),
                Produto.id == id_da_busca(q),
            ))
        consulta = consulta.order_by(Produto.id.desc())
        return self.db.session.execute(consulta).scalars().all()

    def buscar(self, produto_id):
        return self.db.session.get(Produto, produto_id)

    def criar(self, nome, descricao, preco, quantidade):
        produto = Produto(nome=nome, descricao=descricao, preco=preco, quantidade=quantidade)
        try:
            self.db.session.add(produto)
            self.db.session.commit()
        except Exception:
            self.db.session.rollback()
            raise
        return produto

    def atualizar(self, produto_id, nome, descricao, preco, quantidade):
        """Substitui todos os campos; retorna o número de linhas afetadas (0 se o id não existe)."""
        consulta = (
            update(Produto)
            .where(Produto.id == produto_id)
            .values(nome=nome, descricao=descricao, preco=preco, quantidade=quantidade)
        )
        return self._executar(consulta)

    def excluir(self, produto_id):
        return self._executar(delete(Produto).where(Produto.id == produto_id))

    def _executar(self, consulta):
        try:
            resultado = self.db.session.execute(consulta)
            self.db.session.commit()
        except Exception:
            self.db.session.rollback()
            raise
        return resultado.rowcount
