# Rotas do catálogo: painel, CRUD de produtos e API JSON
from flask import Blueprint, current_app, flash, jsonify, redirect, render_template, request, url_for
from sqlalchemy.exc import SQLAlchemyError

from conversao import MAX_INTEIRO
from forms_type import ProdutoForm


def criar_blueprint(store):
    """Monta o blueprint com as rotas usando o ``store`` recebido."""
    bp = Blueprint('estoque', __name__)

    def falha_no_banco(mensagem):
        current_app.logger.exception(mensagem)
        return mensagem, 500, {'Content-Type': 'text/plain; charset=utf-8'}

    # Painel (estatísticas simples)
    @bp.route('/')
    def index():
        try:
            stats = store.estatisticas()
        except SQLAlchemyError:
            return falha_no_banco('DB error')
        return render_template('index.html', stats=stats)

    # Lista de produtos com pesquisa simples
    @bp.route('/produtos', methods=['GET'])
    def listar_produtos():
        q = request.args.get('q', '')
        try:
            produtos = store.listar(q)
        except SQLAlchemyError:
            return falha_no_banco('DB error')
        return render_template('produtos.html', produtos=produtos, q=q)

    @bp.route('/produtos/novo')
    def novo_produto():
        return render_template('form.html', form=ProdutoForm(formdata=None), produto=None)

    @bp.route('/produtos', methods=['POST'])
    def adicionar_produto():
        dados = ProdutoForm().dados_convertidos()
        try:
            produto = store.criar(**dados)
        except SQLAlchemyError:
            return falha_no_banco('Erro ao criar produto')
        current_app.logger.info('Produto %s cadastrado: %s', produto.id, produto.nome)
        flash('Produto cadastrado com sucesso!', 'success')
        return redirect(url_for('estoque.listar_produtos'))

    # Formulário de edição, buscando o produto pelo ID
    @bp.route(f'/produtos/editar/<int(max={MAX_INTEIRO}):produto_id>', methods=['GET'])
    def editar_produto(produto_id):
        try:
            produto = store.buscar(produto_id)
        except SQLAlchemyError:
            return falha_no_banco('Erro DB')
        if produto is None:
            return 'Produto não encontrado', 404, {'Content-Type': 'text/plain; charset=utf-8'}
        return render_template('form.html', form=ProdutoForm(formdata=None, obj=produto), produto=produto)

    @bp.route(f'/produtos/editar/<int(max={MAX_INTEIRO}):produto_id>', methods=['POST'])
    def atualizar_produto(produto_id):
        dados = ProdutoForm().dados_convertidos()
        try:
            linhas = store.atualizar(produto_id, **dados)
        except SQLAlchemyError:
            return falha_no_banco('Erro ao atualizar')
        # ID inexistente não altera nada e segue para a listagem
        if linhas:
            current_app.logger.info('Produto %s atualizado', produto_id)
            flash('Produto atualizado com sucesso!', 'success')
        return redirect(url_for('estoque.listar_produtos'))

    @bp.route(f'/produtos/excluir/<int(max={MAX_INTEIRO}):produto_id>', methods=['POST'])
    def excluir_produto(produto_id):
        try:
            linhas = store.excluir(produto_id)
        except SQLAlchemyError:
            return falha_no_banco('Erro ao excluir')
        if linhas:
            current_app.logger.info('Produto %s excluído', produto_id)
            flash('Produto excluído com sucesso!', 'success')
        return redirect(url_for('estoque.listar_produtos'))

    @bp.route('/api/produtos')
    def api_produtos():
        try:
            produtos = store.listar()
        except SQLAlchemyError:
            current_app.logger.exception('Erro ao listar produtos na API')
            return jsonify({'error': 'DB error'}), 500
        return jsonify([
            {
                'id': p.id,
                'nome': p.nome,
                'descricao': p.descricao,
                'preco': p.preco,
                'quantidade': p.quantidade
            } for p in produtos
        ])

    return bp
