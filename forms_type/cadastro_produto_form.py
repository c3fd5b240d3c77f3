# Formulário para cadastro e edição de produtos no sistema
from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField, TextAreaField

from conversao import converter_decimal, converter_inteiro


class ProdutoForm(FlaskForm):
    # Campos numéricos são texto: a conversão com valor padrão é feita em dados_convertidos()
    nome = StringField('Nome do Produto')  # Nome do produto
    descricao = TextAreaField('Descrição')  # Descrição detalhada
    preco = StringField('Preço', default='0')  # Preço unitário
    quantidade = StringField('Quantidade em Estoque', default='0')  # Quantidade em estoque
    submit = SubmitField('Salvar')  # Botão de envio

    def dados_convertidos(self):
        """Campos do formulário prontos para o banco (preço e quantidade já convertidos)."""
        return {
            'nome': self.nome.raw_data[0] if self.nome.raw_data else None,
            'descricao': self.descricao.data,
            'preco': converter_decimal(self.preco.data),
            'quantidade': converter_inteiro(self.quantidade.data),
        }
