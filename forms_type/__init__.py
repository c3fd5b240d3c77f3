from .cadastro_produto_form import ProdutoForm
