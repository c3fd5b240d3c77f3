from sqlalchemy.exc import SQLAlchemyError

from app import create_app


def criar_banco(app=None):
    app = app or create_app()
    with app.app_context():
        store = app.extensions['produto_store']
        try:
            criada = store.abrir()
        except SQLAlchemyError as e:
            print(f"❌ Erro ao criar tabela de produtos: {e}")
            return False
        finally:
            store.fechar()
    if criada:
        print("✅ Tabela 'produtos' confirmada no banco de dados")
    else:
        print("❌ Erro: Tabela 'produtos' não foi criada")
    return criada


if __name__ == '__main__':
    criar_banco()
