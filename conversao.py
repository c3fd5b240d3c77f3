# Conversão dos campos numéricos recebidos nos formulários.
# Os valores chegam como texto; entrada inválida nunca gera erro, vira o padrão.
import math
import re

MAX_INTEIRO = 2 ** 63 - 1  # Maior valor aceito pela coluna INTEGER do SQLite

# Prefixo numérico aceito: "9.99abc" -> 9.99, "12 unidades" -> 12
_PREFIXO_DECIMAL = re.compile(r'\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')
_PREFIXO_INTEIRO = re.compile(r'\s*[+-]?\d+')
# Termo de busca que é um número completo: "42", " 4.5 ", "1e3" (não "1_000" nem "4 peças")
_NUMERO_COMPLETO = re.compile(r'\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*')

# Função para converter o preço informado
# Parâmetros:
#   valor: texto vindo do formulário (ou None quando o campo não foi enviado)
#   padrao: valor usado quando o texto não começa com um número
# Retorna: float não negativo


def converter_decimal(valor, padrao=0.0):
    """Converte texto em decimal; vazio, inválido ou negativo vira o padrão."""
    if valor is None:
        return padrao
    encontrado = _PREFIXO_DECIMAL.match(str(valor))
    if not encontrado:
        return padrao
    numero = float(encontrado.group(0))
    if math.isinf(numero) or numero <= 0:
        return padrao
    return numero

# Função para converter a quantidade informada
# Parâmetros:
#   valor: texto vindo do formulário
#   padrao: valor usado quando o texto não começa com um inteiro
# Retorna: inteiro não negativo ("3.7" -> 3)


def converter_inteiro(valor, padrao=0):
    """Converte texto em inteiro; vazio, inválido, negativo ou grande demais vira o padrão."""
    if valor is None:
        return padrao
    encontrado = _PREFIXO_INTEIRO.match(str(valor))
    if not encontrado:
        return padrao
    numero = int(encontrado.group(0))
    if numero <= 0 or numero > MAX_INTEIRO:
        return padrao
    return numero


def id_da_busca(termo):
    """Interpreta o termo de busca como identificador.

    Termos não numéricos, que valem zero ou que passam do maior INTEGER do
    SQLite retornam -1, que não casa com nenhuma linha da tabela.
    """
    if not _NUMERO_COMPLETO.fullmatch(str(termo)):
        return -1
    numero = float(termo)
    if math.isinf(numero) or numero == 0:
        return -1
    if numero.is_integer():
        numero = int(numero)
        return numero if abs(numero) <= MAX_INTEIRO else -1
    return numero
