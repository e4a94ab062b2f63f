class ErroBancoDados(Exception):
    """Falha de acesso ao banco de dados, com a causa legível."""

    def __init__(self, mensagem: str):
        super().__init__(mensagem)
        self.mensagem = mensagem
