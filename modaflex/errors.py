class ValidationError(ValueError):
    """Erro de validação por campo; ``errors`` mapeia campo -> mensagem."""

    def __init__(self, errors: dict, message: str = "Dados inválidos"):
        super().__init__(message)
        self.errors = errors


class NotFoundError(ValueError):
    pass


class BusinessRuleError(ValueError):
    """Requisição válida, mas o estado atual não permite a operação."""
