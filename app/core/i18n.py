"""User-facing response messages, per locale."""

SUPPORTED_LOCALES = ("pt-BR", "en")

MESSAGES: dict[str, dict[str, str]] = {
    "pt-BR": {
        # errors
        "MISSING_FIELDS": "Campos obrigatórios faltando",
        "MISSING_CREDENTIALS": "Email e senha são obrigatórios",
        "EMPTY_UPDATE": "Informe destinatario_nome ou mensagem para atualizar",
        "INVALID_CREDENTIALS": "Credenciais inválidas",
        "UNAUTHENTICATED": "Token não fornecido",
        "FORBIDDEN": "Token inválido",
        "NOT_FOUND": "Mensagem não encontrada",
        "ROUTE_NOT_FOUND": "Rota não encontrada",
        "METHOD_NOT_ALLOWED": "Método não permitido",
        "STORAGE_ERROR": "Erro ao acessar o banco de dados",
        "CONFIGURATION_ERROR": "Erro de configuração do servidor",
        "INTERNAL_ERROR": "Erro interno no servidor",
        # success
        "LOGIN_OK": "Login realizado com sucesso",
        "MESSAGE_SAVED": "Mensagem salva com sucesso",
        "MESSAGE_UPDATED": "Mensagem atualizada com sucesso",
        "MESSAGE_DELETED": "Mensagem excluída com sucesso",
        "MESSAGES_DELETED": "{count} mensagens excluídas com sucesso",
        "MESSAGE_PRINTED": "Mensagem marcada como impressa",
    },
    "en": {
        "MISSING_FIELDS": "Required fields are missing",
        "MISSING_CREDENTIALS": "Email and password are required",
        "EMPTY_UPDATE": "Provide destinatario_nome or mensagem to update",
        "INVALID_CREDENTIALS": "Invalid credentials",
        "UNAUTHENTICATED": "Token not provided",
        "FORBIDDEN": "Invalid token",
        "NOT_FOUND": "Message not found",
        "ROUTE_NOT_FOUND": "Route not found",
        "METHOD_NOT_ALLOWED": "Method not allowed",
        "STORAGE_ERROR": "Could not access the database",
        "CONFIGURATION_ERROR": "Server configuration error",
        "INTERNAL_ERROR": "Internal server error",
        "LOGIN_OK": "Logged in successfully",
        "MESSAGE_SAVED": "Message saved successfully",
        "MESSAGE_UPDATED": "Message updated successfully",
        "MESSAGE_DELETED": "Message deleted successfully",
        "MESSAGES_DELETED": "{count} messages deleted successfully",
        "MESSAGE_PRINTED": "Message marked as printed",
    },
}


def resolve_locale(accept_language: str | None, default: str) -> str:
    """Pick the first supported locale from an Accept-Language header."""
    if not accept_language:
        return default

    for part in accept_language.split(","):
        tag = part.split(";")[0].strip().lower()
        if not tag:
            continue
        for locale in SUPPORTED_LOCALES:
            if tag == locale.lower() or tag.split("-")[0] == locale.split("-")[0].lower():
                return locale
    return default


def translate(key: str, locale: str, **kwargs) -> str:
    """Render a catalog message, falling back to the generic error."""
    catalog = MESSAGES.get(locale, MESSAGES["pt-BR"])
    template = catalog.get(key, catalog["INTERNAL_ERROR"])
    return template.format(**kwargs) if kwargs else template
