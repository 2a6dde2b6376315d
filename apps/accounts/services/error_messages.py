"""User-facing messages for authentication failures."""


class AuthErrorCode:
    INVALID_CREDENTIAL = 'invalid-credential'
    USER_NOT_FOUND = 'user-not-found'
    USER_DISABLED = 'user-disabled'
    EMAIL_ALREADY_IN_USE = 'email-already-in-use'
    WEAK_PASSWORD = 'weak-password'
    INVALID_EMAIL = 'invalid-email'
    OPERATION_NOT_ALLOWED = 'operation-not-allowed'


AUTH_ERROR_MESSAGES = {
    AuthErrorCode.INVALID_CREDENTIAL: 'E-mail ou senha inválidos.',
    AuthErrorCode.USER_NOT_FOUND: 'Usuário não encontrado.',
    AuthErrorCode.USER_DISABLED: 'Esta conta foi desativada.',
    AuthErrorCode.EMAIL_ALREADY_IN_USE: 'Este e-mail já está em uso.',
    AuthErrorCode.WEAK_PASSWORD: 'A senha deve ter pelo menos 6 caracteres.',
    AuthErrorCode.INVALID_EMAIL: 'E-mail inválido.',
    AuthErrorCode.OPERATION_NOT_ALLOWED: 'O login por e-mail/senha não está ativado.',
}

DEFAULT_AUTH_ERROR_MESSAGE = 'Ocorreu um erro ao processar sua solicitação. Tente novamente.'


def auth_error_message(code):
    """Return the Portuguese message for ``code``, or the generic fallback."""
    return AUTH_ERROR_MESSAGES.get(code, DEFAULT_AUTH_ERROR_MESSAGE)
