"""Erreurs métier levées par les services et converties en réponses HTTP dans app.main."""


class TodoError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TodoError):
    status_code = 400


class NotFoundError(TodoError):
    status_code = 404


class DuplicateError(TodoError):
    status_code = 409


class StoreError(TodoError):
    """Echec de la base (connexion perdue, contrainte inattendue...). Jamais retenté."""
    status_code = 500
