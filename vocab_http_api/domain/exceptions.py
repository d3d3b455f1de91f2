# vocab_http_api/domain/exceptions.py


class VocabularyError(Exception):
    """Base class for all domain-level exceptions."""

    code = "vocabulary_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


# --- Validation Errors ---


class MalformedInputError(VocabularyError):
    """Raised when a request payload cannot be interpreted."""

    code = "malformed_input"


# --- Storage Errors ---


class ConstraintViolationError(VocabularyError):
    """Raised when creating a word would break (text, source language) uniqueness."""

    code = "constraint_violation"

    def __init__(self, text: str, source_language_id: int):
        self.text = text
        self.source_language_id = source_language_id
        super().__init__(
            f"Word '{text}' already exists for source language {source_language_id}."
        )


class WordNotFoundError(VocabularyError):
    """Raised when an update or delete targets a word id that is not stored."""

    code = "not_found"

    def __init__(self, word_id: int):
        self.word_id = word_id
        super().__init__(f"Word with id={word_id} not found.")


class StoreUnavailableError(VocabularyError):
    """Raised when the underlying database cannot be reached or fails."""

    code = "store_unavailable"

    def __init__(self, details: str):
        super().__init__(f"Word store unavailable: {details}")
