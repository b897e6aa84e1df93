class CompletionServerError(Exception):
    """Base class for errors raised by completionls."""


class DocumentNotFound(CompletionServerError):
    """The requested URI is not an open document in the workspace."""

    def __init__(self, uri: str):
        super().__init__(f"Document not found: {uri}")
        self.uri = uri


class NoCompletorForLanguage(CompletionServerError):
    """No completor is registered for a language identifier."""

    def __init__(self, language_id: str):
        super().__init__(f"No completor registered for language '{language_id}'")
        self.language_id = language_id


class ConfigError(CompletionServerError):
    """Invalid configuration file or initialization options."""
