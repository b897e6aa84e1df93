from pygls.lsp.server import LanguageServer

from completionls.completion.registry import CompletorRegistry
from completionls.config import CompletionConfig
from completionls.lsp.capabilities.capabilities import CapabilityManager
from completionls.lsp.capabilities.signature_help import SignatureHelper


class CompletionLanguageServer(LanguageServer):
    """
    Custom Language Server with completion-specific attributes.

    Attributes:
        config: Settings resolved during initialize
        registry: Completors by language identifier
        signature_helpers: Signature helpers by language identifier
        snippet_support: Whether the client accepts snippet completions
        capability_manager: Feature handlers, None until initialized
    """

    def __init__(self, name: str, version: str):
        super().__init__(name, version)

        self.config = CompletionConfig()
        self.registry = CompletorRegistry()
        self.signature_helpers: dict[str, SignatureHelper] = {}
        self.snippet_support = False
        self.capability_manager: CapabilityManager | None = None
