from pathlib import Path

from lsprotocol.types import (
    INITIALIZE,
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_SIGNATURE_HELP,
    ClientCapabilities,
    CompletionList,
    CompletionParams,
    InitializeParams,
    LogMessageParams,
    MessageType,
    SignatureHelpParams,
)
from pygls.exceptions import JsonRpcInvalidParams
from pygls.uris import to_fs_path

from completionls import __version__
from completionls.completion.completor import ChainCompletor, Completor, LimitingCompletor
from completionls.completion.php.function_signature_helper import FunctionSignatureHelper
from completionls.completion.php.keyword_completor import KeywordCompletor
from completionls.completion.php.variable_completor import VariableCompletor
from completionls.completion.registry import CompletorRegistry
from completionls.config import CompletionConfig, load_config
from completionls.exceptions import ConfigError, DocumentNotFound
from completionls.lsp.capabilities.capabilities import CapabilityManager
from completionls.lsp.capabilities.options import (
    completion_options,
    signature_help_options,
)
from completionls.lsp.capabilities.signature_help import SignatureHelper
from completionls.lsp.completion_language_server import CompletionLanguageServer


def client_supports_snippets(capabilities: ClientCapabilities | None) -> bool:
    """Check textDocument.completion.completionItem.snippetSupport."""
    text_document = capabilities.text_document if capabilities else None
    completion = text_document.completion if text_document else None
    completion_item = completion.completion_item if completion else None
    return bool(completion_item and completion_item.snippet_support)


def build_registry(config: CompletionConfig) -> CompletorRegistry:
    """Create the completors for every supported language."""
    php: Completor = ChainCompletor([VariableCompletor(), KeywordCompletor()])
    if config.limit is not None:
        php = LimitingCompletor(php, config.limit)

    return CompletorRegistry({"php": php})


def build_signature_helpers() -> dict[str, SignatureHelper]:
    """Create the signature helpers for every supported language."""
    return {"php": FunctionSignatureHelper()}


def create_server() -> CompletionLanguageServer:
    """
    Creates and returns a configured Language Server instance.

    The LanguageServer class from pygls handles:
    - JSON-RPC communication with clients (editors)
    - Request/response lifecycle, including $/cancelRequest
    - Text document synchronization (didOpen/didChange/didClose)
    """
    server = CompletionLanguageServer("completionls", __version__)

    @server.feature(INITIALIZE)
    async def initialize(ls: CompletionLanguageServer, params: InitializeParams):
        """
        Load settings and set up the completors and capabilities.
        """
        workspace_root = Path(to_fs_path(params.root_uri)) if params.root_uri else None

        try:
            ls.config = load_config(workspace_root, params.initialization_options)
        except ConfigError as e:
            ls.window_log_message(
                LogMessageParams(
                    type=MessageType.Error, message=f"{e}; using default settings"
                )
            )
            ls.config = CompletionConfig()

        if ls.config.source:
            ls.window_log_message(
                LogMessageParams(
                    type=MessageType.Info,
                    message=f"Loaded settings from {ls.config.source}",
                )
            )

        ls.snippet_support = client_supports_snippets(params.capabilities)
        ls.registry = build_registry(ls.config)
        ls.signature_helpers = build_signature_helpers()

        # Initialize capability manager
        ls.capability_manager = CapabilityManager(ls)
        ls.capability_manager.register_all()

        ls.window_log_message(
            LogMessageParams(
                type=MessageType.Info,
                message=f"Completion enabled for: {', '.join(ls.registry.language_ids)}",
            )
        )

    @server.feature(TEXT_DOCUMENT_COMPLETION, completion_options())
    async def completion(ls: CompletionLanguageServer, params: CompletionParams):
        if not ls.capability_manager:
            return CompletionList(is_incomplete=False, items=[])

        try:
            return await ls.capability_manager.handle_completion(params)
        except DocumentNotFound as e:
            raise JsonRpcInvalidParams(message=str(e)) from e
        except Exception as e:
            ls.window_log_message(
                LogMessageParams(
                    type=MessageType.Error,
                    message=f"Completion failed for {params.text_document.uri}: "
                            f"{type(e).__name__}: {e}",
                )
            )
            raise

    @server.feature(TEXT_DOCUMENT_SIGNATURE_HELP, signature_help_options())
    async def signature_help(ls: CompletionLanguageServer, params: SignatureHelpParams):
        if not ls.capability_manager:
            return None

        try:
            return await ls.capability_manager.handle_signature_help(params)
        except DocumentNotFound as e:
            raise JsonRpcInvalidParams(message=str(e)) from e

    return server
