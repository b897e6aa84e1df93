"""
LSP Capabilities Manager

This module manages LSP feature handlers (completion, signature help)
using a small plugin architecture.

Design Principles:
1. Plugin-based (add capabilities without modifying the server wiring)
2. Type-safe (abstract base classes per feature)
3. Composable (multiple handlers for the same feature)
4. Testable (capabilities only need a server-like object)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from lsprotocol.types import (
    CompletionList,
    CompletionParams,
    SignatureHelp,
    SignatureHelpParams,
)

from completionls.completion.cancellation import CancellationToken

if TYPE_CHECKING:
    from completionls.lsp.completion_language_server import CompletionLanguageServer


class Capability(ABC):
    """
    Base class for all LSP capability handlers.

    Each capability handles one LSP feature for the documents of the
    workspace.
    """

    def __init__(self, server: CompletionLanguageServer) -> None:
        self.server = server

    def register(self) -> None:
        """
        Hook called once when the capability manager is set up.

        Override to register extra handlers or hooks with the server.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this capability."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this capability does."""
        pass


class CompletionCapability(Capability):
    """Base class for completion capabilities."""

    @abstractmethod
    async def complete(
        self, params: CompletionParams, token: CancellationToken | None = None
    ) -> CompletionList:
        """
        Provide completion items.

        Implementations should stop early and return an incomplete list
        once token is cancelled.
        """
        pass


class SignatureHelpCapability(Capability):
    """Base class for signature help capabilities."""

    @abstractmethod
    async def signature_help(self, params: SignatureHelpParams) -> SignatureHelp | None:
        """Provide signature help."""
        pass


class CapabilityManager:
    """
    Central manager for all LSP capabilities.

    Usage:
        # In server initialization
        manager = CapabilityManager(server)
        manager.register_all()
    """

    def __init__(
        self,
        server: CompletionLanguageServer,
        capabilities: dict[str, Capability] | None = None,
    ):
        self.server = server

        # Default capabilities
        if capabilities is None:
            from completionls.lsp.capabilities.completion import CompletionHandler
            from completionls.lsp.capabilities.signature_help import (
                SignatureHelpHandler,
            )

            capabilities = {
                "completion": CompletionHandler.from_server(server),
                "signature_help": SignatureHelpHandler.from_server(server),
            }

        self.capabilities = capabilities
        self._registered = False

    def register_all(self) -> None:
        """Register all capabilities with the server."""
        if self._registered:
            return

        for capability in self.capabilities.values():
            capability.register()

        self._registered = True

    def get_capability(self, name: str) -> Capability | None:
        """Get a specific capability by name"""
        return self.capabilities.get(name)

    def get_capabilities_by_type(self, capability_type: type) -> list[Capability]:
        """Get all capabilities of a specific type (e.g., all CompletionCapability)."""
        return [
            cap
            for cap in self.capabilities.values()
            if isinstance(cap, capability_type)
        ]

    async def handle_completion(
        self, params: CompletionParams, token: CancellationToken | None = None
    ) -> CompletionList:
        """
        Handle completion requests by delegating to every completion capability.

        Items keep capability order. The aggregated list is incomplete if
        any capability's list was.
        """
        token = token or CancellationToken()
        all_items = []
        is_incomplete = False

        for capability in self.get_capabilities_by_type(CompletionCapability):
            result = await capability.complete(params, token)  # pyright: ignore
            all_items.extend(result.items)
            is_incomplete = is_incomplete or result.is_incomplete

        return CompletionList(is_incomplete=is_incomplete, items=all_items)

    async def handle_signature_help(
        self, params: SignatureHelpParams
    ) -> SignatureHelp | None:
        """
        Handle signature help requests by delegating to capable handlers.

        Returns the first non-None result
        """
        for capability in self.get_capabilities_by_type(SignatureHelpCapability):
            result = await capability.signature_help(params)  # pyright: ignore
            if result:
                return result

        return None
