"""
Main entry point for the completion language server.

This file is executed when running: python -m completionls

The server communicates with editors via stdin/stdout using JSON-RPC,
so diagnostics for humans go to stderr.
"""
import os
import sys

from completionls.lsp.server import create_server


def main():
    """Start the language server on stdin/stdout."""

    # Check if we're in debug mode
    if os.getenv("DEBUG"):
        print("completionls starting in DEBUG mode", file=sys.stderr)
        print("Waiting for debugger to attach on port 5678...", file=sys.stderr)
        try:
            import debugpy  # type: ignore
            debugpy.listen(("127.0.0.1", 5678))
            debugpy.wait_for_client()
            print("Debugger attached, continuing", file=sys.stderr)
        except ImportError:
            print("debugpy not available - install with: poetry install --with dev", file=sys.stderr)

    server = create_server()

    # Start the server - it will listen on stdin/stdout for LSP messages
    # from the editor client
    server.start_io()


if __name__ == "__main__":
    main()
