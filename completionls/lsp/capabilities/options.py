"""
Static capability options announced to the client at initialization.

pygls builds the server capabilities from the options passed to
`server.feature(...)`, so these are read once, when the features are
registered.
"""

from lsprotocol.types import CompletionOptions, SignatureHelpOptions

# `$` starts a variable, `>` ends `->`, `:` ends `::`.
COMPLETION_TRIGGER_CHARACTERS = [":", ">", "$"]

SIGNATURE_HELP_TRIGGER_CHARACTERS = ["(", ","]


def completion_options() -> CompletionOptions:
    return CompletionOptions(
        resolve_provider=False,
        trigger_characters=list(COMPLETION_TRIGGER_CHARACTERS),
    )


def signature_help_options() -> SignatureHelpOptions:
    return SignatureHelpOptions(
        trigger_characters=list(SIGNATURE_HELP_TRIGGER_CHARACTERS),
    )
