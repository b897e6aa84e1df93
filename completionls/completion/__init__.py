"""Language-independent completion model."""
from .cancellation import CancellationToken
from .completor import ChainCompletor, Completor, LimitingCompletor, SuggestionStream
from .registry import CompletorRegistry
from .suggestion import ByteOffset, ByteOffsetRange, SourceDocument, Suggestion, SuggestionType

__all__ = [
    'ByteOffset',
    'ByteOffsetRange',
    'CancellationToken',
    'ChainCompletor',
    'Completor',
    'CompletorRegistry',
    'LimitingCompletor',
    'SourceDocument',
    'Suggestion',
    'SuggestionStream',
    'SuggestionType',
]
