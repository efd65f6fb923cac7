from .enums import Mood, AttemptKind, FallbackState
from .credential import Credential
from .suggestion import Suggestion, ProviderTarget
from .api import SuggestionRequest, SuggestionBatch, MoodOption, CredentialCreate, CredentialResponse
