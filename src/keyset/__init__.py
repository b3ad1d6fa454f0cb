"""JSON Web Keys and JSON Web Key Sets."""

from ._constants import VERSION
from .config import ConfigError, KeySetConfig, load_config_from_env, load_config_from_file
from .exceptions import DataError, KeySetError, OperationError
from .jwk import JWK
from .jwkset import JWKSet
from .merge import merge_fields
from .query import AllOf, Contains, Equals, Exists, Matcher, OneOf, register_operator
from .sources import Source, SourceKind, classify
from .thumbprint import compute_thumbprint, thumbprint_uri
from .transport import KeySetFetcher
from .types import EncryptedPayload, KeyType, KeyUse, KidPolicy

__all__ = [
    "JWK", "JWKSet", "KeySetFetcher",
    "KeySetConfig", "ConfigError", "load_config_from_env", "load_config_from_file",
    "compute_thumbprint", "thumbprint_uri", "merge_fields", "classify", "Source", "SourceKind",
    "Matcher", "Equals", "OneOf", "Contains", "Exists", "AllOf", "register_operator",
    "KeyType", "KeyUse", "KidPolicy", "EncryptedPayload",
    "KeySetError", "DataError", "OperationError",
]

__version__ = VERSION
