"""Exception types raised by crypto providers."""


class ProviderError(Exception):
    """Base exception for all crypto provider errors."""
    pass


class NotSupportedError(ProviderError):
    """Algorithm, curve or key type is not supported by the provider."""
    pass


class InvalidKeyError(ProviderError):
    """Key material cannot be imported or does not fit the algorithm."""
    pass


class InvalidAccessError(ProviderError):
    """Operation is not permitted for the key's role, usages or algorithm."""
    pass


class OperationFailedError(ProviderError):
    """The operation ran but failed, e.g. authenticated decryption."""
    pass
