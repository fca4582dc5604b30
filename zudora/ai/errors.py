class AIError(RuntimeError):
    pass


class AIConfigurationError(AIError):
    """The provider has no credentials configured."""


class AIServiceError(AIError):
    """The provider call failed or returned an unusable response."""
