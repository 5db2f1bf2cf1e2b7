# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class PromptCatalogError(Exception):
    """Base class for prompt catalog errors."""
    pass


class TemplateNotFound(PromptCatalogError, LookupError):
    """Raised when a prompt key has no template in the registry."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'Prompt not found: {key}')
