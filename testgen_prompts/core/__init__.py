from .errors import PromptCatalogError, TemplateNotFound
