"""This module holds the prompt template registry and its loaders."""
from .entities import PLACEHOLDER_PATTERN, PromptTemplate
from .prompt_store import PromptStore
from .in_memory_prompt_store import InMemoryPromptStore
from .defaults import DEFAULT_PROMPTS, builtin_templates, default_prompt_store
from .file_system_prompt_store import FilesystemPromptStore
