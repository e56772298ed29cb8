"""A small interactive shell: tokenizing, expansion, builtins, redirections and pipelines."""

__version__ = "0.1.0"