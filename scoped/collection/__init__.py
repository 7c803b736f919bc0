from .traverse import replicate, sequence, traverse

__all__ = (
    "replicate",
    "sequence",
    "traverse",
)
