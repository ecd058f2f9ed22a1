"""In-memory storage of loaded claims."""

from claimboard.storage.dataset import ClaimsDataset

__all__ = ["ClaimsDataset"]
