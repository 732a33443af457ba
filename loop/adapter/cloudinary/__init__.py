"""Cloudinary media adapter."""

from .client import CloudinaryMediaStore, MockMediaStore

__all__ = ["CloudinaryMediaStore", "MockMediaStore"]
