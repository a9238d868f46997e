"""Pydantic schemas for API request/response models."""

from .classification import *
