#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/options/base.py
"""Base classes for renderer options.

This module defines the foundation classes for backend-specific options.
Options are frozen dataclasses and are read-only for the duration of a render.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from markhtml.constants import DEFAULT_CREATOR


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    creator : str or None, default "markhtml"
        Generator name written into document metadata. Set to None to omit it.

    Notes
    -----
    Subclasses should define backend-specific options as frozen dataclass fields.

    """

    creator: str | None = field(
        default=DEFAULT_CREATOR,
        metadata={
            "help": "Generator name for document metadata. Set to None to disable generator metadata.",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        if self.creator is not None and not self.creator.strip():
            raise ValueError("creator must be a non-empty string or None")
