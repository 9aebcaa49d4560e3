# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeIndex exceptions."""

from __future__ import annotations


class TreeIndexError(Exception):
    """Base exception for TreeIndex errors."""

    pass


class MissingParentError(TreeIndexError, LookupError):
    """Raised when a node to remove has no entry in the parent index."""

    pass


class NotFoundError(TreeIndexError, LookupError):
    """Raised when a root node is missing from the forest it is indexed under."""

    pass
