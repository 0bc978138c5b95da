# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""Iterator category resolution."""

from __future__ import annotations

import logging

from .._caching import cache_with_key
from .._errors import IteratorCategoryError
from .._types import IteratorCategory

logger = logging.getLogger(__name__)

_REQUIRED_METHODS = ("advance", "dereference", "equal")


def _has_method(primitive_type: type, name: str) -> bool:
    return callable(getattr(primitive_type, name, None))


@cache_with_key(lambda primitive_type: primitive_type)
def resolve_category(primitive_type: type) -> IteratorCategory:
    """
    Determine the iterator category for a primitive type.

    An explicit ``iterator_category`` class attribute wins. Otherwise the
    category is inferred from the richest operation set the type defines: a
    ``difference`` method means random-access, anything else is input-only.
    The result is computed once per type.

    Args:
        primitive_type: The primitive class (not an instance)

    Returns:
        The resolved IteratorCategory

    Raises:
        IteratorCategoryError: if the type lacks a required method, declares
            something that is not a category, or declares random-access
            without a ``difference`` method
    """
    missing = [
        name for name in _REQUIRED_METHODS if not _has_method(primitive_type, name)
    ]
    if missing:
        raise IteratorCategoryError(
            f"{primitive_type.__name__} cannot be adapted: "
            f"missing {', '.join(missing)}"
        )

    declared = getattr(primitive_type, "iterator_category", None)
    if declared is not None:
        try:
            category = IteratorCategory(declared)
        except ValueError as e:
            raise IteratorCategoryError(
                f"{primitive_type.__name__}.iterator_category is not an "
                f"iterator category: {declared!r}"
            ) from e
        if category is IteratorCategory.RANDOM_ACCESS and not _has_method(
            primitive_type, "difference"
        ):
            raise IteratorCategoryError(
                f"{primitive_type.__name__} declares random-access but does "
                "not define difference"
            )
        source = "declared"
    elif _has_method(primitive_type, "difference"):
        category = IteratorCategory.RANDOM_ACCESS
        source = "inferred"
    else:
        category = IteratorCategory.INPUT
        source = "inferred"

    logger.debug(
        "%s category for %s: %s", source, primitive_type.__qualname__, category
    )
    return category
