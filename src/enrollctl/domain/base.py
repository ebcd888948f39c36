"""Base model for domain values that must stay valid across copies.

pydantic's ``model_copy(update=...)`` assigns the update without running
validators. Domain values override it so a copy is constructed the same
way as the original and re-checked.

INVARIANT: Every instance of a domain model, copies included, has passed
its validators.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel


class DomainModel(BaseModel):
    """A pydantic model whose copies are validated like fresh instances."""

    def _copy_context(self) -> dict[str, Any] | None:
        """Validation context used when re-checking a copy."""
        return None

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """Return a copy with *update* applied, validated from scratch.

        Raises:
            ValidationError: The updated fields break an invariant, or name
                a field this model does not have.
        """
        if not update:
            return super().model_copy(deep=deep)
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        fields.update(update)
        return type(self).model_validate(fields, context=self._copy_context())
