"""
Type resolver for field types.

Substitutes declared field types through the alias table. Substitution is
single level: the target of an alias is used as is, even when it happens to
be the name of another alias.
"""

from __future__ import annotations

from ..schema_ast import TypeAlias


class TypeResolver:
    """Maps declared type tokens to target-language types."""

    def __init__(self, types: dict[str, TypeAlias]):
        """
        Initialize the resolver.

        Args:
            types: Global alias map
        """
        self.types = types

    def resolve(self, type_name: str, local_types: dict[str, TypeAlias] | None = None) -> str:
        """
        Resolve a declared type.

        Args:
            type_name: The type as written in the schema
            local_types: Aliases of the table being resolved, shadowing global ones

        Returns:
            The alias target if type_name is an alias, otherwise type_name unchanged
        """
        alias = None
        if local_types:
            alias = local_types.get(type_name)
        if alias is None:
            alias = self.types.get(type_name)
        return alias.target_type if alias is not None else type_name
