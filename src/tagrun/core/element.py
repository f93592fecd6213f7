"""
Element tree model for tagrun.

This module contains the `Element` class, the single value type produced by
the tag-language grammar. Elements are immutable: a parent element is first
built without children and then replaced by a copy carrying them.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, field_validator

from tagrun.core.types import Attributes, is_identifier


class Element(BaseModel):
    """
    A parsed tag: a name, ordered attributes and ordered children.

    Attributes keep their source order and duplicates are preserved as
    written. Self-closing elements always have an empty `children` tuple.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    attributes: Attributes = ()
    children: tuple["Element", ...] = ()

    @field_validator("name")
    @classmethod
    def validate_name(cls, name: str) -> str:
        """Element names are non-empty runs of letters, digits, '-', '&' or '.'."""
        if not name:
            raise ValueError("Element name must not be empty")
        if not is_identifier(name):
            raise ValueError(f"Invalid element name: {name!r}")
        return name

    @field_validator("attributes")
    @classmethod
    def validate_attributes(cls, attributes: Attributes) -> Attributes:
        """Keys follow the name rules; values must not contain '"'."""
        for key, value in attributes:
            if not is_identifier(key):
                raise ValueError(f"Invalid attribute key: {key!r}")
            if '"' in value:
                raise ValueError(f"Attribute value for {key!r} contains '\"'")
        return attributes

    @property
    def is_self_closing(self) -> bool:
        return not self.children

    def with_children(self, children: Iterable["Element"]) -> "Element":
        """
        Return a copy of this element with `children` attached.

        Params:
            children: Child elements in source order

        Returns:
            New element; the receiver is left unchanged
        """
        return self.model_copy(update={"children": tuple(children)})

    def get_attribute(self, key: str, default: str | None = None) -> str | None:
        """
        Look up the value of the first attribute named `key`.

        Params:
            key: Attribute key, matched exactly
            default: Value returned when the key is absent

        Returns:
            The first matching value, or `default`
        """
        for attribute_key, value in self.attributes:
            if attribute_key == key:
                return value
        return default

    def attribute_keys(self) -> list[str]:
        return [key for key, _ in self.attributes]

    def to_markup(self) -> str:
        """Render the element back into tag-language text."""
        start = "<" + self.name
        for key, value in self.attributes:
            start += f' {key}="{value}"'
        if self.is_self_closing:
            return start + "/>"
        inner = "".join(child.to_markup() for child in self.children)
        return f"{start}>{inner}</{self.name}>"
