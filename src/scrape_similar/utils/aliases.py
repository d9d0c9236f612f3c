from __future__ import annotations


class AliasGenerator:
    @classmethod
    def to_camel_case(cls, name: str) -> str:
        """
        Convert a snake_case string to camelCase (`main_selector` -> `mainSelector`).
        Reference: https://github.com/pydantic/pydantic/blob/main/pydantic/alias_generators.py
        """
        return "".join(word.capitalize() if i > 0 else word for i, word in enumerate(name.split("_")))
