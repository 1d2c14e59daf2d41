from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    short_description: str
    display_name: str
    symbol: str
    default_severity: str
    manual_instructions: str
    eli5_description: str
    example: str
    references: list[str]
