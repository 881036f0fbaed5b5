"""Generator configuration.

The configuration is an explicit value handed to every resolver and emitter.
Defaults for the reserved-word list and the override table come from the
selected target and are only applied at this boundary.

A JSON config file may use either the Python field names or the keys of the
AppSync C# codegen plugin:

    {
        "target": "csharp",
        "netKeywords": ["case", "private", "public"],
        "netTypes": {"String": "string", "Int!": "int"}
    }
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .targets import Target, TargetRegistry


class GeneratorConfig(BaseModel):
    """Options recognised by the code generator."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    target: str = "csharp"
    reserved_words: frozenset[str] | None = Field(default=None, alias="netKeywords")
    type_overrides: dict[str, str] | None = Field(default=None, alias="netTypes")
    namespace: str = "AppSync.Operations"
    client_interface: str = "IAppSyncClient"

    def get_target(self, registry: TargetRegistry | None = None) -> Target:
        """Return the target profile for this config."""
        registry = registry or TargetRegistry()
        target = registry.get(self.target)
        if target is None:
            raise ValueError(f"Unknown target: {self.target}")
        return target

    def effective_reserved_words(self, target: Target) -> frozenset[str]:
        if self.reserved_words is None:
            return frozenset(target.default_reserved_words)
        return self.reserved_words

    def effective_type_overrides(self, target: Target) -> dict[str, str]:
        if self.type_overrides is None:
            return dict(target.default_type_overrides)
        return dict(self.type_overrides)


def load_config(path: str | Path) -> GeneratorConfig:
    """Load a GeneratorConfig from a JSON file."""
    return GeneratorConfig.model_validate_json(Path(path).read_text())
