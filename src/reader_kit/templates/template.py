from string import Formatter

from pydantic import BaseModel


class CopyTemplate(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    class Config:
        extra = "forbid"

    def placeholders(self) -> set[str]:
        return {
            field for _, field, _, _ in Formatter().parse(self.template) if field
        }

    def render(self, **values: str) -> str:
        """Substitute `{name}` placeholders. Every declared input is required."""
        missing = set(self.inputs) - set(values)
        if missing:
            raise ValueError(
                f"Template '{self.name}' missing inputs: {', '.join(sorted(missing))}"
            )
        unexpected = set(values) - set(self.inputs)
        if unexpected:
            raise ValueError(
                f"Template '{self.name}' got unexpected inputs: "
                f"{', '.join(sorted(unexpected))}"
            )
        return self.template.format(**values)
