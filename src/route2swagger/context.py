"""Source location of a parsed annotation."""

from pydantic import BaseModel, ConfigDict


class Context(BaseModel):
    """Where an annotation was declared: file, module, class and method."""

    model_config = ConfigDict(frozen=True)

    filename: str | None = None
    module: str | None = None
    class_name: str | None = None
    method: str | None = None
    line: int | None = None

    def fully_qualified_class(self) -> str | None:
        if self.class_name is None:
            return None
        if self.module:
            return f"{self.module}.{self.class_name}"
        return self.class_name

    def __str__(self) -> str:
        target = self.fully_qualified_class() or self.module or ""
        if self.method:
            target = f"{target}.{self.method}()" if target else f"{self.method}()"
        location = self.filename or "<unknown>"
        if self.line is not None:
            location = f"{location} on line {self.line}"
        return f"{target} in {location}" if target else location
