from pydantic import BaseModel, Field, computed_field


class FieldError(BaseModel):
    field: str
    message: str


class ValidationResult(BaseModel):
    errors: list[FieldError] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def joined(self) -> str:
        return ", ".join(self.messages)

    @classmethod
    def of(cls, *results: "ValidationResult") -> "ValidationResult":
        """Concatenate the errors of several results, preserving order."""
        return cls(errors=[e for r in results for e in r.errors])
