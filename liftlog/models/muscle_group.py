from pydantic import BaseModel


class MuscleGroup(BaseModel):
    id: int
    name: str
    description: str | None = None


class MuscleGroupInput(BaseModel):
    """Payload for creating or updating a muscle group."""

    name: str
    description: str | None = None

    def normalised(self) -> "MuscleGroupInput":
        return self.model_copy(update={"name": self.name.strip().upper()})
