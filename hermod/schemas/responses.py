from pydantic import BaseModel, ConfigDict, model_validator


class ModelObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    object: str
    created: int
    owned_by: str

    def describe(self) -> str:
        return (
            f"Model ID: {self.id}, Object: {self.object}, "
            f"Created: {self.created}, OwnedBy: {self.owned_by}"
        )


class ModelListResponse(BaseModel):
    object: str = "list"
    data: list[ModelObject] = []

    @model_validator(mode="before")
    @classmethod
    def _null_means_empty(cls, value):
        # A null body or a null "data" is an empty listing.
        if value is None:
            return {}
        if isinstance(value, dict) and "data" in value and value["data"] is None:
            return {**value, "data": []}
        return value
