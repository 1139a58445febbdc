from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base for all configuration schemas. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
