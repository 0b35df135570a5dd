from pydantic import BaseModel, validator, Field


class LabelBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    @validator('name', pre=True)
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class LabelCreate(LabelBase):
    pass


class LabelUpdate(LabelBase):
    pass
