from pydantic import BaseModel, ConfigDict, Field


class DeleteImageRequest(BaseModel):
    """DTO for image deletion requests"""
    model_config = ConfigDict(populate_by_name=True)

    image_path: str = Field(alias="imagePath")
