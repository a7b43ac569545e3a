from typing import Annotated

from pydantic import AnyUrl, BaseModel, UrlConstraints

HttpsUrl = Annotated[AnyUrl, UrlConstraints(allowed_schemes=["https"], host_required=True)]


class UploadResult(BaseModel):
    """The part of the provider's upload response the app relies on."""
    secure_url: HttpsUrl
